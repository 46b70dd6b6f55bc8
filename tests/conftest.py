# conftest.py - pytest configuration
import os
import shutil

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def main_tf(tmp_path):
    """A private copy of tests/data/main.tf, so extraction never writes into the repo."""
    target = tmp_path / "main.tf"
    shutil.copy(os.path.join(DATA_DIR, "main.tf"), target)
    return str(target)


@pytest.fixture
def main_tf_lines():
    with open(os.path.join(DATA_DIR, "main.tf"), encoding="utf-8") as f:
        return f.read().splitlines()
