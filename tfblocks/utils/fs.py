# tfblocks/utils/fs.py
from __future__ import annotations

import logging
import os
from typing import List, Sequence

import pathspec

from .._logging import resolve_logger
from ..errors import FileReadError
from .gitignore import get_gitignore

# Longest single line accepted when loading a file, in bytes before decoding.
MAX_LINE_LENGTH = 64 * 1024


def check_file_exists(file_name: str) -> bool:
    return os.path.exists(file_name)


def check_valid_extension(
    file_name: str,
    extension: str = ".tf",
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> bool:
    if not file_name.endswith(extension):
        lg = resolve_logger(logger=logger, enabled=log)
        lg.error("Target file %s is not a terraform file", file_name)
        return False
    return True


def read_file_to_lines(file_name: str, *, max_line_length: int = MAX_LINE_LENGTH) -> List[str]:
    """
    Load a whole file as a list of lines without their terminators.

    Only '\\n' ends a line, with one '\\r' before it dropped as well; a lone
    '\\r' stays inside its line. A final newline does not produce a trailing
    empty entry. Lines are decoded as UTF-8 with undecodable bytes replaced.

    Either the complete list is returned or FileReadError is raised, including
    when a single line is longer than `max_line_length` bytes.
    """
    lines: List[str] = []
    try:
        # Binary iteration splits on b"\n" only and lets the bound count bytes.
        with open(file_name, "rb") as f:
            for number, raw in enumerate(f, start=1):
                if raw.endswith(b"\n"):
                    raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
                if len(raw) > max_line_length:
                    raise FileReadError(
                        file_name, f"line {number} exceeds {max_line_length} bytes"
                    )
                lines.append(raw.decode("utf-8", errors="replace"))
    except OSError as e:
        raise FileReadError(file_name, e.strerror or str(e)) from e
    return lines


def find_config_files(root: str, patterns: Sequence[str] = ("*.tf",)) -> List[str]:
    """
    Return the sorted paths under `root` whose names match `patterns`.

    Directories and files excluded by the nearest `.gitignore` (and the
    always-ignored `.git/` and `.terraform/`) are skipped.
    """
    ignore = get_gitignore(root)
    wanted = pathspec.GitIgnoreSpec.from_lines(patterns)
    found: List[str] = []

    for current, dirs, files in os.walk(root):
        # Prune in place so os.walk never descends into ignored directories.
        dirs[:] = sorted(d for d in dirs if not ignore.ignores(os.path.join(current, d), is_dir=True))
        for name in sorted(files):
            path = os.path.join(current, name)
            if ignore.ignores(path) or not wanted.match_file(name):
                continue
            found.append(path)
    return found
