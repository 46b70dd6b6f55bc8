# tfblocks/utils/gitignore.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import pathspec

# Never scanned for configuration: VCS metadata and terraform's provider/module cache.
ALWAYS_IGNORED = (".git/", ".terraform/")


@dataclass
class IgnoreRules:
    """Ignore patterns anchored at the directory of the .gitignore they came from."""

    spec: pathspec.GitIgnoreSpec
    base: str

    def ignores(self, path: str, is_dir: bool = False) -> bool:
        rel = os.path.relpath(os.path.abspath(path), self.base).replace(os.sep, "/")
        if rel == "." or rel.startswith("../"):
            return False
        return self.spec.match_file(rel + "/" if is_dir else rel)


def _nearest_gitignore(start: str) -> Optional[str]:
    cur = start
    while True:
        candidate = os.path.join(cur, ".gitignore")
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(cur)
        if parent == cur:
            return None
        cur = parent


def get_gitignore(path: str) -> IgnoreRules:
    """
    Load the nearest .gitignore at or above `path` (file or directory).

    Without one, the rules still skip ALWAYS_IGNORED, relative to `path`.
    An unreadable .gitignore counts as empty.
    """
    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    lines: List[str] = list(ALWAYS_IGNORED)
    found = _nearest_gitignore(base)
    if found is not None:
        try:
            with open(found, "r", encoding="utf-8", errors="ignore") as f:
                lines.extend(f.read().splitlines())
            base = os.path.dirname(found)
        except OSError:
            pass

    return IgnoreRules(spec=pathspec.GitIgnoreSpec.from_lines(lines), base=base)
