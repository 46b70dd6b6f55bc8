"""
Write scanned blocks back out as configuration text.

Public API:
  - render_blocks(registry, block_type, block_name=None) -> str
  - extract_blocks_to_file(registry, block_type, file_name, *, block_name=None, logger=None, log=False) -> str
"""
from __future__ import annotations

import logging
import os
from typing import List, Optional

from ._logging import resolve_logger
from .errors import ExtractError
from .models.registry import Registry
from .utils.paths import extraction_target

__all__ = ["render_blocks", "extract_blocks_to_file"]


def render_blocks(registry: Registry, block_type: str, block_name: Optional[str] = None) -> str:
    """
    Render every block of `block_type` as text, one source line per output line.

    Anonymous blocks are each followed by a blank line and cannot be selected
    by name. For a named type, pass `block_name` to render that single entry
    instead of all of them.
    """
    if block_type not in registry:
        raise ExtractError(f"No '{block_type}' blocks found")

    out: List[str] = []
    if block_type == registry.anonymous_type:
        if block_name is not None:
            raise ExtractError(f"'{block_type}' blocks have no names; cannot select '{block_name}'")
        for lines in registry.anonymous():
            out.extend(line + "\n" for line in lines)
            out.append("\n")
        return "".join(out)

    named = registry.named(block_type)
    if block_name is not None:
        if block_name not in named:
            raise ExtractError(f"No '{block_type}' block named '{block_name}' found")
        selected = [named[block_name]]
    else:
        selected = list(named.values())

    for lines in selected:
        out.extend(line + "\n" for line in lines)
    return "".join(out)


def extract_blocks_to_file(
    registry: Registry,
    block_type: str,
    file_name: str,
    *,
    block_name: Optional[str] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> str:
    """
    Write the `block_type` blocks scanned from `file_name` to `<block_type>.tf`
    in the same directory and return the path written.
    """
    lg = resolve_logger(logger=logger, enabled=log)
    lg.info("Extracting file from %s", file_name)

    text = render_blocks(registry, block_type, block_name)
    target = extraction_target(file_name, block_type)
    if os.path.realpath(target) == os.path.realpath(file_name):
        raise ExtractError(f"Refusing to overwrite the input file '{file_name}'")
    try:
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise ExtractError(f"Failed to write '{target}': {e}") from e

    lg.debug("Wrote %d character(s) to %s", len(text), target)
    return target
