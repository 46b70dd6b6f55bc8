# tfblocks/extract/scanner.py

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from .._logging import resolve_logger
from ..models.blocks import Block


def determine_block(line: str) -> tuple[str, str]:
    """
    Classify a block from its opening line.

    The header is the text before the rightmost '{', minus the one character
    just ahead of the brace (normally the separating space). Its first
    space-separated token is the block type; the remaining tokens, stripped of
    double quotes and joined with '.', are the block name:

        resource "aws_vpc" "this" {   ->  ("resource", "aws_vpc.this")
        locals {                      ->  ("locals", "")

    A brace in the first two columns leaves an empty header, giving ("", "").
    """
    brace = line.rfind("{")
    header = line[: brace - 1] if brace > 0 else ""

    parts = header.split(" ")
    block_type = parts[0]
    name = ""
    if len(parts) > 1:
        name = ".".join(parts[1:]).replace('"', "")
    return block_type, name


def iter_blocks(
    lines: Sequence[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Iterator[Block]:
    """
    Yield every top-level brace-balanced block in `lines`, in order.

    Lines outside a block that hold no '{' are skipped. Once a block opens,
    each '{' raises the depth and each '}' lowers it, starting on the opening
    line itself; the block closes on the first line that leaves the depth at 0.
    An unterminated trailing block is dropped without error.

    Braces inside string literals and comments are counted like any other.
    """
    lg = resolve_logger(logger=logger, enabled=log)

    in_block = False
    depth = 0
    start = -1
    block_type = name = ""

    for i, line in enumerate(lines):
        if not in_block:
            if "{" not in line:
                continue
            in_block = True
            start = i
            block_type, name = determine_block(line)

        depth += line.count("{") - line.count("}")

        if depth == 0:
            lg.debug(
                "Found %s block :: %s at lines %d to %d", block_type, name, start + 1, i + 1
            )
            yield Block(
                block_type=block_type,
                name=name,
                lines=list(lines[start : i + 1]),
                start=start,
                end=i,
            )
            in_block = False
            start = -1

    if in_block:
        lg.debug("Dropping unterminated %s block starting at line %d", block_type, start + 1)
