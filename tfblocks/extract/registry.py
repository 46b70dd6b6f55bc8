# tfblocks/extract/registry.py

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

from .._logging import resolve_logger
from ..models.registry import ANONYMOUS_TYPE, AnonymousEntry, NamedEntry, Registry
from .scanner import iter_blocks


def register(registry: Registry, block_type: str, block_name: str, lines: Sequence[str]) -> Registry:
    """
    Record one block in `registry` and return it.

    The anonymous entry is created on first use whatever the block type, so a
    registry that has seen any block always exposes it. Anonymous blocks are
    appended in order and `block_name` is ignored for them; any other block is
    stored under its name, replacing an earlier block with the same name.
    """
    entries = registry.entries
    if registry.anonymous_type not in entries:
        entries[registry.anonymous_type] = AnonymousEntry()
    if block_type not in entries:
        entries[block_type] = NamedEntry()

    entry = entries[block_type]
    if isinstance(entry, AnonymousEntry):
        entry.blocks.append(list(lines))
    else:
        entry.blocks[block_name] = list(lines)
    return registry


def retrieve_blocks(
    lines: Sequence[str],
    *,
    registry: Optional[Registry] = None,
    anonymous_type: str = ANONYMOUS_TYPE,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Registry:
    """
    Scan `lines` and fold every block into a registry.

    Pass an existing `registry` to accumulate several files into one; its own
    anonymous type is kept and `anonymous_type` is ignored.
    """
    lg = resolve_logger(logger=logger, enabled=log)
    if registry is None:
        registry = Registry(anonymous_type=anonymous_type)

    for block in iter_blocks(lines, logger=logger, log=log):
        registry = register(registry, block.block_type, block.name, block.lines)

    lg.debug("Registry holds %d block type(s)", len(registry))
    return registry


def iter_addresses(registry: Registry) -> Iterator[str]:
    """Yield `<type>.<name>` for every named entry, in insertion order."""
    for block_type in registry.named_types():
        for name in registry.named(block_type):
            yield f"{block_type}.{name}" if name else block_type


def list_block_names(registry: Registry) -> List[str]:
    """Return the entry names under every non-anonymous block type."""
    return [name for block_type in registry.named_types() for name in registry.named(block_type)]
