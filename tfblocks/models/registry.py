from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Union

# Blocks of this type carry no labels, so they are kept as an ordered list.
ANONYMOUS_TYPE = "locals"


@dataclass
class AnonymousEntry:
    """Ordered list of anonymous blocks, each one a list of lines."""

    blocks: List[List[str]] = field(default_factory=list)


@dataclass
class NamedEntry:
    """Blocks of one type keyed by their dotted name."""

    blocks: Dict[str, List[str]] = field(default_factory=dict)


RegistryEntry = Union[AnonymousEntry, NamedEntry]


@dataclass
class Registry:
    """
    Scanned blocks grouped by block type.

    The anonymous type maps to an AnonymousEntry; every other type maps to a
    NamedEntry. Read through the accessors so callers never have to check
    which variant they hold.
    """

    anonymous_type: str = ANONYMOUS_TYPE
    entries: Dict[str, RegistryEntry] = field(default_factory=dict)

    def anonymous(self) -> List[List[str]]:
        entry = self.entries.get(self.anonymous_type)
        if isinstance(entry, AnonymousEntry):
            return entry.blocks
        return []

    def named(self, block_type: str) -> Dict[str, List[str]]:
        entry = self.entries.get(block_type)
        if isinstance(entry, NamedEntry):
            return entry.blocks
        return {}

    def types(self) -> List[str]:
        return list(self.entries)

    def named_types(self) -> Iterator[str]:
        for block_type in self.entries:
            if block_type != self.anonymous_type:
                yield block_type

    def __contains__(self, block_type: object) -> bool:
        return block_type in self.entries

    def __len__(self) -> int:
        return len(self.entries)
