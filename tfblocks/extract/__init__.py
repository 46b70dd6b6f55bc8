from .registry import iter_addresses, list_block_names, register, retrieve_blocks
from .scanner import determine_block, iter_blocks

__all__ = [
    "determine_block",
    "iter_blocks",
    "register",
    "retrieve_blocks",
    "iter_addresses",
    "list_block_names",
]
