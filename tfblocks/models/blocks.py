from dataclasses import dataclass
from typing import List


@dataclass
class Block:
    """A brace-balanced run of source lines, classified by its opening line."""

    block_type: str
    name: str
    lines: List[str]
    start: int  # 0-based index of the opening line
    end: int    # 0-based index of the closing line (inclusive)
