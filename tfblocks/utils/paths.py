# tfblocks/utils/paths.py
import os


def extraction_target(file_name: str, block_type: str, extension: str = ".tf") -> str:
    """Path of the file that extracted `block_type` blocks are written to, beside `file_name`."""
    return os.path.join(os.path.dirname(file_name), f"{block_type}{extension}")
