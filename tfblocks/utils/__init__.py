# tfblocks/utils/__init__.py
from .fs import (
    MAX_LINE_LENGTH,
    check_file_exists,
    check_valid_extension,
    find_config_files,
    read_file_to_lines,
)
from .gitignore import get_gitignore
from .paths import extraction_target

__all__ = [
    "MAX_LINE_LENGTH",
    "check_file_exists",
    "check_valid_extension",
    "find_config_files",
    "read_file_to_lines",
    "get_gitignore",
    "extraction_target",
]
