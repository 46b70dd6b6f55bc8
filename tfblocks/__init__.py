from .export import extract_blocks_to_file, render_blocks
from .errors import CommandError, ExtractError, FileReadError
from .extract import (
    determine_block,
    iter_addresses,
    iter_blocks,
    list_block_names,
    register,
    retrieve_blocks,
)
from .models import ANONYMOUS_TYPE, AnonymousEntry, Block, NamedEntry, Registry
from .utils.fs import check_file_exists, check_valid_extension, find_config_files, read_file_to_lines
from .utils.paths import extraction_target

__version__ = "0.1.0"

__all__ = [
    "determine_block",
    "iter_blocks",
    "register",
    "retrieve_blocks",
    "iter_addresses",
    "list_block_names",
    "render_blocks",
    "extract_blocks_to_file",
    "read_file_to_lines",
    "check_file_exists",
    "check_valid_extension",
    "find_config_files",
    "extraction_target",
    "Block",
    "Registry",
    "AnonymousEntry",
    "NamedEntry",
    "ANONYMOUS_TYPE",
    "FileReadError",
    "ExtractError",
    "CommandError",
]
