from .command import CommandError
from .extract import ExtractError
from .read import FileReadError

__all__ = ["FileReadError", "ExtractError", "CommandError"]
