class ExtractError(Exception):
    """Raised when blocks cannot be rendered or written to their target file."""
