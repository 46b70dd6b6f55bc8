class CommandError(Exception):
    """Raised for an unknown command or a command used in the wrong mode."""
