class FileReadError(Exception):
    """Raised when a configuration file cannot be loaded into lines."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")
