"""
Opt-in diagnostics for the scanner and its collaborators.

Every library entry point takes `logger=None, log=False`:

    retrieve_blocks(lines)                  # silent
    retrieve_blocks(lines, log=True)        # records go to the "tfblocks" logger
    retrieve_blocks(lines, logger=my_lg)    # records go to my_lg

The package logger is handed out as is. Its level and handlers belong to the
application (the CLI sets them from -v), so turning "tfblocks" up to DEBUG
shows the per-block "Found ..." records.
"""
from __future__ import annotations

import logging

PACKAGE_LOGGER = "tfblocks"


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
) -> logging.Logger | NoopLogger:
    """Pick the injected logger, else the package logger when enabled, else a no-op."""
    if logger is not None:
        return logger
    if enabled:
        return logging.getLogger(PACKAGE_LOGGER)
    return NoopLogger()
