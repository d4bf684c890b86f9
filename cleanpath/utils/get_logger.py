import logging

from ..constants import PROG_NAME


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by ``configure_logging`` at the CLI entry point;
    library use without it falls back to the standard logging defaults.
    """
    return logging.getLogger(f"{PROG_NAME}.{name}")
