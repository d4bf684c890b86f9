import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_ENV, LOG_LEVEL_ENV, PROG_NAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Configure cleanpath diagnostic logging.

    Diagnostics go to stderr at ``CLEANPATH_LOG_LEVEL`` (default WARNING) and,
    when ``CLEANPATH_LOG_FILE`` is set, to a rotating log file as well.

    Args:
        level: Logging level name. If None, derived from environment.
        log_file: Path to log file. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if log_file is None:
        env_file = os.environ.get(LOG_FILE_ENV)
        log_file = Path(env_file).expanduser() if env_file else None

    root_logger = logging.getLogger(PROG_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
