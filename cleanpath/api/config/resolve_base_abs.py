"""Resolve the base directory into an absolute, cleaned path."""

from ..path.clean_path import clean_path
from .ConfigError import ConfigError
from .SystemContext import SystemContext


def resolve_base_abs(base: str, context: SystemContext) -> str:
    """Resolve ``base`` against the working directory and clean it.

    Raises:
        ConfigError: If the working directory cannot be determined
    """
    if not base:
        base = "."
    if base.startswith("/"):
        return clean_path(base)
    try:
        cwd = context.getcwd()
    except OSError as e:
        raise ConfigError(f"cannot resolve base: {e}") from e
    return clean_path(f"{cwd}/{base}")
