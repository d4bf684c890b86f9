"""Parse the -p parent traversal limit."""

import re

from ...constants import UNLIMITED_PARENT_MARKER
from .ConfigError import ConfigError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_parent_limit(raw: str) -> tuple[int, bool]:
    """Parse a parent limit value.

    Returns:
        Tuple of (limit, unlimited)

    Raises:
        ConfigError: If ``raw`` is neither ``-`` nor a non-negative integer
    """
    if raw == "":
        return 0, False
    if raw == UNLIMITED_PARENT_MARKER:
        return 0, True
    if not _INTEGER.fullmatch(raw) or int(raw) < 0:
        raise ConfigError(f"invalid -p value: {raw!r}")
    return int(raw), False
