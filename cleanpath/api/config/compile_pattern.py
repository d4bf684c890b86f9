"""Compile the -o pattern and check the -n replacement against it."""

import re

from .ConfigError import ConfigError


def compile_pattern(old_pattern: str, new_pattern: str) -> re.Pattern[str]:
    """Compile ``old_pattern`` and validate ``new_pattern`` as its template.

    Group references in the replacement are checked here so that a bad
    template fails the run up front instead of on the first matching path.

    Raises:
        ConfigError: If the pattern or the replacement template is invalid
    """
    try:
        regex = re.compile(old_pattern)
    except re.error as e:
        raise ConfigError(f"invalid -o pattern: {e}") from e

    try:
        regex.sub(new_pattern, "")
    except (re.error, IndexError) as e:
        raise ConfigError(f"invalid -n replacement: {e}") from e
    return regex
