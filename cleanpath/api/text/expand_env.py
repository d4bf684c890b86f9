"""Expand environment variable references."""

import os
import re
from collections.abc import Container, Mapping

# $NAME (ASCII word characters) or ${NAME}
ENV_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}", re.ASCII)


def expand_env(path: str, allowed: Container[str], environ: Mapping[str, str] | None = None) -> str:
    """Expand ``$NAME`` and ``${NAME}`` references for allowed names.

    Values are read from the live environment at call time. References to
    names outside ``allowed``, or to unset variables, are left as written.
    A variable set to the empty string expands to nothing.

    Args:
        path: Path string
        allowed: Names eligible for expansion
        environ: Environment to read from (default ``os.environ``)

    Returns:
        Path with eligible references substituted
    """
    env = os.environ if environ is None else environ

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        if name not in allowed:
            return match.group(0)
        value = env.get(name)
        if value is None:
            return match.group(0)
        return value

    return ENV_PATTERN.sub(_substitute, path)
