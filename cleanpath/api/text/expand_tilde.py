"""Expand a leading tilde to a home directory."""

from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..config.CleanpathConfig import CleanpathConfig
from ..config.lookup_user_home import lookup_user_home

logger = get_logger("text")


def expand_tilde(
    path: str,
    config: CleanpathConfig,
    lookup_home: Callable[[str], str | None] = lookup_user_home,
) -> str:
    """Expand ``~`` or ``~user`` at the start of ``path``.

    Bare ``~`` uses the home directory resolved at configuration time.
    ``~user`` is looked up when the path is processed. A ``~`` anywhere
    other than the first character is literal.

    Args:
        path: Path string
        config: Resolved configuration (``resolved_home`` is used)
        lookup_home: Maps a user name to its home directory, or None

    Returns:
        Path with the tilde prefix replaced, or ``path`` unchanged when the
        home directory is unknown

    Examples:
        >>> expand_tilde("~/docs", CleanpathConfig(resolved_home="/home/me"))
        '/home/me/docs'
    """
    if not path.startswith("~"):
        return path

    name, slash, rest = path[1:].partition("/")
    rest = slash + rest

    if not name:
        if not config.resolved_home:
            return path
        return config.resolved_home + rest

    home = lookup_home(name)
    if not home:
        logger.debug("No home directory for user %r; leaving %s unchanged", name, path)
        return path
    return home + rest
