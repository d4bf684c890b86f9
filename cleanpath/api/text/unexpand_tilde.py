"""Replace a leading home directory with a tilde."""

from ..config.CleanpathConfig import CleanpathConfig


def unexpand_tilde(path: str, config: CleanpathConfig) -> str:
    """Replace the resolved home directory prefix of ``path`` with ``~``.

    The prefix becomes ``~<user>`` when a target user was configured and it
    differs from the user the home directory was resolved for.
    """
    home = config.resolved_home
    if not home:
        return path
    if path != home and not path.startswith(home + "/"):
        return path

    prefix = "~"
    if config.user and config.user != config.resolved_user:
        prefix = "~" + config.user
    return prefix + path[len(home) :]
