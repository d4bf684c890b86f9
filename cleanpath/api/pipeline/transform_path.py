"""Apply the enabled transforms to one path."""

from ..config.CleanpathConfig import CleanpathConfig
from ._enabled_stages import _enabled_stages


def transform_path(path: str, config: CleanpathConfig) -> str:
    """Apply the enabled transforms to ``path`` in pipeline order.

    Order: tilde expand, tilde unexpand, env expand, env unexpand, clean
    (always), absolute, unabsolute, regex. Never raises for path content;
    a transform that does not apply passes the value through.

    Examples:
        >>> transform_path("/tmp/./aa//bb/", CleanpathConfig())
        '/tmp/aa/bb'
    """
    for _name, stage in _enabled_stages(config):
        path = stage(path)
    return path
