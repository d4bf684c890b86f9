"""Build the ordered list of enabled pipeline stages."""

from collections.abc import Callable

from ..config.CleanpathConfig import CleanpathConfig
from ..path.clean_path import clean_path
from ..path.make_absolute import make_absolute
from ..path.make_relative import make_relative
from ..text.expand_env import expand_env
from ..text.expand_tilde import expand_tilde
from ..text.unexpand_env import unexpand_env
from ..text.unexpand_tilde import unexpand_tilde

Stage = tuple[str, Callable[[str], str]]


def _enabled_stages(config: CleanpathConfig) -> list[Stage]:
    """Return (step name, transform) pairs in pipeline order.

    Cleaning always runs; every other stage runs only when its flag is set.
    """
    stages: list[Stage] = []
    if config.tilde_expand:
        stages.append(("tilda", lambda p: expand_tilde(p, config)))
    if config.tilde_unexpand:
        stages.append(("untilda", lambda p: unexpand_tilde(p, config)))
    if config.env_expand:
        stages.append(("env", lambda p: expand_env(p, config.env_allowed)))
    if config.env_unexpand:
        stages.append(("unenv", lambda p: unexpand_env(p, config.env_order, config.env_values)))
    stages.append(("clean", clean_path))
    if config.absolute:
        stages.append(("absolute", lambda p: make_absolute(p, config.base_abs)))
    if config.unabsolute:
        stages.append(
            ("unabsolute", lambda p: make_relative(p, config.base_abs, config.parent_limit, config.unlimited_up))
        )
    if config.regex is not None:
        regex = config.regex
        stages.append(("regex", lambda p: regex.sub(config.new_pattern, p)))
    return stages
