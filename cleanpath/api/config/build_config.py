"""Validate options and resolve them into a CleanpathConfig."""

from typing import Any

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from .CleanpathConfig import CleanpathConfig
from .CleanpathOptions import CleanpathOptions
from .compile_pattern import compile_pattern
from .ConfigError import ConfigError
from .env_order_and_values import env_order_and_values
from .parse_parent_limit import parse_parent_limit
from .resolve_base_abs import resolve_base_abs
from .resolve_user_home import resolve_user_home
from .SystemContext import SystemContext

logger = get_logger("config")


def _validation_message(e: ValidationError) -> str:
    """Extract the first validation error as a plain message."""
    error_list = e.errors() or [{"msg": str(e), "loc": ()}]
    first = error_list[0]
    original = first.get("ctx", {}).get("error")
    if original is not None:
        return str(original)
    error_msg = first.get("msg", str(e))
    loc = first.get("loc", ())
    field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
    return f"{field}: {error_msg}" if field else error_msg


def build_config(
    options: CleanpathOptions | dict[str, Any],
    context: SystemContext | None = None,
) -> CleanpathConfig:
    """Validate options and resolve everything the pipeline needs.

    Home directories, environment values, the base directory and the regex
    are resolved here once; the resulting configuration is read-only.

    Args:
        options: Validated options, or a dict of option fields
        context: Process state to resolve against (default: the running process)

    Returns:
        Resolved configuration

    Raises:
        ConfigError: On the first invalid option or option combination
    """
    if not isinstance(options, CleanpathOptions):
        try:
            options = CleanpathOptions(**options)
        except ValidationError as e:
            raise ConfigError(_validation_message(e)) from e

    if context is None:
        context = SystemContext.from_os()

    resolved: dict[str, Any] = {
        "tilde_expand": options.tilde_expand,
        "tilde_unexpand": options.tilde_unexpand,
        "env_expand": options.env_expand,
        "env_unexpand": options.env_unexpand,
        "absolute": options.absolute,
        "unabsolute": options.unabsolute,
        "user": options.user,
        "new_pattern": options.new_pattern,
    }

    if options.tilde_expand or options.tilde_unexpand:
        home, name = resolve_user_home(options.user, context)
        logger.debug("Resolved home %r for user %r", home, name)
        resolved["resolved_home"] = home
        resolved["resolved_user"] = name

    if options.env_expand or options.env_unexpand:
        order, values = env_order_and_values(options.env_names, options.env_expand, context.environ)
        logger.debug("Environment variables in scope: %s", ", ".join(order))
        resolved["env_order"] = order
        resolved["env_values"] = values
        resolved["env_allowed"] = frozenset(order)

    limit, unlimited = parse_parent_limit(options.parent)
    resolved["parent_limit"] = limit
    resolved["unlimited_up"] = unlimited

    if options.absolute or options.unabsolute:
        resolved["base_abs"] = resolve_base_abs(options.base, context)
        logger.debug("Resolved base %r", resolved["base_abs"])

    if options.old_pattern:
        resolved["regex"] = compile_pattern(options.old_pattern, options.new_pattern)

    return CleanpathConfig(**resolved)
