"""Resolve which environment variables take part in env transforms."""

from collections.abc import Mapping, Sequence

from ...constants import ALL_ENV_MARKER


def env_order_and_values(
    names: Sequence[str],
    expand_all: bool,
    environ: Mapping[str, str],
) -> tuple[tuple[str, ...], dict[str, str]]:
    """Resolve the ordered env names and their captured values.

    Every variable in ``environ`` is used, in its own order, when ``names``
    contains ``-`` or when ``expand_all`` is set and ``names`` is empty.
    Otherwise ``names`` is used as given, with ``""`` for unset variables.

    Args:
        names: Names from repeated -x options
        expand_all: True when env expansion is enabled
        environ: Environment snapshot

    Returns:
        Tuple of (order, values)
    """
    if ALL_ENV_MARKER in names or (expand_all and not names):
        return tuple(environ), dict(environ)
    return tuple(names), {name: environ.get(name, "") for name in names}
