"""Replace environment variable values with references."""

from collections.abc import Iterable, Mapping


def unexpand_env(path: str, order: Iterable[str], values: Mapping[str, str]) -> str:
    """Replace captured variable values in ``path`` with ``$NAME``.

    Names are applied in ``order``; each replaces every occurrence of its
    value in the result of the previous ones. Empty values are skipped.

    Examples:
        >>> unexpand_env("/path/foobar", ["A", "B"], {"A": "foo", "B": "foobar"})
        '/path/$Abar'
    """
    for name in order:
        value = values.get(name, "")
        if not value:
            continue
        path = path.replace(value, "$" + name)
    return path
