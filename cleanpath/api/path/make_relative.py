"""Make an absolute path relative to a base directory."""

from ...utils.get_logger import get_logger
from .common_prefix_len import common_prefix_len
from .split_abs import split_abs

logger = get_logger("path")


def make_relative(path: str, base_abs: str, limit: int, unlimited: bool) -> str:
    """Express ``path`` relative to ``base_abs``.

    Both inputs are expected to be absolute and already cleaned. The number
    of ``..`` segments needed to leave the base is bounded by ``limit``
    unless ``unlimited`` is set; when the bound would be exceeded the path
    is returned unchanged rather than partially relativized.

    Args:
        path: Absolute, cleaned target path
        base_abs: Absolute, cleaned base directory ("" when unknown)
        limit: Maximum number of ``..`` segments allowed
        unlimited: Ignore ``limit`` when True

    Returns:
        Relative path, ``"."`` when ``path`` equals the base, or ``path``
        unchanged when it is not absolute, no base is known, or the limit
        is exceeded

    Examples:
        >>> make_relative("/tmp/some-dir/another-dir/xxx", "/tmp/some-dir", 0, False)
        'another-dir/xxx'
        >>> make_relative("/tmp/foo", "/tmp/some-dir", 0, False)
        '/tmp/foo'
        >>> make_relative("/tmp/foo", "/tmp/some-dir", 1, False)
        '../foo'
    """
    if not path or not path.startswith("/") or not base_abs:
        return path
    if path == base_abs:
        return "."

    path_segs = split_abs(path)
    base_segs = split_abs(base_abs)
    common = common_prefix_len(path_segs, base_segs)
    parents_needed = len(base_segs) - common
    if not unlimited and parents_needed > limit:
        logger.debug("%s needs %d parent traversals, limit is %d", path, parents_needed, limit)
        return path

    rel_segs = [".."] * parents_needed + path_segs[common:]
    if not rel_segs:
        return "."
    return "/".join(rel_segs)
