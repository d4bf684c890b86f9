"""Normalize a path string without touching the filesystem."""


def clean_path(path: str) -> str:
    """Normalize a filesystem-like path lexically.

    Removes empty and ``.`` segments and resolves ``..`` against the
    preceding segment. Absolute paths never climb above ``/``; relative
    paths keep the ``..`` segments that cannot be resolved. Unlike
    ``os.path.normpath``, a leading ``//`` collapses to ``/``.

    Args:
        path: Path string using ``/`` as separator

    Returns:
        Cleaned path; ``"."`` for an empty relative result, ``"/"`` for an
        empty absolute one

    Examples:
        >>> clean_path("/tmp/./aa//bb/")
        '/tmp/aa/bb'
        >>> clean_path("/../a")
        '/a'
        >>> clean_path("../..")
        '../..'
    """
    if path == "":
        return "."

    is_abs = path.startswith("/")
    out: list[str] = []

    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if out and out[-1] != "..":
                out.pop()
            elif not is_abs:
                out.append("..")
            # Absolute path at root: nothing above "/"
            continue
        out.append(part)

    if is_abs:
        return "/" + "/".join(out)
    return "/".join(out) or "."
