"""Make a path absolute against a base directory."""

from .clean_path import clean_path


def make_absolute(path: str, base_abs: str) -> str:
    """Join a relative path onto ``base_abs`` and clean the result.

    Absolute paths, and any path when no base is known, pass through
    unchanged.
    """
    if path == "":
        return clean_path(path)
    if path.startswith("/") or not base_abs:
        return path
    return clean_path(f"{base_abs}/{path}")
