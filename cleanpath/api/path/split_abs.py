"""Split an absolute path into segments."""


def split_abs(path: str) -> list[str]:
    """Split an absolute path into its non-empty segments."""
    return [part for part in path.split("/") if part]
