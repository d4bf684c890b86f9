"""Resolve the home directory used for tilde transforms."""

from .SystemContext import SystemContext


def resolve_user_home(user_name: str, context: SystemContext) -> tuple[str, str]:
    """Resolve the home directory and user name for ``user_name``.

    An empty name means the invoking user. An unknown name falls back to
    the invoking user's home with an empty resolved name, so tilde unexpand
    still recognises that home and qualifies it with ``user_name``.

    Returns:
        Tuple of (home_dir, resolved_user)
    """
    current = context.current_user()
    if not user_name:
        return current.home, current.name
    record = context.lookup_user(user_name)
    if record is None:
        return current.home, ""
    return record.home, record.name
