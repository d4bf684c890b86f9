"""Look up a user's home directory by name."""

from .lookup_user import lookup_user


def lookup_user_home(name: str) -> str | None:
    """Return the home directory of ``name``, or None if the user is unknown."""
    record = lookup_user(name)
    if record is None:
        return None
    return record.home
