"""Look up a user account by name."""

import pwd

from .UserRecord import UserRecord


def lookup_user(name: str) -> UserRecord | None:
    """Return the account for ``name`` from the password database, or None."""
    try:
        entry = pwd.getpwnam(name)
    except KeyError:
        return None
    return UserRecord(entry.pw_name, entry.pw_dir)
