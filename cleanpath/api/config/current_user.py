"""Determine the invoking user."""

import os
import pwd

from .UserRecord import UserRecord


def current_user() -> UserRecord:
    """Return the invoking user's name and home directory.

    Falls back to the ``USER`` and ``HOME`` environment variables when the
    password database has no entry for the current uid.
    """
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        return UserRecord(os.environ.get("USER", ""), os.environ.get("HOME", ""))
    return UserRecord(entry.pw_name, entry.pw_dir)
