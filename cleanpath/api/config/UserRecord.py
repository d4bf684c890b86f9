"""User name and home directory pair."""

from typing import NamedTuple


class UserRecord(NamedTuple):
    """A user account as seen by tilde resolution."""

    name: str
    home: str
