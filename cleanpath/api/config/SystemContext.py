"""Read-only view of process state used during configuration."""

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .current_user import current_user as _current_user
from .lookup_user import lookup_user as _lookup_user
from .UserRecord import UserRecord


@dataclass(frozen=True)
class SystemContext:
    """Process state consulted once while building a configuration.

    ``environ`` is a snapshot: values captured here are what env unexpand
    substitutes, regardless of later changes to the process environment.
    """

    environ: Mapping[str, str] = field(default_factory=dict)
    getcwd: Callable[[], str] = os.getcwd
    current_user: Callable[[], UserRecord] = _current_user
    lookup_user: Callable[[str], UserRecord | None] = _lookup_user

    @classmethod
    def from_os(cls) -> "SystemContext":
        """Build a context backed by the running process."""
        return cls(environ=dict(os.environ))
