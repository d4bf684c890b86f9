"""Tilde and environment-variable rewrites."""

from .expand_env import expand_env
from .expand_tilde import expand_tilde
from .unexpand_env import unexpand_env
from .unexpand_tilde import unexpand_tilde

__all__ = [
    "expand_env",
    "expand_tilde",
    "unexpand_env",
    "unexpand_tilde",
]
