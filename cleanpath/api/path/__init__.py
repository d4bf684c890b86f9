"""Lexical path operations."""

from .clean_path import clean_path
from .common_prefix_len import common_prefix_len
from .make_absolute import make_absolute
from .make_relative import make_relative
from .split_abs import split_abs

__all__ = [
    "clean_path",
    "common_prefix_len",
    "make_absolute",
    "make_relative",
    "split_abs",
]
