"""cleanpath - lexical path cleanup and transformation."""

__version__ = "0.1.0"
