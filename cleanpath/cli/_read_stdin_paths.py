"""Read input paths from a text stream."""

from collections.abc import Iterable


def _read_stdin_paths(stream: Iterable[str]) -> list[str]:
    """Return one path per line of ``stream``, without line terminators."""
    return [line.rstrip("\r\n") for line in stream]
