"""One entry of a transform trace."""

from dataclasses import dataclass

INPUT_STEP = "input"
OUTPUT_STEP = "output"


@dataclass(frozen=True)
class TraceStep:
    """A pipeline step that changed the path, or the input/output markers.

    ``after`` is None for the ``input`` and ``output`` entries.
    """

    step: str
    before: str
    after: str | None = None
