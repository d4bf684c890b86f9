"""Format a trace entry as a verbose log line."""

from ...constants import PROG_NAME, STEP_WIDTH
from .TraceStep import TraceStep


def format_log_line(entry: TraceStep) -> str:
    """Render ``entry`` with the step name padded to a fixed column.

    Examples:
        >>> format_log_line(TraceStep("clean", "./a", "a"))
        'cleanpath clean      ./a -> a'
    """
    if entry.after is None:
        return f"{PROG_NAME} {entry.step:<{STEP_WIDTH}} {entry.before}"
    return f"{PROG_NAME} {entry.step:<{STEP_WIDTH}} {entry.before} -> {entry.after}"
