"""Print a transform trace to stderr."""

from rich.console import Console
from rich.text import Text

from ..api.pipeline.format_log_line import format_log_line
from ..api.pipeline.TraceStep import TraceStep
from ..constants import PROG_NAME, STEP_WIDTH


def _print_trace(trace: list[TraceStep]) -> None:
    """Print trace lines to stderr, styling the step column on terminals."""
    console = Console(stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True)
    step_start = len(PROG_NAME) + 1
    for entry in trace:
        line = Text(format_log_line(entry))
        line.stylize("dim", 0, len(PROG_NAME))
        line.stylize("bold cyan", step_start, step_start + STEP_WIDTH)
        console.print(line)
