"""Transform pipeline - fixed-order application of enabled transforms."""

from .format_log_line import format_log_line
from .TraceStep import TraceStep
from .transform_path import transform_path
from .transform_path_verbose import transform_path_verbose

__all__ = [
    "TraceStep",
    "format_log_line",
    "transform_path",
    "transform_path_verbose",
]
