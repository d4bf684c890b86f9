"""Apply the enabled transforms to one path and record a trace."""

from ..config.CleanpathConfig import CleanpathConfig
from ._enabled_stages import _enabled_stages
from .TraceStep import INPUT_STEP, OUTPUT_STEP, TraceStep


def transform_path_verbose(path: str, config: CleanpathConfig) -> tuple[str, list[TraceStep]]:
    """Apply the enabled transforms like ``transform_path`` and trace them.

    The trace starts with an ``input`` entry, has one entry per stage that
    changed the value, and ends with an ``output`` entry.

    Returns:
        Tuple of (final path, trace)
    """
    trace = [TraceStep(INPUT_STEP, path)]
    current = path
    for name, stage in _enabled_stages(config):
        updated = stage(current)
        if updated != current:
            trace.append(TraceStep(name, current, updated))
        current = updated
    trace.append(TraceStep(OUTPUT_STEP, current))
    return current, trace
