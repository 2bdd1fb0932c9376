"""
engine/
-------
Run control, instrumentation & recording layer.

    from engine import SortDriver, Recorder, compare
"""

from engine.cancellation import CancellationToken
from engine.instruments  import Instruments, RunStatistics
from engine.driver       import (
    SortDriver,
    DriverState,
    SPEED_PRESETS,
    SPEED_MIN,
    SPEED_MAX,
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
    pacing_delay,
)
from engine.recorder     import (
    Recorder,
    RunMetrics,
    ComparisonResult,
    compare,
    compare_algorithms,
)

__all__ = [
    "CancellationToken",
    "Instruments",
    "RunStatistics",
    "SortDriver",
    "DriverState",
    "SPEED_PRESETS",
    "SPEED_MIN",
    "SPEED_MAX",
    "MIN_ARRAY_SIZE",
    "MAX_ARRAY_SIZE",
    "pacing_delay",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_algorithms",
]
