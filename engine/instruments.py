"""
instruments.py — Instrumentation Callbacks & Run Statistics
============================================================
The three callables every engine receives:

    should_continue()  – poll the CancellationToken
    on_compare()       – count one comparison, then sleep the pacing delay
    on_swap()          – count one exchange / placement, then sleep

Both counting callbacks bail out *before* counting or sleeping once the
token has been cleared, so a stop never waits on more than the delay
that was already in flight.

RunStatistics is the only state besides the token that the engine side
writes and the driver side reads.  Only the callbacks write to it.
"""

import time
from typing import Callable, Dict, Any

from engine.cancellation import CancellationToken


# ---------------------------------------------------------------------------
# Run Statistics
# ---------------------------------------------------------------------------
class RunStatistics:
    """
    Attributes:
        comparisons     : on_compare invocations that went through.
        swaps           : on_swap invocations that went through.
        time_elapsed_ms : Time from start() to the latest callback, frozen at the end.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        self.comparisons:     int   = 0
        self.swaps:           int   = 0
        self.time_elapsed_ms: float = 0.0
        self._started_at:     float = self._clock()
        self._frozen:         bool  = False

    def start(self) -> None:
        self._started_at = self._clock()
        self._frozen = False

    def record_comparison(self) -> None:
        if self._frozen:
            return
        self.comparisons += 1
        self._tick()

    def record_swap(self) -> None:
        if self._frozen:
            return
        self.swaps += 1
        self._tick()

    def freeze(self) -> None:
        if not self._frozen:
            self._tick()
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comparisons":     self.comparisons,
            "swaps":           self.swaps,
            "time_elapsed_ms": round(self.time_elapsed_ms),
        }

    def _tick(self) -> None:
        self.time_elapsed_ms = (self._clock() - self._started_at) * 1000


# ---------------------------------------------------------------------------
# Instruments — the callbacks handed to an engine
# ---------------------------------------------------------------------------
class Instruments:
    """
    Binds one token and one statistics sink into engine callbacks.

    Args:
        token : Consulted by every callback.
        stats : Incremented once per counted callback.
        delay : Returns the pacing delay in seconds; read on every call so a
                speed change takes effect mid-run.
        sleep : Blocking sleep (swap for a no-op in tests).
    """

    def __init__(
        self,
        token: CancellationToken,
        stats: RunStatistics,
        delay: Callable[[], float] = lambda: 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.token = token
        self.stats = stats
        self._delay = delay
        self._sleep = sleep

    def should_continue(self) -> bool:
        return self.token.should_continue()

    def on_compare(self) -> None:
        if not self.should_continue():
            return
        self.stats.record_comparison()
        self._pause()

    def on_swap(self) -> None:
        if not self.should_continue():
            return
        self.stats.record_swap()
        self._pause()

    def _pause(self) -> None:
        seconds = self._delay()
        if seconds > 0:
            self._sleep(seconds)
