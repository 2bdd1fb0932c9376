"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete, unpaced algorithm run (every Snapshot), then computes
the metrics the Statistics panel and Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", elements=driver.current.elements())
    rec.run_to_completion()          # exhausts the generator, no delays
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME array, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Optional, List, Dict, Any, Sequence

from elements import Element, Visual
from algorithms import AlgoInfo, Snapshot, get_algorithm
from engine.cancellation import CancellationToken
from engine.instruments import Instruments, RunStatistics


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Statistics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    array_size:      int   = 0
    comparisons:     int   = 0
    swaps:           int   = 0
    total_frames:    int   = 0          # snapshots, including the initial one
    wall_time_ms:    float = 0.0        # unpaced wall-clock time to completion
    memory_bytes:    int   = 0          # approx size of the frame buffer
    sorted_ok:       bool  = False      # sorted permutation of the input, all SORTED
    stable:          bool  = False      # registry claim, not measured


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_swaps:       str = ""
    winner_frames:      str = ""   # shorter animation


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames  : Every Snapshot of the run, starting with the initial array.
        metrics : Computed RunMetrics (available after run_to_completion).
        stats   : The RunStatistics the instruments counted into.
    """

    def __init__(self):
        self.frames:  List[Snapshot]       = []
        self.metrics: Optional[RunMetrics] = None
        self.stats:   RunStatistics        = RunStatistics()

        self._algo_info: Optional[AlgoInfo] = None
        self._initial:   List[Element]      = []
        self._generator                     = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, elements: Sequence[Element]) -> None:
        """Build the engine generator for this run (nothing executes yet)."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._initial   = [e.copy(Visual.DEFAULT) for e in elements]
        self.frames     = [Snapshot.of(self._initial)]
        self.metrics    = None
        self.stats.reset()

        token = CancellationToken()
        token.arm()
        instruments = Instruments(token, self.stats)
        self._generator = info.fn(
            self._initial,
            instruments.on_compare,
            instruments.on_swap,
            instruments.should_continue,
        )

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every frame, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        start_time = time.monotonic()
        self.stats.start()

        self.frames.extend(self._generator)
        self._generator = None
        self.stats.freeze()

        wall_ms = (time.monotonic() - start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "Recorded %s: %d frames, %d comparisons, %d swaps",
            self.metrics.algo_key,
            self.metrics.total_frames,
            self.metrics.comparisons,
            self.metrics.swaps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "initial":  [e.to_dict() for e in self._initial],
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "frames":   [f.to_dict() for f in self.frames],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.frames[-1]

        expected = sorted(e.value for e in self._initial)
        sorted_ok = list(last.values) == expected and last.all_sorted

        # approximate memory: sizeof the frame buffer
        mem = sys.getsizeof(self.frames)
        for f in self.frames:
            mem += sys.getsizeof(f) + sys.getsizeof(f.values) + sys.getsizeof(f.states)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            array_size=len(self._initial),
            comparisons=self.stats.comparisons,
            swaps=self.stats.swaps,
            total_frames=len(self.frames),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            sorted_ok=sorted_ok,
            stable=info.stable if info else False,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps=winner(l.swaps, r.swaps, l.algo_label, r.algo_label),
        winner_frames=winner(l.total_frames, r.total_frames, l.algo_label, r.algo_label),
    )


def compare_algorithms(left_key: str, right_key: str, elements: Sequence[Element]) -> ComparisonResult:
    """Record both algorithms on the same array and compare them."""
    recorders = []
    for key in (left_key, right_key):
        rec = Recorder()
        rec.start(key, elements)
        rec.run_to_completion()
        recorders.append(rec)
    return compare(*recorders)
