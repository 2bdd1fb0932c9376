"""
driver.py — Run Driver
=======================
The SortDriver is the ONLY object the UI talks to during a run.
It owns the displayed array, the statistics, the cancellation token and
the settings (algorithm, array size, speed), and it publishes every
Snapshot an engine yields, in order, to `current` and to `on_frame`.

State machine:
    IDLE     →  start()  →  RUNNING
    RUNNING  →  stop()   →  STOPPED    (engine polled a cleared token)
    RUNNING  →  (engine exhausted) → FINISHED
    any      →  reset()  →  IDLE       (fresh random array)

Threading:
  start() runs the engine on one worker thread so a web request can
  return while the sort animates; run() does the same work on the
  calling thread.  Only one run may be active at a time.  A second
  start() is rejected here, never inside an engine.
"""

import logging
import threading
import time
from enum import Enum
from typing import Callable, Dict, Optional, Any, Sequence

from elements import Element, Visual, generate_random_array
from algorithms import AlgoInfo, Snapshot, get_algorithm
from engine.cancellation import CancellationToken
from engine.instruments import Instruments, RunStatistics


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class DriverState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    STOPPED  = "stopped"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed & size settings
# ---------------------------------------------------------------------------
SPEED_MIN     = 1
SPEED_MAX     = 100
DEFAULT_SPEED = 50

SPEED_PRESETS = {
    "slow":   10,     # teaching mode
    "medium": 50,
    "fast":   90,     # demo mode
    "turbo":  100,
}

MIN_ARRAY_SIZE     = 10
MAX_ARRAY_SIZE     = 100
DEFAULT_ARRAY_SIZE = 50

DEFAULT_ALGORITHM = "bubble"


def pacing_delay(speed: int) -> float:
    """Seconds to pause per callback: (101 - speed) ms, so higher is faster."""
    return (SPEED_MAX + 1 - speed) / 1000.0


# ---------------------------------------------------------------------------
# SortDriver
# ---------------------------------------------------------------------------
class SortDriver:
    """
    Attributes:
        state            : Current DriverState.
        algo_key         : Registry key of the selected algorithm.
        array_size       : Size used by generate().
        speed            : 1..100, read live by the pacing callbacks.
        current          : Last published Snapshot (what the renderer shows).
        frames_published : Snapshots published since the last start()/load().
        stats            : RunStatistics of the current / last run.
        on_frame         : Optional callback(Snapshot) fired on every publish.
    """

    def __init__(
        self,
        algo_key: str = DEFAULT_ALGORITHM,
        array_size: int = DEFAULT_ARRAY_SIZE,
        speed: int = DEFAULT_SPEED,
        on_frame: Optional[Callable[[Snapshot], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
        seed: Optional[int] = None,
        elements: Optional[Sequence[Element]] = None,
    ):
        if get_algorithm(algo_key) is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self.algo_key:         str             = algo_key
        self.array_size:       int             = array_size
        self.speed:            int             = _check_speed(speed)
        self.on_frame:         Optional[Callable[[Snapshot], None]] = on_frame
        self.state:            DriverState     = DriverState.IDLE
        self.stats:            RunStatistics   = RunStatistics()
        self.token:            CancellationToken = CancellationToken()
        self.current:          Snapshot        = Snapshot()
        self.frames_published: int             = 0

        self._sleep  = sleep
        self._seed   = seed
        self._lock   = threading.Lock()
        self._worker: Optional[threading.Thread] = None

        if elements is not None:
            self.load(elements)
        else:
            _check_size(array_size)
            self.generate()

    # ------------------------------------------------------------------
    # Array management
    # ------------------------------------------------------------------
    def generate(self) -> Snapshot:
        """Replace the displayed array with a fresh random one."""
        self._ensure_idle("generate a new array")
        return self.load(generate_random_array(self.array_size, seed=self._seed))

    def load(self, elements: Sequence[Element]) -> Snapshot:
        """Display `elements` (re-marked DEFAULT) as the next run's input."""
        self._ensure_idle("load a new array")
        self.array_size = len(elements)
        self.stats.reset()
        self.frames_published = 0
        self.state = DriverState.IDLE
        self._publish(Snapshot.of([e.copy(Visual.DEFAULT) for e in elements]))
        return self.current

    def resize(self, size: int) -> Snapshot:
        self._ensure_idle("resize the array")
        _check_size(size)
        self.array_size = size
        logger.debug("Array size set to %d", size)
        return self.generate()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def select_algorithm(self, key: str) -> AlgoInfo:
        self._ensure_idle("change algorithm")
        info = get_algorithm(key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {key}")
        self.algo_key = key
        return info

    def set_speed(self, speed: int) -> None:
        """Allowed mid-run; the next callback picks it up."""
        self.speed = _check_speed(speed)
        logger.debug("Speed set to %d (%.0f ms per step)", self.speed, self.delay * 1000)

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.set_speed(SPEED_PRESETS[preset])

    @property
    def delay(self) -> float:
        return pacing_delay(self.speed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Launch the selected algorithm on a worker thread and return."""
        info, elements = self._prepare()
        self._worker = threading.Thread(
            target=self._run_worker,
            args=(info, elements),
            name=f"sort-{info.key}",
            daemon=True,
        )
        self._worker.start()

    def run(self) -> bool:
        """Run the selected algorithm on this thread.  True if it completed."""
        info, elements = self._prepare()
        return self._execute(info, elements)

    def stop(self) -> bool:
        """Request cancellation.  Returns False if nothing was running."""
        with self._lock:
            if self.state != DriverState.RUNNING:
                return False
            self.token.cancel()
        logger.info("Stop requested for %s", self.algo_key)
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the worker thread.  True once no run is in flight."""
        worker = self._worker
        if worker is not None:
            worker.join(timeout)
            if worker.is_alive():
                return False
        return self.state != DriverState.RUNNING

    def reset(self, size: Optional[int] = None) -> Snapshot:
        """Stop any run, then show a freshly generated array."""
        if size is not None:
            _check_size(size)
        self.stop()
        self.wait()
        if size is not None:
            self.array_size = size
        return self.generate()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def algorithm(self) -> AlgoInfo:
        return get_algorithm(self.algo_key)

    @property
    def is_running(self) -> bool:
        return self.state == DriverState.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.state == DriverState.FINISHED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state":        self.state.value,
            "algo_key":     self.algo_key,
            "array_size":   self.array_size,
            "speed":        self.speed,
            "frame_number": self.current.frame_number,
            "stats":        self.stats.to_dict(),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _prepare(self):
        with self._lock:
            if self.state == DriverState.RUNNING:
                raise RuntimeError("A run is already in progress")
            info = self.algorithm
            # private copy of what is on screen, marks cleared
            elements = self.current.elements(Visual.DEFAULT)
            self.stats.reset()
            self.stats.start()
            self.frames_published = 0
            self.token.arm()
            self.state = DriverState.RUNNING
        # outside the lock: on_frame may call stop()
        self._publish(Snapshot.of(elements))
        logger.info("Starting %s on %d elements (speed %d)", info.label, len(elements), self.speed)
        return info, elements

    def _execute(self, info: AlgoInfo, elements) -> bool:
        instruments = Instruments(
            self.token,
            self.stats,
            delay=lambda: self.delay,
            sleep=self._sleep,
        )
        completed = False
        try:
            for snapshot in info.fn(
                elements,
                instruments.on_compare,
                instruments.on_swap,
                instruments.should_continue,
            ):
                self._publish(snapshot)

            completed = self.token.should_continue()
            if completed and len(self.current):
                self._publish(Snapshot.of(
                    self.current.elements(Visual.SORTED),
                    frame_number=self.current.frame_number + 1,
                    event="final",
                    is_final=True,
                ))
        finally:
            self.stats.freeze()
            with self._lock:
                self.token.cancel()
                self.state = DriverState.FINISHED if completed else DriverState.STOPPED
            logger.info(
                "%s %s: %d comparisons, %d swaps, %.0f ms",
                info.label,
                "finished" if completed else "stopped",
                self.stats.comparisons,
                self.stats.swaps,
                self.stats.time_elapsed_ms,
            )
        return completed

    def _run_worker(self, info: AlgoInfo, elements) -> None:
        try:
            self._execute(info, elements)
        except Exception:
            logger.exception("Sort worker for %s crashed", info.key)

    def _publish(self, snapshot: Snapshot) -> None:
        self.current = snapshot
        self.frames_published += 1
        if self.on_frame is not None:
            self.on_frame(snapshot)

    def _ensure_idle(self, action: str) -> None:
        if self.state == DriverState.RUNNING:
            raise RuntimeError(f"Cannot {action} while a run is in progress")


def _check_speed(speed: int) -> int:
    if not SPEED_MIN <= speed <= SPEED_MAX:
        raise ValueError(f"Speed must be between {SPEED_MIN} and {SPEED_MAX}, got {speed}")
    return int(speed)


def _check_size(size: int) -> None:
    if not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
        raise ValueError(
            f"Array size must be between {MIN_ARRAY_SIZE} and {MAX_ARRAY_SIZE}, got {size}"
        )
