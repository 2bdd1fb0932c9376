"""
snapshot.py — Working Array Snapshot
=====================================
Every sorting engine is a generator that yields Snapshot objects.
A Snapshot is a frozen-in-time picture of everything the renderer
needs to draw one frame:

    • The value of every bar, in order
    • The visual state of every bar (default / comparing / swapping / …)
    • Which indices the step touched (for highlighting + the stats line)
    • What kind of event produced the frame
    • Which line of pseudocode is executing right now

Design decisions:
  - Snapshot is a frozen dataclass of tuples.  It is a SNAPSHOT: the
    engine is the only writer of the WorkingArray it came from, and the
    driver / renderer are pure readers.
  - WorkingArray is the mutable scratch-pad an engine owns for exactly
    one run.  It copies the caller's elements on construction so two runs
    never share Element objects.
  - Mutations and emissions are separate calls.  Engines call one or
    more mutators, then `snapshot()` exactly once before moving on.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Any

from elements import Element, Visual


# Instrumentation signatures shared by every engine:
#   fn(elements, on_compare, on_swap, should_continue) -> Iterator[Snapshot]
Callback = Callable[[], None]
Poll     = Callable[[], bool]


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        frame_number    : 0 for the driver's initial frame, then 1, 2, … per emission.
        values          : Sort keys, in array order.
        states          : Visual state per index.
        uids            : Element identity per index.
        event           : What produced this frame: "initial", "compare", "swap",
                          "reset", "pivot", "sorted" or "final".
        active          : Indices touched by the event.
        pseudocode_line : 0-based index into the engine's PSEUDOCODE (-1 = none).
        is_final        : True on the driver's completion frame.
    """

    frame_number:     int                 = 0
    values:           Tuple[float, ...]   = ()
    states:           Tuple[Visual, ...]  = ()
    uids:             Tuple[Optional[int], ...] = ()
    event:            str                 = "initial"
    active:           Tuple[int, ...]     = ()
    pseudocode_line:  int                 = -1
    is_final:         bool                = False

    def __len__(self) -> int:
        return len(self.values)

    @property
    def all_sorted(self) -> bool:
        return all(s == Visual.SORTED for s in self.states)

    def elements(self, state: Optional[Visual] = None) -> List[Element]:
        """Fresh, independent Elements for this frame (optionally re-marked)."""
        return [
            Element(v, state if state is not None else s, uid)
            for v, s, uid in zip(self.values, self.states, self.uids)
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame_number":    self.frame_number,
            "values":          list(self.values),
            "states":          [s.value for s in self.states],
            "uids":            list(self.uids),
            "event":           self.event,
            "active":          list(self.active),
            "pseudocode_line": self.pseudocode_line,
            "is_final":        self.is_final,
        }

    @classmethod
    def of(
        cls,
        elements: Sequence[Element],
        frame_number: int = 0,
        event: str = "initial",
        active: Sequence[int] = (),
        pseudocode_line: int = -1,
        is_final: bool = False,
    ) -> "Snapshot":
        return cls(
            frame_number=frame_number,
            values=tuple(e.value for e in elements),
            states=tuple(e.state for e in elements),
            uids=tuple(e.uid for e in elements),
            event=event,
            active=tuple(active),
            pseudocode_line=pseudocode_line,
            is_final=is_final,
        )


# ---------------------------------------------------------------------------
# Mutable scratch-pad the engines drive
# ---------------------------------------------------------------------------
class WorkingArray:
    """
    Owned by one engine for one run.

    Usage inside an engine generator:
        arr = WorkingArray(elements)
        arr.mark(Visual.COMPARING, j, j + 1)
        yield arr.snapshot("compare", j, j + 1, line=3)
        on_compare()
    """

    def __init__(self, elements: Sequence[Element]):
        self.items:   List[Element] = [e.copy() for e in elements]
        self.emitted: int           = 0

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, idx: int) -> Element:
        return self.items[idx]

    def value(self, idx: int) -> float:
        return self.items[idx].value

    def state(self, idx: int) -> Visual:
        return self.items[idx].state

    # -- mutators --
    def mark(self, state: Visual, *indices: int) -> None:
        for idx in indices:
            self.items[idx].state = state

    def mark_range(self, state: Visual, start: int, stop: int) -> None:
        for idx in range(start, stop):
            self.items[idx].state = state

    def swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def place(self, idx: int, element: Element, state: Visual) -> None:
        """Write a copy of `element` into slot `idx` (merge-style write)."""
        self.items[idx] = element.copy(state)

    def copy_range(self, start: int, stop: int) -> Tuple[Element, ...]:
        """Read-only staging buffer for [start, stop)."""
        return tuple(e.copy() for e in self.items[start:stop])

    # -- emission --
    def snapshot(self, event: str, *active: int, line: int = -1) -> Snapshot:
        self.emitted += 1
        return Snapshot.of(
            self.items,
            frame_number=self.emitted,
            event=event,
            active=active,
            pseudocode_line=line,
        )
