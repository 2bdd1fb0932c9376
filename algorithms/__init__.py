"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting engine the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, …),
        …
    }

Every `fn` has the same shape:

    fn(elements, on_compare, on_swap, should_continue) -> Generator[Snapshot]

so the driver and the recorder never special-case an algorithm.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

from algorithms.snapshot  import Snapshot, WorkingArray
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    stable:            bool     = False       # preserves order of equal values?
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    description:       str      = ""          # one-liner for the info card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly steps through the list, compares adjacent elements "
                    "and swaps them if they are in the wrong order.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        stable=False,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Picks a pivot, partitions the array around it, then "
                    "recursively sorts the two sides.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Divides the array into halves, sorts them separately, "
                    "then merges the sorted halves.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        stable=False,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and moves it to the "
                    "front, then repeats for the rest.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted array one element at a time by inserting "
                    "each element into its correct position.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def stable_algorithms() -> List[AlgoInfo]:
    """Algorithms that keep equal values in their original order."""
    return [a for a in REGISTRY.values() if a.stable]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Snapshot",
    "WorkingArray",
    "get_algorithm",
    "list_algorithms",
    "stable_algorithms",
]
