"""
quick.py — Quick Sort
======================
Generator-based quick sort with a Lomuto partition.  The last element of
the active range is the pivot and keeps its PIVOT mark for the whole
partition; only the slot it finally lands in is marked SORTED.
Singleton ranges are marked SORTED directly, with no comparison.

The recursion is kept (depth log n .. n).  Each recursive call polls
`should_continue` before doing anything, and `_partition` hands its pivot
index back through `yield from` (None when the run was cancelled).

Not stable: the partition exchange can reorder equal elements.
"""

from typing import Generator, List, Optional, Sequence

from elements import Element, Visual
from algorithms.snapshot import Snapshot, WorkingArray, Callback, Poll


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",                      # 0
    "    if low < high:",                                   # 1
    "        p ← partition(arr, low, high)",                # 2
    "        quick_sort(arr, low, p - 1)",                  # 3
    "        quick_sort(arr, p + 1, high)",                 # 4
    "    elif low == high: mark arr[low] sorted",           # 5
    "def partition(arr, low, high):",                       # 6
    "    pivot ← arr[high]",                                # 7
    "    i ← low - 1",                                      # 8
    "    for j in low .. high-1:",                          # 9
    "        compare arr[j], pivot",                        # 10
    "        if arr[j] < pivot:",                           # 11
    "            i ← i + 1",                                # 12
    "            swap(arr[i], arr[j])",                     # 13
    "    swap(arr[i+1], arr[high]); mark arr[i+1] sorted",  # 14
    "    return i + 1",                                     # 15
]


def quick_sort(
    elements: Sequence[Element],
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    """Yields Snapshot frames while quick-sorting a private copy of `elements`."""
    arr = WorkingArray(elements)
    yield from _quick_sort(arr, 0, len(arr) - 1, on_compare, on_swap, should_continue)


def _quick_sort(
    arr: WorkingArray,
    low: int,
    high: int,
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    if not should_continue():
        return

    if low < high:
        pi = yield from _partition(arr, low, high, on_compare, on_swap, should_continue)
        if pi is None:
            return
        yield from _quick_sort(arr, low, pi - 1, on_compare, on_swap, should_continue)
        yield from _quick_sort(arr, pi + 1, high, on_compare, on_swap, should_continue)
    elif low == high:
        arr.mark(Visual.SORTED, low)
        yield arr.snapshot("sorted", low, line=5)


def _partition(
    arr: WorkingArray,
    low: int,
    high: int,
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, Optional[int]]:
    pivot_value = arr.value(high)
    arr.mark(Visual.PIVOT, high)
    yield arr.snapshot("pivot", high, line=7)

    i = low - 1
    for j in range(low, high):
        if not should_continue():
            return None

        arr.mark(Visual.COMPARING, j)
        yield arr.snapshot("compare", j, high, line=10)
        on_compare()
        if not should_continue():
            return None

        if arr.value(j) < pivot_value:
            i += 1
            if i != j:
                arr.mark(Visual.SWAPPING, i, j)
                yield arr.snapshot("swap", i, j, line=13)
                on_swap()
                if not should_continue():
                    return None
                arr.swap(i, j)

        # i and j stay below high, so the pivot mark is never touched here
        touched = (j,) if i < low or i == j else (i, j)
        arr.mark(Visual.DEFAULT, *touched)
        yield arr.snapshot("reset", *touched, line=9)

    if not should_continue():
        return None

    store = i + 1
    arr.mark(Visual.SWAPPING, store, high)
    yield arr.snapshot("swap", store, high, line=14)
    on_swap()
    if not should_continue():
        return None

    arr.swap(store, high)
    if store != high:
        arr.mark(Visual.DEFAULT, high)
    arr.mark(Visual.SORTED, store)
    yield arr.snapshot("sorted", store, line=14)
    return store
