"""
selection.py — Selection Sort
==============================
Generator-based selection sort.  The provisional minimum of the unsorted
suffix is marked PIVOT; every scanned element flashes COMPARING and either
takes over the PIVOT mark (new minimum) or drops back to DEFAULT.

Not stable: the long-range exchange can jump an element past its equals.
"""

from typing import Generator, List, Sequence

from elements import Element, Visual
from algorithms.snapshot import Snapshot, WorkingArray, Callback, Poll


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                     # 0
    "    for i in 0 .. n-2:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            compare arr[j], arr[min]",         # 4
    "            if arr[j] < arr[min]: min ← j",    # 5
    "        if min ≠ i: swap(arr[i], arr[min])",   # 6
    "        mark arr[i] sorted",                   # 7
    "    mark arr[n-1] sorted",                     # 8
]


def selection_sort(
    elements: Sequence[Element],
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    """Yields Snapshot frames while selection-sorting a private copy of `elements`."""
    arr = WorkingArray(elements)
    n = len(arr)

    for i in range(n - 1):
        if not should_continue():
            return

        min_idx = i
        arr.mark(Visual.PIVOT, i)
        yield arr.snapshot("pivot", i, line=2)

        for j in range(i + 1, n):
            if not should_continue():
                return

            arr.mark(Visual.COMPARING, j)
            yield arr.snapshot("compare", j, min_idx, line=4)
            on_compare()
            if not should_continue():
                return

            if arr.value(j) < arr.value(min_idx):
                arr.mark(Visual.DEFAULT, min_idx)
                min_idx = j
                arr.mark(Visual.PIVOT, min_idx)
                yield arr.snapshot("pivot", min_idx, line=5)
            else:
                arr.mark(Visual.DEFAULT, j)
                yield arr.snapshot("reset", j, line=3)

        if not should_continue():
            return

        if min_idx != i:
            arr.mark(Visual.SWAPPING, i, min_idx)
            yield arr.snapshot("swap", i, min_idx, line=6)
            on_swap()
            if not should_continue():
                return
            arr.swap(i, min_idx)
            arr.mark(Visual.DEFAULT, min_idx)

        arr.mark(Visual.SORTED, i)
        yield arr.snapshot("sorted", i, line=7)

    if n > 0 and should_continue():
        arr.mark(Visual.SORTED, n - 1)
        yield arr.snapshot("sorted", n - 1, line=8)
