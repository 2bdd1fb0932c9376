"""
insertion.py — Insertion Sort
==============================
Generator-based insertion sort.  The element being inserted is marked
PIVOT and walks left one slot per shift: every larger neighbour is moved
one slot right (SWAPPING → DEFAULT) and the pivot takes its place.

Moving the pivot with each shift, instead of holding it aside, keeps the
array a permutation of the input at every emitted frame, so a cancelled
run never shows a duplicated or missing bar.

Invariant: after step i completes, indices 0..i are SORTED.
Stable: only strictly greater elements are shifted past the pivot.
"""

from typing import Generator, List, Sequence

from elements import Element, Visual
from algorithms.snapshot import Snapshot, WorkingArray, Callback, Poll


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                     # 0
    "    mark arr[0] sorted",                       # 1
    "    for i in 1 .. n-1:",                       # 2
    "        key ← arr[i]",                         # 3
    "        j ← i - 1",                            # 4
    "        while j ≥ 0:",                         # 5
    "            compare arr[j], key",              # 6
    "            if arr[j] > key:",                 # 7
    "                arr[j+1] ← arr[j]",            # 8
    "                j ← j - 1",                    # 9
    "            else: mark arr[j] sorted; break",  # 10
    "        arr[j+1] ← key",                       # 11
    "        mark arr[0..i] sorted",                # 12
]


def insertion_sort(
    elements: Sequence[Element],
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    """Yields Snapshot frames while insertion-sorting a private copy of `elements`."""
    arr = WorkingArray(elements)
    n = len(arr)

    if n == 0 or not should_continue():
        return
    arr.mark(Visual.SORTED, 0)
    yield arr.snapshot("sorted", 0, line=1)

    for i in range(1, n):
        if not should_continue():
            return

        arr.mark(Visual.PIVOT, i)
        yield arr.snapshot("pivot", i, line=3)
        key = arr.value(i)
        j = i - 1

        # pivot sits at j + 1 throughout the walk
        while j >= 0:
            if not should_continue():
                return

            arr.mark(Visual.COMPARING, j)
            yield arr.snapshot("compare", j, j + 1, line=6)
            on_compare()
            if not should_continue():
                return

            if arr.value(j) > key:
                arr.mark(Visual.SWAPPING, j)
                yield arr.snapshot("swap", j, j + 1, line=8)
                on_swap()
                if not should_continue():
                    return
                arr.swap(j, j + 1)
                arr.mark(Visual.DEFAULT, j + 1)
                yield arr.snapshot("reset", j, j + 1, line=9)
                j -= 1
            else:
                arr.mark(Visual.SORTED, j)
                yield arr.snapshot("sorted", j, line=10)
                break

        if not should_continue():
            return
        arr.mark_range(Visual.SORTED, 0, i + 1)
        yield arr.snapshot("sorted", *range(i + 1), line=12)
