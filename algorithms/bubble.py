"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Snapshot at every visible change:
  1. Adjacent pair marked COMPARING
  2. Out-of-order pair marked SWAPPING (then exchanged)
  3. Pair reset to DEFAULT
  4. Last unsorted index marked SORTED after each pass

A pass with no exchange ends the sort early; whatever prefix is still
unmarked at that point is already in order and is marked SORTED in one go.

Stable: only strictly greater neighbours are exchanged.
"""

from typing import Generator, List, Sequence

from elements import Element, Visual
from algorithms.snapshot import Snapshot, WorkingArray, Callback, Poll


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                        # 0
    "    for i in 0 .. n-2:",                       # 1
    "        swapped ← false",                      # 2
    "        for j in 0 .. n-i-2:",                 # 3
    "            compare arr[j], arr[j+1]",         # 4
    "            if arr[j] > arr[j+1]:",            # 5
    "                swap(arr[j], arr[j+1])",       # 6
    "                swapped ← true",               # 7
    "        mark arr[n-1-i] sorted",               # 8
    "        if not swapped: break",                # 9
    "    mark remaining prefix sorted",             # 10
]


def bubble_sort(
    elements: Sequence[Element],
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    """
    Yields Snapshot frames while bubble-sorting a private copy of `elements`.

    Args:
        elements        : Starting array (not mutated).
        on_compare      : Called once per comparison, after the COMPARING frame.
        on_swap         : Called once per exchange, after the SWAPPING frame.
        should_continue : Polled before every visible mutation.
    """
    arr = WorkingArray(elements)
    n = len(arr)
    unsorted_end = n

    for i in range(n - 1):
        if not should_continue():
            return
        swapped = False

        for j in range(n - i - 1):
            if not should_continue():
                return

            arr.mark(Visual.COMPARING, j, j + 1)
            yield arr.snapshot("compare", j, j + 1, line=4)
            on_compare()
            if not should_continue():
                return

            if arr.value(j) > arr.value(j + 1):
                arr.mark(Visual.SWAPPING, j, j + 1)
                yield arr.snapshot("swap", j, j + 1, line=6)
                on_swap()
                if not should_continue():
                    return
                arr.swap(j, j + 1)
                swapped = True

            arr.mark(Visual.DEFAULT, j, j + 1)
            yield arr.snapshot("reset", j, j + 1, line=3)

        if not should_continue():
            return
        unsorted_end = n - 1 - i
        arr.mark(Visual.SORTED, unsorted_end)
        yield arr.snapshot("sorted", unsorted_end, line=8)

        if not swapped:
            break

    if unsorted_end > 0 and should_continue():
        # normally just index 0; the whole untouched prefix after an early exit
        arr.mark_range(Visual.SORTED, 0, unsorted_end)
        yield arr.snapshot("sorted", *range(unsorted_end), line=10)
