"""
merge.py — Merge Sort
======================
Generator-based top-down merge sort.  Each merge copies its two halves
into read-only staging buffers and writes the merged run back in place:

  • destination slot marked COMPARING, then on_compare
    (only while both buffers still have a head)
  • chosen value written in, marked SWAPPING, then on_swap
  • slot reset to DEFAULT
  • leftover buffer drained the same way, without comparisons

Elements are relocated by copy, so nothing can be marked SORTED until the
top-level merge is done; the final pass marks the whole array at once.

Stable: ties take the left buffer's head.
"""

from typing import Generator, List, Sequence

from elements import Element, Visual
from algorithms.snapshot import Snapshot, WorkingArray, Callback, Poll


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",            # 0
    "    if left < right:",                         # 1
    "        mid ← (left + right) // 2",            # 2
    "        merge_sort(arr, left, mid)",           # 3
    "        merge_sort(arr, mid + 1, right)",      # 4
    "        merge(arr, left, mid, right)",         # 5
    "def merge(arr, left, mid, right):",            # 6
    "    L ← arr[left..mid]; R ← arr[mid+1..right]",# 7
    "    while L and R:",                           # 8
    "        compare L.head, R.head",               # 9
    "        arr[k] ← smaller head (L on ties)",    # 10
    "    arr[k..] ← rest of L",                     # 11
    "    arr[k..] ← rest of R",                     # 12
    "mark every element sorted",                    # 13
]


def merge_sort(
    elements: Sequence[Element],
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    """Yields Snapshot frames while merge-sorting a private copy of `elements`."""
    arr = WorkingArray(elements)
    n = len(arr)

    yield from _merge_sort(arr, 0, n - 1, on_compare, on_swap, should_continue)

    if n > 0 and should_continue():
        arr.mark_range(Visual.SORTED, 0, n)
        yield arr.snapshot("sorted", *range(n), line=13)


def _merge_sort(
    arr: WorkingArray,
    left: int,
    right: int,
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    if not should_continue():
        return
    if left < right:
        mid = (left + right) // 2
        yield from _merge_sort(arr, left, mid, on_compare, on_swap, should_continue)
        yield from _merge_sort(arr, mid + 1, right, on_compare, on_swap, should_continue)
        yield from _merge(arr, left, mid, right, on_compare, on_swap, should_continue)


def _merge(
    arr: WorkingArray,
    left: int,
    mid: int,
    right: int,
    on_compare: Callback,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, None]:
    if not should_continue():
        return

    left_buf  = arr.copy_range(left, mid + 1)
    right_buf = arr.copy_range(mid + 1, right + 1)
    i = j = 0
    k = left

    while i < len(left_buf) and j < len(right_buf):
        if not should_continue():
            return

        arr.mark(Visual.COMPARING, k)
        yield arr.snapshot("compare", k, line=9)
        on_compare()
        if not should_continue():
            return

        if left_buf[i].value <= right_buf[j].value:
            chosen = left_buf[i]
            i += 1
        else:
            chosen = right_buf[j]
            j += 1

        placed = yield from _write(arr, k, chosen, 10, on_swap, should_continue)
        if not placed:
            return
        k += 1

    for buf, start, line in ((left_buf, i, 11), (right_buf, j, 12)):
        for element in buf[start:]:
            if not should_continue():
                return
            placed = yield from _write(arr, k, element, line, on_swap, should_continue)
            if not placed:
                return
            k += 1


def _write(
    arr: WorkingArray,
    k: int,
    element: Element,
    line: int,
    on_swap: Callback,
    should_continue: Poll,
) -> Generator[Snapshot, None, bool]:
    """Write one element into slot k: SWAPPING, on_swap, DEFAULT."""
    arr.place(k, element, Visual.SWAPPING)
    yield arr.snapshot("swap", k, line=line)
    on_swap()
    if not should_continue():
        return False
    arr.mark(Visual.DEFAULT, k)
    yield arr.snapshot("reset", k, line=line)
    return True
