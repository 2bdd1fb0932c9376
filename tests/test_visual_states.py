import pytest

from algorithms import get_algorithm
from elements import Visual, elements_from_values

from conftest import ALGORITHM_KEYS, Harness


VALUES = [8, 3, 8, 1, 6, 2, 7, 4, 5, 3]


def _frames(key):
    return Harness().run(get_algorithm(key).fn, VALUES)


# insertion re-compares its sorted prefix on every step
@pytest.mark.parametrize("key", ["bubble", "quick", "merge", "selection"])
def test_sorted_is_terminal(key):
    frames = _frames(key)
    for prev, cur in zip(frames, frames[1:]):
        for idx, state in enumerate(prev.states):
            if state == Visual.SORTED:
                assert cur.states[idx] == Visual.SORTED
                assert cur.uids[idx] == prev.uids[idx]


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_pivot_is_never_overwritten_by_comparing(key):
    frames = _frames(key)
    for prev, cur in zip(frames, frames[1:]):
        for idx, state in enumerate(prev.states):
            if state == Visual.PIVOT and cur.uids[idx] == prev.uids[idx]:
                assert cur.states[idx] != Visual.COMPARING


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_at_most_one_pivot(key):
    for frame in _frames(key):
        assert frame.states.count(Visual.PIVOT) <= 1


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_frame_precedes_each_callback(key):
    h = Harness()
    last = []

    def on_compare():
        assert last[-1].event == "compare"
        h.instruments.on_compare()

    def on_swap():
        assert last[-1].event == "swap"
        h.instruments.on_swap()

    gen = get_algorithm(key).fn(
        elements_from_values(VALUES), on_compare, on_swap, h.instruments.should_continue
    )
    for frame in gen:
        last.append(frame)

    assert h.stats.comparisons > 0
    assert len(last) > h.stats.comparisons + h.stats.swaps


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_every_frame_differs_from_the_last(key):
    frames = _frames(key)
    for prev, cur in zip(frames, frames[1:]):
        assert (prev.values, prev.states) != (cur.values, cur.states) or prev.event != cur.event


def test_bubble_pair_cycle():
    frames = Harness().run(get_algorithm("bubble").fn, [2, 1])
    assert [f.event for f in frames] == ["compare", "swap", "reset", "sorted", "sorted"]
    assert frames[0].states == (Visual.COMPARING, Visual.COMPARING)
    assert frames[1].states == (Visual.SWAPPING, Visual.SWAPPING)
    assert frames[2].values == (1, 2)
    assert frames[2].states == (Visual.DEFAULT, Visual.DEFAULT)
    assert frames[3].states == (Visual.DEFAULT, Visual.SORTED)
    assert frames[4].states == (Visual.SORTED, Visual.SORTED)


def test_insertion_pivot_walks_left():
    frames = Harness().run(get_algorithm("insertion").fn, [3, 1])
    pivot_frame = next(f for f in frames if f.event == "pivot")
    assert pivot_frame.states == (Visual.SORTED, Visual.PIVOT)
    reset = next(f for f in frames if f.event == "reset")
    assert reset.values == (1, 3)
    assert reset.states[0] == Visual.PIVOT


def test_insertion_prefix_is_sorted_after_each_step():
    frames = _frames("insertion")
    step_ends = [f for f in frames if f.event == "sorted" and f.pseudocode_line == 12]
    assert len(step_ends) == len(VALUES) - 1
    for i, frame in enumerate(step_ends, start=1):
        assert frame.active == tuple(range(i + 1))
        prefix = list(frame.values[:i + 1])
        assert prefix == sorted(prefix)
        assert all(s == Visual.SORTED for s in frame.states[:i + 1])
