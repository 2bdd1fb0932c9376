from collections import Counter

import pytest

from algorithms import get_algorithm
from elements import Visual, elements_from_values
from engine import CancellationToken, Instruments, RunStatistics

from conftest import ALGORITHM_KEYS, no_sleep


VALUES = [9, 4, 7, 1, 8, 2, 6, 3, 5]


def _run(key, token, stats, on_compare=None, on_swap=None):
    inst = Instruments(token, stats, sleep=no_sleep)
    return list(
        get_algorithm(key).fn(
            elements_from_values(VALUES),
            on_compare or inst.on_compare,
            on_swap or inst.on_swap,
            inst.should_continue,
        )
    )


def test_token_lifecycle():
    token = CancellationToken()
    assert not token.should_continue()
    token.arm()
    assert token.should_continue()
    token.cancel()
    assert not token.should_continue()


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_cancelled_before_start_emits_nothing(key):
    stats = RunStatistics()
    frames = _run(key, CancellationToken(), stats)
    assert frames == []
    assert stats.comparisons == 0
    assert stats.swaps == 0


@pytest.mark.parametrize("key", ALGORITHM_KEYS)
def test_cancel_inside_compare_stops_emission(key):
    token = CancellationToken()
    token.arm()
    stats = RunStatistics()
    inst = Instruments(token, stats, sleep=no_sleep)
    emitted_at_cancel = []
    frames = []

    def on_compare():
        inst.on_compare()
        if stats.comparisons == 3:
            token.cancel()
            emitted_at_cancel.append(len(frames))

    gen = get_algorithm(key).fn(
        elements_from_values(VALUES), on_compare, inst.on_swap, inst.should_continue
    )
    for frame in gen:
        frames.append(frame)

    assert emitted_at_cancel == [len(frames)]
    assert stats.comparisons == 3
    assert frames[-1].event == "compare"
    assert not frames[-1].all_sorted


@pytest.mark.parametrize("key", ["bubble", "quick", "selection", "insertion"])
def test_cancel_inside_swap_leaves_a_permutation(key):
    token = CancellationToken()
    token.arm()
    stats = RunStatistics()
    inst = Instruments(token, stats, sleep=no_sleep)

    def on_swap():
        inst.on_swap()
        token.cancel()

    frames = _run(key, token, stats, on_swap=on_swap)
    last = frames[-1]
    assert stats.swaps == 1
    assert last.event == "swap"
    # the exchange never happened
    assert Counter(last.values) == Counter(VALUES)
    assert Visual.SWAPPING in last.states


def test_callbacks_after_cancel_do_not_count():
    token = CancellationToken()
    stats = RunStatistics()
    sleeps = []
    inst = Instruments(token, stats, delay=lambda: 0.05, sleep=sleeps.append)
    inst.on_compare()
    inst.on_swap()
    assert (stats.comparisons, stats.swaps) == (0, 0)
    assert sleeps == []


def test_callbacks_sleep_the_live_delay():
    token = CancellationToken()
    token.arm()
    delay = [0.05]
    sleeps = []
    inst = Instruments(token, RunStatistics(), delay=lambda: delay[0], sleep=sleeps.append)
    inst.on_compare()
    delay[0] = 0.001
    inst.on_swap()
    assert sleeps == [0.05, 0.001]


def test_statistics_freeze():
    ticks = iter([0.0, 0.0, 0.25, 0.5, 9.0])
    stats = RunStatistics(clock=lambda: next(ticks))
    stats.start()
    stats.record_comparison()
    stats.freeze()
    stats.record_swap()
    assert stats.frozen
    assert stats.comparisons == 1
    assert stats.swaps == 0
    assert stats.to_dict() == {"comparisons": 1, "swaps": 0, "time_elapsed_ms": 500}
