import threading

import pytest

from elements import Visual, elements_from_values
from engine import DriverState, SortDriver, pacing_delay

from conftest import no_sleep


VALUES = [14, 3, 9, 1, 12, 5, 10, 2, 7, 4]


def make_driver(**kwargs) -> SortDriver:
    kwargs.setdefault("elements", elements_from_values(VALUES))
    kwargs.setdefault("sleep", no_sleep)
    return SortDriver(**kwargs)


def test_pacing_delay_bounds():
    assert pacing_delay(100) == pytest.approx(0.001)
    assert pacing_delay(1) == pytest.approx(0.1)
    assert pacing_delay(50) == pytest.approx(0.051)


def test_initial_state():
    driver = make_driver()
    assert driver.state == DriverState.IDLE
    assert driver.current.frame_number == 0
    assert driver.current.values == tuple(VALUES)
    assert driver.array_size == len(VALUES)


@pytest.mark.parametrize("key", ["bubble", "quick", "merge", "selection", "insertion"])
def test_run_publishes_final_sorted_frame(key):
    published = []
    driver = make_driver(algo_key=key, on_frame=published.append)
    assert driver.run() is True
    assert driver.state == DriverState.FINISHED
    assert driver.is_finished
    assert driver.current.is_final
    assert driver.current.values == tuple(sorted(VALUES))
    assert driver.current.all_sorted
    assert published[-1] is driver.current
    assert driver.stats.frozen
    assert driver.stats.comparisons > 0


def test_run_starts_from_cleared_states():
    published = []
    driver = make_driver(on_frame=published.append)
    driver.run()
    published.clear()
    driver.run()
    # second run starts from the sorted array, marks cleared
    assert published[0].states == tuple(Visual.DEFAULT for _ in VALUES)
    assert driver.stats.swaps == 0


def test_stop_from_frame_callback():
    driver = make_driver()

    def on_frame(snapshot):
        if snapshot.frame_number == 5:
            driver.stop()

    driver.on_frame = on_frame
    assert driver.run() is False
    assert driver.state == DriverState.STOPPED
    assert not driver.current.is_final
    assert driver.current.frame_number == 5


def test_stop_when_idle_is_noop():
    driver = make_driver()
    assert driver.stop() is False
    assert driver.state == DriverState.IDLE


def test_start_while_running_is_rejected(gate):
    release, blocking_sleep = gate
    driver = make_driver(sleep=blocking_sleep)
    driver.start()
    assert driver.is_running
    with pytest.raises(RuntimeError):
        driver.start()
    with pytest.raises(RuntimeError):
        driver.select_algorithm("quick")
    with pytest.raises(RuntimeError):
        driver.resize(20)

    assert driver.stop() is True
    release.set()
    assert driver.wait(5)
    assert driver.state == DriverState.STOPPED


def test_background_run_finishes():
    driver = make_driver(algo_key="merge")
    driver.start()
    assert driver.wait(5)
    assert driver.state == DriverState.FINISHED
    assert driver.current.values == tuple(sorted(VALUES))


def test_speed_change_applies_mid_run():
    sleeps = []
    driver = make_driver(speed=1, sleep=sleeps.append)

    def on_frame(snapshot):
        if snapshot.frame_number == 3:
            driver.set_speed_preset("turbo")

    driver.on_frame = on_frame
    driver.run()
    assert sleeps[0] == pytest.approx(0.1)
    assert sleeps[-1] == pytest.approx(0.001)


def test_settings_validation():
    driver = make_driver()
    with pytest.raises(ValueError):
        driver.set_speed(0)
    with pytest.raises(ValueError):
        driver.set_speed(101)
    with pytest.raises(ValueError):
        driver.set_speed_preset("warp")
    with pytest.raises(ValueError):
        driver.resize(9)
    with pytest.raises(ValueError):
        driver.resize(101)
    with pytest.raises(ValueError):
        driver.select_algorithm("bogo")
    with pytest.raises(ValueError):
        SortDriver(algo_key="bogo")


def test_reset_generates_new_array():
    driver = make_driver(seed=3)
    driver.run()
    snap = driver.reset(size=25)
    assert driver.state == DriverState.IDLE
    assert len(snap) == 25
    assert snap.frame_number == 0
    assert driver.stats.comparisons == 0


def test_seeded_generation_is_repeatable():
    first = SortDriver(array_size=30, seed=11)
    second = SortDriver(array_size=30, seed=11)
    assert first.current.values == second.current.values


def test_to_dict():
    driver = make_driver(algo_key="quick", speed=90)
    data = driver.to_dict()
    assert data["state"] == "idle"
    assert data["algo_key"] == "quick"
    assert data["speed"] == 90
    assert data["array_size"] == len(VALUES)
    assert data["stats"] == {"comparisons": 0, "swaps": 0, "time_elapsed_ms": 0}


def test_rejected_reset_keeps_the_run_going(gate):
    release, blocking_sleep = gate
    driver = make_driver(sleep=blocking_sleep)
    driver.start()
    try:
        with pytest.raises(ValueError):
            driver.reset(size=5)
        assert driver.state == DriverState.RUNNING
        assert driver.token.should_continue()
    finally:
        driver.stop()
        release.set()
        driver.wait(5)
    assert driver.array_size == len(VALUES)


def test_stop_waits_for_lifecycle_lock(gate):
    release, blocking_sleep = gate
    driver = make_driver(sleep=blocking_sleep)
    driver.start()
    result = []
    with driver._lock:
        stopper = threading.Thread(target=lambda: result.append(driver.stop()))
        stopper.start()
        stopper.join(0.1)
        assert stopper.is_alive()
        assert driver.token.should_continue()
    stopper.join(5)
    assert result == [True]
    release.set()
    assert driver.wait(5)
    assert driver.state == DriverState.STOPPED


def test_frames_published_counts_every_frame():
    published = []
    driver = make_driver(on_frame=published.append)
    assert driver.frames_published == 1
    published.clear()
    driver.run()
    assert driver.frames_published == len(published)
    assert published[-1].is_final
