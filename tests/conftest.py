import threading

import pytest

from elements import Visual, elements_from_values
from engine import CancellationToken, Instruments, RunStatistics


ALGORITHM_KEYS = ["bubble", "quick", "merge", "selection", "insertion"]


def no_sleep(seconds: float) -> None:
    pass


class Harness:
    """Armed token + statistics + instruments, no pacing."""

    def __init__(self):
        self.token = CancellationToken()
        self.token.arm()
        self.stats = RunStatistics()
        self.instruments = Instruments(self.token, self.stats, sleep=no_sleep)

    def run(self, fn, values):
        """Exhaust `fn` over `values`, return every emitted frame."""
        return list(
            fn(
                elements_from_values(values),
                self.instruments.on_compare,
                self.instruments.on_swap,
                self.instruments.should_continue,
            )
        )


@pytest.fixture
def harness() -> Harness:
    return Harness()


@pytest.fixture
def gate():
    """A sleep that blocks until released, to hold a driver mid-run."""
    event = threading.Event()

    def sleep(seconds: float) -> None:
        event.wait(5)

    yield event, sleep
    event.set()


@pytest.fixture
def client():
    import main

    driver = main.init_driver(
        elements=elements_from_values([42, 7, 19, 3, 25, 11, 30, 1, 16, 8]),
        speed=100,
        sleep=no_sleep,
    )
    main.app.config["TESTING"] = True
    yield main.app.test_client()
    driver.stop()
    driver.wait(5)


def final_is_sorted(frames, values) -> bool:
    last = frames[-1]
    return list(last.values) == sorted(values) and all(s == Visual.SORTED for s in last.states)
