"""
cancellation.py — Cooperative Cancellation
===========================================
One token per driver.  The driver arms it when a run starts and clears
it on stop or when the run ends; engines only ever read it, through the
`should_continue` capability they are handed.

Cancellation is polled, never pre-emptive: clearing the token does not
interrupt a pacing delay that is already in flight.  It only guarantees
that the next poll returns False.
"""

import threading


class CancellationToken:
    """Thread-safe "a run is still permitted to continue" flag."""

    def __init__(self):
        self._running = threading.Event()

    def arm(self) -> None:
        self._running.set()

    def cancel(self) -> None:
        self._running.clear()

    def should_continue(self) -> bool:
        """Non-blocking, side-effect-free poll."""
        return self._running.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(armed={self.should_continue()})"
