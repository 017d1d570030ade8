"""This module provides the delayed-call scheduler used by the simulated flows.

The chat assistant and the document generator only pretend to work: they wait
a fixed amount of time and then publish canned content. Scheduling goes
through this provider so the flows never sleep themselves, every pending call
can be cancelled when its screen is torn down, and tests can swap in a
deterministic scheduler.
"""

import threading
from collections.abc import Callable
from typing import Protocol

from cidadania_legal.providers.logging import LoggingProvider, current_correlation_id


class ScheduledCall(Protocol):
    """A handle to a callback that will run later."""

    def cancel(self) -> None:
        """Prevents the callback from running, if it has not run yet."""


class Scheduler(Protocol):
    """Anything able to run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Schedules `callback` to run once after `delay` seconds."""


class TimerCall:
    """A `ScheduledCall` backed by a daemon `threading.Timer`."""

    def __init__(self, timer: threading.Timer):
        """Wraps an already started timer.

        Args:
            timer: The timer running the callback.
        """
        self._timer = timer

    def cancel(self) -> None:
        """Cancels the underlying timer."""
        self._timer.cancel()


class ThreadingScheduler:
    """Runs delayed callbacks on daemon timer threads.

    The correlation ID active when the call is scheduled is re-bound on the
    timer thread, so log lines emitted by the callback stay attributed to
    the visitor that triggered it.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Schedules `callback` to run once after `delay` seconds.

        Args:
            delay: Seconds to wait before running the callback.
            callback: The function to run.

        Returns:
            A handle that cancels the call.
        """
        correlation_id = current_correlation_id()

        def run() -> None:
            with LoggingProvider().set_correlation_id(correlation_id):
                callback()

        timer = threading.Timer(delay, run)
        timer.daemon = True
        timer.start()
        return TimerCall(timer)
