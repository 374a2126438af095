"""Delayed, latest-only computation scheduling.

Models a slow remote fetch: each submission waits ``delay`` seconds, then
computes and applies its result. A newer submission (or ``cancel()``)
supersedes everything before it, so a stale result is dropped instead of
being applied after a fresher one.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Protocol, TypeVar

DEFAULT_DELAY = 1.0

T = TypeVar("T")


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[..., Timer]


class LatestOnlyScheduler:
    """Run delayed computations, applying only the most recently submitted one.

    Usage:
        scheduler = LatestOnlyScheduler(delay=1.0)
        scheduler.submit(lambda: evaluate(series, profile), show_result)
        # a second submit before the first fires drops the first
        scheduler.submit(lambda: evaluate(other_series, profile), show_result)
    """

    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._ticket = 0
        self._timer: Timer | None = None

    @property
    def latest_ticket(self) -> int:
        with self._lock:
            return self._ticket

    @property
    def pending(self) -> bool:
        """True while a submitted computation has neither been applied nor dropped."""
        with self._lock:
            return self._timer is not None

    def submit(
        self,
        compute: Callable[[], T],
        apply: Callable[[T], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> int:
        """Schedule ``compute`` after the delay; hand its result to ``apply`` if still latest.

        If ``compute`` raises and ``on_error`` is given, the exception goes to
        ``on_error`` (only while the submission is still latest). Without
        ``on_error`` it propagates in the timer thread.

        Returns the ticket identifying this submission.
        """
        with self._lock:
            self._cancel_timer()
            self._ticket += 1
            ticket = self._ticket
            timer = self._timer_factory(self._delay, self._fire, args=(ticket, compute, apply, on_error))
            if isinstance(timer, threading.Timer):
                timer.daemon = True
            self._timer = timer
        timer.start()
        return ticket

    def cancel(self) -> None:
        """Drop the pending computation, including one already computing."""
        with self._lock:
            self._cancel_timer()
            self._ticket += 1

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _is_latest(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._ticket

    def _claim(self, ticket: int) -> bool:
        """Mark ``ticket`` as finished; True if it is still the latest."""
        with self._lock:
            if ticket != self._ticket:
                return False
            self._timer = None
            return True

    def _fire(
        self,
        ticket: int,
        compute: Callable[[], Any],
        apply: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None,
    ) -> None:
        if not self._is_latest(ticket):
            return
        try:
            result = compute()
        except Exception as exc:
            latest = self._claim(ticket)
            if on_error is None:
                raise
            if latest:
                on_error(exc)
            return
        # Callbacks run outside the lock.
        if self._claim(ticket):
            apply(result)
