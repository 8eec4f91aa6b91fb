from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timedelta
from typing import Callable

from throttle_timer.core import time_utils
from throttle_timer.core.config import settings
from throttle_timer.core.errors import ClockAnomalyError, InvalidIntervalError
from throttle_timer.schemas.stats import GateReport

logger = logging.getLogger(__name__)

# whole days only, so the bound itself converts back to a timedelta exactly
MAX_INTERVAL_SECONDS = timedelta.max.days * 86400.0


def _to_seconds(interval: float | timedelta) -> float:
    if isinstance(interval, timedelta):
        seconds = interval.total_seconds()
    elif isinstance(interval, (int, float)) and not isinstance(interval, bool):
        try:
            seconds = float(interval)
        except OverflowError:
            raise InvalidIntervalError(interval) from None
    else:
        raise InvalidIntervalError(interval)
    if not math.isfinite(seconds) or seconds < 0 or seconds > MAX_INTERVAL_SECONDS:
        raise InvalidIntervalError(interval)
    return seconds


class ThrottleGate:
    """Permit an event at most once per ``interval`` seconds.

    The first call always fires. Gating decisions use a monotonic clock; the
    wall clock is only read for ``created_at`` and :meth:`report`.

    A gate is not thread-safe. Confine it to one thread or guard it with a lock.

        break_gate = ThrottleGate(10, "Break")
        if break_gate.try_fire():
            take_a_break()
    """

    def __init__(
        self,
        interval: float | timedelta,
        label: str,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._interval = _to_seconds(interval)
        self._label = label
        self._clock = clock
        self._sleep = sleep
        self._last_fired: float | None = None
        self._call_count = 0
        self._created_at = time_utils.now()
        logger.debug("throttle gate %s created (interval=%ss)", label, self._interval)

    def __repr__(self) -> str:
        return (
            f"ThrottleGate(label={self._label!r}, interval={self._interval!r}, "
            f"call_count={self._call_count})"
        )

    @property
    def label(self) -> str:
        return self._label

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def interval_delta(self) -> timedelta:
        return timedelta(seconds=self._interval)

    @property
    def call_count(self) -> int:
        return self._call_count

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def last_fired(self) -> float | None:
        return self._last_fired

    def _permitted(self, now: float) -> bool:
        if self._last_fired is None:
            return True
        return (now - self._last_fired) >= self._interval

    def _record(self, now: float) -> None:
        self._last_fired = now
        self._call_count += 1

    def may_fire(self) -> bool:
        """Return True if a call right now would fire. Does not change state."""
        return self._permitted(self._clock())

    def try_fire(self) -> bool:
        now = self._clock()
        if not self._permitted(now):
            return False
        self._record(now)
        return True

    def try_fire_with(self, action: Callable[[], object]) -> bool:
        """Fire and run ``action`` once, or do nothing if throttled."""
        if not self.try_fire():
            return False
        action()
        return True

    def try_fire_branch(self, on_fire: Callable[[], object], on_throttled: Callable[[], object]) -> bool:
        """Run ``on_fire`` when permitted, ``on_throttled`` otherwise. Exactly one runs."""
        if self.try_fire():
            on_fire()
            return True
        on_throttled()
        return False

    def try_fire_logged(self, log: logging.Logger | None = None) -> bool:
        """Same as :meth:`try_fire` but logs a message when throttled."""
        if self.try_fire():
            return True
        if settings.log_throttled:
            now = self._clock()
            (log or logger).info(
                "%s throttled, last fired %.3fs ago, next event possible in %.3fs",
                self._label,
                now - self._last_fired,
                self._remaining(now),
            )
        return False

    def _remaining(self, now: float) -> float:
        if self._last_fired is None:
            return 0.0
        elapsed = now - self._last_fired
        return self._interval - min(self._interval, elapsed)

    def wait_time(self) -> float:
        """Seconds until the next call may fire, 0.0 if it may fire now."""
        return self._remaining(self._clock())

    def fire_after_wait(self, action: Callable[[], object]) -> None:
        """Block until the interval has elapsed, then fire and run ``action``.

        This is the only blocking operation on the gate; the wait is bounded
        by ``interval`` and cannot be cancelled.
        """
        wait = self.wait_time()
        if wait > 0:
            logger.debug("%s waiting %.3fs before firing", self._label, wait)
            self._sleep(wait)
        # interval already waited out; record without re-checking
        self._record(self._clock())
        action()

    def report(self) -> GateReport:
        observed = time_utils.now()
        if observed < self._created_at:
            raise ClockAnomalyError(self._label, self._created_at, observed)
        elapsed = (observed - self._created_at).total_seconds()
        seconds_per_call = None
        calls_per_second = None
        if self._call_count > 0:
            seconds_per_call = elapsed / self._call_count
            if elapsed > 0:
                calls_per_second = self._call_count / elapsed
        return GateReport(
            label=self._label,
            call_count=self._call_count,
            interval_seconds=self._interval,
            created_at=self._created_at,
            elapsed_seconds=elapsed,
            seconds_per_call=seconds_per_call,
            calls_per_second=calls_per_second,
        )

    def log_stats(self, log: logging.Logger | None = None) -> GateReport | None:
        target = log or logger
        try:
            stats = self.report()
        except ClockAnomalyError as exc:
            target.warning("%s stats unavailable: %s", self._label, exc.message)
            return None
        target.info("%s", stats.summary())
        return stats
