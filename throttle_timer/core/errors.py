"""
Error types raised by throttle gates.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class ThrottleError(Exception):
    """Base exception for throttle gates."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidIntervalError(ThrottleError, ValueError):
    """Interval is negative, non-finite or not a duration."""

    def __init__(self, interval: Any):
        super().__init__(
            "INVALID_INTERVAL",
            f"interval must be a finite, non-negative number of seconds or timedelta, got {interval!r}",
            {"interval": repr(interval)},
        )


class ClockAnomalyError(ThrottleError):
    """Wall clock reports a time before the gate was created."""

    def __init__(self, label: str, created_at: datetime, observed_at: datetime):
        self.created_at = created_at
        self.observed_at = observed_at
        super().__init__(
            "CLOCK_ANOMALY",
            f"{label}: wall clock {observed_at.isoformat()} is before creation time {created_at.isoformat()}",
            {
                "label": label,
                "created_at": created_at.isoformat(),
                "observed_at": observed_at.isoformat(),
            },
        )
