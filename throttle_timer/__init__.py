from throttle_timer.core.errors import ClockAnomalyError, InvalidIntervalError, ThrottleError
from throttle_timer.schemas.stats import GateReport
from throttle_timer.services.throttle import ThrottleGate

__all__ = [
    "ClockAnomalyError",
    "GateReport",
    "InvalidIntervalError",
    "ThrottleError",
    "ThrottleGate",
]
