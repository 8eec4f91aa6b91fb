from __future__ import annotations

import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))

from throttle_timer.core.logging import configure_logging  # noqa: E402
from throttle_timer.services.throttle import ThrottleGate  # noqa: E402


def main() -> None:
    configure_logging()
    break_gate = ThrottleGate(10, "Break")

    # first call always fires
    assert break_gate.try_fire()
    for _ in range(100):
        # 10s have not passed
        assert not break_gate.try_fire()

    break_gate.log_stats()
    assert break_gate.call_count == 1


if __name__ == "__main__":
    main()
