from datetime import datetime

from pydantic import BaseModel, Field


class GateReport(BaseModel):
    label: str
    call_count: int
    interval_seconds: float
    created_at: datetime
    elapsed_seconds: float
    seconds_per_call: float | None = Field(default=None)
    calls_per_second: float | None = Field(default=None)

    def summary(self) -> str:
        rate = f"{self.calls_per_second:.3f}" if self.calls_per_second is not None else "n/a"
        per_call = f"{self.seconds_per_call:.3f}" if self.seconds_per_call is not None else "n/a"
        return (
            f"{self.label}: {self.call_count} calls, {rate} calls/sec, "
            f"{per_call} sec/call, running for {self.elapsed_seconds:.3f}s"
        )
