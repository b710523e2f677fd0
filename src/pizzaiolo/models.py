from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class Order:
    arrival_time: int
    duration: int


@dataclass(slots=True)
class Job:
    id: int
    arrival_time: int
    duration: int

    # Previsão feita uma única vez na admissão
    predicted_finish_time: int = 0

    # Timestamps preenchidos durante simulação
    start_time: Optional[int] = None
    actual_finish_time: Optional[int] = None

    def predicted_wait(self) -> int:
        return self.predicted_finish_time - self.arrival_time - self.duration

    def waiting_time(self) -> Optional[int]:
        if self.start_time is None:
            return None
        return self.start_time - self.arrival_time

    def turnaround_time(self) -> Optional[int]:
        if self.actual_finish_time is None:
            return None
        return self.actual_finish_time - self.arrival_time

    def prediction_error(self) -> Optional[int]:
        # positivo: ficou pronta depois do previsto
        if self.actual_finish_time is None:
            return None
        return self.actual_finish_time - self.predicted_finish_time


@dataclass(slots=True)
class Event:
    tick: int
    kind: str  # "admission", "dispatch", "completion"
    job_id: int
    detail: Dict[str, Any] = field(default_factory=dict)


ADMISSION = "admission"
DISPATCH = "dispatch"
COMPLETION = "completion"
