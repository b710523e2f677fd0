from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from ..errors import ConfigurationError
from ..models import Event, Job
from .engine import RunResult


@dataclass(slots=True)
class MetricsSummary:
    pizzas: int
    avg_waiting_time: float
    avg_turnaround_time: float
    makespan: int
    throughput: float
    mean_abs_prediction_error: float
    exact_prediction_ratio: float
    max_backlog: int


def jobs_to_dataframe(jobs: List[Job]) -> pd.DataFrame:
    data = [
        {
            "id": j.id,
            "arrival_time": j.arrival_time,
            "duration": j.duration,
            "predicted_finish_time": j.predicted_finish_time,
            "start_time": j.start_time,
            "actual_finish_time": j.actual_finish_time,
            "waiting_time": j.waiting_time(),
            "turnaround_time": j.turnaround_time(),
            "prediction_error": j.prediction_error(),
        }
        for j in jobs
    ]
    return pd.DataFrame(data, columns=_JOB_COLUMNS)


_JOB_COLUMNS = [
    "id",
    "arrival_time",
    "duration",
    "predicted_finish_time",
    "start_time",
    "actual_finish_time",
    "waiting_time",
    "turnaround_time",
    "prediction_error",
]


def events_to_dataframe(events: List[Event]) -> pd.DataFrame:
    data = [
        {
            "tick": e.tick,
            "kind": e.kind,
            "job_id": e.job_id,
            "predicted_finish_time": e.detail.get("predicted_finish_time"),
        }
        for e in events
    ]
    return pd.DataFrame(data, columns=["tick", "kind", "job_id", "predicted_finish_time"])


def utilization_series(jobs: Iterable[Job], capacity: int, window_size: int, final_tick: int) -> pd.DataFrame:
    """Minutos de forno usados em cada janela [k*W, k*W + W) até final_tick.

    Só lê start_time e actual_finish_time de cada pizza concluída.
    """
    if capacity <= 0 or window_size <= 0:
        raise ConfigurationError("capacity e window_size devem ser positivos")

    spans = [(j.start_time, j.actual_finish_time) for j in jobs if j.start_time is not None and j.actual_finish_time is not None]
    rows = []
    if not spans:
        return pd.DataFrame(rows, columns=_WINDOW_COLUMNS)

    for window_start in range(0, final_tick + 1, window_size):
        window_end = window_start + window_size
        used = 0
        for start, finish in spans:
            # sobreposição entre o tempo de forno e a janela
            used += max(0, min(finish, window_end) - max(start, window_start))
        rows.append(
            {
                "start_time": window_start,
                "end_time": window_end - 1,
                "used_time": used,
                "utilization": _round_half_up(used / (capacity * window_size) * 100),
            }
        )
    return pd.DataFrame(rows, columns=_WINDOW_COLUMNS)


_WINDOW_COLUMNS = ["start_time", "end_time", "used_time", "utilization"]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize(result: RunResult) -> MetricsSummary:
    df = jobs_to_dataframe(result.jobs)
    if df.empty:
        return MetricsSummary(
            pizzas=0,
            avg_waiting_time=0.0,
            avg_turnaround_time=0.0,
            makespan=0,
            throughput=0.0,
            mean_abs_prediction_error=0.0,
            exact_prediction_ratio=0.0,
            max_backlog=result.max_backlog,
        )
    makespan = int(df["actual_finish_time"].max())
    errors = df["prediction_error"].astype(float)
    return MetricsSummary(
        pizzas=len(df),
        avg_waiting_time=float(df["waiting_time"].mean()),
        avg_turnaround_time=float(df["turnaround_time"].mean()),
        makespan=makespan,
        throughput=(len(df) / makespan) if makespan > 0 else 0.0,
        mean_abs_prediction_error=float(errors.abs().mean()),
        exact_prediction_ratio=float((errors == 0).mean()),
        max_backlog=result.max_backlog,
    )


def format_utilization_table(series: pd.DataFrame) -> str:
    if series.empty:
        return "(nenhuma pizza concluída)"
    table = series.copy()
    table["utilization"] = table["utilization"].map(lambda v: f"{v}%")
    return table.to_string(index=False)
