import pytest

from pizzaiolo.config import SimConfig
from pizzaiolo.errors import ConfigurationError
from pizzaiolo.generators import SHOP_ORDERS
from pizzaiolo.models import Job, Order
from pizzaiolo.sim.engine import run_simulation
from pizzaiolo.sim.metrics import (
    events_to_dataframe,
    format_utilization_table,
    jobs_to_dataframe,
    summarize,
    utilization_series,
)


@pytest.fixture
def shop_result():
    return run_simulation(SHOP_ORDERS, SimConfig(capacity=3))


def test_single_job_split_across_windows():
    job = Job(id=1, arrival_time=5, duration=10, start_time=5, actual_finish_time=15)
    series = utilization_series([job], capacity=1, window_size=10, final_tick=15)

    assert list(series["used_time"]) == [5, 5]
    assert list(series["utilization"]) == [50, 50]
    assert list(series["end_time"]) == [9, 19]


def test_simulated_single_job_utilization():
    result = run_simulation([Order(5, 10)], SimConfig(capacity=1))
    series = utilization_series(result.jobs, 1, 10, result.final_tick)
    assert list(series["utilization"]) == [50, 50]


def test_utilization_rounds_half_up():
    job = Job(id=1, arrival_time=0, duration=1, start_time=0, actual_finish_time=1)
    series = utilization_series([job], capacity=4, window_size=2, final_tick=0)
    # 1 / 8 = 12.5%
    assert list(series["utilization"]) == [13]


def test_empty_completed_set_gives_empty_report():
    series = utilization_series([], capacity=3, window_size=10, final_tick=20)
    assert series.empty
    assert format_utilization_table(series) == "(nenhuma pizza concluída)"


def test_invalid_window_rejected():
    with pytest.raises(ConfigurationError):
        utilization_series([], capacity=3, window_size=0, final_tick=5)


def test_total_used_minutes_match_cook_time(shop_result):
    series = utilization_series(shop_result.jobs, 3, 10, shop_result.final_tick)
    assert series["used_time"].sum() == sum(o.duration for o in SHOP_ORDERS)
    assert series["utilization"].max() <= 100


def test_summary(shop_result):
    summary = summarize(shop_result)
    assert summary.pizzas == len(SHOP_ORDERS)
    assert summary.makespan == shop_result.final_tick
    assert 0.0 <= summary.exact_prediction_ratio <= 1.0
    assert summary.avg_turnaround_time >= summary.avg_waiting_time


def test_dataframes(shop_result):
    df = jobs_to_dataframe(shop_result.jobs)
    assert len(df) == len(SHOP_ORDERS)
    assert (df["actual_finish_time"] == df["start_time"] + df["duration"]).all()

    events = events_to_dataframe(shop_result.events)
    assert set(events["kind"]) == {"admission", "dispatch", "completion"}
    assert len(events) == 3 * len(SHOP_ORDERS)


def test_format_table_shows_percent(shop_result):
    series = utilization_series(shop_result.jobs, 3, 10, shop_result.final_tick)
    text = format_utilization_table(series)
    assert "%" in text
    assert "used_time" in text
