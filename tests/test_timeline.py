import pytest

from pizzaiolo.errors import ConfigurationError
from pizzaiolo.sim.timeline import TimeSlotTimeline


def test_spreads_prep_time_over_slots():
    timeline = TimeSlotTimeline(interval=10, horizon=60)
    timeline.add_item(10, 35)
    assert timeline.used_times() == [0, 10, 10, 10, 5, 0]

    timeline.add_item(20, 31)
    assert timeline.used_times() == [0, 10, 20, 20, 15, 1]


def test_partial_first_slot():
    timeline = TimeSlotTimeline()
    timeline.add_item(12, 22)
    assert timeline.used_times()[:4] == [0, 8, 10, 4]

    timeline.add_item(29, 30)
    assert timeline.used_times()[:6] == [0, 8, 11, 14, 10, 9]
    assert timeline.items == 2
    assert timeline.total_prep_time == 52


def test_first_slot_is_valid():
    timeline = TimeSlotTimeline()
    timeline.add_item(0, 5)
    assert timeline.used_times()[0] == 5


def test_grows_past_horizon():
    timeline = TimeSlotTimeline(interval=10, horizon=20)
    timeline.add_item(15, 20)
    assert timeline.used_times() == [0, 5, 10, 5]
    assert timeline.slots[-1].end_time == 39


def test_rejects_start_outside_timeline():
    timeline = TimeSlotTimeline(interval=10, horizon=70)
    with pytest.raises(ConfigurationError):
        timeline.add_item(70, 5)
    with pytest.raises(ConfigurationError):
        timeline.add_item(-1, 5)
