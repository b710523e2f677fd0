import pytest

from pizzaiolo.models import Job
from pizzaiolo.schedulers.fcfs import FCFSBacklog


def test_pops_in_arrival_order():
    backlog = FCFSBacklog()
    for job_id, duration in [(1, 15), (2, 12), (3, 20)]:
        backlog.push(Job(id=job_id, arrival_time=0, duration=duration))

    assert backlog.durations() == [15, 12, 20]
    assert [backlog.pop().id for _ in range(3)] == [1, 2, 3]
    assert len(backlog) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        FCFSBacklog().pop()
