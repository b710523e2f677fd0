from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List

from ..models import Job


class FCFSBacklog:
    """Fila de pizzas aguardando forno, na ordem de chegada."""

    def __init__(self) -> None:
        self._queue: Deque[Job] = deque()

    def push(self, job: Job) -> None:
        self._queue.append(job)

    def pop(self) -> Job:
        if not self._queue:
            raise IndexError("fila de pizzas vazia")
        return self._queue.popleft()

    def durations(self) -> List[int]:
        return [job.duration for job in self._queue]

    def __iter__(self) -> Iterator[Job]:
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
