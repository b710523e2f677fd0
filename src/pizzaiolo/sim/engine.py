from __future__ import annotations

import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..config import SimConfig, validate_orders
from ..errors import InvariantViolation
from ..models import ADMISSION, COMPLETION, DISPATCH, Event, Job, Order
from ..schedulers.fcfs import FCFSBacklog
from .estimator import estimate_finish_time

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    events: List[Event]
    jobs: List[Job]
    capacity: int
    final_tick: int
    max_backlog: int


class Simulation:
    """Pizzaria com `capacity` fornos, avançando um minuto por tick.

    Todo o estado (fila, fornos, concluídas, relógio) pertence a esta
    instância; duas simulações nunca compartilham nada.
    """

    def __init__(
        self,
        orders: Iterable[Order],
        config: SimConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        config.validate()
        self.config = config
        self._orders = validate_orders(orders)
        self._sleep = sleep

        # Pedidos agrupados por minuto de chegada, mantendo a ordem de envio
        self._arrivals: Dict[int, List[Order]] = defaultdict(list)
        for order in self._orders:
            self._arrivals[order.arrival_time].append(order)

        self.current_tick = 0
        self.next_job_id = 1
        self.backlog = FCFSBacklog()
        self.cooking: List[Job] = []
        self.completed: List[Job] = []
        self.events: List[Event] = []
        self.max_backlog = 0

    @property
    def capacity(self) -> int:
        return self.config.capacity

    @property
    def admitted(self) -> int:
        return self.next_job_id - 1

    @property
    def done(self) -> bool:
        return len(self.completed) >= len(self._orders)

    def step(self) -> None:
        """Executa um tick completo: admissão, retirada e despacho."""
        for order in self._arrivals.pop(self.current_tick, []):
            self._admit(order)
        self._retire_finished()
        self._dispatch()
        self.max_backlog = max(self.max_backlog, len(self.backlog))
        self.check_invariants()

    def run(self) -> RunResult:
        logger.info("==== Pizza Shop is Open! (%d fornos) ====", self.capacity)
        final_tick = 0
        # Um minuto por iteração, até todas as pizzas saírem do forno
        while not self.done:
            final_tick = self.current_tick
            self.step()
            if self.config.tick_delay_seconds > 0:
                self._sleep(self.config.tick_delay_seconds)
            self.current_tick += 1

        return RunResult(
            events=self.events,
            jobs=list(self.completed),
            capacity=self.capacity,
            final_tick=final_tick,
            max_backlog=self.max_backlog,
        )

    def estimate(self, duration: int) -> int:
        return estimate_finish_time(
            now=self.current_tick,
            capacity=self.capacity,
            # pizza que terminou e ainda não foi retirada libera o forno agora
            occupied_free_times=[max(job.actual_finish_time, self.current_tick) for job in self.cooking],
            backlog_durations=self.backlog.durations(),
            duration=duration,
        )

    def _admit(self, order: Order) -> Job:
        job = Job(
            id=self.next_job_id,
            arrival_time=order.arrival_time,
            duration=order.duration,
        )
        self.next_job_id += 1
        job.predicted_finish_time = self.estimate(order.duration)
        self.backlog.push(job)

        wait = job.predicted_wait()
        self._emit(
            ADMISSION,
            job,
            "ORDER RECEIVED",
            f"Pizza ID: {job.id}, will be done at minute {job.predicted_finish_time}.",
            predicted_finish_time=job.predicted_finish_time,
            predicted_wait=wait,
        )
        if wait > 0:
            logger.info(
                "Minute %d: [PIZZA QUEUED] Pizza ID: %d, will need to wait for %d minutes before cooking.",
                self.current_tick,
                job.id,
                wait,
            )
        return job

    def _retire_finished(self) -> None:
        still_cooking: List[Job] = []
        for job in self.cooking:
            if job.actual_finish_time is not None and job.actual_finish_time <= self.current_tick:
                self.completed.append(job)
                self._emit(COMPLETION, job, "FINISHED COOKING", f"Pizza ID: {job.id}")
            else:
                still_cooking.append(job)
        self.cooking = still_cooking

    def _dispatch(self) -> None:
        while len(self.cooking) < self.capacity and len(self.backlog) > 0:
            job = self.backlog.pop()
            job.start_time = self.current_tick
            job.actual_finish_time = self.current_tick + job.duration
            self.cooking.append(job)
            self._emit(DISPATCH, job, "STARTED COOKING", f"Pizza ID: {job.id}")

    def _emit(self, kind: str, job: Job, label: str, message: str, **detail: int) -> None:
        self.events.append(Event(tick=self.current_tick, kind=kind, job_id=job.id, detail=dict(detail)))
        logger.info("Minute %d: [%s] %s", self.current_tick, label, message)

    def snapshot(self) -> Dict[str, object]:
        return {
            "tick": self.current_tick,
            "capacity": self.capacity,
            "admitted": self.admitted,
            "backlog": [job.id for job in self.backlog],
            "cooking": [(job.id, job.start_time, job.actual_finish_time) for job in self.cooking],
            "completed": [job.id for job in self.completed],
        }

    def check_invariants(self) -> None:
        if len(self.cooking) > self.capacity:
            raise InvariantViolation("fornos acima da capacidade", self.snapshot())

        ids = [job.id for job in self.backlog]
        ids += [job.id for job in self.cooking]
        ids += [job.id for job in self.completed]
        if len(ids) != len(set(ids)):
            raise InvariantViolation("pizza em mais de um lugar", self.snapshot())
        if len(ids) != self.admitted:
            raise InvariantViolation("pizzas admitidas não batem com fila+fornos+prontas", self.snapshot())

        for job in self.cooking:
            if job.start_time is None or job.actual_finish_time != job.start_time + job.duration:
                raise InvariantViolation(f"pizza {job.id} com tempo de forno incoerente", self.snapshot())


def run_simulation(
    orders: Iterable[Order],
    config: Optional[SimConfig] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    return Simulation(orders, config or SimConfig(), sleep=sleep).run()
