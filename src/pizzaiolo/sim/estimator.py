from __future__ import annotations

import heapq
from typing import List, Sequence


def estimate_finish_time(
    now: int,
    capacity: int,
    occupied_free_times: Sequence[int],
    backlog_durations: Sequence[int],
    duration: int,
) -> int:
    """Quando uma nova pizza ficaria pronta se entrasse agora no fim da fila.

    Não reserva forno nem olha para frente: cada pizza da fila entra no forno
    que libera primeiro, em ordem FCFS, e a nova pizza começa no menor horário
    livre que sobrar. Função pura, só lê os argumentos.
    """
    # Há forno livre agora
    if len(occupied_free_times) < capacity:
        return now + duration

    free_times: List[int] = list(occupied_free_times)
    heapq.heapify(free_times)
    for queued in backlog_durations:
        # a pizza da fila ocupa o forno que libera primeiro
        heapq.heapreplace(free_times, free_times[0] + queued)

    earliest_start = free_times[0]
    return earliest_start + duration
