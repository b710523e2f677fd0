from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..errors import ConfigurationError


@dataclass(slots=True)
class TimeSlot:
    start_time: int
    end_time: int  # inclusivo
    used_time: int = 0


class TimeSlotTimeline:
    """Linha do tempo em faixas fixas que acumula o tempo de preparo de cada item.

    Um item que começa no meio de uma faixa só consome o que resta dela; as
    faixas seguintes recebem até `interval` minutos cada, até o preparo acabar.
    """

    def __init__(self, interval: int = 10, horizon: int = 70) -> None:
        if interval <= 0 or horizon <= 0:
            raise ConfigurationError("interval e horizon devem ser positivos")
        self.interval = interval
        self.slots: List[TimeSlot] = []
        while len(self.slots) * interval < horizon:
            self._append_slot()
        self._horizon = len(self.slots) * interval
        self.items = 0
        self.total_prep_time = 0

    def add_item(self, start_time: int, prep_time: int) -> None:
        if prep_time < 0:
            raise ConfigurationError("prep_time não pode ser negativo")
        if not 0 <= start_time < self._horizon:
            raise ConfigurationError(f"nenhuma faixa contém o minuto {start_time}")

        index = start_time // self.interval
        cursor = start_time
        remaining = prep_time
        while remaining > 0:
            if index >= len(self.slots):
                # preparo passou do fim da linha do tempo
                self._append_slot()
            slot = self.slots[index]
            usage = min(remaining, slot.end_time - cursor + 1)
            slot.used_time += usage
            remaining -= usage
            cursor = slot.end_time + 1
            index += 1

        self.items += 1
        self.total_prep_time += prep_time

    def used_times(self) -> List[int]:
        return [slot.used_time for slot in self.slots]

    def _append_slot(self) -> None:
        start = len(self.slots) * self.interval
        self.slots.append(TimeSlot(start_time=start, end_time=start + self.interval - 1))
