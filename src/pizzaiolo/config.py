from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterable, List

from .errors import ConfigurationError
from .models import Order


@dataclass(slots=True)
class SimConfig:
    capacity: int = 3  # número de fornos
    window_size: int = 10  # minutos por janela no relatório de utilização
    tick_delay_seconds: float = 0.0  # só apresentação, não altera resultados

    def validate(self) -> None:
        if not _is_int(self.capacity) or self.capacity <= 0:
            raise ConfigurationError(f"capacity deve ser inteiro positivo (recebido {self.capacity!r})")
        if not _is_int(self.window_size) or self.window_size <= 0:
            raise ConfigurationError(f"window_size deve ser inteiro positivo (recebido {self.window_size!r})")
        if self.tick_delay_seconds < 0:
            raise ConfigurationError("tick_delay_seconds não pode ser negativo")


def validate_orders(orders: Iterable[Order]) -> List[Order]:
    checked: List[Order] = []
    for index, order in enumerate(orders):
        if not _is_int(order.arrival_time) or order.arrival_time < 0:
            raise ConfigurationError(
                f"pedido #{index}: arrival_time deve ser inteiro >= 0 (recebido {order.arrival_time!r})"
            )
        if not _is_int(order.duration) or order.duration < 0:
            raise ConfigurationError(
                f"pedido #{index}: duration deve ser inteiro >= 0 (recebido {order.duration!r})"
            )
        checked.append(order)
    return checked


def _is_int(value: object) -> bool:
    # aceita int e inteiros numpy, mas não bool
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
