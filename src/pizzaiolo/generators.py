from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from .errors import ConfigurationError
from .models import Order


# Pedidos de exemplo da pizzaria (minuto do pedido, minutos de forno)
SHOP_ORDERS: List[Order] = [
    Order(2, 15),
    Order(2, 12),
    Order(3, 15),
    Order(3, 20),
    Order(5, 15),
    Order(5, 10),
    Order(8, 15),
    Order(10, 30),
    Order(12, 15),
    Order(16, 20),
    Order(23, 10),
    Order(30, 15),
    Order(39, 15),
    Order(46, 20),
    Order(54, 15),
    Order(68, 15),
]

# Muitos pedidos de uma vez
RUSH_ORDERS: List[Order] = [Order(0, 10) for _ in range(12)]


@dataclass(slots=True)
class WorkloadConfig:
    num_orders: int
    arrival_pattern: str  # "bursty" | "poisson"
    cook_time_dist: str  # "uniform" | "expon_tail"
    seed: int


def generate_orders(config: WorkloadConfig) -> List[Order]:
    rng = np.random.default_rng(config.seed)

    if config.arrival_pattern == "bursty":
        arrival_ticks = _arrivals_rush(rng, config.num_orders)
    elif config.arrival_pattern == "poisson":
        arrival_ticks = _arrivals_per_minute(rng, rate=0.3, n=config.num_orders)
    else:
        raise ConfigurationError("arrival_pattern inválido")

    if config.cook_time_dist == "uniform":
        cook_times = rng.uniform(8.0, 20.0, size=config.num_orders)
    elif config.cook_time_dist == "expon_tail":
        cook_times = np.clip(rng.exponential(scale=12.0, size=config.num_orders), 5.0, 45.0)
    else:
        raise ConfigurationError("cook_time_dist inválido")

    # forno trabalha em minutos inteiros, nunca zero
    cook_ticks = np.maximum(1, np.rint(cook_times)).astype(int)

    return [Order(arrival_time=int(arrival_ticks[i]), duration=int(cook_ticks[i])) for i in range(config.num_orders)]


def _arrivals_rush(rng: np.random.Generator, n: int, rush_size: int = 5) -> np.ndarray:
    """Picos de movimento: grupos de até `rush_size` pedidos nos mesmos 3 minutos."""
    ticks = np.empty(n, dtype=int)
    rush_start = 0
    for first in range(0, n, rush_size):
        size = min(rush_size, n - first)
        ticks[first:first + size] = rush_start + rng.integers(0, 3, size=size)
        rush_start += int(rng.integers(10, 26))
    return np.sort(ticks)


def _arrivals_per_minute(rng: np.random.Generator, rate: float, n: int) -> np.ndarray:
    # quantos pedidos chegam em cada minuto ~ Poisson(rate)
    ticks: List[int] = []
    minute = 0
    while len(ticks) < n:
        ticks.extend([minute] * int(rng.poisson(rate)))
        minute += 1
    return np.array(ticks[:n], dtype=int)
