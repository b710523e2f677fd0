from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .config import SimConfig
from .generators import RUSH_ORDERS, SHOP_ORDERS, WorkloadConfig, generate_orders
from .models import Order
from .plots import plot_gantt, plot_utilization
from .sim.engine import run_simulation
from .sim.metrics import (
    events_to_dataframe,
    format_utilization_table,
    jobs_to_dataframe,
    summarize,
    utilization_series,
)

logger = logging.getLogger(__name__)


SCENARIOS: Dict[str, Callable[[], List[Order]]] = {
    "shop": lambda: list(SHOP_ORDERS),
    "rush": lambda: list(RUSH_ORDERS),
    "bursty": lambda: generate_orders(
        WorkloadConfig(num_orders=30, arrival_pattern="bursty", cook_time_dist="uniform", seed=123)
    ),
    "poisson": lambda: generate_orders(
        WorkloadConfig(num_orders=40, arrival_pattern="poisson", cook_time_dist="expon_tail", seed=123)
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="pizzaiolo: previsão de pizzas prontas com fornos em paralelo (FCFS)"
    )
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="shop", help="Lista de pedidos")
    parser.add_argument("--capacity", type=int, default=3, help="Número de fornos")
    parser.add_argument("--window", type=int, default=10, help="Tamanho da janela de utilização (minutos)")
    parser.add_argument(
        "--tick-delay-ms",
        type=int,
        default=0,
        help="Pausa entre ticks para simular tempo real (não altera resultados)",
    )
    parser.add_argument("--outputs", type=str, default=None, help="Diretório de saída para CSV/PNG/JSON")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    config = SimConfig(
        capacity=args.capacity,
        window_size=args.window,
        tick_delay_seconds=args.tick_delay_ms / 1000.0,
    )
    orders = SCENARIOS[args.scenario]()
    result = run_simulation(orders, config)

    series = utilization_series(result.jobs, result.capacity, config.window_size, result.final_tick)
    summary = summarize(result)

    print(f"\n==== Oven Usage Time Series ({config.window_size}-minute windows) ====")
    print(format_utilization_table(series))
    print(
        f"\nPizzas: {summary.pizzas}  Makespan: {summary.makespan} min  "
        f"Avg wait: {summary.avg_waiting_time:.2f} min  "
        f"Prediction MAE: {summary.mean_abs_prediction_error:.2f} min  "
        f"Max backlog: {summary.max_backlog}"
    )

    if args.outputs is None:
        return

    outputs_dir = Path(args.outputs)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    df_jobs = jobs_to_dataframe(result.jobs)
    df_jobs.to_csv(outputs_dir / "jobs.csv", index=False)
    events_to_dataframe(result.events).to_csv(outputs_dir / "events.csv", index=False)
    series.to_csv(outputs_dir / "utilization.csv", index=False)
    (outputs_dir / "summary.json").write_text(
        json.dumps({"scenario": args.scenario, **asdict(config), **asdict(summary)}, indent=2),
        encoding="utf-8",
    )
    if not series.empty:
        plot_utilization(series, f"Utilização dos fornos — {args.scenario}", outputs_dir / "utilization.png")
        plot_gantt(df_jobs, f"Gantt — {args.scenario}", outputs_dir / "gantt.png")
    logger.info("Resultados salvos em %s", outputs_dir)


if __name__ == "__main__":
    main()
