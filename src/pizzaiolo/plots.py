from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


def plot_utilization(series: pd.DataFrame, title: str, out: Path) -> None:
    labels = [f"{s}-{e}" for s, e in zip(series["start_time"], series["end_time"])]
    values = list(series["utilization"])
    x = list(range(len(labels)))
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(x, values, color="#4C78A8")
    ax.set_title(title)
    ax.set_ylabel("utilização (%)")
    ax.set_ylim(0, 105)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    plt.setp(ax.get_xticklabels(), rotation=20, ha="right")
    for i, v in enumerate(values):
        ax.text(i, v, f"{v}%", ha="center", va="bottom", fontsize=8)
    plt.subplots_adjust(bottom=0.25, top=0.9)
    fig.savefig(out, dpi=150, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)


def plot_gantt(df: pd.DataFrame, title: str, out: Path, max_jobs: int = 30) -> None:
    d = df.sort_values("start_time").head(max_jobs)
    fig, ax = plt.subplots(figsize=(9, 5))
    for _, row in d.iterrows():
        # espera na fila (cinza) e tempo de forno (verde)
        ax.broken_barh(
            [(row["arrival_time"], row["start_time"] - row["arrival_time"])],
            (row["id"] * 10, 9),
            facecolors="#BAB0AC",
        )
        ax.broken_barh(
            [(row["start_time"], row["duration"])],
            (row["id"] * 10, 9),
            facecolors="#54A24B",
        )
        ax.plot([row["predicted_finish_time"]] * 2, [row["id"] * 10, row["id"] * 10 + 9], color="#E45756")
    ax.set_xlabel("minuto")
    ax.set_ylabel("pizza id")
    ax.set_title(title)
    plt.subplots_adjust(bottom=0.2, top=0.9)
    fig.savefig(out, dpi=150, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)
