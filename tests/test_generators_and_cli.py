import json

from pizzaiolo.config import validate_orders
from pizzaiolo.generators import WorkloadConfig, generate_orders
from pizzaiolo.main import main


def test_generated_orders_are_valid_and_seeded():
    cfg = WorkloadConfig(num_orders=25, arrival_pattern="poisson", cook_time_dist="expon_tail", seed=3)
    first = generate_orders(cfg)
    second = generate_orders(cfg)

    assert first == second
    assert len(first) == 25
    assert validate_orders(first) == first
    assert all(o.duration >= 1 for o in first)


def test_bursty_orders_share_arrival_ticks():
    orders = generate_orders(WorkloadConfig(num_orders=10, arrival_pattern="bursty", cook_time_dist="uniform", seed=1))
    assert len(orders) == 10
    assert len({o.arrival_time for o in orders}) < 10


def test_cli_writes_outputs(tmp_path, capsys):
    main(["--scenario", "shop", "--capacity", "3", "--outputs", str(tmp_path), "--log-level", "WARNING"])

    out = capsys.readouterr().out
    assert "Oven Usage Time Series" in out
    for name in ("jobs.csv", "events.csv", "utilization.csv", "summary.json", "utilization.png", "gantt.png"):
        assert (tmp_path / name).exists()
    summary = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
    assert summary["pizzas"] == 16
    assert summary["capacity"] == 3


def test_rush_orders_arrive_in_groups_of_five():
    orders = generate_orders(WorkloadConfig(num_orders=12, arrival_pattern="bursty", cook_time_dist="uniform", seed=5))
    ticks = [o.arrival_time for o in orders]
    assert ticks == sorted(ticks)
    # cada grupo cai em 3 minutos seguidos e o próximo pico começa pelo menos 10 minutos depois
    groups = [ticks[0:5], ticks[5:10], ticks[10:12]]
    for group in groups:
        assert max(group) - min(group) <= 2
    assert min(groups[1]) - max(groups[0]) >= 8
