"""Command line interface to simulate the single-teller bank queue."""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from tqdm import trange

from bankqueue import (
    BankParams,
    BankQueueError,
    BankSimulation,
    BankSummary,
    format_statistics,
    format_table,
    get_params,
    list_scenarios,
    records_frame,
)

log = logging.getLogger("run_sim")

SUMMARY_METRICS = [
    "n_clients",
    "avg_wait",
    "avg_time_in_system",
    "max_service",
    "waited_count",
    "total_idle",
    "utilization",
    "makespan",
]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate clients arriving at a single bank teller."
    )
    parser.add_argument(
        "--scenario",
        type=str,
        choices=list(list_scenarios()),
        help="Named range preset; explicit range options override it.",
    )
    parser.add_argument(
        "--population", type=int, nargs=2, metavar=("MIN", "MAX"), help="Client count range."
    )
    parser.add_argument(
        "--first-arrival",
        type=float,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="Range of the first client's arrival time.",
    )
    parser.add_argument(
        "--arrival-gap",
        type=float,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="Range of the time between consecutive arrivals.",
    )
    parser.add_argument(
        "--service", type=float, nargs=2, metavar=("MIN", "MAX"), help="Service duration range."
    )
    parser.add_argument("--seed", type=int, default=None, help="Base random seed (default: random).")
    parser.add_argument("--replications", type=int, default=1, help="Number of replications.")
    parser.add_argument(
        "--outputs",
        type=Path,
        default=Path("outputs/results.csv"),
        help="CSV with one summary row per replication.",
    )
    parser.add_argument(
        "--records-out",
        type=Path,
        default=None,
        help="Optional CSV with the client records of the first replication.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def build_params(args: argparse.Namespace, seed: Optional[int]) -> BankParams:
    """Merge the scenario preset with explicit range options."""
    base = get_params(args.scenario or "default", seed=seed)
    return BankParams(
        population_range=tuple(args.population) if args.population else base.population_range,
        first_arrival_range=(
            tuple(args.first_arrival) if args.first_arrival else base.first_arrival_range
        ),
        arrival_gap_range=tuple(args.arrival_gap) if args.arrival_gap else base.arrival_gap_range,
        service_duration_range=(
            tuple(args.service) if args.service else base.service_duration_range
        ),
        seed=seed,
    )


def replication_seed(base: Optional[int], rep: int) -> Optional[int]:
    return None if base is None else base + rep


def run_replications(args: argparse.Namespace) -> Iterable[BankSimulation]:
    """Yield one simulation per replication."""
    for rep in trange(args.replications, desc="Simulating", unit="rep", disable=args.replications < 2):
        yield BankSimulation(build_params(args, replication_seed(args.seed, rep)))


def summarize(results: Iterable[BankSummary]) -> pd.DataFrame:
    df = pd.DataFrame([r.as_dict() for r in results])
    if not df.empty:
        df[SUMMARY_METRICS] = df[SUMMARY_METRICS].apply(pd.to_numeric, errors="coerce")
    return df


def compute_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Mean, sample std and 95% CI half-width of every metric across replications."""
    if df.empty:
        return pd.DataFrame()

    n = len(df)
    rows = []
    for name in SUMMARY_METRICS:
        series = df[name]
        mean = float(series.mean())
        std = float(series.std(ddof=1)) if n > 1 else 0.0
        half = 1.96 * std / math.sqrt(n) if n > 1 else 0.0
        rows.append(
            {
                "metric": name,
                "mean": mean,
                "std": std,
                "ci95_halfwidth": half,
                "ci95_rel_pct": (half / mean * 100) if mean else 0.0,
                "replications": n,
            }
        )
    return pd.DataFrame(rows)


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.replications < 1:
        raise SystemExit("--replications must be >= 1.")

    try:
        simulations = list(run_replications(args))
    except BankQueueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    first = simulations[0]
    if args.records_out is not None:
        ensure_parent(args.records_out)
        records_frame(first.records).to_csv(args.records_out, index=False)
        log.info("client records written to %s", args.records_out.resolve())

    if len(simulations) == 1:
        print(format_table(first.records))
        print(format_statistics(first.summary()))
        return

    df = summarize(sim.summary() for sim in simulations)
    ensure_parent(args.outputs)
    df.to_csv(args.outputs, index=False)

    summary_df = compute_summary(df)
    summary_path = args.outputs.parent / "summary.csv"
    summary_df.to_csv(summary_path, index=False)

    print(f"\nReplications: {len(df)}")
    print("\nMeans (+/- 95% CI half-width):")
    for row in summary_df.itertuples(index=False):
        print(f"  {row.metric:<19}: {row.mean:>10.4f} +/- {row.ci95_halfwidth:<10.4f}")

    log.info("results written to %s", args.outputs.resolve())
    log.info("summary written to %s", summary_path.resolve())


if __name__ == "__main__":
    main()
