"""Figures from the CSV files written by run_sim."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

RECORD_COLUMNS = ["client", "arrival", "service_begin", "service_end", "idle", "wait", "system"]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate plots from bank queue outputs.")
    parser.add_argument(
        "--records",
        type=Path,
        default=Path("outputs/records.csv"),
        help="Client records CSV produced by run_sim --records-out.",
    )
    parser.add_argument(
        "--results",
        type=Path,
        default=Path("outputs/results.csv"),
        help="Per-replication CSV produced by run_sim --replications N.",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=Path("reports"),
        help="Directory where PNG files will be saved.",
    )
    return parser.parse_args()


def load_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    df = pd.read_csv(path)
    if df.empty:
        raise ValueError(f"{path} is empty. Run the simulation first.")
    return df


def plot_timeline(records: pd.DataFrame, out: Path) -> None:
    """One row per client: waiting span in grey, service span in blue."""
    missing = set(RECORD_COLUMNS) - set(records.columns)
    if missing:
        raise ValueError(f"Records file lacks columns: {sorted(missing)}")

    fig, ax = plt.subplots(figsize=(9, 0.4 * len(records) + 1.5))
    for row in records.itertuples(index=False):
        y = row.client
        if row.wait > 0:
            ax.broken_barh([(row.arrival, row.wait)], (y - 0.3, 0.6), color="#c0c0c0")
        ax.broken_barh(
            [(row.service_begin, row.service_end - row.service_begin)],
            (y - 0.3, 0.6),
            color="#4c72b0",
        )
        ax.plot(row.arrival, y, marker="|", color="black", markersize=10)
    ax.set_yticks(records["client"])
    ax.invert_yaxis()
    ax.set_xlabel("Time (minutes)")
    ax.set_ylabel("Client")
    ax.set_title("Teller timeline (grey: waiting, blue: service)")
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)


def plot_histogram(series: pd.Series, title: str, xlabel: str, out: Path) -> None:
    fig, ax = plt.subplots(figsize=(6, 4))
    bins = min(20, max(5, len(series)))
    ax.hist(series, bins=bins, color="#4c72b0", alpha=0.85, edgecolor="white")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Frequency")
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main() -> None:
    args = parse_args()
    args.reports_dir.mkdir(parents=True, exist_ok=True)

    written = []
    if args.records.exists():
        out = args.reports_dir / "timeline.png"
        plot_timeline(load_csv(args.records), out)
        written.append(out)
    if args.results.exists():
        results = load_csv(args.results)
        out = args.reports_dir / "hist_wait.png"
        plot_histogram(results["avg_wait"], "Average wait per replication", "avg_wait", out)
        written.append(out)

    if not written:
        raise SystemExit("Nothing to plot: run run_sim with --records-out or --replications first.")
    for path in written:
        print(f"Figure saved to {path.resolve()}")


if __name__ == "__main__":
    main()
