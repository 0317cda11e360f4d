"""Text and tabular rendering of simulated clients."""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from .bank_core import BankSummary, ClientRecord

RULE = "=" * 74
HEADER = "| ID | Arrival | Service Begin | Service End | Idle Time | Wait | System |"


def format_table(records: Iterable[ClientRecord]) -> str:
    """Render the per-client table with two decimals, clients numbered from 1."""
    lines: List[str] = [RULE, HEADER, RULE]
    for idx, r in enumerate(records, start=1):
        lines.append(
            f"| {idx:>2} | {r.arrival_time:>7.2f} | {r.service_begin:>13.2f} | "
            f"{r.service_end:>11.2f} | {r.idle_time:>9.2f} | {r.wait_in_queue:>5.2f} | "
            f"{r.time_in_system:>6.2f} |"
        )
    lines.append(RULE)
    return "\n".join(lines)


def format_statistics(summary: BankSummary) -> str:
    return "\n".join(
        [
            f"Average Waiting Time    : {summary.avg_wait:.2f} minutes",
            f"Average Time In System  : {summary.avg_time_in_system:.2f} minutes",
            f"Maximum Service Time    : {summary.max_service:.2f} minutes",
            f"Clients Who Waited      : {summary.waited_count} out of {summary.n_clients}",
        ]
    )


def records_frame(records: Iterable[ClientRecord]) -> pd.DataFrame:
    rows = [
        {
            "client": idx,
            "arrival": r.arrival_time,
            "service_begin": r.service_begin,
            "service_end": r.service_end,
            "idle": r.idle_time,
            "wait": r.wait_in_queue,
            "system": r.time_in_system,
        }
        for idx, r in enumerate(records, start=1)
    ]
    return pd.DataFrame(
        rows,
        columns=["client", "arrival", "service_begin", "service_end", "idle", "wait", "system"],
    )
