"""Pre-defined range presets for the bank queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .bank_core import BankParams


@dataclass(frozen=True)
class Scenario:
    name: str
    arrival_gap_range: Tuple[float, float]
    service_duration_range: Tuple[float, float] = (1.0, 5.0)


SCENARIOS: Dict[str, Scenario] = {
    "default": Scenario(name="default", arrival_gap_range=(1.0, 5.0)),
    "rush": Scenario(name="rush", arrival_gap_range=(0.5, 2.5)),  # queue builds up
    "quiet": Scenario(name="quiet", arrival_gap_range=(3.0, 8.0)),  # teller mostly idle
}


def list_scenarios() -> Iterable[str]:
    """Return available scenario identifiers."""
    return sorted(SCENARIOS.keys())


def get_params(name: str, seed: Optional[int] = None) -> BankParams:
    """Return `BankParams` for a named scenario."""
    key = name.lower()
    if key not in SCENARIOS:
        raise KeyError(f"Scenario '{name}' is not defined. Available: {list(list_scenarios())}")
    scenario = SCENARIOS[key]
    return BankParams(
        arrival_gap_range=scenario.arrival_gap_range,
        service_duration_range=scenario.service_duration_range,
        seed=seed,
    )
