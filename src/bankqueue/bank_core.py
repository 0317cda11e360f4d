"""Single-teller queue: client record derivation and aggregate statistics."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import EmptyPopulation, InvalidConfiguration
from .variates import RandomVariates, VariateSource

log = logging.getLogger(__name__)

Range = Tuple[float, float]


@dataclass(frozen=True)
class BankParams:
    """Ranges the variates are drawn from, plus an optional seed."""

    population_range: Tuple[int, int] = (5, 15)
    first_arrival_range: Range = (0.0, 3.0)
    arrival_gap_range: Range = (1.0, 5.0)
    service_duration_range: Range = (1.0, 5.0)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not all(isinstance(v, numbers.Integral) for v in self.population_range):
            raise InvalidConfiguration(
                f"population_range bounds must be integers: {self.population_range}."
            )
        if self.seed is not None and self.seed < 0:
            raise InvalidConfiguration(f"Seed must be non-negative, got {self.seed}.")
        for name in (
            "population_range",
            "first_arrival_range",
            "arrival_gap_range",
            "service_duration_range",
        ):
            low, high = getattr(self, name)
            # NaN compares False against everything, so check it first.
            if not (math.isfinite(low) and math.isfinite(high)):
                raise InvalidConfiguration(f"{name} bounds must be finite: [{low}, {high}].")
            if low > high:
                raise InvalidConfiguration(f"{name} is inverted: [{low}, {high}].")
        if self.population_range[0] < 1:
            raise InvalidConfiguration("Population size must be at least 1.")
        if self.first_arrival_range[0] < 0:
            raise InvalidConfiguration("First arrival time must be non-negative.")
        if self.arrival_gap_range[0] <= 0:
            raise InvalidConfiguration("Inter-arrival gaps must be strictly positive.")
        if self.service_duration_range[0] < 0:
            raise InvalidConfiguration("Service durations must be non-negative.")


@dataclass(frozen=True)
class ClientRecord:
    """Timestamps and delays of one served client."""

    arrival_time: float
    service_begin: float
    service_end: float
    wait_in_queue: float
    time_in_system: float
    idle_time: float

    @property
    def service_duration(self) -> float:
        return self.service_end - self.service_begin


@dataclass
class BankSummary:
    """Aggregated outputs of one simulated day."""

    seed: Optional[int]
    n_clients: int
    avg_wait: float
    avg_time_in_system: float
    max_service: float
    waited_count: int
    total_idle: float
    utilization: float
    makespan: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def draw_arrivals(variates: VariateSource, params: BankParams, n: int) -> List[float]:
    """Chain arrival instants from a first arrival and positive gaps."""
    current = variates.uniform_real(*params.first_arrival_range)
    arrivals = [current]
    for _ in range(1, n):
        current += variates.uniform_real(*params.arrival_gap_range)
        arrivals.append(current)
    return arrivals


def derive_record(
    previous: Optional[ClientRecord], arrival_time: float, service_duration: float
) -> ClientRecord:
    """
    Build a fully derived record from its predecessor and fresh variates.

    The teller starts serving at the later of the client's arrival and the end
    of the previous service (FIFO, no preemption). Idle time is clamped at zero;
    a negative gap can only come from floating-point rounding.
    """
    if previous is None:
        service_begin = arrival_time
        idle_time = 0.0
    else:
        service_begin = max(arrival_time, previous.service_end)
        idle_time = max(0.0, service_begin - previous.service_end)
    service_end = service_begin + service_duration
    return ClientRecord(
        arrival_time=arrival_time,
        service_begin=service_begin,
        service_end=service_end,
        wait_in_queue=service_begin - arrival_time,
        time_in_system=service_end - arrival_time,
        idle_time=idle_time,
    )


class BankSimulation:
    """One simulated population of clients served by a single teller."""

    def __init__(self, params: Optional[BankParams] = None, variates: Optional[VariateSource] = None):
        self.params = params if params is not None else BankParams()
        self.variates = variates if variates is not None else RandomVariates(seed=self.params.seed)

        n = self.variates.uniform_integer(*self.params.population_range)
        if n <= 0:
            raise InvalidConfiguration(f"Drawn population size must be positive, got {n}.")

        arrivals = draw_arrivals(self.variates, self.params, n)
        records: List[ClientRecord] = []
        previous: Optional[ClientRecord] = None
        for arrival_time in arrivals:
            duration = self.variates.uniform_real(*self.params.service_duration_range)
            previous = derive_record(previous, arrival_time, duration)
            records.append(previous)

        self._records: Tuple[ClientRecord, ...] = tuple(records)
        log.debug("simulated %d clients (seed=%s)", n, self.params.seed)

    @property
    def records(self) -> Tuple[ClientRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ClientRecord]:
        return iter(self.records)

    def _require_clients(self) -> None:
        if not self.records:
            raise EmptyPopulation("No clients were simulated.")

    def average_waiting_time(self) -> float:
        self._require_clients()
        return float(np.mean([r.wait_in_queue for r in self.records]))

    def average_time_in_system(self) -> float:
        self._require_clients()
        return float(np.mean([r.time_in_system for r in self.records]))

    def max_service_duration(self) -> float:
        return max((r.service_duration for r in self.records), default=0.0)

    def waited_client_count(self) -> int:
        # Clients served exactly on arrival did not wait.
        return sum(1 for r in self.records if r.wait_in_queue > 0)

    def total_idle_time(self) -> float:
        return float(sum(r.idle_time for r in self.records))

    def makespan(self) -> float:
        if not self.records:
            return 0.0
        return self.records[-1].service_end - self.records[0].arrival_time

    def utilization(self) -> float:
        """Fraction of the makespan the teller spent serving."""
        span = self.makespan()
        if span == 0:
            return 0.0
        busy = sum(r.service_duration for r in self.records)
        return busy / span

    def summary(self) -> BankSummary:
        return BankSummary(
            seed=self.params.seed,
            n_clients=len(self.records),
            avg_wait=self.average_waiting_time(),
            avg_time_in_system=self.average_time_in_system(),
            max_service=self.max_service_duration(),
            waited_count=self.waited_client_count(),
            total_idle=self.total_idle_time(),
            utilization=self.utilization(),
            makespan=self.makespan(),
        )


def run_bank(params: BankParams, variates: Optional[VariateSource] = None) -> BankSummary:
    """Simulate one population and return its aggregated statistics."""
    return BankSimulation(params, variates).summary()
