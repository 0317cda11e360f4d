"""Sources of random variates consumed by the simulator."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Optional, Protocol

import numpy as np

from .errors import InvalidRange, ScriptExhausted


def check_range(low: float, high: float) -> None:
    """Reject inverted bounds."""
    if low > high:
        raise InvalidRange(f"Invalid range [{low}, {high}]: low must not exceed high.")


class VariateSource(Protocol):
    def uniform_real(self, low: float, high: float) -> float: ...

    def uniform_integer(self, low: int, high: int) -> int: ...


class RandomVariates:
    """Numpy-backed source; ``seed=None`` draws fresh entropy from the OS."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed=seed)

    def uniform_real(self, low: float, high: float) -> float:
        check_range(low, high)
        return float(self.rng.uniform(low, high))

    def uniform_integer(self, low: int, high: int) -> int:
        check_range(low, high)
        return int(self.rng.integers(low, high, endpoint=True))


class ScriptedVariates:
    """
    Replay fixed sequences of values in call order.

    Real values are handed out by ``uniform_real`` and integers by
    ``uniform_integer``, each from its own queue. The requested range is
    validated but the scripted value is returned as-is, so a script can
    reproduce any trace.
    """

    def __init__(self, reals: Iterable[float], integers: Iterable[int] = ()):
        self._reals: Deque[float] = deque(float(v) for v in reals)
        self._integers: Deque[int] = deque(int(v) for v in integers)

    @property
    def remaining(self) -> int:
        return len(self._reals) + len(self._integers)

    def uniform_real(self, low: float, high: float) -> float:
        check_range(low, high)
        if not self._reals:
            raise ScriptExhausted("No scripted real values left.")
        return self._reals.popleft()

    def uniform_integer(self, low: int, high: int) -> int:
        check_range(low, high)
        if not self._integers:
            raise ScriptExhausted("No scripted integer values left.")
        return self._integers.popleft()
