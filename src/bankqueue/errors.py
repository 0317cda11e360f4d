"""Error taxonomy for the bank queue simulator."""

from __future__ import annotations


class BankQueueError(ValueError):
    """Base class for every precondition violation raised by the package."""


class InvalidRange(BankQueueError):
    """A variate source received ``low > high``."""


class InvalidConfiguration(BankQueueError):
    """Simulation parameters are unusable (inverted range, empty population...)."""


class EmptyPopulation(BankQueueError):
    """An average was requested over zero client records."""


class ScriptExhausted(BankQueueError, LookupError):
    """A scripted variate source has no more values to replay."""
