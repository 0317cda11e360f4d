"""Single-teller bank queue simulation."""

import logging

from .bank_core import (
    BankParams,
    BankSimulation,
    BankSummary,
    ClientRecord,
    derive_record,
    draw_arrivals,
    run_bank,
)
from .errors import (
    BankQueueError,
    EmptyPopulation,
    InvalidConfiguration,
    InvalidRange,
    ScriptExhausted,
)
from .report import format_statistics, format_table, records_frame
from .scenarios import Scenario, get_params, list_scenarios
from .variates import RandomVariates, ScriptedVariates, VariateSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BankParams",
    "BankQueueError",
    "BankSimulation",
    "BankSummary",
    "ClientRecord",
    "EmptyPopulation",
    "InvalidConfiguration",
    "InvalidRange",
    "RandomVariates",
    "Scenario",
    "ScriptExhausted",
    "ScriptedVariates",
    "VariateSource",
    "derive_record",
    "draw_arrivals",
    "format_statistics",
    "format_table",
    "get_params",
    "list_scenarios",
    "records_frame",
    "run_bank",
]
