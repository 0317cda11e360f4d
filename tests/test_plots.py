"""Smoke checks for the figure helpers."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from bankqueue.bank_core import BankParams, BankSimulation  # noqa: E402
from bankqueue.report import records_frame  # noqa: E402
from plots import plot_histogram, plot_timeline  # noqa: E402


def test_timeline_written(tmp_path):
    records = records_frame(BankSimulation(BankParams(seed=5)).records)
    out = tmp_path / "timeline.png"
    plot_timeline(records, out)
    assert out.exists() and out.stat().st_size > 0


def test_timeline_rejects_foreign_csv(tmp_path):
    with pytest.raises(ValueError):
        plot_timeline(pd.DataFrame({"L": [1.0]}), tmp_path / "bad.png")


def test_histogram_written(tmp_path):
    out = tmp_path / "hist.png"
    plot_histogram(pd.Series([0.1, 0.4, 0.2, 0.9]), "t", "x", out)
    assert out.exists()
