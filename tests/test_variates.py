"""Unit tests for the variate sources."""

import pytest

from bankqueue.errors import InvalidRange, ScriptExhausted
from bankqueue.variates import RandomVariates, ScriptedVariates


def test_uniform_real_stays_in_range():
    source = RandomVariates(seed=1)
    values = [source.uniform_real(1.0, 5.0) for _ in range(1000)]
    assert all(1.0 <= v <= 5.0 for v in values)
    assert all(isinstance(v, float) for v in values)


def test_uniform_integer_covers_closed_interval():
    source = RandomVariates(seed=2)
    values = {source.uniform_integer(5, 15) for _ in range(2000)}
    assert values == set(range(5, 16))


def test_degenerate_range_returns_bound():
    source = RandomVariates(seed=3)
    assert source.uniform_integer(4, 4) == 4
    assert source.uniform_real(2.0, 2.0) == 2.0


def test_inverted_range_raises():
    source = RandomVariates(seed=4)
    with pytest.raises(InvalidRange):
        source.uniform_real(5.0, 1.0)
    with pytest.raises(InvalidRange):
        source.uniform_integer(15, 5)


def test_seeded_sources_agree():
    a, b = RandomVariates(seed=9), RandomVariates(seed=9)
    assert [a.uniform_real(0, 3) for _ in range(5)] == [b.uniform_real(0, 3) for _ in range(5)]


def test_scripted_source_replays_in_order():
    source = ScriptedVariates(reals=[1.5, 2.5], integers=[7])
    assert source.uniform_integer(5, 15) == 7
    assert source.uniform_real(0, 3) == 1.5
    assert source.uniform_real(1, 5) == 2.5
    assert source.remaining == 0


def test_scripted_source_exhaustion():
    source = ScriptedVariates(reals=[])
    with pytest.raises(ScriptExhausted):
        source.uniform_real(0, 1)
    with pytest.raises(LookupError):
        source.uniform_integer(0, 1)


def test_scripted_source_validates_range():
    source = ScriptedVariates(reals=[1.0])
    with pytest.raises(InvalidRange):
        source.uniform_real(3, 0)
