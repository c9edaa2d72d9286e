"""
Tests for regional crime statistics — deterministic per postal-code prefix.
"""

import pytest

from riskcheck.core.region import get_crime_stats


def test_urban_prefix():
    stats = get_crime_stats("80331")
    assert stats.plz == "80331"
    assert stats.burglary_trend == 12
    assert stats.risk_score == 8
    assert stats.incidents_last_year == 400


def test_urban_prefix_berlin():
    stats = get_crime_stats("10115")
    assert (stats.burglary_trend, stats.risk_score, stats.incidents_last_year) == (14, 8, 260)


def test_non_urban_prefix():
    stats = get_crime_stats("82256")
    assert (stats.burglary_trend, stats.risk_score, stats.incidents_last_year) == (8, 6, 326)


@pytest.mark.parametrize("plz", ["00123", "ab123", ""])
def test_unparseable_or_zero_prefix_uses_default_seed(plz):
    stats = get_crime_stats(plz)
    assert (stats.burglary_trend, stats.risk_score, stats.incidents_last_year) == (6, 4, 320)


def test_partial_digit_prefix():
    stats = get_crime_stats("1a000")
    assert (stats.burglary_trend, stats.risk_score, stats.incidents_last_year) == (5, 5, 83)


def test_same_prefix_same_profile():
    a = get_crime_stats("85221")
    b = get_crime_stats("85999")
    assert a.model_dump(exclude={"plz"}) == b.model_dump(exclude={"plz"})
