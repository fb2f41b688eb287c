"""
test_houses.py
==============
Ascendant, Midheaven and Whole Sign house partitioning.
"""

import logging
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vedic_chart.core.angles import sign_of
from vedic_chart.core.houses import (
    ascendant, cusps_are_closed, house_of, midheaven, planets_in_house, whole_sign_houses,
)
from vedic_chart.errors import ValidationError

longitudes = st.floats(min_value=0.0, max_value=360.0, exclude_max=True,
                       allow_nan=False, allow_infinity=False)


# ---------------------------------------------------------------------------
# Ascendant / MC
# ---------------------------------------------------------------------------

def test_ascendant_at_equator_with_aries_on_meridian():
    assert ascendant(0.0, 0.0) == pytest.approx(90.0)


def test_ascendant_rejects_impossible_latitude():
    with pytest.raises(ValidationError) as exc_info:
        ascendant(100.0, 95.0)
    assert exc_info.value.errors()[0]["loc"] == ["latitude"]


def test_polar_ascendant_is_finite_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="vedic_chart.core.houses"):
        asc = ascendant(100.0, 80.0)
    assert 0.0 <= asc < 360.0
    assert any("ill-conditioned" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("ramc, expected", [(0.0, 0.0), (90.0, 90.0), (180.0, 180.0), (270.0, 270.0)])
def test_midheaven_at_cardinal_points(ramc, expected):
    assert midheaven(ramc) == pytest.approx(expected)


# ---------------------------------------------------------------------------
# Whole Sign houses
# ---------------------------------------------------------------------------

def test_whole_sign_cusps_start_at_ascendant_sign():
    cusps = whole_sign_houses(45.5)
    assert cusps[0] == 30.0
    assert cusps[11] == 0.0
    assert len(cusps) == 12
    assert cusps_are_closed(cusps)


def test_every_house_gets_thirty_sampled_degrees():
    for asc in (0.0, 123.4, 359.9):
        cusps = whole_sign_houses(asc)
        counts = Counter(house_of(float(lon), cusps) for lon in range(360))
        assert set(counts) == set(range(1, 13))
        assert all(n == 30 for n in counts.values())


@given(longitudes, longitudes)
def test_house_matches_sign_offset(asc, lon):
    cusps = whole_sign_houses(asc)
    house = house_of(lon, cusps)
    assert 1 <= house <= 12
    assert house == (sign_of(lon) - sign_of(asc)) % 12 + 1


def test_house_of_wraps_past_pisces():
    cusps = whole_sign_houses(350.0)  # Pisces rising
    assert house_of(355.0, cusps) == 1
    assert house_of(5.0, cusps) == 2
    assert house_of(345.0, cusps) == 1      # still Pisces
    assert house_of(325.0, cusps) == 12     # Aquarius


def test_house_of_needs_twelve_cusps():
    with pytest.raises(ValidationError):
        house_of(10.0, [0.0, 30.0, 60.0])


def test_cusps_are_closed_rejects_degenerate_cusps():
    assert not cusps_are_closed([0.0] * 12)
    assert not cusps_are_closed([0.0, 30.0])


def test_planets_in_house():
    cusps = whole_sign_houses(30.0)
    positions = {"Sun": 35.0, "Moon": 215.0, "Mars": 59.9}
    assert planets_in_house(1, positions, cusps) == ["Sun", "Mars"]
    assert planets_in_house(7, positions, cusps) == ["Moon"]
    assert planets_in_house(12, positions, cusps) == []


@pytest.mark.parametrize("house", [0, 13, -1])
def test_planets_in_house_rejects_bad_house_number(house):
    with pytest.raises(ValidationError):
        planets_in_house(house, {"Sun": 35.0}, whole_sign_houses(0.0))
