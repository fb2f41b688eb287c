"""
test_angles.py
==============
Angle normalization, sign lookup and sexagesimal formatting.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vedic_chart.core.angles import (
    angular_distance, degree_in_sign, format_dms, from_dms, normalize_angle,
    sign_name, sign_of, to_degrees, to_dms, to_radians,
)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    (0.0, 0.0),
    (370.0, 10.0),
    (-10.0, 350.0),
    (720.0, 0.0),
    (-360.0, 0.0),
    (359.5, 359.5),
])
def test_normalize_angle(raw, expected):
    assert normalize_angle(raw) == pytest.approx(expected)


def test_normalize_tiny_negative_stays_below_360():
    r = normalize_angle(-1e-15)
    assert 0.0 <= r < 360.0


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False))
def test_normalize_lands_in_range_and_preserves_direction(x):
    r = normalize_angle(x)
    assert 0.0 <= r < 360.0
    d = (r - x) % 360.0
    assert min(d, 360.0 - d) < 1e-6


@given(st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False),
       st.integers(min_value=-1000, max_value=1000))
def test_normalize_ignores_whole_turns(x, k):
    d = (normalize_angle(x) - normalize_angle(x + 360.0 * k)) % 360.0
    assert min(d, 360.0 - d) < 1e-6


def test_radian_conversion():
    assert to_radians(180.0) == pytest.approx(3.141592653589793)
    assert to_degrees(to_radians(123.456)) == pytest.approx(123.456)


# ---------------------------------------------------------------------------
# Distances and signs
# ---------------------------------------------------------------------------

def test_angular_distance_takes_short_way_round():
    assert angular_distance(350.0, 10.0) == pytest.approx(20.0)
    assert angular_distance(10.0, 350.0) == pytest.approx(20.0)
    assert angular_distance(0.0, 180.0) == pytest.approx(180.0)
    assert angular_distance(45.0, 45.0) == 0.0


@pytest.mark.parametrize("lon, index, name", [
    (0.0, 0, "Aries"),
    (29.999, 0, "Aries"),
    (30.0, 1, "Taurus"),
    (359.9, 11, "Pisces"),
    (-1.0, 11, "Pisces"),
    (400.0, 1, "Taurus"),
])
def test_sign_lookup(lon, index, name):
    assert sign_of(lon) == index
    assert sign_name(lon) == name


def test_degree_in_sign():
    assert degree_in_sign(45.5) == pytest.approx(15.5)
    assert degree_in_sign(-5.0) == pytest.approx(25.0)


# ---------------------------------------------------------------------------
# DMS
# ---------------------------------------------------------------------------

def test_to_dms_splits_fields():
    d, m, s = to_dms(10.5)
    assert (d, m) == (10, 30)
    assert s == pytest.approx(0.0, abs=1e-6)


def test_to_dms_negative_sign_on_degrees_only():
    d, m, s = to_dms(-10.5)
    assert (d, m) == (-10, 30)
    assert s == pytest.approx(0.0, abs=1e-6)


def test_from_dms_inverts_to_dms():
    for value in (0.0, 23.4392911, 179.999, -45.25):
        assert from_dms(*to_dms(value)) == pytest.approx(value, abs=1e-9)


def test_format_dms():
    assert format_dms(15.5) == "15°30'0.0\""
    assert format_dms(0.0) == "0°0'0.0\""


@pytest.mark.parametrize("value, fields", [
    (-0.5, (0, -30)),
    (-0.01, (0, 0)),
])
def test_to_dms_keeps_sign_below_one_degree(value, fields):
    d, m, s = to_dms(value)
    assert (d, m) == fields
    assert from_dms(d, m, s) == pytest.approx(value, abs=1e-9)


def test_format_dms_negative_below_one_degree():
    assert format_dms(-0.5) == "-0°30'0.0\""
    assert format_dms(-10.5) == "-10°30'0.0\""
