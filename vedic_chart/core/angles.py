"""
angles.py
=========
Degree/radian conversion, angle normalization and sexagesimal helpers.

Every angle handed between chart components passes through
``normalize_angle`` so it lands in [0, 360).
"""

import math
from typing import Tuple

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

DEGREES_PER_SIGN = 30.0

SIGNS = ["Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
         "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces"]


def to_radians(degrees: float) -> float:
    return degrees * DEG_TO_RAD


def to_degrees(radians: float) -> float:
    return radians * RAD_TO_DEG


def normalize_angle(x: float) -> float:
    """Normalize angle to [0, 360)."""
    r = x % 360.0
    # tiny negatives round up to exactly 360.0
    if r >= 360.0:
        return 0.0
    return r


def angular_distance(a: float, b: float) -> float:
    """Shortest arc between two longitudes, in [0, 180]."""
    d = abs(normalize_angle(a) - normalize_angle(b))
    return 360.0 - d if d > 180.0 else d


def sign_of(longitude: float) -> int:
    """Zero-based zodiac sign index (0 = Aries)."""
    return int(normalize_angle(longitude) // DEGREES_PER_SIGN) % 12


def degree_in_sign(longitude: float) -> float:
    return normalize_angle(longitude) % DEGREES_PER_SIGN


def sign_name(longitude: float) -> str:
    return SIGNS[sign_of(longitude)]


# ---------------------------------------------------------------------------
# Degrees / minutes / seconds
# ---------------------------------------------------------------------------

def to_dms(degrees: float) -> Tuple[int, int, float]:
    """
    Split decimal degrees into (degrees, minutes, seconds).
    The sign sits on the leading non-zero field: -10.5 -> (-10, 30, 0.0)
    and -0.5 -> (0, -30, 0.0).
    """
    value = abs(degrees)
    d = int(value)
    m_float = (value - d) * 60
    m = int(m_float)
    s = (m_float - m) * 60
    # carry rounding noise such as 59.99999999 seconds
    if s >= 60.0 - 1e-9:
        s = 0.0
        m += 1
    if m >= 60:
        m -= 60
        d += 1
    if degrees < 0:
        if d:
            d = -d
        elif m:
            m = -m
        else:
            s = -s
    return d, m, s


def from_dms(degrees: int, minutes: int = 0, seconds: float = 0.0) -> float:
    """Inverse of ``to_dms``; a negative sign on any field applies to the whole value."""
    value = abs(degrees) + abs(minutes) / 60.0 + abs(seconds) / 3600.0
    return -value if (degrees < 0 or minutes < 0 or seconds < 0) else value


def format_dms(degrees: float) -> str:
    """Format decimal degrees as D°M'S\" string."""
    d, m, s = to_dms(abs(degrees))
    sign = "-" if degrees < 0 else ""
    return f"{sign}{d}°{m}'{s:.1f}\""
