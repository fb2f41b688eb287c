"""
houses.py
=========
Ascendant (Lagna), Midheaven and Whole Sign house cusps.

Whole Sign is the only house system used by the chart: house 1 is the
entire sign containing the Ascendant and every following house is the
next sign.

Source: Meeus Ch. 14; Holden, J.H. (1994). "A History of Horoscopic Astrology"
"""

import logging
import math
from typing import Iterable, List, Mapping, Sequence, Tuple

from ..errors import ValidationError
from .angles import DEGREES_PER_SIGN, normalize_angle, to_degrees, to_radians
from .astronomy import J2000_OBLIQUITY

log = logging.getLogger(__name__)

HOUSES_COUNT = 12
# Above this latitude the ecliptic can coincide with the horizon
POLAR_CIRCLE = 66.5


# ---------------------------------------------------------------------------
# Ascendant (Lagna) and Midheaven
# ---------------------------------------------------------------------------

def ascendant(lst: float, latitude: float,
              obliquity: float = J2000_OBLIQUITY) -> float:
    """
    Ecliptic longitude rising on the eastern horizon, degrees in [0, 360).
    lst: Local Sidereal Time in degrees (= RAMC)
    Source: Meeus Ch. 14

    Near the poles tan(latitude) blows up and the result, while finite,
    has no astronomical meaning.
    """
    if not -90.0 <= latitude <= 90.0:
        raise ValidationError({
            "loc": ["latitude"],
            "msg": f"latitude must be between -90 and 90, got {latitude}",
            "type": "value_error",
        })
    if abs(latitude) >= POLAR_CIRCLE:
        log.warning("ascendant requested at latitude %.4f; result is ill-conditioned", latitude)

    ramc = to_radians(lst)
    e = to_radians(obliquity)
    phi = to_radians(latitude)

    y = math.cos(ramc)
    x = -(math.sin(ramc) * math.cos(e) + math.tan(phi) * math.sin(e))
    return normalize_angle(to_degrees(math.atan2(y, x)))


def midheaven(lst: float, obliquity: float = J2000_OBLIQUITY) -> float:
    """
    Ecliptic longitude culminating on the meridian (MC).
    Source: Meeus Ch. 14
    """
    e = to_radians(obliquity)
    ramc = to_radians(lst)
    mc = math.atan2(math.sin(ramc), math.cos(ramc) * math.cos(e))
    return normalize_angle(to_degrees(mc))


# ---------------------------------------------------------------------------
# Whole Sign cusps and house lookup
# ---------------------------------------------------------------------------

def whole_sign_houses(ascendant_longitude: float) -> Tuple[float, ...]:
    """
    Whole Sign house cusps. House 1 = sign containing Ascendant.
    Each house = entire zodiac sign (30°).
    """
    lagna_sign = math.floor(normalize_angle(ascendant_longitude) / DEGREES_PER_SIGN) * DEGREES_PER_SIGN
    return tuple(normalize_angle(lagna_sign + DEGREES_PER_SIGN * i) for i in range(HOUSES_COUNT))


def house_of(longitude: float, cusps: Sequence[float]) -> int:
    """
    1-based house whose half-open interval [cusp_i, cusp_i+1) holds ``longitude``.
    The interval that crosses 360°/0° is handled explicitly.
    """
    if len(cusps) != HOUSES_COUNT:
        raise ValidationError({
            "loc": ["cusps"],
            "msg": f"expected {HOUSES_COUNT} house cusps, got {len(cusps)}",
            "type": "value_error",
        })
    lon = normalize_angle(longitude)
    for i in range(HOUSES_COUNT):
        start = cusps[i]
        end = cusps[(i + 1) % HOUSES_COUNT]
        if start < end:
            if start <= lon < end:
                return i + 1
        elif lon >= start or lon < end:  # wraparound at 360/0
            return i + 1
    # cusps that do not partition the circle
    raise ValidationError({
        "loc": ["cusps"],
        "msg": f"longitude {lon} is not covered by cusps {list(cusps)}",
        "type": "value_error",
    })


def planets_in_house(house: int, positions: Mapping, cusps: Sequence[float]) -> List:
    """Names (keys of ``positions``) whose longitude falls in ``house``."""
    if not 1 <= house <= HOUSES_COUNT:
        raise ValidationError({
            "loc": ["house"],
            "msg": f"house number must be between 1 and {HOUSES_COUNT}, got {house}",
            "type": "value_error",
        })
    return [name for name, lon in positions.items() if house_of(lon, cusps) == house]


def cusps_are_closed(cusps: Iterable[float]) -> bool:
    """True when consecutive cusps are 30° apart around the full circle."""
    cusps = list(cusps)
    if len(cusps) != HOUSES_COUNT:
        return False
    for i, start in enumerate(cusps):
        step = normalize_angle(cusps[(i + 1) % HOUSES_COUNT] - start)
        if abs(step - DEGREES_PER_SIGN) > 1e-9:
            return False
    return True
