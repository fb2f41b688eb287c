"""
ephemeris.py: Simplified tropical positions of the nine grahas
==============================================================
Mean-motion model: each body's tropical longitude is its mean longitude
at J2000 plus a fixed daily rate times the days elapsed since J2000.
Rates are the Meeus Table 31.a / 47.a mean-longitude coefficients
divided by 36525.

Sun and Moon additionally get their largest periodic terms
(equation of centre for the Sun, the ten largest Table 47.a terms for
the Moon), which keeps the Sun within about a degree and the Moon
within about a tenth of a degree of the true position.

Known limitations:
  * Mercury–Saturn use heliocentric mean longitudes. Outer planets are
    usable on average; Mercury and Venus can be far from their true
    geocentric position.
  * Retrograde motion is only modelled for the lunar nodes, which always
    regress. Every other body reports ``retrograde=False``.
  * Latitude is always 0.

Rahu is the mean ascending node; Ketu is always exactly Rahu + 180°.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping

from ..errors import PlanetaryError
from .angles import normalize_angle, to_radians
from .astronomy import J2000


class Planet(str, Enum):
    SUN     = "Sun"
    MOON    = "Moon"
    MERCURY = "Mercury"
    VENUS   = "Venus"
    MARS    = "Mars"
    JUPITER = "Jupiter"
    SATURN  = "Saturn"
    RAHU    = "Rahu"
    KETU    = "Ketu"


PLANETS = tuple(Planet)


@dataclass(frozen=True)
class MeanMotion:
    base_longitude: float   # tropical longitude at J2000, degrees
    daily_rate:     float   # degrees / day


@dataclass(frozen=True)
class BodyMotion:
    longitude:  float
    speed:      float
    retrograde: bool
    latitude:   float = 0.0


# ── Mean-motion constants (read-only) ──────────────────────────

MOTION_TABLE: Mapping[Planet, MeanMotion] = MappingProxyType({
    Planet.SUN:     MeanMotion(280.46646,   36000.76983   / 36525.0),
    Planet.MOON:    MeanMotion(218.3164477, 481267.88123421 / 36525.0),
    Planet.MERCURY: MeanMotion(252.2509,    149474.0722   / 36525.0),
    Planet.VENUS:   MeanMotion(181.9798,    58517.8160    / 36525.0),
    Planet.MARS:    MeanMotion(355.4333,    19140.2993    / 36525.0),
    Planet.JUPITER: MeanMotion(34.3515,     3034.9057     / 36525.0),
    Planet.SATURN:  MeanMotion(50.0774,     1222.1138     / 36525.0),
    Planet.RAHU:    MeanMotion(125.04452,   -1934.136261  / 36525.0),
})


def mean_longitude(planet: Planet, days: float) -> float:
    """Mean tropical longitude ``days`` after J2000."""
    motion = MOTION_TABLE[planet]
    return normalize_angle(motion.base_longitude + motion.daily_rate * days)


# ── Periodic corrections ───────────────────────────────────────

def _sun_correction(T: float) -> float:
    """Equation of centre. Meeus Ch. 25."""
    M = to_radians(normalize_angle(357.52911 + 35999.05029*T))
    return (1.914602*math.sin(M)
            + 0.019993*math.sin(2*M)
            + 0.000289*math.sin(3*M))


def _moon_correction(T: float) -> float:
    """Ten largest longitude terms of Meeus Table 47.a, in degrees."""
    D  = to_radians(normalize_angle(297.8501921 + 445267.1114034*T))
    M  = to_radians(normalize_angle(357.5291092 + 35999.0502909*T))
    Mp = to_radians(normalize_angle(134.9633964 + 477198.8675055*T))
    F  = to_radians(normalize_angle(93.2720950  + 483202.0175233*T))
    return (6.288774*math.sin(Mp)
            + 1.274027*math.sin(2*D - Mp)
            + 0.658314*math.sin(2*D)
            + 0.213618*math.sin(2*Mp)
            - 0.185116*math.sin(M)
            - 0.114332*math.sin(2*F)
            + 0.058793*math.sin(2*D - 2*Mp)
            + 0.057066*math.sin(2*D - M - Mp)
            + 0.053322*math.sin(2*D + Mp)
            - 0.031958*math.sin(M - 2*Mp))


# ── Main API ────────────────────────────────────────────────────

def tropical_positions(jd: float) -> Dict[Planet, BodyMotion]:
    """
    Tropical ecliptic longitude, speed and retrograde flag of all nine bodies.
    Raises PlanetaryError for a non-finite Julian Day.
    """
    try:
        jd = float(jd)
    except (TypeError, ValueError) as exc:
        raise PlanetaryError(f"Julian Day must be a number, got {jd!r}") from exc
    if not math.isfinite(jd):
        raise PlanetaryError(f"Julian Day must be finite, got {jd!r}")

    days = jd - J2000
    T = days / 36525.0

    positions = {}
    for planet, motion in MOTION_TABLE.items():
        lon = mean_longitude(planet, days)
        if planet is Planet.SUN:
            lon = normalize_angle(lon + _sun_correction(T))
        elif planet is Planet.MOON:
            lon = normalize_angle(lon + _moon_correction(T))
        positions[planet] = BodyMotion(
            longitude=lon,
            speed=motion.daily_rate,
            retrograde=motion.daily_rate < 0,
        )

    rahu = positions[Planet.RAHU]
    positions[Planet.KETU] = BodyMotion(
        longitude=normalize_angle(rahu.longitude + 180.0),
        speed=rahu.speed,
        retrograde=rahu.retrograde,
    )
    return {planet: positions[planet] for planet in PLANETS}


def tropical_to_sidereal(positions: Mapping[Planet, float],
                         ayanamsa: float) -> Dict[Planet, float]:
    """Subtract the ayanamsa from every tropical longitude, normalized."""
    if not math.isfinite(ayanamsa):
        raise PlanetaryError(f"ayanamsa must be finite, got {ayanamsa!r}")
    sidereal = {}
    for planet, lon in positions.items():
        if not math.isfinite(lon):
            raise PlanetaryError(f"{planet} longitude must be finite, got {lon!r}")
        sidereal[planet] = normalize_angle(lon - ayanamsa)
    return sidereal
