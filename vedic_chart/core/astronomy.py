"""
astronomy.py: Time scales, sidereal time and coordinate frames
==============================================================
Uses Jean Meeus "Astronomical Algorithms" 2nd ed.

  Julian Day           Meeus Ch. 7 (Gregorian calendar)
  Sidereal time        Meeus Ch. 12, Eq. 12.4
  Mean obliquity       Meeus Ch. 22, Eq. 22.2
  Frame conversion     Meeus Ch. 13
  Equation of time     Meeus Ch. 28, Eq. 28.3

Supported calendar range is 1582 (Gregorian adoption) through 2100.
Dates before 15 Oct 1582 inside that year are treated as proleptic Gregorian.
"""

import calendar
import math
from datetime import datetime, timedelta
from typing import Dict, Tuple

from ..errors import AstronomicalError, ValidationError
from .angles import normalize_angle, to_degrees, to_radians

# ── Constants ──────────────────────────────────────────────────
J2000          = 2451545.0
JULIAN_CENTURY = 36525.0
MIN_YEAR       = 1582
MAX_YEAR       = 2100
# Mean obliquity at J2000 (Meeus 22.2 with T = 0)
J2000_OBLIQUITY = 23.0 + 26.0/60 + 21.448/3600

VARA = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


# ── Julian Day ─────────────────────────────────────────────────

def _check_civil_date(year: int, month: int, day: int,
                      hour: float, minute: float, second: float) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise AstronomicalError(
            f"year {year} outside supported range {MIN_YEAR}-{MAX_YEAR}")
    if not 1 <= month <= 12:
        raise AstronomicalError(f"month {month} must be between 1 and 12")
    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        raise AstronomicalError(
            f"day {day} is not valid for {year}-{month:02d} ({days_in_month} days)")
    if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
        raise AstronomicalError(
            f"time of day {hour}:{minute}:{second} out of range")


def julian_day(year: int, month: int, day: int,
               hour: float = 0, minute: float = 0, second: float = 0.0) -> float:
    """Meeus Ch. 7. Raises AstronomicalError outside 1582–2100 or for impossible dates."""
    _check_civil_date(year, month, day, hour, minute, second)
    day_fraction = (hour + minute / 60.0 + second / 3600.0) / 24.0
    if month <= 2:
        year -= 1; month += 12
    A = int(year / 100)
    B = 2 - A + int(A / 4)
    return (int(365.25*(year + 4716)) + int(30.6001*(month + 1))
            + day + B - 1524.5 + day_fraction)


def julian_centuries(jd: float) -> float:
    return (jd - J2000) / JULIAN_CENTURY


def utc_components(year: int, month: int, day: int,
                   hour: int, minute: int, second: float,
                   timezone_offset: float) -> Tuple[int, int, int, int, int, float]:
    """
    Shift local civil time to UTC.
    timezone_offset: hours ahead of UTC (e.g. 5.5 for IST, -5 for EST).
    Day, month and year roll over as needed.
    """
    try:
        local = datetime(year, month, day, hour, minute) + timedelta(seconds=second)
        utc = local - timedelta(hours=timezone_offset)
    except (ValueError, OverflowError) as exc:
        raise AstronomicalError(f"cannot convert local time to UTC: {exc}") from exc
    return (utc.year, utc.month, utc.day, utc.hour, utc.minute,
            utc.second + utc.microsecond / 1_000_000)


def weekday(jd: float) -> int:
    """Day of week for the civil day containing ``jd``; 0 = Sunday."""
    return int(math.floor(jd + 1.5)) % 7


# ── Ayanamsa ────────────────────────────────────────────────────

AYANAMSA = {
    # value at year 2000 (degrees), precession rate (degrees / year)
    "lahiri": {"j2000": 23.85700, "rate": 50.2882 / 3600.0},
    "raman":  {"j2000": 22.46000, "rate": 50.2388 / 3600.0},
    "kp":     {"j2000": 23.86000, "rate": 50.2388 / 3600.0},
    "fagan":  {"j2000": 24.74000, "rate": 50.2388 / 3600.0},
}


def ayanamsa(year: float, system: str = "lahiri") -> float:
    """
    Precession offset between the tropical and sidereal zodiacs for ``year``.
    Linear in year, so it is continuous and strictly increasing.
    """
    params = AYANAMSA.get(system.lower())
    if params is None:
        raise ValidationError({
            "loc": ["ayanamsa"],
            "msg": f"unknown ayanamsa system {system!r}; expected one of {sorted(AYANAMSA)}",
            "type": "value_error",
        })
    if not math.isfinite(year):
        raise AstronomicalError(f"year must be finite, got {year!r}")
    return params["j2000"] + params["rate"] * (year - 2000)


# ── Sidereal time ───────────────────────────────────────────────

def gmst(jd: float) -> float:
    """Greenwich Mean Sidereal Time in degrees. Meeus Ch. 12."""
    if not math.isfinite(jd):
        raise AstronomicalError(f"Julian Day must be finite, got {jd!r}")
    T  = julian_centuries(jd)
    th = 280.46061837 + 360.98564736629*(jd - J2000) + 0.000387933*T*T - T*T*T/38710000.0
    return normalize_angle(th)


def lst(gmst_deg: float, longitude: float) -> float:
    """Local Sidereal Time in degrees; longitude positive East."""
    return normalize_angle(gmst_deg + longitude)


# ── Obliquity and frame conversion ──────────────────────────────

def obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic in degrees."""
    T = julian_centuries(jd)
    return J2000_OBLIQUITY - (46.8150*T + 0.00059*T*T - 0.001813*T*T*T) / 3600.0


def equatorial_to_ecliptic(ra: float, dec: float,
                           obliquity_deg: float = J2000_OBLIQUITY) -> Dict[str, float]:
    """(right ascension, declination) -> {"longitude", "latitude"} in degrees."""
    a = to_radians(ra)
    d = to_radians(dec)
    e = to_radians(obliquity_deg)

    sin_lat = math.sin(d)*math.cos(e) - math.cos(d)*math.sin(e)*math.sin(a)
    lon = math.atan2(math.sin(a)*math.cos(e) + math.tan(d)*math.sin(e), math.cos(a))
    return {
        "longitude": normalize_angle(to_degrees(lon)),
        "latitude": to_degrees(math.asin(max(-1.0, min(1.0, sin_lat)))),
    }


def ecliptic_to_equatorial(longitude: float, latitude: float,
                           obliquity_deg: float = J2000_OBLIQUITY) -> Dict[str, float]:
    """(ecliptic longitude, latitude) -> {"ra", "dec"} in degrees."""
    l = to_radians(longitude)
    b = to_radians(latitude)
    e = to_radians(obliquity_deg)

    sin_dec = math.sin(b)*math.cos(e) + math.cos(b)*math.sin(e)*math.sin(l)
    ra = math.atan2(math.sin(l)*math.cos(e) - math.tan(b)*math.sin(e), math.cos(l))
    return {
        "ra": normalize_angle(to_degrees(ra)),
        "dec": to_degrees(math.asin(max(-1.0, min(1.0, sin_dec)))),
    }


# ── Equation of time ────────────────────────────────────────────

def equation_of_time(jd: float) -> float:
    """
    Apparent minus mean solar time, in minutes. Meeus Eq. 28.3 (Smart).
    Positive when a sundial is ahead of the clock.
    """
    if not math.isfinite(jd):
        raise AstronomicalError(f"Julian Day must be finite, got {jd!r}")
    T = julian_centuries(jd)
    L0 = to_radians(normalize_angle(280.46646 + 36000.76983*T + 0.0003032*T*T))
    M  = to_radians(normalize_angle(357.52911 + 35999.05029*T - 0.0001537*T*T))
    e  = 0.016708634 - 0.000042037*T - 0.0000001267*T*T
    y  = math.tan(to_radians(obliquity(jd)) / 2.0) ** 2

    E = (y*math.sin(2*L0)
         - 2*e*math.sin(M)
         + 4*e*y*math.sin(M)*math.cos(2*L0)
         - 0.5*y*y*math.sin(4*L0)
         - 1.25*e*e*math.sin(2*M))
    return to_degrees(E) * 4.0
