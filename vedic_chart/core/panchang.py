"""
panchang.py
===========
Lunar-calendar limbs derived from the Sun and Moon sidereal longitudes.

  Tithi  : Lunar day, one per 12° of Moon–Sun elongation (1–30)
  Karana : Half tithi, one per 6° of elongation (1–60)
  Yoga   : Luni-solar yoga, (Sun + Moon) in 13°20' steps (1–27)
  Vara   : Day of week

Tithi naming: each paksha (lunar fortnight) repeats the same fifteen
names. Day 15 of the waxing half is Purnima (full moon) and day 15 of the
waning half, tithi 30, is Amavasya (new moon). Both carry
``paksha_day == 15``.

Source: Drik Panchang algorithm
"""

from dataclasses import dataclass
from enum import Enum

from .angles import normalize_angle
from .astronomy import VARA, weekday

TITHI_SPAN  = 12.0
KARANA_SPAN = 6.0
YOGA_SPAN   = 360.0 / 27.0

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

TITHIS = (
    "Pratipada", "Dvitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dvadashi", "Trayodashi", "Chaturdashi",
)
FULL_MOON_TITHI = "Purnima"
NEW_MOON_TITHI  = "Amavasya"

YOGAS = (
    "Vishkumbha", "Preeti", "Ayushman", "Saubhagya", "Shobhana",
    "Atiganda", "Sukarma", "Dhriti", "Shula", "Ganda",
    "Vriddhi", "Dhruva", "Vyaghata", "Harshana", "Vajra",
    "Siddhi", "Vyatipata", "Variyana", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma",
    "Indra", "Vaidhriti",
)

MOVABLE_KARANAS = ("Bava", "Balava", "Kaulava", "Taitila", "Garija", "Vanija", "Vishti")
# Kimstughna opens the lunar month, the other three close it
FIXED_KARANAS   = ("Shakuni", "Chatushpada", "Nagava")
FIRST_KARANA    = "Kimstughna"


class Paksha(str, Enum):
    WAXING = "Shukla"
    WANING = "Krishna"


@dataclass(frozen=True)
class Tithi:
    number:     int       # 1–30
    name:       str
    paksha:     Paksha
    progress:   float     # fraction of the current 12° segment elapsed
    paksha_day: int       # 1–15 within the paksha


@dataclass(frozen=True)
class Karana:
    number: int           # 1–60
    name:   str
    fixed:  bool


@dataclass(frozen=True)
class Yoga:
    number:  int          # 1–27
    name:    str
    degrees: float        # normalized Sun + Moon


def elongation(sun_sid: float, moon_sid: float) -> float:
    """Moon's angular distance ahead of the Sun, in [0, 360)."""
    return normalize_angle(moon_sid - sun_sid)


# ---------------------------------------------------------------------------
# Core Panchang computation
# ---------------------------------------------------------------------------

def tithi_of(sun_sid: float, moon_sid: float) -> Tithi:
    """
    Tithi = difference between Moon and Sun longitudes / 12°
    Each tithi = 12° of separation. 30 tithis per lunar month.
    """
    diff = elongation(sun_sid, moon_sid)
    index = min(int(diff / TITHI_SPAN), 29)  # 0-based, 0–29
    paksha = Paksha.WAXING if diff < 180.0 else Paksha.WANING
    paksha_day = index % 15 + 1

    if paksha_day == 15:
        name = FULL_MOON_TITHI if paksha is Paksha.WAXING else NEW_MOON_TITHI
    else:
        name = TITHIS[paksha_day - 1]

    return Tithi(
        number=index + 1,
        name=name,
        paksha=paksha,
        progress=(diff % TITHI_SPAN) / TITHI_SPAN,
        paksha_day=paksha_day,
    )


def karana_of(sun_sid: float, moon_sid: float) -> Karana:
    """
    Karana = half-tithi. Two karanas per tithi.
    First karana is the fixed Kimstughna, the next 56 cycle through the seven
    movable karanas, the last three are fixed.
    """
    karana_num = min(int(elongation(sun_sid, moon_sid) / KARANA_SPAN), 59)  # 0–59

    if karana_num == 0:
        name, fixed = FIRST_KARANA, True
    elif karana_num >= 57:
        name, fixed = FIXED_KARANAS[karana_num - 57], True
    else:
        name, fixed = MOVABLE_KARANAS[(karana_num - 1) % 7], False

    return Karana(number=karana_num + 1, name=name, fixed=fixed)


def yoga_of(sun_sid: float, moon_sid: float) -> Yoga:
    """
    Yoga = (Sun longitude + Moon longitude) / (360/27)
    27 yogas, each 13°20'
    """
    combined = normalize_angle(sun_sid + moon_sid)
    yoga_idx = min(int(combined / YOGA_SPAN), 26)
    return Yoga(number=yoga_idx + 1, name=YOGAS[yoga_idx], degrees=combined)


def vara_of(jd: float) -> str:
    return VARA[weekday(jd)]
