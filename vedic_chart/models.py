"""
models.py
=========
Input model and the immutable chart aggregate handed to consumers.

``BirthInput`` is a pydantic model so that range checks live next to the
field declarations. Everything produced by the pipeline is a frozen
dataclass; the planet map is exposed read-only.
"""

import calendar
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import ChartSettings
from .core.angles import (
    SIGNS, angular_distance, degree_in_sign, format_dms, sign_of,
)
from .core.astronomy import MAX_YEAR, MIN_YEAR, julian_centuries
from .core.ephemeris import PLANETS, Planet
from .core.houses import house_of as _house_of
from .core.houses import planets_in_house as _planets_in_house
from .core.nakshatra import Nakshatra, nakshatra_of
from .core.panchang import Karana, Tithi, Yoga


# ── Input ──────────────────────────────────────────────────────

class BirthInput(BaseModel):
    """Civil birth moment and place. Time is local when timezone_offset is set, else UTC."""

    model_config = ConfigDict(frozen=True)

    year:            int   = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    month:           int   = Field(..., ge=1,    le=12)
    day:             int   = Field(..., ge=1,    le=31)
    hour:            int   = Field(...,  ge=0,    le=23)
    minute:          int   = Field(...,  ge=0,    le=59)
    second:          float = Field(0.0, ge=0,    lt=60)
    latitude:        float = Field(..., ge=-90,  le=90)
    longitude:       float = Field(..., ge=-180, le=180)
    timezone_offset: Optional[float] = Field(None, ge=-12, le=14,
                                             description="Hours ahead of UTC (5.5 for IST)")

    @model_validator(mode="after")
    def _day_exists(self) -> "BirthInput":
        days_in_month = calendar.monthrange(self.year, self.month)[1]
        if self.day > days_in_month:
            raise ValueError(
                f"day {self.day} is not valid for {self.year}-{self.month:02d} "
                f"({days_in_month} days)")
        return self


# ── Chart elements ─────────────────────────────────────────────

@dataclass(frozen=True)
class Ascendant:
    longitude:          float    # sidereal
    sign:               int      # 0 = Aries
    degree:             float    # within sign
    tropical_longitude: float

    @classmethod
    def from_longitude(cls, sidereal: float, tropical: float) -> "Ascendant":
        return cls(
            longitude=sidereal,
            sign=sign_of(sidereal),
            degree=degree_in_sign(sidereal),
            tropical_longitude=tropical,
        )

    @property
    def sign_name(self) -> str:
        return SIGNS[self.sign]


@dataclass(frozen=True)
class PlanetPosition:
    planet:             Planet
    longitude:          float    # sidereal
    tropical_longitude: float
    latitude:           float
    speed:              float    # degrees / day
    sign:               int
    degree:             float
    house:              int
    retrograde:         bool
    nakshatra:          Nakshatra

    @property
    def sign_name(self) -> str:
        return SIGNS[self.sign]

    def degree_formatted(self) -> str:
        return format_dms(self.degree)


@dataclass(frozen=True)
class Aspect:
    planet: Planet
    angle:  float
    orb:    float


# ── Aggregate root ─────────────────────────────────────────────

@dataclass(frozen=True)
class BirthChart:
    birth:          BirthInput
    julian_day:     float
    ayanamsa:       float
    gmst:           float
    lst:            float
    obliquity:      float
    ascendant:      Ascendant
    midheaven:      float
    houses:         Tuple[float, ...]
    planets:        Mapping[Planet, PlanetPosition]
    moon_nakshatra: Nakshatra
    tithi:          Tithi
    karana:         Karana
    yoga:           Yoga
    vara:           str
    settings:       ChartSettings

    def house_of(self, longitude: float) -> int:
        return _house_of(longitude, self.houses)

    def planets_in_house(self, house_number: int) -> List[Planet]:
        positions = {p: pos.longitude for p, pos in self.planets.items()}
        return _planets_in_house(house_number, positions, self.houses)

    def aspects_to(self, longitude: float) -> List[Aspect]:
        """
        Planets within ``settings.aspect_orb`` of one of the aspect angles
        from ``longitude``. At most one aspect (the first angle matched) per planet.
        """
        aspects = []
        for planet, pos in self.planets.items():
            separation = angular_distance(longitude, pos.longitude)
            for angle in self.settings.aspect_angles:
                orb = abs(separation - angle)
                if orb < self.settings.aspect_orb:
                    aspects.append(Aspect(planet=planet, angle=angle, orb=orb))
                    break
        return aspects

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view of the chart."""
        asc = self.ascendant
        asc_nak = nakshatra_of(asc.longitude)
        mc = self.midheaven

        planets = {}
        for planet in PLANETS:
            pos = self.planets[planet]
            planets[planet.value] = {
                "sidereal_longitude": round(pos.longitude, 4),
                "tropical_longitude": round(pos.tropical_longitude, 4),
                "sign": pos.sign_name,
                "degree_in_sign": round(pos.degree, 4),
                "degree_formatted": pos.degree_formatted(),
                "speed": round(pos.speed, 6),
                "nakshatra": pos.nakshatra.name,
                "nakshatra_pada": pos.nakshatra.pada,
                "house": pos.house,
                "is_retrograde": pos.retrograde,
            }

        houses = [
            {
                "house": i + 1,
                "sidereal_longitude": round(cusp, 4),
                "sign": SIGNS[sign_of(cusp)],
                "degree_formatted": format_dms(degree_in_sign(cusp)),
            }
            for i, cusp in enumerate(self.houses)
        ]

        moon = self.moon_nakshatra
        return {
            "meta": {
                "input": self.birth.model_dump(),
                "julian_day": round(self.julian_day, 6),
                "julian_centuries_j2000": round(julian_centuries(self.julian_day), 8),
                "ayanamsa": round(self.ayanamsa, 6),
                "ayanamsa_system": self.settings.ayanamsa,
                "obliquity": round(self.obliquity, 6),
                "gmst_degrees": round(self.gmst, 6),
                "lst_degrees": round(self.lst, 6),
                "house_system": "whole_sign",
            },
            "lagna": {
                "sign": asc.sign_name,
                "sidereal_longitude": round(asc.longitude, 4),
                "tropical_longitude": round(asc.tropical_longitude, 4),
                "degree_formatted": format_dms(asc.degree),
                "nakshatra": asc_nak.name,
                "nakshatra_pada": asc_nak.pada,
            },
            "midheaven": {
                "sign": SIGNS[sign_of(mc)],
                "sidereal_longitude": round(mc, 4),
                "degree_formatted": format_dms(degree_in_sign(mc)),
            },
            "planets": planets,
            "houses": houses,
            "lunar": {
                "nakshatra": {
                    "number": moon.number,
                    "name": moon.name,
                    "pada": moon.pada,
                    "lord": moon.lord.value,
                    "degrees_in_nakshatra": round(moon.degrees_in_nakshatra, 4),
                },
                "tithi": {
                    "number": self.tithi.number,
                    "name": self.tithi.name,
                    "paksha": self.tithi.paksha.value,
                    "paksha_day": self.tithi.paksha_day,
                    "elapsed_pct": round(self.tithi.progress * 100, 1),
                },
                "karana": {"number": self.karana.number, "name": self.karana.name},
                "yoga": {"number": self.yoga.number, "name": self.yoga.name},
                "vara": self.vara,
            },
        }
