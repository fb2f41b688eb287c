"""
chart.py
========
Birth chart generator.

Runs the pipeline stages in order, each one producing a ``(value, error)``
pair; the first error stops the run:

    VALIDATE → ASTRONOMICAL → CHART_ELEMENTS → PLANETARY → LUNAR → ASSEMBLE

Usage:
    from vedic_chart.tools.chart import generate_chart

    chart = generate_chart({
        "year": 1990, "month": 5, "day": 15,
        "hour": 14, "minute": 30,
        "latitude": 28.6139,        # Delhi
        "longitude": 77.2090,
    })
    chart.ascendant.sign_name
    chart.planets[Planet.MOON].nakshatra.name
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..config import DEFAULT_SETTINGS, ChartSettings
from ..core.angles import degree_in_sign, normalize_angle, sign_of
from ..core.astronomy import (
    ayanamsa, gmst, julian_day, lst, obliquity, utc_components,
)
from ..core.ephemeris import Planet, tropical_positions, tropical_to_sidereal
from ..core.houses import ascendant, cusps_are_closed, house_of, midheaven, whole_sign_houses
from ..core.nakshatra import nakshatra_of
from ..core.panchang import karana_of, tithi_of, vara_of, yoga_of
from ..errors import ChartError, Stage, ValidationError, error_for_stage
from ..models import Ascendant, BirthChart, BirthInput, PlanetPosition

log = logging.getLogger(__name__)

BirthLike = Union[BirthInput, Mapping[str, Any]]


class Outcome(NamedTuple):
    value: Any
    error: Optional[ChartError]


@dataclass(frozen=True)
class ChartResult:
    chart: Optional[BirthChart]
    error: Optional[ChartError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BirthChart:
        if self.error is not None:
            raise self.error
        return self.chart


def _attempt(stage: Stage, fn: Callable, *args) -> Outcome:
    """Run one stage, turning any failure into an error of the stage's kind."""
    try:
        value = fn(*args)
    except ChartError as exc:
        if exc.kind is stage.error_kind:
            if exc.stage is None:
                exc.stage = stage
            error = exc
        else:
            error = error_for_stage(stage, exc.message)
            error.__cause__ = exc
    except (ValueError, ArithmeticError, TypeError, LookupError, AttributeError) as exc:
        error = error_for_stage(stage, str(exc) or type(exc).__name__)
        error.__cause__ = exc
    else:
        log.debug("stage %s complete", stage.value)
        return Outcome(value, None)

    log.warning("stage %s failed: %s", stage.value, error.message)
    return Outcome(None, error)


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def _validate(birth: BirthLike) -> BirthInput:
    if isinstance(birth, BirthInput):
        return birth
    if not isinstance(birth, Mapping):
        raise ValidationError({
            "loc": [],
            "msg": f"birth must be a BirthInput or a mapping, got {type(birth).__name__}",
            "type": "type_error",
        })
    try:
        return BirthInput.model_validate(dict(birth))
    except PydanticValidationError as exc:
        raise ValidationError([
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]) from exc


def _astronomical(birth: BirthInput, settings: ChartSettings) -> Dict[str, float]:
    if birth.timezone_offset is None:
        civil = (birth.year, birth.month, birth.day, birth.hour, birth.minute, birth.second)
    else:
        civil = utc_components(birth.year, birth.month, birth.day,
                               birth.hour, birth.minute, birth.second,
                               birth.timezone_offset)
    jd = julian_day(*civil)
    gmst_deg = gmst(jd)
    return {
        "julian_day": jd,
        "gmst": gmst_deg,
        "lst": lst(gmst_deg, birth.longitude),
        "obliquity": obliquity(jd),
        "ayanamsa": ayanamsa(birth.year, settings.ayanamsa),
    }


def _chart_elements(astro: Dict[str, float], latitude: float) -> Dict[str, Any]:
    asc_tropical = ascendant(astro["lst"], latitude, astro["obliquity"])
    asc_sidereal = normalize_angle(asc_tropical - astro["ayanamsa"])
    mc_sidereal = normalize_angle(midheaven(astro["lst"], astro["obliquity"]) - astro["ayanamsa"])
    return {
        "ascendant": Ascendant.from_longitude(asc_sidereal, asc_tropical),
        "midheaven": mc_sidereal,
        "houses": whole_sign_houses(asc_sidereal),
    }


def _planetary(jd: float, ayanamsa_deg: float,
               houses: Tuple[float, ...]) -> Dict[Planet, PlanetPosition]:
    motions = tropical_positions(jd)
    sidereal = tropical_to_sidereal(
        {planet: m.longitude for planet, m in motions.items()}, ayanamsa_deg)

    positions = {}
    for planet, motion in motions.items():
        lon = sidereal[planet]
        positions[planet] = PlanetPosition(
            planet=planet,
            longitude=lon,
            tropical_longitude=motion.longitude,
            latitude=motion.latitude,
            speed=motion.speed,
            sign=sign_of(lon),
            degree=degree_in_sign(lon),
            house=house_of(lon, houses),
            retrograde=motion.retrograde,
            nakshatra=nakshatra_of(lon),
        )
    return positions


def _lunar(positions: Mapping[Planet, PlanetPosition], jd: float) -> Dict[str, Any]:
    sun = positions[Planet.SUN].longitude
    moon = positions[Planet.MOON].longitude
    return {
        "moon_nakshatra": positions[Planet.MOON].nakshatra,
        "tithi": tithi_of(sun, moon),
        "karana": karana_of(sun, moon),
        "yoga": yoga_of(sun, moon),
        "vara": vara_of(jd),
    }


def _assemble(birth: BirthInput, settings: ChartSettings, astro: Dict[str, float],
              elements: Dict[str, Any], positions: Dict[Planet, PlanetPosition],
              lunar: Dict[str, Any]) -> BirthChart:
    if not cusps_are_closed(elements["houses"]):
        raise ValueError(f"house cusps do not close the circle: {list(elements['houses'])}")
    if set(positions) != set(Planet):
        missing = sorted(p.value for p in set(Planet) - set(positions))
        raise ValueError(f"missing planet positions: {missing}")
    return BirthChart(
        birth=birth,
        planets=MappingProxyType(dict(positions)),
        settings=settings,
        **astro,
        **elements,
        **lunar,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def compute_chart(birth: BirthLike, settings: Optional[ChartSettings] = None) -> ChartResult:
    """
    Run the full pipeline and report the outcome without raising.

    Args:
        birth: BirthInput, or a mapping with the same fields
        settings: ayanamsa preset and aspect parameters (defaults when None)

    Returns:
        ChartResult with either ``chart`` or the tagged ``error`` set
    """
    settings = settings or DEFAULT_SETTINGS

    checked, error = _attempt(Stage.VALIDATE, _validate, birth)
    if error:
        return ChartResult(None, error)

    astro, error = _attempt(Stage.ASTRONOMICAL, _astronomical, checked, settings)
    if error:
        return ChartResult(None, error)

    elements, error = _attempt(Stage.CHART_ELEMENTS, _chart_elements, astro, checked.latitude)
    if error:
        return ChartResult(None, error)

    positions, error = _attempt(Stage.PLANETARY, _planetary,
                                astro["julian_day"], astro["ayanamsa"], elements["houses"])
    if error:
        return ChartResult(None, error)

    lunar, error = _attempt(Stage.LUNAR, _lunar, positions, astro["julian_day"])
    if error:
        return ChartResult(None, error)

    chart, error = _attempt(Stage.ASSEMBLE, _assemble,
                            checked, settings, astro, elements, positions, lunar)
    return ChartResult(chart, error)


def generate_chart(birth: BirthLike, settings: Optional[ChartSettings] = None) -> BirthChart:
    """Generate a birth chart; raises the stage-tagged ChartError on failure."""
    return compute_chart(birth, settings).unwrap()
