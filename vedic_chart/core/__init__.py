# Vedic chart - Core modules
from .angles import normalize_angle, to_radians, to_degrees, to_dms, from_dms
from .astronomy import julian_day, julian_centuries, ayanamsa, gmst, lst, obliquity, equation_of_time
from .ephemeris import Planet, tropical_positions, tropical_to_sidereal
from .houses import ascendant, whole_sign_houses, house_of
from .nakshatra import nakshatra_of, nakshatra_by_number, nakshatra_by_name, pada_strength
from .panchang import tithi_of, karana_of, yoga_of

__all__ = [
    "normalize_angle", "to_radians", "to_degrees", "to_dms", "from_dms",
    "julian_day", "julian_centuries", "ayanamsa", "gmst", "lst", "obliquity", "equation_of_time",
    "Planet", "tropical_positions", "tropical_to_sidereal",
    "ascendant", "whole_sign_houses", "house_of",
    "nakshatra_of", "nakshatra_by_number", "nakshatra_by_name", "pada_strength",
    "tithi_of", "karana_of", "yoga_of",
]
