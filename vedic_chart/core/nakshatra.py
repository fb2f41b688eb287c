"""
nakshatra.py
============
The 27 lunar mansions (nakshatras) and their quarters (padas).

Each nakshatra spans 360/27 = 13°20' of sidereal longitude and is split
into four padas of 3°20'. Segment 1 (Ashwini) starts at 0° sidereal and
segment 27 (Revati) closes the circle at 360°.

The reference table is validated once at import; an inconsistent table
is a data bug and fails loudly before any chart is computed.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import ValidationError
from .angles import normalize_angle
from .ephemeris import Planet

NAKSHATRA_COUNT = 27
NAKSHATRA_SPAN  = 360.0 / NAKSHATRA_COUNT     # 13°20'
PADA_SPAN       = NAKSHATRA_SPAN / 4.0        # 3°20'


@dataclass(frozen=True)
class NakshatraInfo:
    number:       int
    name:         str
    lord:         Planet
    deity:        str
    symbol:       str
    nature:       str
    quality:      str
    favorable:    Tuple[str, ...]
    unfavorable:  Tuple[str, ...]
    start_degree: float
    end_degree:   float


@dataclass(frozen=True)
class Nakshatra:
    number:               int
    name:                 str
    pada:                 int
    lord:                 Planet
    degrees_in_nakshatra: float
    degrees_in_pada:      float
    remaining_degrees:    float

    @property
    def info(self) -> NakshatraInfo:
        return NAKSHATRA_TABLE[self.number - 1]

    @property
    def pada_strength(self) -> float:
        return pada_strength(min(self.degrees_in_pada, PADA_SPAN))


# ---------------------------------------------------------------------------
# Reference table
# ---------------------------------------------------------------------------

# name, lord, deity, symbol, nature, quality, favorable, unfavorable
_RAW = [
    ("Ashwini", Planet.KETU, "Ashwini Kumaras", "Horse Head", "Divine", "Rajas",
     ("Travel", "Medicine", "Healing"), ("Marriage", "Investment")),
    ("Bharani", Planet.VENUS, "Yama", "Yoni", "Human", "Tamas",
     ("Courage", "Strength", "Endurance"), ("New beginnings", "Marriage")),
    ("Krittika", Planet.SUN, "Agni", "Knife", "Divine", "Rajas",
     ("Fire rituals", "Purification", "Leadership"), ("Delay", "Procrastination")),
    ("Rohini", Planet.MOON, "Brahma", "Cart", "Human", "Sattva",
     ("Growth", "Prosperity", "Arts"), ("Arguments", "Conflicts")),
    ("Mrigashira", Planet.MARS, "Soma", "Deer Head", "Divine", "Tamas",
     ("Searching", "Research", "Travel"), ("Stability", "Commitment")),
    ("Ardra", Planet.RAHU, "Rudra", "Teardrop", "Human", "Rajas",
     ("Transformation", "Destruction of old"), ("Stability", "Patience")),
    ("Punarvasu", Planet.JUPITER, "Aditi", "Bow", "Divine", "Sattva",
     ("Renewal", "Second chances", "Learning"), ("Impulsiveness",)),
    ("Pushya", Planet.SATURN, "Brihaspati", "Flower", "Divine", "Sattva",
     ("Nourishment", "Care", "Spirituality"), ("Aggression", "Violence")),
    ("Ashlesha", Planet.MERCURY, "Nagakanya", "Serpent", "Divine", "Tamas",
     ("Secrets", "Mysteries", "Healing"), ("Trust", "Openness")),
    ("Magha", Planet.KETU, "Pitris", "Throne", "Human", "Rajas",
     ("Authority", "Ancestors", "Royalty"), ("Subordination",)),
    ("Purva Phalguni", Planet.VENUS, "Bhaga", "Bed", "Human", "Rajas",
     ("Pleasure", "Marriage", "Arts"), ("Conflict", "Arguments")),
    ("Uttara Phalguni", Planet.SUN, "Aryaman", "Bed", "Human", "Sattva",
     ("Friendship", "Patronage", "Service"), ("Selfishness",)),
    ("Hasta", Planet.MOON, "Savitar", "Hand", "Human", "Rajas",
     ("Skills", "Crafts", "Healing"), ("Overconfidence",)),
    ("Chitra", Planet.MARS, "Vishwakarma", "Pearl", "Human", "Rajas",
     ("Beauty", "Artistry", "Architecture"), ("Rudeness",)),
    ("Swati", Planet.RAHU, "Vayu", "Coral", "Divine", "Sattva",
     ("Independence", "Freedom", "Balance"), ("Dependence", "Restriction")),
    ("Vishakha", Planet.JUPITER, "Indra", "Arch", "Human", "Rajas",
     ("Achievement", "Goals", "Leadership"), ("Manipulation",)),
    ("Anuradha", Planet.SATURN, "Mitra", "Lotus", "Human", "Sattva",
     ("Friendship", "Devotion", "Success"), ("Ego", "Pride")),
    ("Jyeshtha", Planet.MERCURY, "Indra", "Umbrella", "Divine", "Rajas",
     ("Eldership", "Wisdom", "Protection"), ("Youthful activities",)),
    ("Mula", Planet.KETU, "Nirriti", "Bunch of roots", "Divine", "Tamas",
     ("Research", "Investigation", "Transformation"), ("Superficiality",)),
    ("Purva Ashadha", Planet.VENUS, "Apah", "Elephant tusk", "Human", "Sattva",
     ("Victory", "Invincibility", "Success"), ("Defeat", "Surrender")),
    ("Uttara Ashadha", Planet.SUN, "Vishwadevas", "Elephant tusk", "Human", "Sattva",
     ("Truth", "Honesty", "Leadership"), ("Deception", "Dishonesty")),
    ("Shravana", Planet.MOON, "Vishnu", "Ear", "Divine", "Sattva",
     ("Learning", "Teaching", "Spirituality"), ("Ignorance",)),
    ("Dhanishtha", Planet.MARS, "Vasus", "Drum", "Divine", "Rajas",
     ("Music", "Arts", "Prosperity"), ("Poverty", "Debt")),
    ("Shatabhisha", Planet.RAHU, "Varuna", "Empty circle", "Human", "Rajas",
     ("Healing", "Mysticism", "Secrets"), ("Revealing secrets",)),
    ("Purva Bhadrapada", Planet.JUPITER, "Aja Ekapada", "Sword", "Human", "Tamas",
     ("Transformation", "Spiritual growth"), ("Materialism",)),
    ("Uttara Bhadrapada", Planet.SATURN, "Ahir Budhnya", "Twin", "Human", "Sattva",
     ("Wisdom", "Patience", "Stability"), ("Impatience", "Instability")),
    ("Revati", Planet.MERCURY, "Pushan", "Fish", "Divine", "Sattva",
     ("Wealth", "Prosperity", "Journey"), ("Poverty", "Stagnation")),
]

NAKSHATRA_TABLE: Tuple[NakshatraInfo, ...] = tuple(
    NakshatraInfo(
        number=i + 1,
        name=name, lord=lord, deity=deity, symbol=symbol,
        nature=nature, quality=quality,
        favorable=favorable, unfavorable=unfavorable,
        start_degree=i * 360.0 / NAKSHATRA_COUNT,
        end_degree=(i + 1) * 360.0 / NAKSHATRA_COUNT,
    )
    for i, (name, lord, deity, symbol, nature, quality, favorable, unfavorable)
    in enumerate(_RAW)
)

NAKSHATRAS = [n.name for n in NAKSHATRA_TABLE]


def check_nakshatra_table(table: Sequence[NakshatraInfo]) -> List[str]:
    """Return every contiguity/closure problem in ``table`` (empty when sound)."""
    problems = []
    if len(table) != NAKSHATRA_COUNT:
        problems.append(f"expected {NAKSHATRA_COUNT} entries, found {len(table)}")
        return problems
    if table[0].start_degree != 0.0:
        problems.append(f"{table[0].name} must start at 0°, starts at {table[0].start_degree}")
    for i, entry in enumerate(table):
        if entry.number != i + 1:
            problems.append(f"entry {i} numbered {entry.number}")
        if not entry.start_degree < entry.end_degree:
            problems.append(f"{entry.name} has an empty or inverted span")
        if i < NAKSHATRA_COUNT - 1 and entry.end_degree != table[i + 1].start_degree:
            problems.append(
                f"gap between {entry.name} ({entry.end_degree}) "
                f"and {table[i + 1].name} ({table[i + 1].start_degree})")
    if table[-1].end_degree != table[0].start_degree + 360.0:
        problems.append(f"{table[-1].name} does not close the circle at 360°")
    return problems


_problems = check_nakshatra_table(NAKSHATRA_TABLE)
if _problems:
    raise RuntimeError("inconsistent nakshatra table: " + "; ".join(_problems))


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def nakshatra_of(longitude: float) -> Nakshatra:
    """Nakshatra and pada for a sidereal longitude."""
    lon = normalize_angle(longitude)
    index = min(int(lon / NAKSHATRA_SPAN), NAKSHATRA_COUNT - 1)
    into = max(lon - NAKSHATRA_TABLE[index].start_degree, 0.0)
    pada = min(int(into / PADA_SPAN), 3) + 1
    entry = NAKSHATRA_TABLE[index]
    return Nakshatra(
        number=entry.number,
        name=entry.name,
        pada=pada,
        lord=entry.lord,
        degrees_in_nakshatra=into,
        degrees_in_pada=into - (pada - 1) * PADA_SPAN,
        remaining_degrees=NAKSHATRA_SPAN - into,
    )


def nakshatra_by_number(number: int) -> NakshatraInfo:
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValidationError({
            "loc": ["number"],
            "msg": f"nakshatra number must be an integer, got {number!r}",
            "type": "type_error.integer",
        })
    if not 1 <= number <= NAKSHATRA_COUNT:
        raise ValidationError({
            "loc": ["number"],
            "msg": f"nakshatra number must be between 1 and {NAKSHATRA_COUNT}, got {number}",
            "type": "value_error",
        })
    return NAKSHATRA_TABLE[number - 1]


def nakshatra_by_name(name: str) -> NakshatraInfo:
    key = name.strip().lower()
    for entry in NAKSHATRA_TABLE:
        if entry.name.lower() == key:
            return entry
    raise ValidationError({
        "loc": ["name"],
        "msg": f"nakshatra {name!r} not found",
        "type": "value_error",
    })


def nakshatras_ruled_by(planet: Planet) -> List[NakshatraInfo]:
    if not isinstance(planet, Planet):
        try:
            planet = Planet(str(planet).strip().capitalize())
        except ValueError as exc:
            raise ValidationError({
                "loc": ["planet"],
                "msg": f"unknown planet {planet!r}",
                "type": "value_error",
            }) from exc
    return [entry for entry in NAKSHATRA_TABLE if entry.lord is planet]


def favorable_activities(longitude: float) -> Tuple[str, ...]:
    return nakshatra_of(longitude).info.favorable


def unfavorable_activities(longitude: float) -> Tuple[str, ...]:
    return nakshatra_of(longitude).info.unfavorable


def is_activity_favorable(longitude: float, activity: str) -> bool:
    needle = activity.lower()
    return any(needle in act.lower() for act in favorable_activities(longitude))


def pada_strength(degrees_in_pada: float) -> float:
    """
    Strength of a position within its pada: 1.0 at the start of the pada,
    falling linearly to 0.5 at its end.
    """
    if not 0.0 <= degrees_in_pada <= PADA_SPAN:
        raise ValidationError({
            "loc": ["degrees_in_pada"],
            "msg": f"degrees in pada must be between 0 and {PADA_SPAN:.4f}, got {degrees_in_pada}",
            "type": "value_error",
        })
    return max(0.0, 1.0 - (degrees_in_pada / PADA_SPAN) * 0.5)
