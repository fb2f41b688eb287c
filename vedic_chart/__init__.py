"""
Vedic Chart
===========
Sidereal (Vedic) birth chart calculation core.

Quick start:
    from vedic_chart import generate_chart

    chart = generate_chart({
        "year": 1990, "month": 5, "day": 15,
        "hour": 14, "minute": 30,
        "timezone_offset": 5.5,
        "latitude": 28.6139,
        "longitude": 77.2090,
    })
    chart.to_dict()

``compute_chart`` runs the same pipeline but returns a ChartResult
instead of raising.
"""

from .config import ChartSettings, load_settings
from .errors import (
    AstronomicalError, CalculationError, ChartError, ErrorKind,
    PlanetaryError, Stage, ValidationError,
)
from .models import Aspect, BirthChart, BirthInput, PlanetPosition
from .tools.chart import ChartResult, compute_chart, generate_chart

__version__ = "1.0.0"
__all__ = [
    "generate_chart", "compute_chart", "ChartResult",
    "BirthInput", "BirthChart", "PlanetPosition", "Aspect",
    "ChartSettings", "load_settings",
    "ChartError", "ValidationError", "AstronomicalError",
    "CalculationError", "PlanetaryError", "ErrorKind", "Stage",
]
