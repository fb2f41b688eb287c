"""
errors.py
=========
Error taxonomy for the chart pipeline.

One error kind per pipeline stage family. ``ChartError.kind`` is the tag to
dispatch on; the four public classes exist so callers can also write
``except ValidationError``. Every class sits directly under ``ChartError``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    ASTRONOMICAL = "astronomical"
    CALCULATION = "calculation"
    PLANETARY = "planetary"


class Stage(str, Enum):
    """Checkpoints of the chart pipeline, in execution order."""
    VALIDATE = "validate"
    ASTRONOMICAL = "astronomical"
    CHART_ELEMENTS = "chart_elements"
    PLANETARY = "planetary"
    LUNAR = "lunar"
    ASSEMBLE = "assemble"

    @property
    def error_kind(self) -> ErrorKind:
        return _STAGE_KINDS[self]


_STAGE_KINDS = {
    Stage.VALIDATE:       ErrorKind.VALIDATION,
    Stage.ASTRONOMICAL:   ErrorKind.ASTRONOMICAL,
    Stage.CHART_ELEMENTS: ErrorKind.CALCULATION,
    Stage.PLANETARY:      ErrorKind.PLANETARY,
    Stage.LUNAR:          ErrorKind.CALCULATION,
    Stage.ASSEMBLE:       ErrorKind.CALCULATION,
}


class ChartError(Exception):
    """Base for every failure raised by the chart core."""

    kind: ErrorKind = ErrorKind.CALCULATION

    def __init__(self, message: str, stage: Optional[Stage] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage is None:
            return self.message
        return f"[{self.stage.value}] {self.message}"


class ValidationError(ChartError):
    """
    Malformed or out-of-range input.

    ``details`` may be a plain message, a single error dict or a list of
    ``{"loc", "msg", "type"}`` dicts (pydantic's ``errors()`` shape).
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, details: Union[str, Dict[str, Any], List[Dict[str, Any]]],
                 stage: Optional[Stage] = None):
        if isinstance(details, str):
            self._details = [{"loc": [], "msg": details, "type": "value_error"}]
        elif isinstance(details, dict):
            self._details = [details]
        else:
            self._details = list(details)
        message = self._details[0]["msg"] if self._details else "validation_error"
        super().__init__(message, stage)

    def errors(self) -> List[Dict[str, Any]]:
        return list(self._details)


class AstronomicalError(ChartError):
    """Julian Day / sidereal time failure, e.g. a date outside 1582–2100."""
    kind = ErrorKind.ASTRONOMICAL


class CalculationError(ChartError):
    """Ascendant, house, lunar-day or assembly failure."""
    kind = ErrorKind.CALCULATION


class PlanetaryError(ChartError):
    """Planetary or sidereal position failure."""
    kind = ErrorKind.PLANETARY


ERROR_TYPES = {
    ErrorKind.VALIDATION:   ValidationError,
    ErrorKind.ASTRONOMICAL: AstronomicalError,
    ErrorKind.CALCULATION:  CalculationError,
    ErrorKind.PLANETARY:    PlanetaryError,
}


def error_for_stage(stage: Stage, message: str) -> ChartError:
    """Build the tagged error a failing ``stage`` reports."""
    return ERROR_TYPES[stage.error_kind](message, stage=stage)
