"""
config.py
=========
Chart settings: ayanamsa preset and the aspect lookup parameters.

Settings come from, in increasing priority:
  1. the defaults below
  2. an optional YAML file (``path`` argument or VEDIC_CHART_CONFIG)
  3. env overrides VEDIC_CHART_AYANAMSA and VEDIC_CHART_ASPECT_ORB

Example YAML:

    ayanamsa: raman
    aspect_orb: 6
    aspect_angles: [60, 90, 120, 180]
"""

import math
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

import yaml

from .core.astronomy import AYANAMSA
from .errors import ValidationError

CONFIG_ENV      = "VEDIC_CHART_CONFIG"
AYANAMSA_ENV    = "VEDIC_CHART_AYANAMSA"
ASPECT_ORB_ENV  = "VEDIC_CHART_ASPECT_ORB"


@dataclass(frozen=True)
class ChartSettings:
    ayanamsa:      str = "lahiri"
    aspect_angles: Tuple[float, ...] = (60.0, 90.0, 120.0, 180.0)
    aspect_orb:    float = 5.0

    def __post_init__(self):
        if isinstance(self.ayanamsa, str):
            object.__setattr__(self, "ayanamsa", self.ayanamsa.strip().lower())
        if self.ayanamsa not in AYANAMSA:
            raise ValidationError({
                "loc": ["ayanamsa"],
                "msg": f"ayanamsa must be one of {sorted(AYANAMSA)}, got {self.ayanamsa!r}",
                "type": "value_error",
            })
        if not (math.isfinite(self.aspect_orb) and 0 <= self.aspect_orb < 90):
            raise ValidationError({
                "loc": ["aspect_orb"],
                "msg": f"aspect_orb must be in [0, 90), got {self.aspect_orb}",
                "type": "value_error",
            })
        if any(not 0 <= angle <= 180 for angle in self.aspect_angles):
            raise ValidationError({
                "loc": ["aspect_angles"],
                "msg": f"aspect angles must be in [0, 180], got {list(self.aspect_angles)}",
                "type": "value_error",
            })


DEFAULT_SETTINGS = ChartSettings()


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValidationError({
            "loc": ["config"],
            "msg": f"{path} must contain a mapping",
            "type": "value_error",
        })
    return data


def _as_float(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError({
            "loc": [key],
            "msg": f"{key} must be a number, got {value!r}",
            "type": "type_error.float",
        }) from exc


def load_settings(path: Optional[str] = None) -> ChartSettings:
    """Build ChartSettings from defaults, optional YAML and environment."""
    data: Dict[str, Any] = {}
    path = path or os.getenv(CONFIG_ENV)
    if path:
        data.update(_read_yaml(path))

    if os.getenv(AYANAMSA_ENV):
        data["ayanamsa"] = os.environ[AYANAMSA_ENV]
    if os.getenv(ASPECT_ORB_ENV):
        data["aspect_orb"] = os.environ[ASPECT_ORB_ENV]

    overrides: Dict[str, Any] = {}
    if "ayanamsa" in data:
        overrides["ayanamsa"] = str(data["ayanamsa"]).strip().lower()
    if "aspect_orb" in data:
        overrides["aspect_orb"] = _as_float("aspect_orb", data["aspect_orb"])
    if "aspect_angles" in data:
        angles = data["aspect_angles"]
        if not isinstance(angles, (list, tuple)):
            angles = [angles]
        overrides["aspect_angles"] = tuple(_as_float("aspect_angles", a) for a in angles)

    return replace(DEFAULT_SETTINGS, **overrides)
