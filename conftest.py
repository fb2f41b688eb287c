# conftest.py
"""
Pytest configuration for the vedic_chart suite.

- Registers Hypothesis profiles for local dev and CI.
- Clears VEDIC_CHART_* variables so a developer's shell cannot change settings under test.
"""

import os

import pytest
from hypothesis import HealthCheck, settings

from vedic_chart.config import ASPECT_ORB_ENV, AYANAMSA_ENV, CONFIG_ENV


# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=60,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=200,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Global fixtures
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    for name in (CONFIG_ENV, AYANAMSA_ENV, ASPECT_ORB_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def delhi_birth():
    """1990-05-15 14:30 UTC at Delhi."""
    return {
        "year": 1990, "month": 5, "day": 15,
        "hour": 14, "minute": 30, "second": 0,
        "latitude": 28.6139, "longitude": 77.2090,
    }
