"""
Shared fixtures for the People Pulse tests.
"""

import numpy as np
import pytest

from peoplepulse.config import get_settings


@pytest.fixture
def rng():
    """Seeded generator so simulations are reproducible."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def reference_factors():
    """A complete PPI reading in the dashboard's camelCase shape."""
    return {
        "outputGap": -1.8,
        "unemploymentRate": 11.2,
        "inflationRate": 2.4,
        "gdpGrowthRate": 3.2,
        "mediaConfidence": 62,
        "socialMediaSentiment": 58,
        "pollApproval": 55,
        "corruptionIndex": 38,
        "safetyIndex": 72,
        "healthcareAccess": 65,
        "policyEffectiveness": 58,
        "transparencyScore": 52,
    }


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
