"""
People Pulse Index (PPI)

A 0-100 measure of public confidence in government, built from twelve
indicators in four weighted groups:

- Economic (40%): output gap, unemployment, inflation, GDP growth
- Sentiment (30%): media confidence, social media sentiment, poll approval
- Social (20%): corruption perception, public safety, healthcare access
- Governance (10%): policy effectiveness, transparency

Economic indicators pass through policy step curves before weighting; the
other groups are already on a 0-100 scale and are blended as-is.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..config import get_settings
from ..errors import PulseInputError
from .composite import (
    Band,
    Category,
    CompositeScorer,
    StepCurve,
    TierScale,
    clamp,
    coerce_number,
    linear,
    round_half_up,
)

logger = logging.getLogger("peoplepulse.scoring.ppi")


# =============================================================================
# Labels
# =============================================================================

class PPICategory(str, Enum):
    """PPI tiers, lowest to highest."""
    CRITICAL = "Critical"
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class Trend(str, Enum):
    DECLINING = "declining"
    STABLE = "stable"
    IMPROVING = "improving"


PPI_TIERS = TierScale(
    [
        (80, PPICategory.EXCELLENT),
        (65, PPICategory.GOOD),
        (50, PPICategory.FAIR),
        (35, PPICategory.POOR),
    ],
    default=PPICategory.CRITICAL,
)


# =============================================================================
# Normalization curves
# =============================================================================

# Closest to zero is best; scored on |gap|.
OUTPUT_GAP_CURVE = StepCurve(
    bands=[
        Band(None, 1, 100),
        Band(None, 2, 90),
        Band(None, 3, 75),
        Band(None, 5, 60),
        Band(None, 7, 40),
    ],
    fallback=linear(100, -10),
    transform=abs,
)

# 2-3% is the target band; deflation scores a flat 50.
INFLATION_CURVE = StepCurve(
    bands=[
        Band(2, 3, 100),
        Band(1, 2, 85, include_high=False),
        Band(3, 4, 85, include_low=False),
        Band(4, 5, 70, include_low=False),
        Band(5, 7, 50, include_low=False),
        Band(7, 10, 30, include_low=False),
        Band(0, 1, 70, include_high=False),
    ],
    fallback=lambda x: max(0.0, 100 - x * 5) if x > 10 else 50.0,
)

# 2-4% growth is healthy; above 6% counts as overheating.
GDP_GROWTH_CURVE = StepCurve(
    bands=[
        Band(2, 4, 100),
        Band(1, 2, 80, include_high=False),
        Band(4, 6, 85, include_low=False),
        Band(6, None, 70, include_low=False),
        Band(0, 1, 60, include_high=False),
        Band(-2, 0, 30, include_high=False),
    ],
    fallback=linear(50, 5),
)

UNEMPLOYMENT_CURVE = linear(100, -2)


# =============================================================================
# Factors and results
# =============================================================================

# camelCase names used by the dashboard front-end
_FACTOR_ALIASES = {
    "outputGap": "output_gap",
    "unemploymentRate": "unemployment_rate",
    "inflationRate": "inflation_rate",
    "gdpGrowthRate": "gdp_growth_rate",
    "mediaConfidence": "media_confidence",
    "socialMediaSentiment": "social_media_sentiment",
    "pollApproval": "poll_approval",
    "corruptionIndex": "corruption_index",
    "safetyIndex": "safety_index",
    "healthcareAccess": "healthcare_access",
    "policyEffectiveness": "policy_effectiveness",
    "transparencyScore": "transparency_score",
}


@dataclass
class PPIFactors:
    """
    The twelve PPI indicators.

    Loose expected ranges: output gap and GDP growth -10..10 (%), unemployment
    0..100 (%), inflation 0..20 (%), everything else 0..100 where higher is
    better. None marks a missing reading.
    """
    # Economic
    output_gap: Optional[float] = None
    unemployment_rate: Optional[float] = None
    inflation_rate: Optional[float] = None
    gdp_growth_rate: Optional[float] = None

    # Media & public sentiment
    media_confidence: Optional[float] = None
    social_media_sentiment: Optional[float] = None
    poll_approval: Optional[float] = None

    # Social
    corruption_index: Optional[float] = None
    safety_index: Optional[float] = None
    healthcare_access: Optional[float] = None

    # Governance
    policy_effectiveness: Optional[float] = None
    transparency_score: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PPIFactors":
        """Build from a dict with snake_case or camelCase keys; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise PulseInputError(f"Factors must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _FACTOR_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


@dataclass(frozen=True)
class PPIResult:
    """One PPI calculation. Created fresh per call."""
    index: float
    category: PPICategory
    trend: Trend
    components: Dict[str, Optional[float]]
    confidence: int
    factors: PPIFactors
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "category": self.category.value,
            "trend": self.trend.value,
            "components": dict(self.components),
            "confidence": self.confidence,
            "factors": self.factors.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }


# =============================================================================
# Calculator
# =============================================================================

DEFAULT_WEIGHTS = {
    "economic": 0.40,
    "sentiment": 0.30,
    "social": 0.20,
    "governance": 0.10,
}

PPI_CATEGORIES = (
    Category(
        "economic",
        weights={
            "output_gap": 0.25,
            "unemployment_rate": 0.35,
            "inflation_rate": 0.20,
            "gdp_growth_rate": 0.20,
        },
        curves={
            "output_gap": OUTPUT_GAP_CURVE,
            "unemployment_rate": UNEMPLOYMENT_CURVE,
            "inflation_rate": INFLATION_CURVE,
            "gdp_growth_rate": GDP_GROWTH_CURVE,
        },
    ),
    Category(
        "sentiment",
        weights={
            "media_confidence": 0.35,
            "social_media_sentiment": 0.35,
            "poll_approval": 0.30,
        },
    ),
    Category(
        "social",
        weights={
            "corruption_index": 0.40,
            "safety_index": 0.35,
            "healthcare_access": 0.25,
        },
    ),
    Category(
        "governance",
        weights={
            "policy_effectiveness": 0.50,
            "transparency_score": 0.50,
        },
    ),
)


FactorsLike = Union[PPIFactors, Mapping[str, Any]]


def _as_factors(factors: FactorsLike) -> PPIFactors:
    if isinstance(factors, PPIFactors):
        return factors
    return PPIFactors.from_mapping(factors)


class PPICalculator:
    """
    Computes the People Pulse Index.

    Usage:
        calc = PPICalculator()
        result = calc.calculate(factors, previous_index=61.2)
        print(result.index, result.category, result.trend)
    """

    def __init__(
        self,
        weights: Optional[Mapping[str, float]] = None,
        trend_threshold: Optional[float] = None,
    ):
        merged = {**DEFAULT_WEIGHTS, **(weights or {})}
        self.scorer = CompositeScorer(PPI_CATEGORIES, merged)
        if trend_threshold is None:
            trend_threshold = get_settings().trend_threshold
        self.trend_threshold = trend_threshold

    @property
    def weights(self) -> Dict[str, float]:
        return self.scorer.category_weights

    def update_weights(self, **weights: float) -> None:
        """Replace some category weights (economic, sentiment, social, governance)."""
        self.scorer = self.scorer.with_weights(**weights)
        logger.info(f"PPI weights updated: {self.weights}")

    def calculate(self, factors: FactorsLike, previous_index: Optional[float] = None) -> PPIResult:
        factors = _as_factors(factors)
        breakdown = self.scorer.score(factors.to_dict())

        components = {
            name: None if score is None else round_half_up(score, 1)
            for name, score in breakdown.components.items()
        }

        return PPIResult(
            index=round_half_up(breakdown.index, 1),
            category=self.categorize(breakdown.index),
            trend=self.determine_trend(breakdown.index, previous_index),
            components=components,
            confidence=breakdown.confidence,
            factors=factors,
        )

    # -------------------------------------------------------------------------
    # Individual steps, exposed for callers that only need one of them
    # -------------------------------------------------------------------------

    @staticmethod
    def categorize(index: float) -> PPICategory:
        return PPI_TIERS.classify(index)

    def determine_trend(self, current: float, previous: Optional[float] = None) -> Trend:
        previous = coerce_number("previous_index", previous)
        if previous is None:
            return Trend.STABLE
        change = current - previous
        if change > self.trend_threshold:
            return Trend.IMPROVING
        if change < -self.trend_threshold:
            return Trend.DECLINING
        return Trend.STABLE

    def calculate_confidence(self, factors: FactorsLike) -> int:
        return self.scorer.score(_as_factors(factors).to_dict()).confidence

    def normalized_factors(self, factors: FactorsLike) -> Dict[str, Optional[float]]:
        """Per-factor scores after the normalization curves."""
        return self.scorer.normalize(_as_factors(factors).to_dict())

    # -------------------------------------------------------------------------
    # Mock history
    # -------------------------------------------------------------------------

    def generate_historical(
        self,
        start: datetime,
        end: datetime,
        rng: Optional[np.random.Generator] = None,
    ) -> List[PPIResult]:
        """
        Weekly mock PPI history between two dates.

        A bounded random walk starting at 65; stands in for a stored series
        until one exists.
        """
        rng = rng if rng is not None else np.random.default_rng(get_settings().simulation_seed)
        days = (end - start).days
        results: List[PPIResult] = []

        base = 65.0
        for offset in range(0, days + 1, 7):
            base += (rng.random() - 0.5) * 5
            base = clamp(base, 30, 85)

            components = {
                name: base + (rng.random() - 0.5) * 10
                for name in DEFAULT_WEIGHTS
            }
            results.append(PPIResult(
                index=round_half_up(base, 1),
                category=self.categorize(base),
                trend=Trend.STABLE,
                components=components,
                confidence=int(round_half_up(85 + rng.random() * 10)),
                factors=_mock_factors(base, rng),
                timestamp=start + timedelta(days=offset),
            ))

        logger.debug(f"Generated {len(results)} historical PPI points")
        return results


def _mock_factors(base: float, rng: np.random.Generator) -> PPIFactors:
    def variance() -> float:
        return (rng.random() - 0.5) * 10

    return PPIFactors(
        output_gap=-2 + variance() / 5,
        unemployment_rate=max(2.0, 10 - base / 10 + variance()),
        inflation_rate=2.5 + variance() / 5,
        gdp_growth_rate=base / 20 + variance() / 5,
        media_confidence=base + variance(),
        social_media_sentiment=base + variance(),
        poll_approval=base + variance(),
        corruption_index=base + variance(),
        safety_index=base + variance(),
        healthcare_access=base + variance(),
        policy_effectiveness=base + variance(),
        transparency_score=base + variance(),
    )


def history_frame(results: Sequence[PPIResult]) -> pd.DataFrame:
    """Flatten a PPI series into a timestamp-indexed DataFrame for charting."""
    rows = []
    for r in results:
        row = {
            "timestamp": r.timestamp,
            "index": r.index,
            "category": r.category.value,
            "trend": r.trend.value,
            "confidence": r.confidence,
        }
        row.update(r.components)
        rows.append(row)

    columns = ["timestamp", "index", "category", "trend", "confidence", *DEFAULT_WEIGHTS]
    frame = pd.DataFrame(rows, columns=columns)
    return frame.set_index("timestamp")


_default_calculator: Optional[PPICalculator] = None


def compute_ppi(factors: FactorsLike, previous_index: Optional[float] = None) -> PPIResult:
    """Compute the PPI with default weights."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = PPICalculator()
    return _default_calculator.calculate(factors, previous_index)
