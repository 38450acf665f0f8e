"""
Corruption Sentiment Index

Tracks public perception of corruption across institutions and sectors:

- Overall index: category-averaged indicator severity, weighted
  institutional 35% / sectoral 25% / political 25% / judicial 15%
- Case tracking that nudges institution trust
- Sector risk classification
- Trend, heat-map and high-profile-case views for the dashboard

All scores are 0-100 where higher means more perceived corruption.
"""

from __future__ import annotations

import logging
import math
import uuid
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from ..config import get_settings
from ..errors import PulseInputError
from ..scoring.composite import TierScale, WeightedBlend, clamp, round_half_up
from .catalog import (
    CorruptionCase,
    IndicatorCategory,
    IndicatorTrend,
    InstitutionTrust,
    InternationalRanking,
    default_albania_catalog,
    normalize_key,
)
from .store import CatalogStore, InMemoryCatalogStore

logger = logging.getLogger("peoplepulse.corruption.engine")

# Per-case adjustments to the named institution
CASE_PERCEPTION_STEP = 2
CASE_TRUST_STEP = 3

# Sector risk adjustments
WORSENING_PENALTY = 10
IMPROVING_CREDIT = 5
CASE_CLUSTER_PENALTY = 15
CASE_CLUSTER_MIN = 3

SECTOR_RISK_TIERS = TierScale(
    [(80, "critical"), (60, "high"), (40, "medium")],
    default="low",
)

PUBLIC_MOOD_TIERS = TierScale(
    [(70, "pessimistic"), (50, "neutral")],
    default="optimistic",
    strict=True,
)


@dataclass(frozen=True)
class SectorRisk:
    risk: str
    score: float
    factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"risk": self.risk, "score": self.score, "factors": list(self.factors)}


@dataclass(frozen=True)
class CorruptionSentiment:
    """Dashboard snapshot of the corruption catalog."""
    overall: int
    by_category: Dict[str, int]
    by_institution: List[InstitutionTrust]
    top_concerns: List[str]
    public_mood: str
    international_ranking: Optional[InternationalRanking] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        ranking = self.international_ranking
        return {
            "overall": self.overall,
            "by_category": dict(self.by_category),
            "by_institution": [
                {
                    "institution": i.institution,
                    "trust_level": i.trust_level,
                    "corruption_perception": i.corruption_perception,
                    "recent_cases": i.recent_cases,
                    "trend": i.trend.value,
                }
                for i in self.by_institution
            ],
            "top_concerns": list(self.top_concerns),
            "public_mood": self.public_mood,
            "international_ranking": None if ranking is None else {
                "rank": ranking.rank,
                "total": ranking.total,
                "source": ranking.source,
            },
        }


def _apply_case(institution: InstitutionTrust) -> None:
    institution.recent_cases += 1
    institution.corruption_perception = min(100, institution.corruption_perception + CASE_PERCEPTION_STEP)
    institution.trust_level = max(0, institution.trust_level - CASE_TRUST_STEP)


class CorruptionSentimentEngine:
    """
    Computes corruption sentiment over a catalog store.

    Usage:
        engine = CorruptionSentimentEngine()
        engine.add_case(CorruptionCase(title="...", institution="Parlamenti"))
        print(engine.calculate_overall_index())
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        category_weights: Optional[Mapping[str, float]] = None,
        ranking: Optional[InternationalRanking] = None,
    ):
        if store is None:
            store = InMemoryCatalogStore(default_albania_catalog())
        self.store = store
        self.ranking = ranking or store.ranking()
        self._category_blend = WeightedBlend(category_weights or store.category_weights())

    # -------------------------------------------------------------------------
    # Index
    # -------------------------------------------------------------------------

    def category_severity(self) -> Dict[str, Optional[float]]:
        """Mean severity per category; None for categories with no indicators."""
        grouped: Dict[str, List[float]] = defaultdict(list)
        for indicator in self.store.indicators():
            grouped[IndicatorCategory(indicator.category).value].append(indicator.severity)

        return {
            category.value: (
                math.fsum(grouped[category.value]) / len(grouped[category.value])
                if grouped[category.value] else None
            )
            for category in IndicatorCategory
        }

    def calculate_overall_index(self) -> int:
        score = self._category_blend.combine(self.category_severity())
        return 0 if score is None else int(round_half_up(score))

    def get_sentiment(self) -> CorruptionSentiment:
        overall = self.calculate_overall_index()
        by_category = {
            name: 0 if value is None else int(round_half_up(value))
            for name, value in self.category_severity().items()
        }

        ranked = sorted(self.store.indicators(), key=lambda i: i.severity, reverse=True)
        top_concerns = [i.name_en for i in ranked[:5]]

        return CorruptionSentiment(
            overall=overall,
            by_category=by_category,
            by_institution=self.store.institutions(),
            top_concerns=top_concerns,
            public_mood=PUBLIC_MOOD_TIERS.classify(overall),
            international_ranking=self.ranking,
        )

    # -------------------------------------------------------------------------
    # Cases
    # -------------------------------------------------------------------------

    def add_case(self, case: CorruptionCase) -> CorruptionCase:
        """
        Record a case and update the institution it names.

        A matched institution gains one recent case, +2 corruption perception
        (capped at 100) and -3 trust (floored at 0).
        """
        if not isinstance(case, CorruptionCase):
            raise PulseInputError(f"Expected CorruptionCase, got {type(case).__name__}")

        stored = case if case.id else replace(case, id=f"case-{uuid.uuid4().hex[:12]}")
        updated = self.store.record_case(stored, _apply_case)
        if updated is not None:
            logger.info(
                f"Case {stored.id} recorded against {updated.institution}: "
                f"trust={updated.trust_level}, perception={updated.corruption_perception}"
            )
        return stored

    def get_high_profile_cases(self, limit: int = 5) -> List[CorruptionCase]:
        threshold = get_settings().high_profile_interest
        cases = [c for c in self.store.cases() if c.public_interest > threshold]
        cases.sort(key=lambda c: c.public_interest, reverse=True)
        return cases[:limit]

    # -------------------------------------------------------------------------
    # Sector risk
    # -------------------------------------------------------------------------

    def calculate_sector_risk(self, sector: str) -> SectorRisk:
        if not isinstance(sector, str):
            raise PulseInputError(f"Sector must be a string, got {type(sector).__name__}")

        key = normalize_key(sector)
        indicator = next(
            (i for i in self.store.indicators() if key in (normalize_key(i.name_en), normalize_key(i.id))),
            None,
        )
        if indicator is None:
            logger.warning(f"Unknown sector '{sector}', returning default medium risk")
            return SectorRisk(risk="medium", score=50, factors=["Unknown sector"])

        factors: List[str] = []
        score = indicator.severity

        if indicator.trend == IndicatorTrend.WORSENING:
            score += WORSENING_PENALTY
            factors.append("Worsening trend")
        elif indicator.trend == IndicatorTrend.IMPROVING:
            score -= IMPROVING_CREDIT
            factors.append("Improving trend")

        # substring match; case institutions are free text
        related = [c for c in self.store.cases() if key in c.institution.casefold()]
        if len(related) >= CASE_CLUSTER_MIN:
            score += CASE_CLUSTER_PENALTY
            factors.append(f"{len(related)} recent cases")

        score = clamp(score, 0, 100)
        return SectorRisk(risk=SECTOR_RISK_TIERS.classify(score), score=score, factors=factors)

    # -------------------------------------------------------------------------
    # Dashboard views
    # -------------------------------------------------------------------------

    def get_trends(self) -> Dict[str, List[str]]:
        trends: Dict[str, List[str]] = {t.value: [] for t in IndicatorTrend}
        for indicator in self.store.indicators():
            trends[IndicatorTrend(indicator.trend).value].append(indicator.name_en)
        return trends

    def get_heat_map_data(self) -> List[Dict[str, Any]]:
        rows: List[Dict[str, Any]] = []
        for inst in self.store.institutions():
            rows.append({"institution": inst.institution, "indicator": "Trust", "value": inst.trust_level})
            rows.append({"institution": inst.institution, "indicator": "Corruption", "value": inst.corruption_perception})
            rows.append({"institution": inst.institution, "indicator": "Cases", "value": min(100, inst.recent_cases * 2)})
        return rows


# =============================================================================
# Module-level helpers
# =============================================================================

_default_engine: Optional[CorruptionSentimentEngine] = None


def get_default_engine() -> CorruptionSentimentEngine:
    """Process-wide engine over the Albanian reference catalog."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CorruptionSentimentEngine()
    return _default_engine


def compute_corruption_sentiment(engine: Optional[CorruptionSentimentEngine] = None) -> CorruptionSentiment:
    return (engine or get_default_engine()).get_sentiment()


def add_corruption_case(case: CorruptionCase, engine: Optional[CorruptionSentimentEngine] = None) -> CorruptionCase:
    return (engine or get_default_engine()).add_case(case)


def sector_risk(sector: str, engine: Optional[CorruptionSentimentEngine] = None) -> SectorRisk:
    return (engine or get_default_engine()).calculate_sector_risk(sector)
