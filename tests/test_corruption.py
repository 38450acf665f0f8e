"""
Corruption Sentiment Tests

Tests for:
- Overall index (category weighting, order invariance, empty categories)
- Case tracking against institution trust records
- Sector risk classification
- Dashboard views and the in-memory store
"""

import random
import threading

import pytest

from peoplepulse.corruption.catalog import (
    CorruptionCase,
    CorruptionCatalog,
    CorruptionIndicator,
    IndicatorCategory,
    IndicatorTrend,
    InstitutionTrust,
    InternationalRanking,
    default_albania_catalog,
)
from peoplepulse.corruption.engine import CorruptionSentimentEngine, sector_risk
from peoplepulse.corruption.store import InMemoryCatalogStore
from peoplepulse.errors import PulseInputError


def _engine(catalog=None):
    catalog = catalog or default_albania_catalog()
    return CorruptionSentimentEngine(store=InMemoryCatalogStore(catalog))


def _institution(engine, name):
    return next(i for i in engine.store.institutions() if i.institution == name)


# =============================================================================
# Overall index
# =============================================================================

class TestOverallIndex:
    """Tests for the weighted category index."""

    def test_reference_catalog(self):
        """66/65/76/65 by category, weighted 35/25/25/15."""
        engine = _engine()
        assert engine.calculate_overall_index() == 68
        sentiment = engine.get_sentiment()
        assert sentiment.by_category == {
            "institutional": 66,
            "sectoral": 65,
            "political": 76,
            "judicial": 65,
        }
        assert sentiment.public_mood == "neutral"
        assert sentiment.international_ranking.rank == 104

    def test_order_invariance(self):
        """Reordering indicators never changes the index."""
        base = default_albania_catalog()
        expected = _engine(base).calculate_overall_index()

        shuffler = random.Random(7)
        for _ in range(10):
            catalog = default_albania_catalog()
            shuffler.shuffle(catalog.indicators)
            assert _engine(catalog).calculate_overall_index() == expected

    def test_empty_category_skipped(self):
        """A category with no indicators drops out and the rest renormalize."""
        catalog = CorruptionCatalog(indicators=[
            CorruptionIndicator("a", "A", "A", IndicatorCategory.INSTITUTIONAL, 40),
            CorruptionIndicator("b", "B", "B", IndicatorCategory.JUDICIAL, 90),
        ])
        # (40 * 0.35 + 90 * 0.15) / 0.5 = 55
        assert _engine(catalog).calculate_overall_index() == 55

    def test_empty_catalog(self):
        engine = _engine(CorruptionCatalog())
        assert engine.calculate_overall_index() == 0
        assert engine.get_sentiment().public_mood == "optimistic"

    def test_public_mood_tiers(self):
        catalog = CorruptionCatalog(indicators=[
            CorruptionIndicator("a", "A", "A", IndicatorCategory.POLITICAL, 71),
        ])
        assert _engine(catalog).get_sentiment().public_mood == "pessimistic"

    def test_top_concerns_do_not_mutate_catalog(self):
        engine = _engine()
        before = [i.id for i in engine.store.indicators()]
        concerns = engine.get_sentiment().top_concerns
        assert concerns[0] == "Political Parties"
        assert len(concerns) == 5
        assert [i.id for i in engine.store.indicators()] == before

    def test_catalog_weights_used(self):
        """Weights and ranking travel with the catalog into the engine."""
        ranking = InternationalRanking(rank=1, total=10, source="Test")
        catalog = CorruptionCatalog(
            indicators=[
                CorruptionIndicator("a", "A", "A", IndicatorCategory.INSTITUTIONAL, 100),
                CorruptionIndicator("b", "B", "B", IndicatorCategory.JUDICIAL, 0),
            ],
            category_weights={"institutional": 0.0, "sectoral": 0.0, "political": 0.0, "judicial": 1.0},
            ranking=ranking,
        )
        engine = _engine(catalog)
        assert engine.calculate_overall_index() == 0
        assert engine.ranking == ranking

    def test_explicit_weights_override_catalog(self):
        catalog = CorruptionCatalog(
            indicators=[
                CorruptionIndicator("a", "A", "A", IndicatorCategory.INSTITUTIONAL, 100),
                CorruptionIndicator("b", "B", "B", IndicatorCategory.JUDICIAL, 0),
            ],
            category_weights={"institutional": 0.0, "judicial": 1.0},
        )
        engine = CorruptionSentimentEngine(
            store=InMemoryCatalogStore(catalog),
            category_weights={"institutional": 1.0, "judicial": 0.0},
        )
        assert engine.calculate_overall_index() == 100


# =============================================================================
# Cases
# =============================================================================

class TestAddCase:
    """Tests for case tracking."""

    def test_named_institution_updated(self):
        engine = _engine()
        others_before = {i.institution: i for i in engine.store.institutions() if i.institution != "Parlamenti"}

        stored = engine.add_case(CorruptionCase(title="Tender rigging", institution="Parlamenti"))

        parlamenti = _institution(engine, "Parlamenti")
        assert parlamenti.recent_cases == 13
        assert parlamenti.corruption_perception == 72
        assert parlamenti.trust_level == 27
        others_after = {i.institution: i for i in engine.store.institutions() if i.institution != "Parlamenti"}
        assert others_after == others_before
        assert stored.id.startswith("case-")
        assert any(c.id == stored.id for c in engine.store.cases())

    def test_normalized_match(self):
        engine = _engine()
        engine.add_case(CorruptionCase(title="x", institution="  parlamenti "))
        assert _institution(engine, "Parlamenti").recent_cases == 13

    def test_unknown_institution(self):
        """Case is kept even when no tracked institution matches."""
        engine = _engine()
        before = engine.store.institutions()
        engine.add_case(CorruptionCase(title="x", institution="Ministry of Tourism"))
        assert engine.store.institutions() == before
        assert len(engine.store.cases()) == 4

    def test_caps_and_floors(self):
        catalog = CorruptionCatalog(institutions=[InstitutionTrust("Court", 2, 99)])
        engine = _engine(catalog)
        engine.add_case(CorruptionCase(title="x", institution="Court"))
        court = _institution(engine, "Court")
        assert court.corruption_perception == 100
        assert court.trust_level == 0

    def test_wrong_type(self):
        with pytest.raises(PulseInputError):
            _engine().add_case({"title": "x", "institution": "Parlamenti"})

    def test_concurrent_cases_not_lost(self):
        engine = _engine()

        def worker():
            for _ in range(25):
                engine.add_case(CorruptionCase(title="x", institution="Media"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert _institution(engine, "Media").recent_cases == 5 + 200

    def test_high_profile_cases(self):
        cases = _engine().get_high_profile_cases()
        assert [c.id for c in cases] == ["case-003", "case-001", "case-002"]

    def test_high_profile_threshold_strict(self):
        engine = _engine(CorruptionCatalog())
        engine.add_case(CorruptionCase(title="edge", institution="x", public_interest=70))
        engine.add_case(CorruptionCase(title="hot", institution="x", public_interest=71))
        assert [c.title for c in engine.get_high_profile_cases()] == ["hot"]


# =============================================================================
# Sector risk
# =============================================================================

class TestSectorRisk:
    """Tests for sector risk classification."""

    def test_worsening_sector(self):
        risk = _engine().calculate_sector_risk("Healthcare")
        assert risk.score == 80
        assert risk.risk == "critical"
        assert risk.factors == ["Worsening trend"]

    def test_improving_sector(self):
        risk = _engine().calculate_sector_risk("police")
        assert risk.score == 50
        assert risk.risk == "medium"
        assert risk.factors == ["Improving trend"]

    def test_stable_sector(self):
        risk = _engine().calculate_sector_risk("Education")
        assert (risk.risk, risk.score, risk.factors) == ("high", 60, [])

    def test_lookup_by_id(self):
        assert _engine().calculate_sector_risk("public-procurement").score == 75

    def test_unknown_sector(self):
        risk = _engine().calculate_sector_risk("Space Program")
        assert risk.risk == "medium"
        assert risk.score == 50
        assert risk.factors == ["Unknown sector"]

    def test_case_cluster(self):
        engine = _engine()
        for _ in range(3):
            engine.add_case(CorruptionCase(title="x", institution="Regional Healthcare Authority"))
        risk = engine.calculate_sector_risk("Healthcare")
        assert risk.score == 95
        assert "3 recent cases" in risk.factors

    def test_score_capped(self):
        catalog = CorruptionCatalog(indicators=[
            CorruptionIndicator("customs", "Customs", "Dogana", IndicatorCategory.INSTITUTIONAL, 98,
                                IndicatorTrend.WORSENING),
        ])
        assert _engine(catalog).calculate_sector_risk("Customs").score == 100

    def test_module_helper(self):
        assert sector_risk("Healthcare").risk == "critical"

    def test_wrong_type(self):
        with pytest.raises(PulseInputError):
            _engine().calculate_sector_risk(42)


# =============================================================================
# Dashboard views
# =============================================================================

class TestDashboardViews:
    """Tests for trends and heat map rows."""

    def test_trends(self):
        trends = _engine().get_trends()
        assert set(trends) == {"improving", "stable", "worsening"}
        assert "Healthcare" in trends["worsening"]
        assert "Judiciary System" in trends["improving"]

    def test_heat_map(self):
        rows = _engine().get_heat_map_data()
        assert len(rows) == 8 * 3
        spak = [r for r in rows if r["institution"] == "SPAK"]
        assert {r["indicator"]: r["value"] for r in spak} == {"Trust": 65, "Corruption": 25, "Cases": 90}

    def test_sentiment_to_dict(self):
        payload = _engine().get_sentiment().to_dict()
        assert payload["overall"] == 68
        assert payload["by_institution"][0]["trend"] == "improving"


class TestInMemoryStore:
    """Tests for the catalog store."""

    def test_reads_are_copies(self):
        store = InMemoryCatalogStore()
        store.institutions()[0].trust_level = 0
        assert store.institutions()[0].trust_level == 65

    def test_source_catalog_untouched(self):
        catalog = default_albania_catalog()
        engine = _engine(catalog)
        engine.add_case(CorruptionCase(title="x", institution="SPAK"))
        assert catalog.institutions[0].recent_cases == 45
        assert len(catalog.cases) == 3
