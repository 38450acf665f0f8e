"""
Corruption sentiment: indicator catalog, catalog stores and the sentiment engine.
"""

from .catalog import (
    CaseStatus,
    CorruptionCase,
    CorruptionCatalog,
    CorruptionIndicator,
    IndicatorCategory,
    IndicatorLevel,
    IndicatorTrend,
    InstitutionTrend,
    InstitutionTrust,
    InternationalRanking,
    default_albania_catalog,
    normalize_key,
)

from .store import CatalogStore, InMemoryCatalogStore

from .engine import (
    CorruptionSentiment,
    CorruptionSentimentEngine,
    SectorRisk,
    add_corruption_case,
    compute_corruption_sentiment,
    get_default_engine,
    sector_risk,
)

__all__ = [
    # Catalog
    "CaseStatus", "CorruptionCase", "CorruptionCatalog", "CorruptionIndicator",
    "IndicatorCategory", "IndicatorLevel", "IndicatorTrend", "InstitutionTrend",
    "InstitutionTrust", "InternationalRanking", "default_albania_catalog", "normalize_key",
    # Stores
    "CatalogStore", "InMemoryCatalogStore",
    # Engine
    "CorruptionSentiment", "CorruptionSentimentEngine", "SectorRisk",
    "add_corruption_case", "compute_corruption_sentiment", "get_default_engine", "sector_risk",
]
