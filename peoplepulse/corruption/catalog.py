"""
Corruption Catalog - Data Models and Reference Data

Indicators (grouped into four categories), institution trust records and
tracked corruption cases. ``default_albania_catalog()`` returns the reference
Albanian catalog used by the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


def normalize_key(name: str) -> str:
    """Lookup key for institution and sector names."""
    return name.strip().casefold()


# =============================================================================
# Enums
# =============================================================================

class IndicatorCategory(str, Enum):
    INSTITUTIONAL = "institutional"
    SECTORAL = "sectoral"
    POLITICAL = "political"
    JUDICIAL = "judicial"


class IndicatorLevel(str, Enum):
    NATIONAL = "national"
    REGIONAL = "regional"
    LOCAL = "local"


class IndicatorTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"


class InstitutionTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class CaseStatus(str, Enum):
    REPORTED = "reported"
    INVESTIGATING = "investigating"
    PROSECUTED = "prosecuted"
    CONVICTED = "convicted"
    DISMISSED = "dismissed"


# =============================================================================
# Records
# =============================================================================

@dataclass
class CorruptionIndicator:
    """
    Perceived corruption in one area.

    Severity is 0-100, higher is worse.
    """
    id: str
    name_en: str
    name_sq: str
    category: IndicatorCategory
    severity: float
    trend: IndicatorTrend = IndicatorTrend.STABLE
    level: IndicatorLevel = IndicatorLevel.NATIONAL
    last_updated: datetime = field(default_factory=datetime.now)


@dataclass
class InstitutionTrust:
    """Trust and corruption perception for one institution (both 0-100)."""
    institution: str
    trust_level: float
    corruption_perception: float
    recent_cases: int = 0
    trend: InstitutionTrend = InstitutionTrend.STABLE

    @property
    def key(self) -> str:
        return normalize_key(self.institution)


@dataclass
class CorruptionCase:
    """A reported corruption case. ``id`` is assigned when the case is recorded."""
    title: str
    institution: str
    description: str = ""
    individuals: List[str] = field(default_factory=list)
    amount: Optional[float] = None
    currency: Optional[str] = None
    status: CaseStatus = CaseStatus.REPORTED
    date_reported: datetime = field(default_factory=datetime.now)
    public_interest: float = 0.0
    media_coverage: float = 0.0
    sources: List[str] = field(default_factory=list)
    id: str = ""


@dataclass(frozen=True)
class InternationalRanking:
    rank: int
    total: int
    source: str


DEFAULT_CATEGORY_WEIGHTS: Dict[str, float] = {
    IndicatorCategory.INSTITUTIONAL.value: 0.35,
    IndicatorCategory.SECTORAL.value: 0.25,
    IndicatorCategory.POLITICAL.value: 0.25,
    IndicatorCategory.JUDICIAL.value: 0.15,
}


@dataclass
class CorruptionCatalog:
    """Everything a CorruptionSentimentEngine starts from."""
    indicators: List[CorruptionIndicator] = field(default_factory=list)
    institutions: List[InstitutionTrust] = field(default_factory=list)
    cases: List[CorruptionCase] = field(default_factory=list)
    category_weights: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_CATEGORY_WEIGHTS))
    ranking: Optional[InternationalRanking] = None


# =============================================================================
# Albania reference catalog
# =============================================================================

def default_albania_catalog() -> CorruptionCatalog:
    """Fresh copy of the Albanian reference catalog."""
    C, T = IndicatorCategory, IndicatorTrend
    indicators = [
        CorruptionIndicator("judiciary", "Judiciary System", "Sistemi Gjyqësor", C.JUDICIAL, 65, T.IMPROVING),
        CorruptionIndicator("public-procurement", "Public Procurement", "Prokurimi Publik", C.INSTITUTIONAL, 75, T.STABLE),
        CorruptionIndicator("healthcare", "Healthcare", "Shëndetësia", C.SECTORAL, 70, T.WORSENING),
        CorruptionIndicator("education", "Education", "Arsimi", C.SECTORAL, 60, T.STABLE),
        CorruptionIndicator("police", "Police", "Policia", C.INSTITUTIONAL, 55, T.IMPROVING),
        CorruptionIndicator("customs", "Customs", "Dogana", C.INSTITUTIONAL, 68, T.STABLE),
        CorruptionIndicator(
            "local-government", "Local Government", "Qeverisja Vendore", C.POLITICAL, 72, T.WORSENING,
            level=IndicatorLevel.LOCAL,
        ),
        CorruptionIndicator("political-parties", "Political Parties", "Partitë Politike", C.POLITICAL, 80, T.STABLE),
    ]

    I = InstitutionTrend
    institutions = [
        InstitutionTrust("SPAK", 65, 25, 45, I.IMPROVING),
        InstitutionTrust("Parlamenti", 30, 70, 12, I.STABLE),
        InstitutionTrust("Qeveria", 35, 68, 8, I.STABLE),
        InstitutionTrust("Gjykatat", 40, 65, 23, I.IMPROVING),
        InstitutionTrust("Policia", 45, 55, 15, I.IMPROVING),
        InstitutionTrust("Bashkitë", 38, 72, 31, I.DECLINING),
        InstitutionTrust("Ministritë", 32, 70, 18, I.STABLE),
        InstitutionTrust("Media", 42, 60, 5, I.STABLE),
    ]

    cases = [
        CorruptionCase(
            id="case-001",
            title="Public Procurement Scandal",
            description="Alleged manipulation of tender process for road construction",
            institution="Ministry of Infrastructure",
            individuals=["Official A", "Businessman B"],
            amount=5_000_000,
            currency="EUR",
            status=CaseStatus.INVESTIGATING,
            date_reported=datetime(2024, 1, 15),
            public_interest=85,
            media_coverage=90,
            sources=["BIRN", "Top Channel", "Exit.al"],
        ),
        CorruptionCase(
            id="case-002",
            title="Healthcare Bribes",
            description="Doctors accepting bribes for medical services",
            institution="QSUT Hospital",
            individuals=["Doctor X", "Doctor Y"],
            status=CaseStatus.PROSECUTED,
            date_reported=datetime(2024, 2, 20),
            public_interest=75,
            media_coverage=80,
            sources=["Syri.net", "Report TV"],
        ),
        CorruptionCase(
            id="case-003",
            title="Vote Buying Allegations",
            description="Political party accused of buying votes in local elections",
            institution="Political Party",
            individuals=["Politician C"],
            amount=500_000,
            currency="ALL",
            status=CaseStatus.REPORTED,
            date_reported=datetime(2024, 3, 10),
            public_interest=90,
            media_coverage=95,
            sources=["BalkanWeb", "News24"],
        ),
    ]

    return CorruptionCatalog(
        indicators=indicators,
        institutions=institutions,
        cases=cases,
        ranking=InternationalRanking(rank=104, total=180, source="Transparency International CPI 2023"),
    )
