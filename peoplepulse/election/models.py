"""
Election Simulation - Data Models

Parties and regions are read-only reference data; a simulation run derives
adjusted copies and returns everything it computed in a SimulationResult.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class RegionType(str, Enum):
    URBAN = "urban"
    RURAL = "rural"
    MIXED = "mixed"


class EconomicLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CoalitionStability(str, Enum):
    STABLE = "stable"
    FRAGILE = "fragile"
    UNSTABLE = "unstable"


def _ideology_terms(tag: str) -> Iterator[str]:
    # "Left-wing" -> left-wing, left ; "Liberal Conservative" -> liberal, conservative
    for word in tag.casefold().split():
        yield word
        yield word.split("-", 1)[0]


@dataclass(frozen=True)
class Party:
    """
    A party with its polling prior.

    ``current_support`` is a percentage; ``momentum`` a small signed trend
    (roughly -5..5); ``strongholds`` are region-name fragments.
    """
    id: str
    name: str
    current_support: float
    momentum: float = 0.0
    ideology: Tuple[str, ...] = ()
    strongholds: Tuple[str, ...] = ()
    acronym: str = ""
    leader: str = ""
    color: str = ""

    def has_ideology(self, term: str) -> bool:
        term = term.casefold()
        return any(term == t for tag in self.ideology for t in _ideology_terms(tag))

    def is_stronghold(self, region_name: str) -> bool:
        name = region_name.casefold()
        return any(s.casefold() in name for s in self.strongholds)


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    registered_voters: int
    turnout_history: float
    urban_rural: RegionType = RegionType.MIXED
    economic_level: EconomicLevel = EconomicLevel.MEDIUM
    population: int = 0


@dataclass(frozen=True)
class ScenarioFactors:
    """
    Scenario drivers.

    The first four range -1 (bad) .. 1 (good); youth engagement and diaspora
    participation range 0..1.
    """
    economic_situation: float = 0.0
    international_relations: float = 0.0
    social_stability: float = 0.0
    media_influence: float = 0.0
    youth_engagement: float = 0.0
    diaspora_participation: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ElectionScenario:
    name: str
    factors: ScenarioFactors = field(default_factory=ScenarioFactors)
    description: str = ""
    events: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PartyResult:
    party: Party
    votes: float
    percentage: float
    seats: int = 0
    change: int = 0


@dataclass(frozen=True)
class CoalitionScenario:
    parties: Tuple[Party, ...]
    total_seats: int
    stability: CoalitionStability


@dataclass(frozen=True)
class RegionalResult:
    region: Region
    winner: Optional[Party]
    shares: Dict[str, float]


@dataclass(frozen=True)
class SimulationResult:
    """Everything one simulation run produced. Never persisted."""
    winner: Optional[Party]
    results: List[PartyResult]
    coalition_scenarios: List[CoalitionScenario]
    turnout: float
    invalid_votes: float
    regional_breakdown: List[RegionalResult]
    confidence: float
    uncertainty_factors: List[str]
    adjusted_parties: List[Party] = field(default_factory=list)

    @property
    def total_seats(self) -> int:
        return sum(r.seats for r in self.results)

    def seats_by_party(self) -> Dict[str, int]:
        return {r.party.id: r.seats for r in self.results}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "winner": self.winner.id if self.winner else None,
            "turnout": self.turnout,
            "invalid_votes": self.invalid_votes,
            "confidence": self.confidence,
            "uncertainty_factors": list(self.uncertainty_factors),
            "results": [
                {
                    "party": r.party.id,
                    "votes": r.votes,
                    "percentage": r.percentage,
                    "seats": r.seats,
                    "change": r.change,
                }
                for r in self.results
            ],
            "coalition_scenarios": [
                {
                    "parties": [p.id for p in c.parties],
                    "total_seats": c.total_seats,
                    "stability": c.stability.value,
                }
                for c in self.coalition_scenarios
            ],
            "regional_breakdown": [
                {
                    "region": r.region.id,
                    "winner": r.winner.id if r.winner else None,
                    "shares": dict(r.shares),
                }
                for r in self.regional_breakdown
            ],
        }
