"""
Political Ontology - Data Models

Parties, leaders, issues and each party's declared stance on an issue.
Stance strength runs 0-1; issue public sentiment runs -1 to 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class PartyPosition(str, Enum):
    GOVERNMENT = "government"
    OPPOSITION = "opposition"
    NEUTRAL = "neutral"


class IssueCategory(str, Enum):
    DOMESTIC = "domestic"
    FOREIGN = "foreign"
    ECONOMIC = "economic"
    SOCIAL = "social"
    ENVIRONMENTAL = "environmental"


class IssuePriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Stance(str, Enum):
    SUPPORT = "support"
    OPPOSE = "oppose"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class PoliticalParty:
    """A party with its current seat count."""
    id: str
    name: str
    name_sq: str
    name_en: str
    leader: str
    founded: int
    ideology: Tuple[str, ...] = ()
    position: PartyPosition = PartyPosition.NEUTRAL
    seats: int = 0
    color: str = "#9E9E9E"
    website: Optional[str] = None
    social_media: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "full_name": {"sq": self.name_sq, "en": self.name_en},
            "leader": self.leader,
            "founded": self.founded,
            "ideology": list(self.ideology),
            "position": PartyPosition(self.position).value,
            "seats": self.seats,
            "color": self.color,
            "website": self.website,
            "social_media": dict(self.social_media),
        }


@dataclass(frozen=True)
class PoliticalLeader:
    id: str
    name: str
    party: str
    position: str
    birth_year: int
    education: str
    previous_roles: Tuple[str, ...] = ()
    approval_rating: Optional[float] = None


@dataclass(frozen=True)
class PoliticalIssue:
    id: str
    name_sq: str
    name_en: str
    category: IssueCategory
    priority: IssuePriority
    related_parties: Tuple[str, ...] = ()
    public_sentiment: float = 0.0
    keywords: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": {"sq": self.name_sq, "en": self.name_en},
            "category": IssueCategory(self.category).value,
            "priority": IssuePriority(self.priority).value,
            "related_parties": list(self.related_parties),
            "public_sentiment": self.public_sentiment,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class IssueStance:
    """A party's declared position on one issue."""
    issue: str
    party: str
    stance: Stance
    strength: float
    statements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CoalitionOption:
    parties: Tuple[str, ...]
    seats: int
    ideological_alignment: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parties": list(self.parties),
            "seats": self.seats,
            "ideological_alignment": self.ideological_alignment,
        }
