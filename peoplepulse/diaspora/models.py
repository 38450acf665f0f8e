"""
Diaspora Tracking - Data Models

Locations are reference data. Posts carry their raw engagement; the influence
score is always derived from engagement, location and narrative type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Tuple


class InfluenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NarrativeType(str, Enum):
    """Where a post's narrative is framed: at home, abroad, or across both."""
    DOMESTIC = "domestic"
    EXTERNAL = "external"
    HYBRID = "hybrid"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


LOCATION_WEIGHTS: Dict[InfluenceLevel, float] = {
    InfluenceLevel.HIGH: 1.5,
    InfluenceLevel.MEDIUM: 1.0,
    InfluenceLevel.LOW: 0.7,
}

NARRATIVE_WEIGHTS: Dict[NarrativeType, float] = {
    NarrativeType.HYBRID: 1.3,
    NarrativeType.EXTERNAL: 0.9,
    NarrativeType.DOMESTIC: 1.0,
}


@dataclass(frozen=True)
class DiasporaLocation:
    country: str
    country_code: str
    population: int
    influence: InfluenceLevel = InfluenceLevel.MEDIUM
    main_cities: Tuple[str, ...] = ()
    social_platforms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Engagement:
    likes: int = 0
    shares: int = 0
    comments: int = 0

    @property
    def total(self) -> int:
        return self.likes + self.shares + self.comments

    @property
    def weighted(self) -> float:
        return self.likes * 1 + self.shares * 3 + self.comments * 2


@dataclass(frozen=True)
class DiasporaPost:
    """A single post from a diaspora community."""
    location: DiasporaLocation
    platform: str
    timestamp: datetime
    engagement: Engagement = field(default_factory=Engagement)
    sentiment: Sentiment = Sentiment.NEUTRAL
    topics: Tuple[str, ...] = ()
    narrative_type: NarrativeType = NarrativeType.DOMESTIC
    content: str = ""
    author: str = ""
    id: str = ""

    @property
    def influence_score(self) -> float:
        score = (
            self.engagement.weighted / 1000
            * LOCATION_WEIGHTS[InfluenceLevel(self.location.influence)]
            * NARRATIVE_WEIGHTS[NarrativeType(self.narrative_type)]
        )
        return min(100.0, score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "country": self.location.country,
            "platform": self.platform,
            "author": self.author,
            "timestamp": self.timestamp.isoformat(),
            "engagement": {
                "likes": self.engagement.likes,
                "shares": self.engagement.shares,
                "comments": self.engagement.comments,
            },
            "sentiment": Sentiment(self.sentiment).value,
            "topics": list(self.topics),
            "narrative_type": NarrativeType(self.narrative_type).value,
            "influence_score": self.influence_score,
        }


@dataclass(frozen=True)
class NarrativeFlow:
    """A topic that surfaced abroad and was later picked up at home."""
    origin: str
    destination: str
    narrative: str
    strength: float
    timeline: List[datetime]
    platforms: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "narrative": self.narrative,
            "strength": self.strength,
            "timeline": [t.isoformat() for t in self.timeline],
            "platforms": list(self.platforms),
        }


@dataclass(frozen=True)
class DiasporaMetrics:
    total_population: int
    active_users: int
    engagement_rate: float
    top_narratives: List[str]
    sentiment_breakdown: Dict[str, float]
    cross_border_flows: List[NarrativeFlow]
    influence_index: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_population": self.total_population,
            "active_users": self.active_users,
            "engagement_rate": self.engagement_rate,
            "top_narratives": list(self.top_narratives),
            "sentiment_breakdown": dict(self.sentiment_breakdown),
            "cross_border_flows": [f.to_dict() for f in self.cross_border_flows],
            "influence_index": self.influence_index,
        }
