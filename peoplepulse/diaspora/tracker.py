"""
Albanian Diaspora Influence Tracker

Monitors online participation of diaspora communities and detects
cross-border narrative flows: topics that surface in external (diaspora)
discussion first and are later taken up domestically.

Re-entry is a precedence test on timestamps, not causal inference.
"""

from __future__ import annotations

import logging
import math
import uuid
from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from ..config import get_settings
from ..errors import PulseInputError
from .models import (
    DiasporaLocation,
    DiasporaMetrics,
    DiasporaPost,
    Engagement,
    NarrativeFlow,
    NarrativeType,
    Sentiment,
)
from .reference import ALBANIAN_DIASPORA, SAMPLE_TOPICS

logger = logging.getLogger("peoplepulse.diaspora.tracker")

SAMPLE_POSTS_PER_LOCATION = 10
SAMPLE_WINDOW_DAYS = 30


def _check_posts(posts: Iterable[DiasporaPost]) -> List[DiasporaPost]:
    posts = list(posts)
    for post in posts:
        if not isinstance(post, DiasporaPost):
            raise PulseInputError(f"Expected DiasporaPost, got {type(post).__name__}")
    return posts


def group_by_topic(posts: Sequence[DiasporaPost]) -> Dict[str, List[DiasporaPost]]:
    """Topic -> posts, in first-seen order. A post joins every topic it carries."""
    groups: Dict[str, List[DiasporaPost]] = {}
    for post in posts:
        for topic in post.topics:
            groups.setdefault(topic, []).append(post)
    return groups


def has_reentered(posts: Sequence[DiasporaPost]) -> bool:
    """True when the first domestic post is strictly later than the first external one."""
    external = [p.timestamp for p in posts if p.narrative_type == NarrativeType.EXTERNAL]
    domestic = [p.timestamp for p in posts if p.narrative_type == NarrativeType.DOMESTIC]
    if not external or not domestic:
        return False
    return min(domestic) > min(external)


def flow_strength(posts: Sequence[DiasporaPost]) -> float:
    if not posts:
        return 0.0
    total_engagement = sum(p.engagement.total for p in posts)
    mean_influence = math.fsum(p.influence_score for p in posts) / len(posts)
    return min(100.0, (total_engagement / 10000) * (mean_influence / 50))


def detect_narrative_flows(
    posts: Iterable[DiasporaPost],
    homeland: Optional[str] = None,
) -> List[NarrativeFlow]:
    """
    Narratives that re-entered the homeland.

    Args:
        posts: Posts to scan; may span any number of topics and locations
        homeland: Flow destination, defaults to the configured homeland

    Returns:
        One flow per re-entered topic, in first-seen topic order
    """
    posts = _check_posts(posts)
    destination = homeland or get_settings().homeland_country

    flows = []
    for topic, group in group_by_topic(posts).items():
        if not has_reentered(group):
            continue

        first_external = min(
            (p for p in group if p.narrative_type == NarrativeType.EXTERNAL),
            key=lambda p: p.timestamp,
        )
        flows.append(NarrativeFlow(
            origin=first_external.location.country,
            destination=destination,
            narrative=topic,
            strength=flow_strength(group),
            timeline=sorted(p.timestamp for p in group),
            platforms=list(dict.fromkeys(p.platform for p in group)),
        ))

    logger.debug(f"Detected {len(flows)} narrative flows across {len(posts)} posts")
    return flows


class DiasporaTracker:
    """
    Tracks diaspora posts against a fixed set of community locations.

    Usage:
        tracker = DiasporaTracker()
        posts = tracker.generate_sample_data(np.random.default_rng(1))
        metrics = tracker.get_metrics(posts)
    """

    def __init__(
        self,
        locations: Optional[Sequence[DiasporaLocation]] = None,
        homeland: Optional[str] = None,
    ):
        self.locations = list(ALBANIAN_DIASPORA if locations is None else locations)
        self.homeland = homeland or get_settings().homeland_country

    def track_post(
        self,
        location: DiasporaLocation,
        platform: str,
        timestamp: datetime,
        engagement: Optional[Engagement] = None,
        sentiment: Sentiment = Sentiment.NEUTRAL,
        topics: Sequence[str] = (),
        narrative_type: NarrativeType = NarrativeType.DOMESTIC,
        content: str = "",
        author: str = "",
    ) -> DiasporaPost:
        return DiasporaPost(
            id=f"diaspora-{uuid.uuid4().hex[:12]}",
            location=location,
            platform=platform,
            timestamp=timestamp,
            engagement=engagement or Engagement(),
            sentiment=Sentiment(sentiment),
            topics=tuple(topics),
            narrative_type=NarrativeType(narrative_type),
            content=content,
            author=author,
        )

    def detect_narrative_flows(self, posts: Iterable[DiasporaPost]) -> List[NarrativeFlow]:
        return detect_narrative_flows(posts, homeland=self.homeland)

    def get_metrics(self, posts: Iterable[DiasporaPost]) -> DiasporaMetrics:
        """Community-wide metrics; an empty post list yields zeros."""
        posts = _check_posts(posts)
        total_population = sum(loc.population for loc in self.locations)

        if not posts:
            return DiasporaMetrics(
                total_population=total_population,
                active_users=0,
                engagement_rate=0.0,
                top_narratives=[],
                sentiment_breakdown={s.value: 0.0 for s in Sentiment},
                cross_border_flows=[],
                influence_index=0.0,
            )

        active_users = len({p.author for p in posts})
        total_engagement = sum(p.engagement.total for p in posts)

        sentiments = Counter(Sentiment(p.sentiment).value for p in posts)
        topic_counts = Counter(t for p in posts for t in p.topics)

        return DiasporaMetrics(
            total_population=total_population,
            active_users=active_users,
            engagement_rate=total_engagement / (active_users * len(posts)) * 100,
            top_narratives=[topic for topic, _ in topic_counts.most_common(5)],
            sentiment_breakdown={s.value: sentiments[s.value] / len(posts) * 100 for s in Sentiment},
            cross_border_flows=self.detect_narrative_flows(posts),
            influence_index=math.fsum(p.influence_score for p in posts) / len(posts),
        )

    def generate_sample_data(
        self,
        rng: Optional[np.random.Generator] = None,
        now: Optional[datetime] = None,
    ) -> List[DiasporaPost]:
        """Ten synthetic posts per location spread over the last 30 days."""
        rng = rng if rng is not None else np.random.default_rng(get_settings().simulation_seed)
        now = now or datetime.now()
        sentiments = list(Sentiment)

        posts = []
        for location in self.locations:
            platforms = location.social_platforms or ("Facebook",)
            for i in range(SAMPLE_POSTS_PER_LOCATION):
                if rng.random() > 0.7:
                    narrative = NarrativeType.EXTERNAL
                elif rng.random() > 0.4:
                    narrative = NarrativeType.DOMESTIC
                else:
                    narrative = NarrativeType.HYBRID

                posts.append(self.track_post(
                    location=location,
                    platform=platforms[int(rng.integers(len(platforms)))],
                    timestamp=now - timedelta(days=float(rng.uniform(0, SAMPLE_WINDOW_DAYS))),
                    engagement=Engagement(
                        likes=int(rng.integers(500)),
                        shares=int(rng.integers(100)),
                        comments=int(rng.integers(200)),
                    ),
                    sentiment=sentiments[int(rng.integers(len(sentiments)))],
                    topics=(SAMPLE_TOPICS[int(rng.integers(len(SAMPLE_TOPICS)))],),
                    narrative_type=narrative,
                    content=f"Sample post about {self.homeland} politics from {location.country}",
                    author=f"User_{location.country_code}_{i}",
                ))

        logger.info(f"Generated {len(posts)} sample posts across {len(self.locations)} locations")
        return posts
