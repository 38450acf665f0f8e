"""Diaspora influence tracking and narrative re-entry detection."""

from .models import (
    DiasporaLocation,
    DiasporaMetrics,
    DiasporaPost,
    Engagement,
    InfluenceLevel,
    NarrativeFlow,
    NarrativeType,
    Sentiment,
)
from .reference import ALBANIAN_DIASPORA, SAMPLE_TOPICS
from .tracker import DiasporaTracker, detect_narrative_flows, flow_strength, group_by_topic, has_reentered

__all__ = [
    "DiasporaLocation",
    "DiasporaMetrics",
    "DiasporaPost",
    "Engagement",
    "InfluenceLevel",
    "NarrativeFlow",
    "NarrativeType",
    "Sentiment",
    "ALBANIAN_DIASPORA",
    "SAMPLE_TOPICS",
    "DiasporaTracker",
    "detect_narrative_flows",
    "flow_strength",
    "group_by_topic",
    "has_reentered",
]
