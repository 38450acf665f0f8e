"""Albanian political landscape: parties, issues, stances and coalitions."""

from .landscape import PoliticalOntology
from .models import (
    CoalitionOption,
    IssueCategory,
    IssuePriority,
    IssueStance,
    PartyPosition,
    PoliticalIssue,
    PoliticalLeader,
    PoliticalParty,
    Stance,
)
from .reference import ALBANIAN_ISSUES, ALBANIAN_LEADERS, ALBANIAN_PARTIES, ALBANIAN_STANCES

__all__ = [
    "PoliticalOntology",
    "CoalitionOption",
    "IssueCategory",
    "IssuePriority",
    "IssueStance",
    "PartyPosition",
    "PoliticalIssue",
    "PoliticalLeader",
    "PoliticalParty",
    "Stance",
    "ALBANIAN_ISSUES",
    "ALBANIAN_LEADERS",
    "ALBANIAN_PARTIES",
    "ALBANIAN_STANCES",
]
