"""
Political Landscape Ontology

Lookups over parties, leaders and issues, plus two derived views:

- Party similarity: mean agreement over the issues both parties have a
  stance on. Agreeing stances score 1 - |strength difference|, differing
  stances score 0.
- Coalition possibilities: every 2- and 3-party combination of seated
  parties that reaches the seat threshold, ranked by mean pairwise
  similarity.
"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import combinations
from typing import Iterable, List, Optional, Union

from ..config import get_settings
from ..errors import PulseInputError
from .models import (
    CoalitionOption,
    IssueCategory,
    IssueStance,
    PoliticalIssue,
    PoliticalLeader,
    PoliticalParty,
    Stance,
)
from .reference import ALBANIAN_ISSUES, ALBANIAN_LEADERS, ALBANIAN_PARTIES, ALBANIAN_STANCES

logger = logging.getLogger("peoplepulse.ontology.landscape")

MAX_COALITION_SIZE = 3


class PoliticalOntology:
    """
    Read-only view of a country's political landscape.

    Usage:
        ontology = PoliticalOntology()
        ontology.party_similarity("PS", "PD")
        for option in ontology.coalition_possibilities():
            print(option.parties, option.seats, option.ideological_alignment)
    """

    def __init__(
        self,
        parties: Optional[Iterable[PoliticalParty]] = None,
        leaders: Optional[Iterable[PoliticalLeader]] = None,
        issues: Optional[Iterable[PoliticalIssue]] = None,
        stances: Optional[Iterable[IssueStance]] = None,
    ):
        self.parties = list(ALBANIAN_PARTIES if parties is None else parties)
        self.leaders = list(ALBANIAN_LEADERS if leaders is None else leaders)
        self.issues = list(ALBANIAN_ISSUES if issues is None else issues)
        self.stances = list(ALBANIAN_STANCES if stances is None else stances)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_party(self, party_id: str) -> Optional[PoliticalParty]:
        return next((p for p in self.parties if p.id == party_id), None)

    def issues_by_category(self, category: Union[IssueCategory, str]) -> List[PoliticalIssue]:
        """Issues in ``category``; an unknown category name matches nothing."""
        if not isinstance(category, str):
            raise PulseInputError(f"Issue category must be a string, got {type(category).__name__}")
        key = category.value if isinstance(category, Enum) else category
        return [i for i in self.issues if IssueCategory(i.category).value == key]

    def party_stance(self, party_id: str, issue_id: str) -> Optional[IssueStance]:
        return next((s for s in self.stances if s.party == party_id and s.issue == issue_id), None)

    def _stances_of(self, party_id: str) -> List[IssueStance]:
        return [s for s in self.stances if s.party == party_id]

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def party_similarity(self, first: str, second: str) -> float:
        """0-1 agreement over shared issues; 0.0 when nothing is shared."""
        theirs = {s.issue: s for s in self._stances_of(second)}

        total = 0.0
        shared = 0
        for ours in self._stances_of(first):
            other = theirs.get(ours.issue)
            if other is None:
                continue
            shared += 1
            if Stance(ours.stance) == Stance(other.stance):
                total += 1 - abs(ours.strength - other.strength)

        return total / shared if shared else 0.0

    def coalition_alignment(self, party_ids: Iterable[str]) -> float:
        """Mean pairwise similarity across a coalition."""
        pairs = list(combinations(party_ids, 2))
        if not pairs:
            return 0.0
        return sum(self.party_similarity(a, b) for a, b in pairs) / len(pairs)

    def coalition_possibilities(self, threshold: Optional[int] = None) -> List[CoalitionOption]:
        """
        Majority coalitions of two or three seated parties.

        Sorted by ideological alignment, highest first. Ties keep
        enumeration order, so smaller coalitions come first.
        """
        if threshold is None:
            threshold = get_settings().coalition_seat_threshold

        seated = [p for p in self.parties if p.seats > 0]
        options: List[CoalitionOption] = []
        for size in range(2, MAX_COALITION_SIZE + 1):
            for combo in combinations(seated, size):
                seats = sum(p.seats for p in combo)
                if seats < threshold:
                    continue
                ids = tuple(p.id for p in combo)
                options.append(CoalitionOption(ids, seats, self.coalition_alignment(ids)))

        options.sort(key=lambda o: o.ideological_alignment, reverse=True)
        logger.debug(f"{len(options)} coalition options reach {threshold} seats")
        return options

    def party_trending_topics(self, party_id: str) -> List[PoliticalIssue]:
        """Issues the party has a stance on, strongest stance first."""
        strength = {s.issue: s.strength for s in self._stances_of(party_id)}
        topics = [i for i in self.issues if i.id in strength]
        topics.sort(key=lambda i: strength[i.id], reverse=True)
        return topics
