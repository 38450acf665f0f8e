"""
D'Hondt seat apportionment.

Seats are awarded one at a time to the party with the highest quotient
``votes / (seats_so_far + 1)``. Parties below the electoral threshold (or with
no votes) take no part.

Ties between equal quotients go to the lowest party id. This is a fixed
convention so results are reproducible, not an electoral rule.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger("peoplepulse.election.dhondt")


def eligible_parties(
    votes: Mapping[str, float],
    threshold: float = 3.0,
    percentages: Optional[Mapping[str, float]] = None,
) -> List[str]:
    """
    Party ids that clear ``threshold`` percent, sorted by id.

    Percentages default to each party's share of the summed votes.
    """
    if percentages is None:
        total = math.fsum(votes.values())
        if total <= 0:
            return []
        percentages = {pid: v / total * 100 for pid, v in votes.items()}
    return sorted(
        pid for pid, v in votes.items()
        if v > 0 and percentages.get(pid, 0.0) >= threshold
    )


def allocate_dhondt(
    votes: Mapping[str, float],
    total_seats: int = 250,
    threshold: float = 3.0,
    percentages: Optional[Mapping[str, float]] = None,
) -> Dict[str, int]:
    """
    Apportion ``total_seats`` among ``votes`` (party id -> votes).

    Every party in ``votes`` appears in the result. The seat counts sum to
    ``total_seats`` exactly when at least one party qualifies, otherwise to 0.
    """
    seats = {pid: 0 for pid in votes}
    eligible = eligible_parties(votes, threshold, percentages)
    if not eligible:
        logger.warning("No party cleared the electoral threshold; no seats awarded")
        return seats

    for _ in range(total_seats):
        best_pid = eligible[0]
        best_quotient = votes[best_pid] / (seats[best_pid] + 1)
        for pid in eligible[1:]:
            quotient = votes[pid] / (seats[pid] + 1)
            if quotient > best_quotient:
                best_pid, best_quotient = pid, quotient
        seats[best_pid] += 1

    return seats
