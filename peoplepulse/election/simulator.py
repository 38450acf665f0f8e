"""
Election Simulation Engine

Simulates a national parliamentary election from party polling priors and a
what-if scenario:

1. Adjust each party's support for momentum, ideology-driven scenario effects
   and polling noise
2. Estimate turnout
3. Redistribute support region by region (strongholds, urban/rural, income)
4. Aggregate regional shares into national votes
5. Apportion seats with D'Hondt above the electoral threshold
6. Search for majority coalitions
7. Score confidence in the prediction

All randomness comes from the injected ``numpy.random.Generator``; two
simulators built with the same seed produce identical results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import get_settings
from ..errors import PulseInputError
from ..scoring.composite import clamp, round_half_up
from .dhondt import allocate_dhondt
from .models import (
    CoalitionScenario,
    CoalitionStability,
    EconomicLevel,
    ElectionScenario,
    Party,
    PartyResult,
    Region,
    RegionalResult,
    RegionType,
    SimulationResult,
)
from .reference import SERBIAN_PARTIES, SERBIAN_REGIONS

logger = logging.getLogger("peoplepulse.election.simulator")

BASE_TURNOUT = 52.0
TURNOUT_BOUNDS = (35.0, 75.0)
SUPPORT_NOISE = 2.0
TURNOUT_NOISE = 3.0
COMPATIBILITY_PROBABILITY = 0.7
MAX_COALITION_SCENARIOS = 3

# (ideology a, ideology b) pairs that never govern together
INCOMPATIBLE_IDEOLOGIES: Tuple[Tuple[str, str], ...] = (
    ("liberal", "conservative"),
    ("nationalist", "pro-european"),
)


class ElectionSimulator:
    """
    Seat and coalition simulator.

    Usage:
        sim = ElectionSimulator(rng=np.random.default_rng(7))
        result = sim.simulate(generate_scenarios()[0])
        print(result.winner.id, result.seats_by_party())
    """

    def __init__(
        self,
        parties: Optional[Sequence[Party]] = None,
        regions: Optional[Sequence[Region]] = None,
        rng: Optional[np.random.Generator] = None,
        total_seats: Optional[int] = None,
        threshold: Optional[float] = None,
    ):
        settings = get_settings()
        self.parties = list(SERBIAN_PARTIES if parties is None else parties)
        self.regions = list(SERBIAN_REGIONS if regions is None else regions)
        self.rng = rng if rng is not None else np.random.default_rng(settings.simulation_seed)
        self.total_seats = settings.total_seats if total_seats is None else total_seats
        self.threshold = settings.electoral_threshold if threshold is None else threshold

    @property
    def majority(self) -> int:
        return self.total_seats // 2 + 1

    def simulate(self, scenario: ElectionScenario) -> SimulationResult:
        if not isinstance(scenario, ElectionScenario):
            raise PulseInputError(f"Expected ElectionScenario, got {type(scenario).__name__}")

        adjusted = self.adjust_party_support(self.parties, scenario)
        turnout = self.calculate_turnout(scenario)
        regional = self.simulate_regional_voting(adjusted)
        national = self.aggregate_national_results(regional, turnout)
        results = self.calculate_seats(national)

        winner = self.identify_winner(results)
        coalitions = self.generate_coalition_scenarios(results)
        confidence, uncertainty = self.assess_confidence(scenario, turnout)
        invalid_votes = float(self.rng.uniform(1, 3))

        logger.info(
            f"Simulated '{scenario.name}': turnout={turnout:.1f}%, "
            f"winner={winner.id if winner else None}, coalitions={len(coalitions)}"
        )

        return SimulationResult(
            winner=winner,
            results=results,
            coalition_scenarios=coalitions,
            turnout=turnout,
            invalid_votes=invalid_votes,
            regional_breakdown=regional,
            confidence=confidence,
            uncertainty_factors=uncertainty,
            adjusted_parties=adjusted,
        )

    # -------------------------------------------------------------------------
    # Steps 1-2: support and turnout
    # -------------------------------------------------------------------------

    def adjust_party_support(self, parties: Sequence[Party], scenario: ElectionScenario) -> List[Party]:
        """Adjusted copies of ``parties``; the inputs are left untouched."""
        f = scenario.factors
        adjusted = []
        for party in parties:
            support = party.current_support + party.momentum * 2

            if party.has_ideology("pro-european"):
                support += f.international_relations * 3
            if party.has_ideology("socialist") or party.has_ideology("left"):
                support += (1 - f.economic_situation) * 2
            if party.has_ideology("liberal"):
                support += f.youth_engagement * 4
            if party.has_ideology("nationalist"):
                support -= f.international_relations * 2

            support += self.rng.uniform(-SUPPORT_NOISE, SUPPORT_NOISE)
            adjusted.append(replace(party, current_support=clamp(support, 0, 100)))
        return adjusted

    def calculate_turnout(self, scenario: ElectionScenario) -> float:
        f = scenario.factors
        turnout = (
            BASE_TURNOUT
            + f.social_stability * 5
            + f.media_influence * 3
            + f.youth_engagement * 8
            + f.diaspora_participation * 4
        )
        turnout += self.rng.uniform(-TURNOUT_NOISE, TURNOUT_NOISE)
        return clamp(float(turnout), *TURNOUT_BOUNDS)

    # -------------------------------------------------------------------------
    # Steps 3-4: regional voting and national aggregation
    # -------------------------------------------------------------------------

    def simulate_regional_voting(self, parties: Sequence[Party]) -> List[RegionalResult]:
        breakdown = []
        for region in self.regions:
            raw: Dict[str, float] = {}
            for party in parties:
                support = party.current_support
                if party.is_stronghold(region.name):
                    support *= 1.2
                if region.urban_rural == RegionType.URBAN and party.has_ideology("liberal"):
                    support *= 1.15
                if region.urban_rural == RegionType.RURAL and party.has_ideology("conservative"):
                    support *= 1.1
                if region.economic_level == EconomicLevel.LOW and party.has_ideology("socialist"):
                    support *= 1.1
                raw[party.id] = support

            total = math.fsum(raw.values())
            shares = {pid: (v / total * 100 if total > 0 else 0.0) for pid, v in raw.items()}

            breakdown.append(RegionalResult(
                region=region,
                winner=_leading_party(parties, shares),
                shares=shares,
            ))
        return breakdown

    def aggregate_national_results(self, regional: Sequence[RegionalResult], turnout: float) -> List[PartyResult]:
        registered = sum(r.registered_voters for r in self.regions)
        actual_voters = registered * (turnout / 100)

        votes: Dict[str, float] = {p.id: 0.0 for p in self.parties}
        for result in regional:
            region_voters = result.region.registered_voters * (turnout / 100)
            for pid, share in result.shares.items():
                votes[pid] = votes.get(pid, 0.0) + share / 100 * region_voters

        return [
            PartyResult(
                party=party,
                votes=votes[party.id],
                percentage=votes[party.id] / actual_voters * 100 if actual_voters > 0 else 0.0,
            )
            for party in self.parties
        ]

    # -------------------------------------------------------------------------
    # Step 5: seats
    # -------------------------------------------------------------------------

    def calculate_seats(self, national: Sequence[PartyResult]) -> List[PartyResult]:
        seats = allocate_dhondt(
            {r.party.id: r.votes for r in national},
            total_seats=self.total_seats,
            threshold=self.threshold,
            percentages={r.party.id: r.percentage for r in national},
        )
        out = []
        for r in national:
            # previous seats approximated from the pre-adjustment poll share
            previous = int(round_half_up(r.party.current_support * self.total_seats / 100))
            count = seats[r.party.id]
            out.append(replace(r, seats=count, change=count - previous))
        return out

    @staticmethod
    def identify_winner(results: Sequence[PartyResult]) -> Optional[Party]:
        ranked = _rank_by_seats(results)
        if not ranked or ranked[0].seats == 0:
            return None
        return ranked[0].party

    # -------------------------------------------------------------------------
    # Step 6: coalitions
    # -------------------------------------------------------------------------

    def generate_coalition_scenarios(self, results: Sequence[PartyResult]) -> List[CoalitionScenario]:
        """
        Greedy majority search.

        Each party, largest first, tries to lead a coalition by adding
        compatible seat-holding partners in seat order until it reaches a
        majority. A single-party majority ends the search.
        """
        scenarios: List[CoalitionScenario] = []
        ranked = [r for r in _rank_by_seats(results) if r.seats > 0]

        for leader in ranked:
            coalition = [leader.party]
            seats = leader.seats

            if seats >= self.majority:
                scenarios.append(CoalitionScenario((leader.party,), seats, CoalitionStability.STABLE))
                break

            for partner in ranked:
                if partner is leader or not self.are_compatible(leader.party, partner.party):
                    continue
                coalition.append(partner.party)
                seats += partner.seats
                if seats >= self.majority:
                    scenarios.append(CoalitionScenario(
                        tuple(coalition), seats, self.assess_coalition_stability(coalition),
                    ))
                    break

        return scenarios[:MAX_COALITION_SCENARIOS]

    def are_compatible(self, a: Party, b: Party) -> bool:
        for x, y in INCOMPATIBLE_IDEOLOGIES:
            if (a.has_ideology(x) and b.has_ideology(y)) or (a.has_ideology(y) and b.has_ideology(x)):
                return False
        return bool(self.rng.random() < COMPATIBILITY_PROBABILITY)

    @staticmethod
    def assess_coalition_stability(parties: Sequence[Party]) -> CoalitionStability:
        if len(parties) == 1:
            return CoalitionStability.STABLE
        if len(parties) == 2:
            return CoalitionStability.FRAGILE
        return CoalitionStability.UNSTABLE

    # -------------------------------------------------------------------------
    # Step 7: confidence
    # -------------------------------------------------------------------------

    @staticmethod
    def assess_confidence(scenario: ElectionScenario, turnout: float) -> Tuple[float, List[str]]:
        f = scenario.factors
        confidence = 75.0
        factors: List[str] = []

        if any(abs(v) > 0.7 for v in f.as_dict().values()):
            confidence -= 10
            factors.append("High scenario volatility")
        if turnout < 40 or turnout > 65:
            confidence -= 5
            factors.append("Unusual turnout expectations")
        if f.youth_engagement > 0.7:
            confidence -= 8
            factors.append("Unpredictable youth vote")
        if len(scenario.events) > 3:
            confidence -= 5
            factors.append("Multiple recent political events")

        if not factors:
            factors.append("Standard polling uncertainty")

        return clamp(confidence, 40, 90), factors


def _rank_by_seats(results: Sequence[PartyResult]) -> List[PartyResult]:
    return sorted(results, key=lambda r: (-r.seats, r.party.id))


def _leading_party(parties: Sequence[Party], shares: Dict[str, float]) -> Optional[Party]:
    leader = None
    for party in sorted(parties, key=lambda p: p.id):
        share = shares.get(party.id, 0.0)
        if share > 0 and (leader is None or share > shares[leader.id]):
            leader = party
    return leader


def run_election_simulation(
    parties: Sequence[Party],
    regions: Sequence[Region],
    scenario: ElectionScenario,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResult:
    """One-shot simulation over explicit reference data."""
    return ElectionSimulator(parties=parties, regions=regions, rng=rng).simulate(scenario)
