"""
Election Simulation Tests

Tests for:
- D'Hondt apportionment (threshold, tie-break, seat conservation)
- Support, turnout and regional steps
- Coalition search and stability labels
- Confidence scoring and reproducibility
"""

import numpy as np
import pytest

from peoplepulse.election.dhondt import allocate_dhondt, eligible_parties
from peoplepulse.election.models import (
    CoalitionStability,
    ElectionScenario,
    Party,
    PartyResult,
    Region,
    RegionType,
    EconomicLevel,
    ScenarioFactors,
)
from peoplepulse.election.reference import SERBIAN_PARTIES, SERBIAN_REGIONS, generate_scenarios
from peoplepulse.election.simulator import ElectionSimulator, run_election_simulation
from peoplepulse.errors import PulseInputError


class MidpointRng:
    """Noise-free stand-in for numpy's Generator."""

    def uniform(self, low, high):
        return (low + high) / 2

    def random(self):
        return 0.0


def _scenario(name):
    return next(s for s in generate_scenarios() if s.name == name)


# =============================================================================
# D'Hondt
# =============================================================================

class TestDHondt:
    """Tests for seat apportionment."""

    def test_small_example(self):
        seats = allocate_dhondt({"A": 100, "B": 80, "C": 30}, total_seats=5)
        assert sum(seats.values()) == 5
        assert seats["A"] >= seats["B"] >= seats["C"]
        assert seats == {"A": 3, "B": 2, "C": 0}

    def test_seats_always_sum_to_total(self, rng):
        for _ in range(20):
            votes = {f"P{i}": float(v) for i, v in enumerate(rng.integers(1, 10_000, size=6))}
            seats = allocate_dhondt(votes, total_seats=250, threshold=0.0)
            assert sum(seats.values()) == 250

    def test_threshold_excludes(self):
        seats = allocate_dhondt({"big": 1000, "tiny": 20}, total_seats=10)
        assert seats == {"big": 10, "tiny": 0}

    def test_threshold_inclusive(self):
        assert eligible_parties({"a": 97, "b": 3}, threshold=3.0, percentages={"a": 97.0, "b": 3.0}) == ["a", "b"]

    def test_zero_votes_excluded(self):
        assert eligible_parties({"a": 10, "b": 0}, threshold=0.0) == ["a"]

    def test_no_eligible_party(self):
        seats = allocate_dhondt({"a": 0, "b": 0}, total_seats=10)
        assert seats == {"a": 0, "b": 0}

    def test_tie_goes_to_lowest_id(self):
        assert allocate_dhondt({"b": 100, "a": 100}, total_seats=1) == {"b": 0, "a": 1}

    def test_explicit_percentages(self):
        """Caller-supplied percentages decide eligibility."""
        seats = allocate_dhondt({"a": 50, "b": 50}, total_seats=4, percentages={"a": 50, "b": 2})
        assert seats == {"a": 4, "b": 0}


# =============================================================================
# Simulation steps
# =============================================================================

class TestSupportAndTurnout:
    """Tests for steps 1 and 2."""

    def test_adjustment_is_a_copy(self):
        sim = ElectionSimulator(rng=MidpointRng())
        adjusted = sim.adjust_party_support(SERBIAN_PARTIES, _scenario("Status Quo"))
        assert SERBIAN_PARTIES[0].current_support == 42
        assert adjusted[0] is not SERBIAN_PARTIES[0]

    def test_ideology_nudges(self):
        sim = ElectionSimulator(rng=MidpointRng())
        factors = ScenarioFactors(economic_situation=-0.5, international_relations=1.0, youth_engagement=0.5)
        scenario = ElectionScenario("test", factors)
        parties = [
            Party("EU", "Pro-EU", 20, ideology=("Pro-European",)),
            Party("SOC", "Socialists", 20, momentum=1, ideology=("Socialist",)),
            Party("LIB", "Liberals", 20, ideology=("Liberal",)),
            Party("NAT", "Nationalists", 20, ideology=("Nationalist",)),
        ]
        adjusted = {p.id: p.current_support for p in sim.adjust_party_support(parties, scenario)}
        assert adjusted == {
            "EU": pytest.approx(23),
            "SOC": pytest.approx(25),
            "LIB": pytest.approx(22),
            "NAT": pytest.approx(18),
        }

    def test_support_clamped(self):
        sim = ElectionSimulator(rng=MidpointRng())
        parties = [Party("X", "X", 99.5, momentum=3), Party("Y", "Y", 0.5, momentum=-3)]
        adjusted = sim.adjust_party_support(parties, ElectionScenario("flat"))
        assert [p.current_support for p in adjusted] == [100, 0]

    def test_turnout(self):
        sim = ElectionSimulator(rng=MidpointRng())
        # 52 + 0.3*5 + 0.1*3 + 0.3*8 + 0.2*4
        assert sim.calculate_turnout(_scenario("Status Quo")) == pytest.approx(57.0)

    def test_turnout_bounds(self, rng):
        sim = ElectionSimulator(rng=rng)
        high = ElectionScenario("surge", ScenarioFactors(social_stability=3, media_influence=1, youth_engagement=1))
        low = ElectionScenario("apathy", ScenarioFactors(social_stability=-4, media_influence=-1))
        for _ in range(20):
            assert sim.calculate_turnout(high) == 75
            assert sim.calculate_turnout(low) == 35


class TestRegionalVoting:
    """Tests for step 3."""

    def test_shares_sum_to_100(self):
        sim = ElectionSimulator(rng=MidpointRng())
        for region in sim.simulate_regional_voting(SERBIAN_PARTIES):
            assert sum(region.shares.values()) == pytest.approx(100)

    def test_multipliers(self):
        region = Region("r", "Capital City", 1000, 50, RegionType.URBAN, EconomicLevel.LOW)
        parties = [
            Party("A", "A", 50, ideology=("Liberal",), strongholds=("capital",)),
            Party("B", "B", 50, ideology=("Socialist",)),
        ]
        sim = ElectionSimulator(parties=parties, regions=[region], rng=MidpointRng())
        (result,) = sim.simulate_regional_voting(parties)
        # A: 50 * 1.2 * 1.15 = 69, B: 50 * 1.1 = 55
        assert result.shares["A"] == pytest.approx(69 / 124 * 100)
        assert result.winner.id == "A"

    def test_zero_support_region(self):
        parties = [Party("A", "A", 0), Party("B", "B", 0)]
        sim = ElectionSimulator(parties=parties, rng=MidpointRng())
        result = sim.simulate_regional_voting(parties)[0]
        assert result.shares == {"A": 0.0, "B": 0.0}
        assert result.winner is None


# =============================================================================
# Coalitions and confidence
# =============================================================================

class TestCoalitions:
    """Tests for step 6."""

    LIB = Party("LIB", "Liberals", 40, ideology=("Liberal",))
    CON = Party("CON", "Conservatives", 32, ideology=("Conservative",))
    MIX = Party("MIX", "Mixed", 28, ideology=("Mixed",))

    def _results(self, seats):
        return [PartyResult(p, 0, 0, seats=s) for p, s in seats]

    def test_single_party_majority(self):
        sim = ElectionSimulator(rng=MidpointRng())
        scenarios = sim.generate_coalition_scenarios(self._results([(self.LIB, 130), (self.MIX, 120)]))
        assert len(scenarios) == 1
        assert scenarios[0].parties == (self.LIB,)
        assert scenarios[0].stability == CoalitionStability.STABLE

    def test_incompatible_partners_skipped(self):
        sim = ElectionSimulator(rng=MidpointRng())
        results = self._results([(self.LIB, 100), (self.CON, 80), (self.MIX, 70)])
        scenarios = sim.generate_coalition_scenarios(results)
        assert [tuple(p.id for p in s.parties) for s in scenarios] == [
            ("LIB", "MIX"), ("CON", "MIX"), ("MIX", "LIB"),
        ]
        assert all(s.stability == CoalitionStability.FRAGILE for s in scenarios)
        assert all(s.total_seats >= 126 for s in scenarios)

    def test_zero_seat_parties_ignored(self):
        sim = ElectionSimulator(rng=MidpointRng())
        results = self._results([(self.LIB, 100), (self.MIX, 0)])
        assert sim.generate_coalition_scenarios(results) == []

    def test_compatibility_rules_symmetric(self):
        sim = ElectionSimulator(rng=MidpointRng())
        eu = Party("EU", "EU", 10, ideology=("Pro-European",))
        nat = Party("NAT", "NAT", 10, ideology=("Nationalist",))
        assert not sim.are_compatible(self.LIB, self.CON)
        assert not sim.are_compatible(self.CON, self.LIB)
        assert not sim.are_compatible(nat, eu)
        assert sim.are_compatible(self.LIB, self.MIX)

    def test_stability_by_size(self):
        assert ElectionSimulator.assess_coalition_stability([self.LIB]) == CoalitionStability.STABLE
        assert ElectionSimulator.assess_coalition_stability([self.LIB, self.MIX]) == CoalitionStability.FRAGILE
        assert ElectionSimulator.assess_coalition_stability(
            [self.LIB, self.MIX, self.CON]
        ) == CoalitionStability.UNSTABLE


class TestConfidence:
    """Tests for step 7."""

    def test_standard_uncertainty(self):
        confidence, factors = ElectionSimulator.assess_confidence(_scenario("Status Quo"), 55)
        assert confidence == 75
        assert factors == ["Standard polling uncertainty"]

    def test_volatile_youth_scenario(self):
        confidence, factors = ElectionSimulator.assess_confidence(_scenario("Youth Mobilization"), 50)
        assert confidence == 57
        assert factors == ["High scenario volatility", "Unpredictable youth vote"]

    def test_all_penalties(self):
        scenario = ElectionScenario(
            "storm",
            ScenarioFactors(economic_situation=-0.9, youth_engagement=0.8),
            events=("a", "b", "c", "d"),
        )
        confidence, factors = ElectionSimulator.assess_confidence(scenario, 30)
        assert confidence == 75 - 10 - 5 - 8 - 5
        assert len(factors) == 4

    def test_turnout_boundaries(self):
        scenario = _scenario("Status Quo")
        assert ElectionSimulator.assess_confidence(scenario, 40)[0] == 75
        assert ElectionSimulator.assess_confidence(scenario, 65)[0] == 75
        assert ElectionSimulator.assess_confidence(scenario, 65.1)[0] == 70


# =============================================================================
# Full runs
# =============================================================================

class TestSimulate:
    """Tests for end-to-end simulation."""

    @pytest.mark.parametrize("scenario", generate_scenarios(), ids=lambda s: s.name)
    def test_run_bounds(self, scenario, rng):
        result = ElectionSimulator(rng=rng).simulate(scenario)
        assert result.total_seats == 250
        assert 35 <= result.turnout <= 75
        assert 40 <= result.confidence <= 90
        assert 1 <= result.invalid_votes <= 3
        assert len(result.coalition_scenarios) <= 3
        assert result.winner is not None
        leader = sorted(result.results, key=lambda r: (-r.seats, r.party.id))[0]
        assert result.winner == leader.party

    def test_same_seed_same_result(self):
        scenario = _scenario("Economic Crisis")
        a = ElectionSimulator(rng=np.random.default_rng(11)).simulate(scenario)
        b = ElectionSimulator(rng=np.random.default_rng(11)).simulate(scenario)
        assert a.to_dict() == b.to_dict()

    def test_default_seed_from_settings(self, monkeypatch):
        monkeypatch.setenv("PULSE_SIMULATION_SEED", "3")
        scenario = _scenario("Status Quo")
        a = ElectionSimulator().simulate(scenario)
        b = ElectionSimulator(rng=np.random.default_rng(3)).simulate(scenario)
        assert a.to_dict() == b.to_dict()

    def test_seat_change(self):
        result = ElectionSimulator(rng=MidpointRng()).simulate(_scenario("Status Quo"))
        for r in result.results:
            previous = int(r.party.current_support * 2.5 + 0.5)
            assert r.change == r.seats - previous

    def test_results_keep_reference_parties(self, rng):
        result = ElectionSimulator(rng=rng).simulate(_scenario("Status Quo"))
        assert [r.party for r in result.results] == SERBIAN_PARTIES
        assert len(result.adjusted_parties) == len(SERBIAN_PARTIES)

    def test_threshold_applied(self):
        parties = [Party("A", "A", 60), Party("B", "B", 38), Party("C", "C", 2)]
        result = run_election_simulation(parties, SERBIAN_REGIONS, ElectionScenario("flat"), rng=MidpointRng())
        seats = result.seats_by_party()
        assert seats["C"] == 0
        assert seats["A"] + seats["B"] == 250

    def test_empty_party_list(self, rng):
        result = run_election_simulation([], SERBIAN_REGIONS, _scenario("Status Quo"), rng=rng)
        assert result.winner is None
        assert result.results == []
        assert result.coalition_scenarios == []

    def test_no_regions(self, rng):
        result = run_election_simulation(SERBIAN_PARTIES, [], _scenario("Status Quo"), rng=rng)
        assert result.total_seats == 0
        assert result.winner is None

    def test_wrong_scenario_type(self):
        with pytest.raises(PulseInputError):
            ElectionSimulator().simulate({"name": "Status Quo"})

    def test_to_dict(self, rng):
        payload = ElectionSimulator(rng=rng).simulate(_scenario("Status Quo")).to_dict()
        assert sum(r["seats"] for r in payload["results"]) == 250
        assert len(payload["regional_breakdown"]) == 4
