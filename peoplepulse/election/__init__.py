"""Parliamentary election simulation with D'Hondt apportionment."""

from .dhondt import allocate_dhondt, eligible_parties
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
    ScenarioFactors,
    SimulationResult,
)
from .reference import SERBIAN_PARTIES, SERBIAN_REGIONS, generate_scenarios
from .simulator import ElectionSimulator, run_election_simulation

__all__ = [
    "allocate_dhondt",
    "eligible_parties",
    "CoalitionScenario",
    "CoalitionStability",
    "EconomicLevel",
    "ElectionScenario",
    "Party",
    "PartyResult",
    "Region",
    "RegionalResult",
    "RegionType",
    "ScenarioFactors",
    "SimulationResult",
    "SERBIAN_PARTIES",
    "SERBIAN_REGIONS",
    "generate_scenarios",
    "ElectionSimulator",
    "run_election_simulation",
]
