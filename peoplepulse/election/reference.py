"""
Serbian reference data for the election simulator.

Party priors, electoral regions and four named what-if scenarios.
"""

from typing import List

from .models import (
    EconomicLevel,
    ElectionScenario,
    Party,
    Region,
    RegionType,
    ScenarioFactors,
)

SERBIAN_PARTIES: List[Party] = [
    Party(
        id="SNS", name="Srpska Napredna Stranka", acronym="SNS",
        ideology=("Conservative", "Pro-European"),
        current_support=42, momentum=-0.5,
        strongholds=("Belgrade", "Novi Sad", "Central Serbia"),
        leader="Current Leadership", color="#2563eb",
    ),
    Party(
        id="SPS", name="Socijalistička Partija Srbije", acronym="SPS",
        ideology=("Socialist", "Left-wing"),
        current_support=12, momentum=0,
        strongholds=("Southern Serbia", "Rural areas"),
        leader="Socialist Leadership", color="#dc2626",
    ),
    Party(
        id="SSP", name="Stranka Slobode i Pravde", acronym="SSP",
        ideology=("Liberal", "Pro-European"),
        current_support=15, momentum=1.5,
        strongholds=("Belgrade", "Urban centers"),
        leader="Opposition Leadership", color="#10b981",
    ),
    Party(
        id="SRS", name="Srpska Radikalna Stranka", acronym="SRS",
        ideology=("Nationalist", "Right-wing"),
        current_support=8, momentum=-1,
        strongholds=("Vojvodina", "Border regions"),
        leader="Radical Leadership", color="#1e3a8a",
    ),
    Party(
        id="DS", name="Demokratska Stranka", acronym="DS",
        ideology=("Center-left", "Liberal"),
        current_support=10, momentum=0.5,
        strongholds=("Belgrade", "Novi Sad"),
        leader="Democratic Leadership", color="#eab308",
    ),
    Party(
        id="PSG", name="Pokret Slobodnih Građana", acronym="PSG",
        ideology=("Liberal", "Civic"),
        current_support=7, momentum=2,
        strongholds=("Belgrade", "Student areas"),
        leader="Civic Leadership", color="#8b5cf6",
    ),
    Party(
        id="Others", name="Other Parties", acronym="Others",
        ideology=("Mixed",),
        current_support=6, momentum=0,
        strongholds=("Various",),
        leader="Various", color="#6b7280",
    ),
]

SERBIAN_REGIONS: List[Region] = [
    Region(
        id="belgrade", name="Belgrade", population=1_700_000, registered_voters=1_300_000,
        turnout_history=58, urban_rural=RegionType.URBAN, economic_level=EconomicLevel.HIGH,
    ),
    Region(
        id="vojvodina", name="Vojvodina", population=1_900_000, registered_voters=1_500_000,
        turnout_history=52, urban_rural=RegionType.MIXED, economic_level=EconomicLevel.MEDIUM,
    ),
    Region(
        id="central-serbia", name="Central Serbia", population=2_800_000, registered_voters=2_200_000,
        turnout_history=48, urban_rural=RegionType.MIXED, economic_level=EconomicLevel.MEDIUM,
    ),
    Region(
        id="southern-serbia", name="Southern Serbia", population=900_000, registered_voters=700_000,
        turnout_history=45, urban_rural=RegionType.RURAL, economic_level=EconomicLevel.LOW,
    ),
]


def generate_scenarios() -> List[ElectionScenario]:
    """The standard what-if scenarios offered on the simulation page."""
    return [
        ElectionScenario(
            name="Status Quo",
            description="Current trends continue with no major changes",
            factors=ScenarioFactors(
                economic_situation=0, international_relations=0.2, social_stability=0.3,
                media_influence=0.1, youth_engagement=0.3, diaspora_participation=0.2,
            ),
            events=("Regular campaign period",),
        ),
        ElectionScenario(
            name="Economic Crisis",
            description="Economic downturn affects voter sentiment",
            factors=ScenarioFactors(
                economic_situation=-0.7, international_relations=-0.2, social_stability=-0.4,
                media_influence=0.3, youth_engagement=0.5, diaspora_participation=0.1,
            ),
            events=("Inflation spike", "Unemployment rise", "Currency devaluation"),
        ),
        ElectionScenario(
            name="EU Integration Progress",
            description="Positive developments in EU accession talks",
            factors=ScenarioFactors(
                economic_situation=0.4, international_relations=0.8, social_stability=0.5,
                media_influence=0.4, youth_engagement=0.7, diaspora_participation=0.5,
            ),
            events=("EU opens new chapters", "Foreign investment increase", "Visa liberalization"),
        ),
        ElectionScenario(
            name="Youth Mobilization",
            description="High youth turnout changes dynamics",
            factors=ScenarioFactors(
                economic_situation=0.1, international_relations=0.3, social_stability=0.2,
                media_influence=0.6, youth_engagement=0.9, diaspora_participation=0.6,
            ),
            events=("Student protests", "Social media campaigns", "Youth registration drive"),
        ),
    ]
