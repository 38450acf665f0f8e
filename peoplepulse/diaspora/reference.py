"""Albanian diaspora communities tracked by default."""

from typing import List

from .models import DiasporaLocation, InfluenceLevel

ALBANIAN_DIASPORA: List[DiasporaLocation] = [
    DiasporaLocation(
        country="Italy", country_code="IT", population=500_000,
        main_cities=("Milan", "Rome", "Turin", "Florence"),
        social_platforms=("Facebook", "Instagram", "TikTok"),
        influence=InfluenceLevel.HIGH,
    ),
    DiasporaLocation(
        country="Greece", country_code="GR", population=450_000,
        main_cities=("Athens", "Thessaloniki"),
        social_platforms=("Facebook", "Instagram"),
        influence=InfluenceLevel.HIGH,
    ),
    DiasporaLocation(
        country="Germany", country_code="DE", population=300_000,
        main_cities=("Munich", "Stuttgart", "Frankfurt", "Berlin"),
        social_platforms=("Facebook", "Instagram", "TikTok"),
        influence=InfluenceLevel.MEDIUM,
    ),
    DiasporaLocation(
        country="Switzerland", country_code="CH", population=200_000,
        main_cities=("Zurich", "Geneva", "Basel"),
        social_platforms=("Facebook", "Instagram"),
        influence=InfluenceLevel.MEDIUM,
    ),
    DiasporaLocation(
        country="United Kingdom", country_code="UK", population=150_000,
        main_cities=("London", "Manchester", "Birmingham"),
        social_platforms=("Facebook", "Instagram", "Twitter"),
        influence=InfluenceLevel.MEDIUM,
    ),
    DiasporaLocation(
        country="United States", country_code="US", population=120_000,
        main_cities=("New York", "Detroit", "Boston", "Chicago"),
        social_platforms=("Facebook", "Instagram", "TikTok", "Twitter"),
        influence=InfluenceLevel.LOW,
    ),
    DiasporaLocation(
        country="Canada", country_code="CA", population=50_000,
        main_cities=("Toronto", "Montreal"),
        social_platforms=("Facebook", "Instagram"),
        influence=InfluenceLevel.LOW,
    ),
]

SAMPLE_TOPICS = (
    "EU Accession", "Corruption", "Elections", "Economy", "Migration",
    "Education", "Healthcare", "Infrastructure", "Justice Reform", "Tourism",
)
