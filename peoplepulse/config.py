"""
People Pulse configuration loaded from environment variables.

Every field can be overridden with a ``PULSE_`` prefixed variable, e.g.
``PULSE_SIMULATION_SEED=7`` or ``PULSE_TOTAL_SEATS=140``.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the scoring engines."""

    log_level: str = Field(default="INFO", description="Root log level for the peoplepulse loggers.")

    # PPI
    trend_threshold: float = Field(
        default=2.0, description="Index change needed before a trend counts as improving/declining."
    )

    # Election simulation
    simulation_seed: int = Field(default=42, description="Seed used for deterministic simulation.")
    total_seats: int = Field(default=250, description="Seats in the simulated parliament.")
    electoral_threshold: float = Field(
        default=3.0, description="Minimum national vote percentage for seat allocation."
    )

    # Political ontology
    coalition_seat_threshold: int = Field(
        default=71, description="Seats a coalition needs in the 140-seat Albanian parliament."
    )

    # Corruption
    high_profile_interest: float = Field(
        default=70.0, description="Public interest above which a case counts as high profile."
    )

    # Diaspora
    homeland_country: str = Field(
        default="Albania", description="Destination country for narrative re-entry flows."
    )

    model_config = SettingsConfigDict(
        env_prefix="PULSE_",
        extra="ignore",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
