"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Game settings loaded from environment variables (prefix ``ARENA_``)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARENA_",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # Combatant setup
    player1_name: str = "Gopher 1"
    player2_name: str = "Gopher 2"
    starting_hitpoints: int = 30
    starting_coins: int = 20

    # Economy
    training_cost: int = 5
    training_increment: int = 2
    work_min_coins: int = 5
    work_max_coins: int = 15

    # Randomness (None = seed from the OS)
    rng_seed: int | None = None

    # Combat log output
    combat_log_path: str | None = None  # Readable log is written here when the match ends

    @model_validator(mode="after")
    def check_economy(self) -> "Settings":
        """Reject constants that would break the economy rules or the name lookup."""
        if self.training_cost < 0:
            raise ValueError("training_cost must be non-negative")
        if self.training_increment < 0:
            raise ValueError("training_increment must be non-negative")
        if self.work_min_coins < 0:
            raise ValueError("work_min_coins must be non-negative")
        if self.work_min_coins > self.work_max_coins:
            raise ValueError("work_min_coins must not exceed work_max_coins")
        if self.player1_name == self.player2_name:
            raise ValueError("player1_name and player2_name must differ")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
