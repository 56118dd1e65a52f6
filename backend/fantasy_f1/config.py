"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Package root: backend/fantasy_f1/
PACKAGE_ROOT = Path(__file__).parent
# Content directory: backend/fantasy_f1/content/
CONTENT_DIR = PACKAGE_ROOT / "content"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Reference data ===
    content_dir: Path = Field(
        default=CONTENT_DIR,
        description="Directory holding cards.yaml and rosters/<season>.yaml"
    )

    # === Power cards ===
    cards_first_season: int = Field(
        default=2026,
        description="First season in which power cards affect scoring"
    )
    default_grid_size: int = Field(
        default=20,
        description="Grid size assumed when a race has no classified results"
    )

    # === Deck building ===
    driver_deck_slots: int = Field(default=12)
    team_deck_slots: int = Field(default=10)
    max_gold_team_cards: int = Field(default=1)

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... as well as upper case."""
        return v.upper()

    model_config = ConfigDict(
        env_prefix="FANTASY_F1_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
