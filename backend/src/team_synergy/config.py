"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled seed data shipped with the package
DEFAULT_KNOWLEDGE_DIR = Path(__file__).parent / "knowledge"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Knowledge directory (env var: KNOWLEDGE_DIR). Empty = bundled seed data.
    knowledge_dir: str = ""

    @computed_field
    @property
    def knowledge_path(self) -> Path:
        """Resolve the knowledge directory to a Path."""
        if self.knowledge_dir:
            return Path(self.knowledge_dir)
        return DEFAULT_KNOWLEDGE_DIR

    # Scoring knobs
    roster_size: int = 6
    high_impact_threshold: int = 7  # Team-ups at or above this score are "high impact"
    local_search_max_iterations: int = 20
    recommendation_limit: int = 3
    counter_weight: float = 2.0  # One counter point ~ two synergy points


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
