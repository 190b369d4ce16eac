"""
Configuration settings for Feedcheck.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a FEEDCHECK_ prefixed variable, nested
scoring fields with a double underscore (FEEDCHECK_SCORING__BASE_POINTS=50).
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedcheck.game.scoring import ScoringRules

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class ScoringConfig(BaseModel):
    """Scoring constants applied by the challenge evaluator."""

    base_points: int = Field(default=100, ge=0)
    streak_step: float = Field(default=0.5, ge=0.0)
    max_multiplier: float = Field(default=3.0, ge=1.0)
    hint_penalty: float = Field(default=0.5, ge=0.0, le=1.0)

    def to_rules(self) -> ScoringRules:
        return ScoringRules(
            base_points=self.base_points,
            streak_step=self.streak_step,
            max_multiplier=self.max_multiplier,
            hint_penalty=self.hint_penalty,
        )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Content
    # ========================================
    data_dir: Path = Field(
        default=PACKAGE_DATA_DIR,
        description="Directory holding lessons.json and posts/<lesson_id>.json",
    )

    # ========================================
    # Persistence
    # ========================================
    storage_dir: Path = Field(
        default=Path.home() / ".feedcheck" / "storage",
        description="Directory for the local key-value store (one file per key)",
    )
    storage_key_prefix: str = Field(
        default="gameState-",
        description="Prefix of the per-lesson storage key",
    )

    # ========================================
    # Challenge flow
    # ========================================
    challenge_mode: Literal["binary", "technique"] = Field(
        default="binary",
        description="binary: is this an example? technique: which technique is used?",
    )
    on_wrong: Literal["retry", "complete"] = Field(
        default="retry",
        description="retry: post stays open after a wrong answer; complete: it is closed with 0 points",
    )
    advance_delay: float = Field(
        default=1.2,
        ge=0.0,
        description="Seconds to pause between an accepted answer and the next step",
    )
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Loguru level for stderr output",
    )

    def get_scoring_rules(self) -> ScoringRules:
        """Get the evaluator rules derived from the scoring section."""
        return self.scoring.to_rules()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
