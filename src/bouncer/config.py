"""
Configuration: typed, validated club settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables (12-factor app)
  - Fall back to .env file
  - Validate types and constraints at startup

Architecture: Only ClubSettings is a BaseSettings instance. Sub-settings are plain
BaseModel classes populated by ClubSettings via env_nested_delimiter="__", so the env
var BOUNCER_AGE__MAX_AGE maps to age.max_age, BOUNCER_PRICING__MALE maps to
pricing.male, etc.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bouncer.domain.models import Gender, Sobriety
from bouncer.pipeline import Strategy

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


def _lowercase(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class AgeSettings(BaseModel):
    """Inclusive age window for admission."""

    min_age: int = Field(default=18, ge=0, description="Youngest admitted age")
    max_age: int = Field(default=40, ge=0, description="Oldest admitted age")

    @model_validator(mode="after")
    def check_window(self) -> AgeSettings:
        """Reject a window that admits nobody."""
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            )
        return self


class DressCodeSettings(BaseModel):
    """
    Clothing rules.

    Men must wear every item in required_for_men; women must wear none of
    banned_for_women. Item names compare case-insensitively.
    """

    required_for_men: list[str] = Field(default_factory=lambda: ["Tie"])
    banned_for_women: list[str] = Field(default_factory=lambda: ["Trainers"])

    @field_validator("required_for_men", "banned_for_women")
    @classmethod
    def strip_items(cls, value: list[str]) -> list[str]:
        """Drop blank entries and surrounding whitespace."""
        return [item.strip() for item in value if item.strip()]


class SobrietySettings(BaseModel):
    """Anyone at or beyond refuse_at on the sobriety scale is turned away."""

    refuse_at: Sobriety = Field(default=Sobriety.DRUNK)

    @field_validator("refuse_at", mode="before")
    @classmethod
    def lowercase_level(cls, value: object) -> object:
        """Accept the level in any case, as the command line does."""
        return _lowercase(value)


class PricingSettings(BaseModel):
    """Entry price per gender."""

    male: int = Field(default=5, ge=0)
    female: int = Field(default=0, ge=0)


class ClubSettings(BaseSettings):
    """
    Root settings: aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables (BOUNCER_ prefix)
      2. .env file
      3. Default values

    admitted_gender restricts the door to one gender; leave it unset (or set
    it to an empty value) to admit everyone.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOUNCER_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    age: AgeSettings = Field(default_factory=AgeSettings)
    dress_code: DressCodeSettings = Field(default_factory=DressCodeSettings)
    sobriety: SobrietySettings = Field(default_factory=SobrietySettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    admitted_gender: Optional[Gender] = Field(default=Gender.MALE)

    strategy: Strategy = Field(default=Strategy.FAIL_FAST)
    parallel_checks: bool = Field(default=False)
    max_workers: Optional[int] = Field(default=None, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("admitted_gender", mode="before")
    @classmethod
    def blank_means_everyone(cls, value: object) -> object:
        """Treat an empty string from the environment as 'no restriction'."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("admitted_gender", "strategy", mode="before")
    @classmethod
    def lowercase_choice(cls, value: object) -> object:
        """Accept enum values in any case, as the command line does."""
        return _lowercase(value)
