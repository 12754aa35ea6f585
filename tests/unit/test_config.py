"""
Unit tests for ClubSettings: defaults, environment overrides and validation.

Settings are loaded with _env_file=None so a developer's .env cannot leak in.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bouncer.config import AgeSettings, ClubSettings, DressCodeSettings
from bouncer.domain.checks import DoorPolicy
from bouncer.domain.models import Gender, Sobriety
from bouncer.pipeline import Strategy


class TestDefaults:
    def test_defaults_match_house_rules(self) -> None:
        """
        GIVEN no environment overrides
        WHEN ClubSettings is loaded
        THEN the default house rules apply.
        """
        settings = ClubSettings(_env_file=None)
        assert settings.age.min_age == 18
        assert settings.age.max_age == 40
        assert settings.dress_code.required_for_men == ["Tie"]
        assert settings.dress_code.banned_for_women == ["Trainers"]
        assert settings.sobriety.refuse_at is Sobriety.DRUNK
        assert settings.pricing.male == 5
        assert settings.pricing.female == 0
        assert settings.admitted_gender is Gender.MALE
        assert settings.strategy is Strategy.FAIL_FAST
        assert settings.parallel_checks is False
        assert settings.log_level == "INFO"

    def test_default_settings_build_default_policy(self) -> None:
        assert DoorPolicy.from_settings(ClubSettings(_env_file=None)) == DoorPolicy()


class TestEnvironmentOverrides:
    def test_nested_values_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN BOUNCER_AGE__MAX_AGE=55 and BOUNCER_PRICING__MALE=12
        WHEN ClubSettings is loaded
        THEN the nested sections pick them up.
        """
        monkeypatch.setenv("BOUNCER_AGE__MAX_AGE", "55")
        monkeypatch.setenv("BOUNCER_PRICING__MALE", "12")
        settings = ClubSettings(_env_file=None)
        assert settings.age.max_age == 55
        assert settings.pricing.male == 12

    def test_enums_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_STRATEGY", "accumulate")
        monkeypatch.setenv("BOUNCER_SOBRIETY__REFUSE_AT", "tipsy")
        monkeypatch.setenv("BOUNCER_ADMITTED_GENDER", "female")
        settings = ClubSettings(_env_file=None)
        assert settings.strategy is Strategy.ACCUMULATE
        assert settings.sobriety.refuse_at is Sobriety.TIPSY
        assert settings.admitted_gender is Gender.FEMALE

    def test_enum_values_any_case(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN enum values in upper or mixed case
        WHEN ClubSettings is loaded
        THEN they parse like their lowercase values.
        """
        monkeypatch.setenv("BOUNCER_ADMITTED_GENDER", "FEMALE")
        monkeypatch.setenv("BOUNCER_SOBRIETY__REFUSE_AT", "Paralytic")
        monkeypatch.setenv("BOUNCER_STRATEGY", " COLLECT ")
        settings = ClubSettings(_env_file=None)
        assert settings.admitted_gender is Gender.FEMALE
        assert settings.sobriety.refuse_at is Sobriety.PARALYTIC
        assert settings.strategy is Strategy.COLLECT

    def test_blank_admitted_gender_opens_the_door(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_ADMITTED_GENDER", "")
        assert ClubSettings(_env_file=None).admitted_gender is None

    def test_list_from_json_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_DRESS_CODE__REQUIRED_FOR_MEN", '["Tie", "Jacket"]')
        settings = ClubSettings(_env_file=None)
        assert settings.dress_code.required_for_men == ["Tie", "Jacket"]

    def test_unprefixed_variables_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGE__MAX_AGE", "99")
        assert ClubSettings(_env_file=None).age.max_age == 40


class TestValidation:
    def test_inverted_age_window_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            AgeSettings(min_age=30, max_age=20)

    def test_negative_price_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_PRICING__FEMALE", "-1")
        with pytest.raises(ValidationError):
            ClubSettings(_env_file=None)

    def test_unknown_strategy_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_STRATEGY", "sideways")
        with pytest.raises(ValidationError):
            ClubSettings(_env_file=None)

    def test_zero_workers_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOUNCER_MAX_WORKERS", "0")
        with pytest.raises(ValidationError):
            ClubSettings(_env_file=None)

    def test_blank_dress_code_items_dropped(self) -> None:
        dress = DressCodeSettings(required_for_men=[" Tie ", "", "  "])
        assert dress.required_for_men == ["Tie"]
