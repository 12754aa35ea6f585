"""
Shared test fixtures for the bouncer test suite.

Provides the default door policy and a few representative people.
"""

from __future__ import annotations

import os

import pytest

from bouncer.domain.checks import DoorPolicy
from bouncer.domain.models import Gender, Person, Sobriety


@pytest.fixture()
def policy() -> DoorPolicy:
    """The default house rules: 18–40, tie for men, no trainers, refuse when drunk, men only."""
    return DoorPolicy()


@pytest.fixture()
def open_policy() -> DoorPolicy:
    """Default house rules with the door open to every gender."""
    return DoorPolicy(admitted_gender=None)


@pytest.fixture()
def smart_man() -> Person:
    """A man who passes every default check."""
    return Person(gender=Gender.MALE, age=28, clothes=("Tie", "Shirt"), sobriety=Sobriety.TIPSY)


@pytest.fixture()
def smart_woman() -> Person:
    """A woman who passes every default check except gender."""
    return Person(gender=Gender.FEMALE, age=25, clothes=("Dress", "Heels"), sobriety=Sobriety.SOBER)


@pytest.fixture(autouse=True)
def _clear_bouncer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BOUNCER_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("BOUNCER_"):
            monkeypatch.delenv(name)
