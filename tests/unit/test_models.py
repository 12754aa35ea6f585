"""
Unit tests for domain models: value objects.

Verifies frozen dataclass behavior, clothing normalisation
and the sobriety ordering.
"""

from __future__ import annotations

import pytest

from bouncer.domain.models import Gender, Person, Sobriety


class TestPerson:
    """Verify Person value object behavior."""

    def test_clothes_list_normalised_to_tuple(self) -> None:
        """
        GIVEN clothes passed as a list
        WHEN a Person is created
        THEN clothes is stored as a tuple in the same order.
        """
        person = Person(gender=Gender.MALE, age=30, clothes=["Tie", "Jeans"])  # type: ignore[arg-type]
        assert person.clothes == ("Tie", "Jeans")

    def test_defaults(self) -> None:
        """
        GIVEN only gender and age
        WHEN a Person is created
        THEN they wear nothing and are sober.
        """
        person = Person(gender=Gender.FEMALE, age=22)
        assert person.clothes == ()
        assert person.sobriety is Sobriety.SOBER

    def test_frozen_prevents_mutation(self) -> None:
        """
        GIVEN a frozen Person
        WHEN attempting to modify a field
        THEN an AttributeError (FrozenInstanceError) is raised.
        """
        person = Person(gender=Gender.MALE, age=30)
        with pytest.raises(AttributeError):
            person.age = 31  # type: ignore[misc]

    def test_equal_people_are_equal_and_hashable(self) -> None:
        a = Person(gender=Gender.MALE, age=30, clothes=["Tie"])  # type: ignore[arg-type]
        b = Person(gender=Gender.MALE, age=30, clothes=("Tie",))
        assert a == b
        assert len({a, b}) == 1

    def test_wears_is_case_insensitive(self) -> None:
        person = Person(gender=Gender.MALE, age=30, clothes=("tie",))
        assert person.wears("Tie")
        assert not person.wears("Jacket")


class TestSobriety:
    """Verify the sobriety scale ordering."""

    def test_scale_is_ordered(self) -> None:
        levels = list(Sobriety)
        assert levels == sorted(levels)
        assert Sobriety.SOBER < Sobriety.TIPSY < Sobriety.DRUNK < Sobriety.PARALYTIC

    def test_at_or_beyond(self) -> None:
        assert Sobriety.DRUNK >= Sobriety.DRUNK
        assert Sobriety.UNCONSCIOUS >= Sobriety.DRUNK
        assert not Sobriety.TIPSY >= Sobriety.DRUNK

    def test_lookup_by_value(self) -> None:
        assert Sobriety("paralytic") is Sobriety.PARALYTIC
