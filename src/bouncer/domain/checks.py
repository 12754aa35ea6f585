"""
Door checks: the independent rules a person must pass to get in.

Each check is a pure function Person -> Result[Person, str]: it either hands
the person back unchanged or fails with one message. No check looks at
another check's outcome, which is what lets the accumulating strategies run
them all and report every reason at once.

The thresholds come from DoorPolicy, normally built from ClubSettings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from verdict import Check, Result

from bouncer.domain.models import Gender, Person, Sobriety

if TYPE_CHECKING:
    from bouncer.config import ClubSettings

TOO_YOUNG = "Too young!"
TOO_OLD = "Too old!"
SMARTEN_UP = "Smarten up!"
WEAR_HEELS = "Wear high heels!"
SOBER_UP = "Sober up!"
MEN_ONLY = "Men only"
WOMEN_ONLY = "Women only"


@dataclass(frozen=True, slots=True)
class DoorPolicy:
    """
    House rules for one club.

    `admitted_gender` of None means the door is open to everyone and
    check_gender always passes. Prices take part in equality but not in the
    hash.
    """

    min_age: int = 18
    max_age: int = 40
    required_for_men: tuple[str, ...] = ("Tie",)
    banned_for_women: tuple[str, ...] = ("Trainers",)
    refuse_at: Sobriety = Sobriety.DRUNK
    admitted_gender: Optional[Gender] = Gender.MALE
    prices: dict[Gender, int] = field(
        default_factory=lambda: {Gender.MALE: 5, Gender.FEMALE: 0}, hash=False
    )

    @classmethod
    def from_settings(cls, settings: ClubSettings) -> DoorPolicy:
        """Build the policy from a loaded ClubSettings."""
        return cls(
            min_age=settings.age.min_age,
            max_age=settings.age.max_age,
            required_for_men=tuple(settings.dress_code.required_for_men),
            banned_for_women=tuple(settings.dress_code.banned_for_women),
            refuse_at=settings.sobriety.refuse_at,
            admitted_gender=settings.admitted_gender,
            prices={
                Gender.MALE: settings.pricing.male,
                Gender.FEMALE: settings.pricing.female,
            },
        )

    # ──────────────────────── Checks ────────────────────────

    def check_age(self, person: Person) -> Result[Person, str]:
        if person.age < self.min_age:
            return Result.failure(TOO_YOUNG)
        if person.age > self.max_age:
            return Result.failure(TOO_OLD)
        return Result.success(person)

    def check_clothes(self, person: Person) -> Result[Person, str]:
        if person.gender is Gender.MALE:
            if not all(person.wears(item) for item in self.required_for_men):
                return Result.failure(SMARTEN_UP)
        elif any(person.wears(item) for item in self.banned_for_women):
            return Result.failure(WEAR_HEELS)
        return Result.success(person)

    def check_sobriety(self, person: Person) -> Result[Person, str]:
        if person.sobriety >= self.refuse_at:
            return Result.failure(SOBER_UP)
        return Result.success(person)

    def check_gender(self, person: Person) -> Result[Person, str]:
        if self.admitted_gender is None or person.gender is self.admitted_gender:
            return Result.success(person)
        return Result.failure(MEN_ONLY if self.admitted_gender is Gender.MALE else WOMEN_ONLY)

    # ──────────────────────── Pricing ────────────────────────

    def entry_price(self, person: Person) -> int:
        return self.prices[person.gender]

    def door_checks(self) -> list[Check[Person, Person, str]]:
        """The three entry checks every club applies, in the order the door asks them."""
        return [self.check_age, self.check_clothes, self.check_sobriety]

    def all_checks(self) -> list[Check[Person, Person, str]]:
        """Gender first, then the door checks."""
        return [self.check_gender, *self.door_checks()]
