"""
Domain models: immutable value objects for people queueing at the door.

These are pure value objects with no behavior. The door checks in
`bouncer.domain.checks` read them; nothing ever modifies them.

All models are frozen dataclasses (immutable) following functional principles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from functools import total_ordering


@unique
class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


@total_ordering
@unique
class Sobriety(Enum):
    """
    How much someone has had to drink, from least to most.

    Members compare by their position in this scale, so a policy can refuse
    everyone "at or beyond" a given level.
    """

    SOBER = "sober"
    TIPSY = "tipsy"
    DRUNK = "drunk"
    PARALYTIC = "paralytic"
    UNCONSCIOUS = "unconscious"

    @property
    def level(self) -> int:
        return list(Sobriety).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sobriety):
            return NotImplemented
        return self.level < other.level


@dataclass(frozen=True, slots=True)
class Person:
    """
    Someone asking to get in.

    `clothes` is normalised to a tuple so a Person stays hashable and
    immutable even when built from a list.
    """

    gender: Gender
    age: int
    clothes: tuple[str, ...] = field(default=())
    sobriety: Sobriety = Sobriety.SOBER

    def __post_init__(self) -> None:
        object.__setattr__(self, "clothes", tuple(self.clothes))

    def wears(self, item: str) -> bool:
        """Case-insensitive check for an item of clothing."""
        wanted = item.casefold()
        return any(worn.casefold() == wanted for worn in self.clothes)
