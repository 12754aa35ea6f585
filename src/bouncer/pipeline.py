"""
Pipeline: the door strategies, composed from the checks in DoorPolicy.

Domain layer: PURE BUSINESS LOGIC apart from one structured log event per
verdict. Check evaluation strategy (sequential or threaded) is injected as a
CheckRunner.

Three ways through the door:

  FAIL_FAST   check_age → check_clothes → check_sobriety → price
              The first refusal ends it; later checks never run.

  ACCUMULATE  check_age, check_clothes, check_sobriety evaluated side by side
              → combine → price, or every refusal reason in check order.

  COLLECT     check_gender, check_age, check_clothes, check_sobriety
              → collect → the four checked values, or every refusal reason.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Optional

import structlog
from verdict import CheckRunner, Result, SequentialRunner, chain, combine, validate

from bouncer.domain.checks import DoorPolicy
from bouncer.domain.models import Person

log = structlog.get_logger()


@unique
class Strategy(Enum):
    FAIL_FAST = "fail_fast"
    ACCUMULATE = "accumulate"
    COLLECT = "collect"


def cost_to_enter(person: Person, policy: DoorPolicy) -> Result[int, str]:
    """
    Fail-fast entry: stop at the first check that refuses.

    Returns Result[int, str] with the entry price on success, or the single
    message of the first failing check.
    """
    return chain(
        Result.success(person),
        policy.check_age,
        policy.check_clothes,
        policy.check_sobriety,
    ).map(policy.entry_price)


def cost_to_enter_accumulating(
    person: Person,
    policy: DoorPolicy,
    runner: Optional[CheckRunner] = None,
) -> Result[int, str]:
    """
    Accumulating entry: run every door check, report every refusal.

    Checks are evaluated independently on the same person, then combined;
    failure messages follow the order of policy.door_checks().
    """
    runner = runner or SequentialRunner()
    age, clothes, sobriety = runner.run(person, policy.door_checks())
    return combine(
        age,
        clothes,
        sobriety,
        combiner=lambda checked, _clothes, _sobriety: policy.entry_price(checked),
    )


def admit(
    person: Person,
    policy: DoorPolicy,
    runner: Optional[CheckRunner] = None,
) -> Result[list[Person], str]:
    """
    Run all four checks (gender included) and collect their outcomes.

    Success holds one checked value per check, in check order.
    """
    return validate(person, policy.all_checks(), runner)


def evaluate(
    person: Person,
    policy: DoorPolicy,
    strategy: Strategy = Strategy.FAIL_FAST,
    runner: Optional[CheckRunner] = None,
) -> Result[Any, str]:
    """
    Dispatch to the chosen strategy and log the verdict.

    A runner only affects the accumulating strategies; the fail-fast chain is
    always sequential.
    """
    match strategy:
        case Strategy.FAIL_FAST:
            result = cost_to_enter(person, policy)
        case Strategy.ACCUMULATE:
            result = cost_to_enter_accumulating(person, policy, runner)
        case Strategy.COLLECT:
            result = admit(person, policy, runner)
        case _:
            raise ValueError(f"Unknown strategy: {strategy!r}")

    return result.peek(lambda value: _log_admitted(strategy, person, value)).peek_failure(
        lambda reasons: log.info(
            "door.refused",
            strategy=strategy.value,
            age=person.age,
            reasons=list(reasons),
        )
    )


def _log_admitted(strategy: Strategy, person: Person, value: Any) -> None:
    if strategy is Strategy.COLLECT:
        log.info("door.admitted", strategy=strategy.value, age=person.age, checks_passed=len(value))
    else:
        log.info("door.admitted", strategy=strategy.value, age=person.age, price=value)
