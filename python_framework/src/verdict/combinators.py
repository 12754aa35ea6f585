"""
Combinators: the two ways of composing many Results into one.

Fail-fast (monadic):
    chain(Result.success(person), check_age, check_clothes, check_sobriety)
    The first Failure stops the chain; later checks never run. Each step
    receives the value produced by the previous one, so evaluation is
    strictly left-to-right.

Accumulating (applicative):
    combine(check_age(p), check_clothes(p), check_sobriety(p), combiner=...)
    collect([check(p) for check in checks])
    Every input has already been evaluated; all failure messages are kept,
    concatenated in the order the inputs were supplied.

Accumulation only makes sense for independent checks: none of them may
depend on another's outcome.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from verdict.result import Check, Failure, Result, Success
from verdict.runners import CheckRunner, SequentialRunner

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


# ──────────────────────── Fail-fast ────────────────────────


def chain(initial: Result[Any, E], *steps: Callable[[Any], Result[Any, E]]) -> Result[Any, E]:
    """
    Thread a Result through a sequence of checks with bind.

    With no steps the initial Result is returned as-is.

        chain(Result.success(person), policy.check_age, policy.check_clothes)
    """
    result = initial
    for step in steps:
        if result.is_failure():
            break
        result = result.bind(step)
    return result


# ──────────────────────── Accumulating ────────────────────────


def collect(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """
    Collect Results into a Result of list, accumulating every failure.

    Success with all values (in input order) if every element succeeded,
    otherwise Failure with the concatenated messages of all failing elements.
    An empty input is vacuously successful: collect([]) == Success([]).

        collect([Success(1), Failure(("a",)), Failure(("b", "c"))])
        # → Failure(('a', 'b', 'c'))
    """
    values: list[T] = []
    messages: list[E] = []
    for result in results:
        match result:
            case Success(v):
                values.append(v)
            case Failure(msgs):
                messages.extend(msgs)
            case _:
                raise TypeError(f"collect() expects Results, got {type(result).__name__}")
    if messages:
        return Failure(messages)
    return Success(values)


def _append(acc: Result[List[T], E], item: Result[T, E]) -> Result[List[T], E]:
    return Success(lambda values: lambda v: [*values, v]).apply(acc).apply(item)


def collect_pairwise(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """
    Same contract as collect(), built as a left fold of pairwise apply.

    Seeded with Success([]), so it agrees with collect() on every input,
    including the empty one.
    """
    return reduce(_append, results, Success([]))


def combine(
    *results: Result[Any, E],
    combiner: Optional[Callable[..., R]] = None,
) -> Result[Any, E]:
    """
    Combine two or more independent Results, accumulating failures.

    Success(combiner(v1, ..., vn)) iff every input succeeded; without a
    combiner the success value is the tuple (v1, ..., vn). Otherwise a Failure
    with every failing input's messages, in argument order.

        combine(
            policy.check_age(person),
            policy.check_clothes(person),
            policy.check_sobriety(person),
            combiner=lambda p, _c, _s: policy.entry_price(p),
        )
    """
    if not results:
        raise ValueError("combine() requires at least one Result")
    if combiner is None:
        return collect(results).map(tuple)
    return collect(results).map(lambda values: combiner(*values))


# ──────────────────────── Building & running checks ────────────────────────


def check(predicate: Callable[[T], bool], message: E) -> Check[T, T, E]:
    """
    Build a check from a predicate: the value passes through on True.

        is_adult = check(lambda p: p.age >= 18, "Too young!")
        is_adult(person)  # → Success(person) or Failure(('Too young!',))
    """

    def run(value: T) -> Result[T, E]:
        if predicate(value):
            return Success(value)
        return Failure((message,))

    return run


def validate(
    value: T,
    checks: Sequence[Check[T, Any, E]],
    runner: Optional[CheckRunner] = None,
) -> Result[List[Any], E]:
    """
    Run independent checks over one value and collect their Results.

    The runner decides how the checks are evaluated (sequentially, on a
    thread pool, with logging); the outcome is ordered by `checks` either way.
    """
    runner = runner or SequentialRunner()
    return collect(runner.run(value, checks))
