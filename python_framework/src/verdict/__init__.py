"""
verdict: validation combinators for Python.

A Result is either a Success holding one value or a Failure holding one or
more messages. Checks return Results; two strategies compose them:

    from verdict import Result, chain, combine, collect

    def check_age(p: Person) -> Result[Person, str]:
        if p.age > 40:
            return Result.failure("Too old!")
        return Result.success(p)

    # Fail-fast: the first failing check stops the chain
    chain(Result.success(person), check_age, check_clothes)

    # Accumulating: every failure is reported, in argument order
    combine(check_age(person), check_clothes(person), combiner=lambda a, c: a)
    collect([check(person) for check in checks])
"""

from verdict.result import Check, Failure, Result, Success
from verdict.combinators import (
    chain,
    check,
    collect,
    collect_pairwise,
    combine,
    validate,
)
from verdict.runners import (
    CheckRunner,
    LoggingRunner,
    SequentialRunner,
    ThreadPoolRunner,
)
from verdict.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Check",
    "chain",
    "check",
    "collect",
    "collect_pairwise",
    "combine",
    "validate",
    "CheckRunner",
    "SequentialRunner",
    "ThreadPoolRunner",
    "LoggingRunner",
    "ResultAssertions",
]

__version__ = "1.0.0"
