"""
Check runners: separate WHICH checks run (pure) from HOW they are evaluated.

The accumulating combinators only need the list of Results; they do not care
whether the checks behind it ran one after another or side by side. Runners
own that decision:

  - SequentialRunner  → one after another, on the calling thread
  - ThreadPoolRunner  → concurrently, via concurrent.futures
  - LoggingRunner     → wraps another runner with timing and outcome logs

Every runner returns Results in the declared order of the checks, never in
completion order, so merged failure messages are deterministic.

Runners are for independent checks only. Fail-fast chains (bind / chain)
feed each step with the previous step's value and always run sequentially.

Usage:
    runner = LoggingRunner(ThreadPoolRunner(max_workers=4), operation="door")
    results = runner.run(person, [check_age, check_clothes, check_sobriety])
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from verdict.result import Check, Result

T = TypeVar("T")
E = TypeVar("E")
logger = logging.getLogger("verdict.runners")


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class CheckRunner(Protocol):
    """
    Protocol for check runners.

    Any class implementing run(value, checks) satisfies this protocol via
    structural typing: no explicit inheritance needed.
    """

    def run(self, value: T, checks: Sequence[Check[T, Any, E]]) -> List[Result[Any, E]]:
        """Evaluate every check against value; results in declaration order."""
        ...


# ──────────────────────── Sequential ────────────────────────


class SequentialRunner:
    """
    Evaluate checks one after another on the calling thread.

    The default runner; also what tests use when evaluation order must be
    observable.
    """

    def run(self, value: T, checks: Sequence[Check[T, Any, E]]) -> List[Result[Any, E]]:
        return [check(value) for check in checks]


# ──────────────────────── Thread pool ────────────────────────


class ThreadPoolRunner:
    """
    Evaluate checks concurrently on a thread pool.

    Results are gathered by declaration index, so the output order matches
    `checks` no matter which check finishes first. An exception raised by a
    check propagates to the caller.

        runner = ThreadPoolRunner(max_workers=4)
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._max_workers = max_workers

    def run(self, value: T, checks: Sequence[Check[T, Any, E]]) -> List[Result[Any, E]]:
        if not checks:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [pool.submit(check, value) for check in checks]
            return [future.result() for future in futures]


# ──────────────────────── Logging ────────────────────────


class LoggingRunner:
    """
    Runner that logs entry, exit, duration and failing-check count.

    Wraps another runner (decorator pattern) to add observability.

        runner = LoggingRunner(ThreadPoolRunner(), operation="door")
    """

    def __init__(
        self,
        inner: CheckRunner | None = None,
        operation: str = "checks",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or SequentialRunner()
        self._operation = operation
        self._log_level = log_level

    def run(self, value: T, checks: Sequence[Check[T, Any, E]]) -> List[Result[Any, E]]:
        logger.log(self._log_level, "[%s] Running %d checks", self._operation, len(checks))
        start = time.monotonic()

        try:
            results = self._inner.run(value, checks)
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "[%s] Check raised after %.3fs: %s",
                self._operation,
                elapsed,
                e,
            )
            raise

        elapsed = time.monotonic() - start
        failed = sum(1 for r in results if r.is_failure())
        logger.log(
            self._log_level,
            "[%s] Completed in %.3fs, %d of %d checks failed",
            self._operation,
            elapsed,
            failed,
            len(results),
        )
        return results
