"""
Test assertions for Result values.

Provides expressive assert helpers that produce clear failure messages.
They read the Result through .match(), like any other consumer.

Usage in tests:
    from verdict import ResultAssertions

    def test_admits_sober_adult():
        price = ResultAssertions.assert_success(cost_to_enter(person, policy))
        assert price == 5

    def test_refuses_old_drunk():
        ResultAssertions.assert_failure_messages(
            cost_to_enter_accumulating(person, policy),
            ["Too old!", "Sober up!"],
        )
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple, TypeVar

from verdict.result import Result

T = TypeVar("T")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" ({message})" if message else ""

        def _fail(msgs: Tuple[Any, ...]) -> T:
            raise AssertionError(f"Expected Success but got Failure({msgs!r}){context}")

        return result.match(lambda v: v, _fail)

    @staticmethod
    def assert_failure(result: Result[Any, E], message: str = "") -> Tuple[E, ...]:
        """
        Assert the Result is a Failure and return its messages.

            messages = ResultAssertions.assert_failure(result)
        """
        context = f" ({message})" if message else ""

        def _fail(v: Any) -> Tuple[E, ...]:
            raise AssertionError(f"Expected Failure but got Success({v!r}){context}")

        return result.match(_fail, lambda msgs: msgs)

    @staticmethod
    def assert_failure_messages(result: Result[Any, E], expected: Sequence[E]) -> None:
        """Assert the Result is a Failure with exactly these messages, in this order."""
        messages = ResultAssertions.assert_failure(result)
        assert messages == tuple(expected), (
            f"Expected failure messages {tuple(expected)!r} but got {messages!r}"
        )

    @staticmethod
    def assert_failure_message_contains(result: Result[Any, Any], substring: str) -> None:
        """Assert that at least one failure message contains the given substring."""
        messages = ResultAssertions.assert_failure(result)
        assert any(substring.lower() in str(m).lower() for m in messages), (
            f"Expected a failure message containing {substring!r} "
            f"but messages were: {messages!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[Any, Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
