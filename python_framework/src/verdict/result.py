"""
Result type: the core of the validation combinators.

A Result[T, E] is either Success(value: T) or Failure(messages: tuple[E, ...]).
Checks return Results instead of raising, and the two composition strategies
decide how several Results merge into one:

    fail-fast (bind)                 accumulating (apply / combine / collect)

    ┌────────┐ bind ┌────────┐        ┌────────┐
    │ check1 │──────│ check2 │──→     │ check1 │──┐
    └───┬────┘      └───┬────┘        └────────┘  │
        │ Failure       │ Failure     ┌────────┐  ├──→ Success(all values)
        └───────────────┴──────→      │ check2 │──┤    or Failure(every message,
                                      └────────┘  │       in input order)
                                      ┌────────┐  │
                                      │ check3 │──┘
                                      └────────┘

Design choices:
  - @dataclass(frozen=True) variants: immutable, value equality for free
  - match/case (Python 3.10+) for consumption; .match() is the eliminator
  - No unwrap/value() accessor: contents come out through .match() only
  - Failure always holds at least one message; an empty Failure is a bug
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


class Result(Generic[T, E]):
    """
    Two-variant validation result.

      - Success(value: T): the check passed
      - Failure(messages: (E, ...)): one or more failure messages, in order

    Transformations never mutate a Result; each returns a new one.

    Usage:
        >>> Result.success(20).map(lambda age: age + 1)
        Success(21)

        >>> Result.failure("Too old!").map(lambda age: age + 1)
        Failure(('Too old!',))

        >>> Result.success(41).match(
        ...     on_success=lambda age: f"age {age}",
        ...     on_failure=lambda msgs: ", ".join(msgs),
        ... )
        'age 41'
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    # ──────────────────────── Elimination ────────────────────────

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Tuple[E, ...]], R],
    ) -> R:
        """
        Apply exactly one of two functions depending on the variant.

        This is the only sanctioned way to get at the contents of a Result:

            result.match(
                on_success=lambda price: f"Pay {price}",
                on_failure=lambda msgs: "; ".join(msgs),
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(msgs):
                return on_failure(msgs)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value. Failures pass through untouched.

            Result.success(5).map(lambda x: x * 2)    # → Success(10)
            Result.failure("no").map(lambda x: x * 2)  # → Failure(('no',))
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def map_failures(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform every failure message, keeping their order. Success passes through."""
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case Failure(msgs):
                return Failure(mapper(m) for m in msgs)
        raise TypeError("unreachable")  # pragma: no cover

    def bind(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning check. Short-circuits on failure.

        This is the fail-fast operator: once a Failure appears, no later
        mapper is invoked and that Failure is the outcome of the chain.

        Equivalent to Haskell's >>=, Rust's .and_then(), LINQ's SelectMany.

            def check_age(p: Person) -> Result[Person, str]:
                if p.age > 40:
                    return Result.failure("Too old!")
                return Result.success(p)

            Result.success(person).bind(check_age).bind(check_clothes)
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    flat_map = bind

    def ensure(self, predicate: Callable[[T], bool], message: E) -> Result[T, E]:
        """
        Validate the success value against a condition, fail-fast.

            Result.success(person).ensure(lambda p: p.age >= 18, "Too young!")
        """
        return self.bind(
            lambda v: Success(v) if predicate(v) else Failure((message,))
        )

    def apply(self, argument: Result[Any, E]) -> Result[Any, E]:
        """
        Apply a wrapped one-argument function to a wrapped argument, accumulating.

        Unlike bind, both sides are inspected: when both are failures the
        output carries this Result's messages followed by the argument's.

            (
                Result.success(lambda a: lambda b: a + b)
                .apply(Result.failure("left"))
                .apply(Result.failure("right"))
            )  # → Failure(('left', 'right'))
        """
        match (self, argument):
            case (Success(fn), Success(a)):
                return Success(fn(a))
            case (Success(_), Failure(_)):
                return argument
            case (Failure(_), Success(_)):
                return self
            case (Failure(left), Failure(right)):
                return Failure(left + right)
        raise TypeError(
            f"apply() expects a Result argument, got {type(argument).__name__}"
        )

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Execute a side effect on the success value without altering the Result.

            result.peek(lambda price: log.info("door.price", price=price))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[Tuple[E, ...]], Any]) -> Result[T, E]:
        """Execute a side effect on the failure messages without altering the Result."""
        match self:
            case Failure(msgs):
                action(msgs)
        return self

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(message: E) -> Result[Any, E]:
        """Create a failed Result carrying a single message."""
        return Failure((message,))

    @staticmethod
    def failure_from(messages: Iterable[E]) -> Result[Any, E]:
        """
        Create a failed Result from a non-empty sequence of messages.

        Raises ValueError on an empty sequence.

            Result.failure_from(["Too old!", "Sober up!"])
        """
        return Failure(messages)

    @staticmethod
    def from_optional(value: Optional[T], message: E) -> Result[T, E]:
        """
        Create a Result from a value that may be None.

            Result.from_optional(form.get("age"), "Age is required")
        """
        if value is not None:
            return Success(value)
        return Failure((message,))

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """The success track: wraps exactly one value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """The failure track: wraps a non-empty tuple of messages."""

    _messages: Tuple[E, ...]

    def __init__(self, messages: Iterable[E]) -> None:
        if isinstance(messages, (str, bytes)):
            raise TypeError(
                "Failure expects a sequence of messages, not a single string; "
                "use Result.failure(message)"
            )
        collected = tuple(messages)
        if not collected:
            raise ValueError("Failure requires at least one message")
        object.__setattr__(self, "_messages", collected)

    def __repr__(self) -> str:
        return f"Failure({self._messages!r})"


# Enable structural pattern matching: case Failure(messages)
Failure.__match_args__ = ("_messages",)


Check = Callable[[T], Result[U, E]]
"""A pure, total validation rule: domain value in, Result out."""
