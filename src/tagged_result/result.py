"""Result type for explicit success/failure values.

A ``Result`` is exactly one of two frozen variants:

- ``Success(value)``: the computation produced ``value``.
- ``Failure(error)``: the computation failed with ``error``.

There is no shared base class. Each variant implements the full method set
directly, so every call branches once, on the variant itself. Both variants
support structural pattern matching.

Example:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return failure("Division by zero is not allowed")
        return success(a / b)

    match divide(10, 2):
        case Success(value):
            print(f"Quotient: {value}")
        case Failure(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import dataclasses
import logging
from typing import Any, ClassVar, Literal, Never, TypeGuard

from tagged_result.errors import ResultError

log = logging.getLogger(__name__)

_UNWRAP_HINT = "Check is_success() first, or use unwrap_or() / unwrap_tuple()"
_UNWRAP_ERROR_HINT = (
    "Check is_failure() first, or use error_or_none() / unwrap_tuple()"
)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[S]:
    """A successful outcome holding ``value``."""

    value: S

    tag: ClassVar[Literal["success"]] = "success"

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def unwrap(self) -> S:
        """Return the success value."""
        return self.value

    def unwrap_error(self) -> Never:
        """Raise ``ResultError``: a Success holds no error."""
        log.debug(
            "unwrap_error() called on Success carrying %s", type(self.value).__name__
        )
        raise ResultError(
            "Called unwrap_error on a Success value", hint=_UNWRAP_ERROR_HINT
        )

    def unwrap_or[T](self, fallback: T) -> S | T:
        """Return the success value; ``fallback`` is ignored."""
        del fallback
        return self.value

    def unwrap_tuple(self) -> tuple[S, None]:
        """Return ``(value, None)``."""
        return (self.value, None)

    def value_or_none(self) -> S:
        return self.value

    def error_or_none(self) -> None:
        return None

    def map[U](self, fn: Callable[[S], U]) -> Success[U]:
        """Apply ``fn`` to the value and wrap the output in a new Success.

        ``fn`` runs exactly once. Anything it raises propagates unchanged.
        """
        return Success(fn(self.value))

    def match[U](
        self,
        *,
        on_success: Callable[[S], U],
        on_failure: Callable[[Any], U],
    ) -> U:
        """Call ``on_success`` with the value and return its result."""
        del on_failure
        return on_success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed outcome holding ``error``.

    The error payload is opaque: it is never inspected, copied or wrapped.
    """

    error: E

    tag: ClassVar[Literal["failure"]] = "failure"

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        """Raise ``ResultError``: a Failure holds no success value."""
        log.debug("unwrap() called on Failure carrying %s", type(self.error).__name__)
        raise ResultError("Called unwrap on a Failure value", hint=_UNWRAP_HINT)

    def unwrap_error(self) -> E:
        """Return the error payload (the same object, not a copy)."""
        return self.error

    def unwrap_or[T](self, fallback: T) -> T:
        """Return ``fallback``."""
        return fallback

    def unwrap_tuple(self) -> tuple[None, E]:
        """Return ``(None, error)``."""
        return (None, self.error)

    def value_or_none(self) -> None:
        return None

    def error_or_none(self) -> E:
        return self.error

    def map(self, fn: Callable[[Any], object]) -> Failure[E]:
        """Return this Failure unchanged; ``fn`` is never called."""
        del fn
        return self

    def match[U](
        self,
        *,
        on_success: Callable[[Any], U],
        on_failure: Callable[[E], U],
    ) -> U:
        """Call ``on_failure`` with the error and return its result."""
        del on_success
        return on_failure(self.error)


# E defaults to Never: a Result[S] can only ever be a Success.
type Result[S, E = Never] = Success[S] | Failure[E]

# An awaitable that resolves to a Result. Purely a typing alias.
type AsyncResult[S, E = Never] = Awaitable[Result[S, E]]


def success[S](value: S) -> Success[S]:
    """Build a Result in the success state."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Build a Result in the failure state."""
    return Failure(error)


def is_success[S, E](result: Result[S, E]) -> TypeGuard[Success[S]]:
    """Narrow ``result`` to ``Success`` for static type checkers."""
    return result.is_success()


def is_failure[S, E](result: Result[S, E]) -> TypeGuard[Failure[E]]:
    """Narrow ``result`` to ``Failure`` for static type checkers."""
    return result.is_failure()
