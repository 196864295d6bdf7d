"""Success/failure values produced by hooks and entry points.

Commands and checks report failure either by returning ``Err`` or by raising.
Raised exceptions are captured as ``Err(exc)`` so that every failure is data
by the time it reaches the execution engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from command_toolkit.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError; an Err has no value to return."""
        msg = f"Called unwrap() on Err: {self.error!r}"
        raise UnwrapError(msg, error=self.error)


Result = Union[Ok[T], Err[E]]


def as_result(value: Any) -> Result[Any, Any]:
    """Wrap a plain return value in Ok, passing Ok/Err through unchanged."""
    if isinstance(value, (Ok, Err)):
        return value
    return Ok(value)
