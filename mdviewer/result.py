"""Small success/failure result type used instead of exceptions for expected errors.

Core operations return ``Success(value)`` or ``Failure(error)``. Call sites
branch on ``isinstance(result, Failure)`` and keep error kinds distinct.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying one closed error kind."""

    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Wrap ``value`` as a success result."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Wrap ``error`` as a failure result."""
    return Failure(error)


__all__ = ["Success", "Failure", "Result", "success", "failure"]
