"""Validation results — success and failure represented as plain values.

Parsers never raise on bad input.  They return ``Ok(value)`` or
``Err(errors)``, where ``errors`` is a non-empty tuple of messages.  Stages are
chained with :meth:`and_then` (short-circuit) and independent checks are
merged with :func:`combine` (accumulate every failure).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful validation carrying the refined *value*."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)


@dataclass(frozen=True)
class Err:
    """A failed validation carrying one or more violation messages."""

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Err requires at least one error message")

    @classmethod
    def of(cls, message: str, *more: str) -> Err:
        return cls((message, *more))

    @property
    def ok(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Err:
        return self


Result = Union[Ok[T], Err]


def combine(results: Mapping[str, Result[Any]]) -> Result[dict[str, Any]]:
    """Merge independent results keyed by field name.

    Returns ``Ok`` with a ``{field: value}`` dict when every result succeeded,
    otherwise a single ``Err`` holding all messages in the mapping's order.
    """
    errors = [
        message
        for result in results.values()
        if isinstance(result, Err)
        for message in result.errors
    ]
    if errors:
        return Err(tuple(errors))
    return Ok({name: result.value for name, result in results.items()})
