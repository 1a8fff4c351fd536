"""Field-level parsers: ``Any -> Result``.

Each parser validates one raw value against a refined type and turns a
pydantic ``ValidationError`` into a single, field-specific message.  No
parser raises on bad input.
"""

from __future__ import annotations

import reprlib
from typing import Any, Callable, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from user_parser.result import Err, Ok, Result
from user_parser.schemas.primitives import (
    MAX_TIMESTAMP,
    MIN_TIMESTAMP,
    Char,
    EmailAddress,
    NonEmptyString50,
    PositiveInteger,
    Timestamp,
    is_number,
)

T = TypeVar("T")

Parser = Callable[[Any], Result[T]]

_name_adapter: TypeAdapter[str] = TypeAdapter(NonEmptyString50)
_char_adapter: TypeAdapter[str] = TypeAdapter(Char)
_email_adapter: TypeAdapter[str] = TypeAdapter(EmailAddress)
_positive_int_adapter: TypeAdapter[int] = TypeAdapter(PositiveInteger)
_timestamp_adapter: TypeAdapter[int] = TypeAdapter(Timestamp)

# Bounded depth and size so arbitrarily nested input never overflows the stack.
_value_repr = reprlib.Repr()
_value_repr.maxstring = 80
_value_repr.maxother = 80


def show_value(value: Any) -> str:
    """Short ``repr`` of an offending value for error messages."""
    return _value_repr.repr(value)


def _refine(adapter: TypeAdapter[T], value: Any, message: str) -> Result[T]:
    try:
        return Ok(adapter.validate_python(value))
    except ValidationError:
        return Err.of(message)


def parse_name(label: str) -> Parser[str]:
    """Build a parser for a 1..50 character name, reporting errors as *label*."""

    def parse(value: Any) -> Result[str]:
        return _refine(
            _name_adapter,
            value,
            f"{label} value must be a string (size between 1 and 50 chars), got: {show_value(value)}",
        )

    return parse


parse_first_name = parse_name("First name")
parse_last_name = parse_name("Last name")


def parse_email_address(value: Any) -> Result[str]:
    return _refine(
        _email_adapter,
        value,
        f"Email address value must be a valid email address, got: {show_value(value)}",
    )


def parse_middle_name_initial(value: Any) -> Result[Optional[str]]:
    """``None`` means absent and is accepted; anything else must be one character."""
    if value is None:
        return Ok(None)
    return _refine(
        _char_adapter,
        value,
        f"Middle name initial value must be a single character, got: {show_value(value)}",
    )


def parse_remaining_readings(value: Any) -> Result[int]:
    if not is_number(value):
        return Err.of(f"Remaining readings value must be a number, got: {show_value(value)}")
    return _refine(
        _positive_int_adapter,
        value,
        f"Remaining readings value must be a positive integer, got: {show_value(value)}",
    )


def parse_timestamp(value: Any) -> Result[int]:
    return _refine(
        _timestamp_adapter,
        value,
        "Timestamp value must be a valid timestamp (integer between "
        f"{MIN_TIMESTAMP} and {MAX_TIMESTAMP}), got: {show_value(value)}",
    )
