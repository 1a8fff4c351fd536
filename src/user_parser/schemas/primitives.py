"""Refined field types for user records.

Each type is a pydantic ``Annotated`` constraint set.  Values of these types
only come out of validation (see :mod:`user_parser.parsers` and the user
models), so holding one is proof that the constraint was checked.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field, StringConstraints

MIN_TIMESTAMP = -8_640_000_000_000_000
MAX_TIMESTAMP = 8_640_000_000_000_000
MAX_NAME_LENGTH = 50

# RFC 5322-style address: dot-atom or quoted local part, then a hostname or a
# bracketed IPv4 / general address literal.
_DOT_ATOM = r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
_QUOTED_LOCAL = (
    r'"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]'
    r'|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*"'
)
_HOSTNAME = r"(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_ADDRESS_LITERAL = (
    r"\[(?:" + _OCTET + r"\.){3}(?:" + _OCTET
    + r"|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]"
    + r"|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\]"
)

EMAIL_PATTERN = re.compile(
    "(?:" + _DOT_ATOM + "|" + _QUOTED_LOCAL + ")@(?:" + _HOSTNAME + "|" + _ADDRESS_LITERAL + ")",
    re.IGNORECASE,
)


def is_number(value: Any) -> bool:
    """True for ``int`` and ``float`` values; ``bool`` is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _match_email(value: str) -> str:
    if EMAIL_PATTERN.search(value) is None:
        raise ValueError(f"{value!r} is not a valid email address")
    return value


def _require_integer(value: Any) -> Any:
    # Runs before the int schema so that strings and bools are never coerced
    # and integral floats such as 3.0 (as JSON decoders may emit) become ints.
    if not is_number(value):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


NonEmptyString50 = Annotated[
    str, StringConstraints(strict=True, min_length=1, max_length=MAX_NAME_LENGTH)
]

Char = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=1)]

EmailAddress = Annotated[str, StringConstraints(strict=True), AfterValidator(_match_email)]

PositiveInteger = Annotated[int, Field(gt=0), BeforeValidator(_require_integer)]

Timestamp = Annotated[
    int,
    Field(ge=MIN_TIMESTAMP, le=MAX_TIMESTAMP),
    BeforeValidator(_require_integer),
]
