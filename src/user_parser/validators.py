"""Record-level validation stages that run before variant dispatch.

1. :func:`parse_user_like` — shape guard.  A non-mapping or a mapping missing
   a mandatory key yields exactly one message.
2. :func:`validate_common_fields` — runs every common-field parser and
   reports *all* failures together.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from user_parser.parsers import (
    parse_email_address,
    parse_first_name,
    parse_last_name,
    parse_middle_name_initial,
    show_value,
)
from user_parser.result import Err, Ok, Result, combine
from user_parser.schemas.user import CommonFields, UserLike


class PartiallyValidUser(BaseModel):
    """Validated common fields plus the still-unchecked variant fields."""

    model_config = ConfigDict(frozen=True)

    common: CommonFields
    remaining_readings: Any = None
    verified_date: Any = None


def _serialize(value: Any) -> str:
    try:
        return json.dumps(value, default=show_value)
    except (TypeError, ValueError, RecursionError):
        return show_value(value)


def parse_user_like(value: Any) -> Result[UserLike]:
    """Accept any mapping that has ``firstName``, ``lastName`` and ``emailAddress``."""
    message = (
        "Input value must have at least firstName, lastName and emailAddress "
        f"properties, got: {_serialize(value)}"
    )
    if not isinstance(value, Mapping):
        return Err.of(message)
    try:
        return Ok(UserLike.model_validate(dict(value)))
    except ValidationError:
        return Err.of(message)


def validate_common_fields(record: UserLike) -> Result[PartiallyValidUser]:
    """Validate the fields every variant shares, accumulating all failures."""
    validated = combine(
        {
            "first_name": parse_first_name(record.first_name),
            "last_name": parse_last_name(record.last_name),
            "email_address": parse_email_address(record.email_address),
            "middle_name_initial": parse_middle_name_initial(record.middle_name_initial),
        }
    )
    return validated.map(
        lambda fields: PartiallyValidUser(
            common=CommonFields(**fields),
            remaining_readings=record.remaining_readings,
            verified_date=record.verified_date,
        )
    )
