"""Variant validators — one per ``User`` variant, registered by tag.

Each validator receives a record whose common fields already passed, checks
the field unique to its variant and builds the tagged domain value.
"""

from __future__ import annotations

from typing import Any

from user_parser.config import ParserSettings
from user_parser.parsers import parse_remaining_readings, parse_timestamp, show_value
from user_parser.registry import register_variant
from user_parser.result import Err, Ok, Result, combine
from user_parser.schemas.user import UNVERIFIED, VERIFIED, UnverifiedUser, VerifiedUser
from user_parser.validators import PartiallyValidUser


def _reject_present(label: str, value: Any) -> Result[None]:
    if value is None:
        return Ok(None)
    return Err.of(f"{label} value must be absent for a verified user, got: {show_value(value)}")


@register_variant(UNVERIFIED)
def validate_unverified_user(
    record: PartiallyValidUser, settings: ParserSettings
) -> Result[UnverifiedUser]:
    return parse_remaining_readings(record.remaining_readings).map(
        lambda readings: UnverifiedUser(
            **record.common.model_dump(), remaining_readings=readings
        )
    )


@register_variant(VERIFIED)
def validate_verified_user(
    record: PartiallyValidUser, settings: ParserSettings
) -> Result[VerifiedUser]:
    if settings.reject_extraneous_fields:
        extraneous = _reject_present("Remaining readings", record.remaining_readings)
    else:
        extraneous = Ok(None)

    checked = combine(
        {
            "verified_date": parse_timestamp(record.verified_date),
            "remaining_readings": extraneous,
        }
    )
    return checked.map(
        lambda fields: VerifiedUser(
            **record.common.model_dump(), verified_date=fields["verified_date"]
        )
    )
