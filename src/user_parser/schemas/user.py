"""Pydantic models for user records.

``UserLike`` is the loosely-typed shape accepted at the boundary; the
``UnverifiedUser`` / ``VerifiedUser`` pair is the validated domain value,
discriminated by its ``type`` field.  Attributes are snake_case, the wire
format (``model_validate`` input and :meth:`CommonFields.to_dict` output) is
camelCase.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from user_parser.schemas.primitives import (
    Char,
    EmailAddress,
    NonEmptyString50,
    PositiveInteger,
    Timestamp,
)

UNVERIFIED = "UnverifiedUser"
VERIFIED = "VerifiedUser"


class UserLike(BaseModel):
    """Anything carrying the three mandatory keys, values still unchecked.

    Absent and ``null`` optional keys both load as ``None``; unknown keys are
    ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, frozen=True, extra="ignore")

    first_name: Any
    last_name: Any
    email_address: Any
    middle_name_initial: Any = None
    remaining_readings: Any = None
    verified_date: Any = None


class CommonFields(BaseModel):
    """Fields shared by every user variant."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    first_name: NonEmptyString50
    last_name: NonEmptyString50
    email_address: EmailAddress
    middle_name_initial: Char | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase dict form, omitting an absent middle initial."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UnverifiedUser(CommonFields):
    type: Literal["UnverifiedUser"] = UNVERIFIED
    remaining_readings: PositiveInteger


class VerifiedUser(CommonFields):
    type: Literal["VerifiedUser"] = VERIFIED
    verified_date: Timestamp


User = Annotated[Union[UnverifiedUser, VerifiedUser], Field(discriminator="type")]
