"""Parsing engine — the orchestrator.

``parse_user`` runs shape guard → common fields → variant dispatch.  Each
stage short-circuits the next on failure; the common-field stage reports every
failing field at once.

The dispatcher **never** calls a concrete variant validator.  It detects the
``type`` tag and resolves the validator through the registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

# Importing the module triggers the @register_variant decorators
import user_parser.variants  # noqa: F401

from user_parser.config import ParserSettings
from user_parser.registry import get_variant_validator
from user_parser.result import Result
from user_parser.schemas.user import UNVERIFIED, VERIFIED, User
from user_parser.validators import PartiallyValidUser, parse_user_like, validate_common_fields

logger = logging.getLogger(__name__)


def detect_user_type(record: PartiallyValidUser) -> str:
    """Only nullishness counts: ``0`` or ``""`` still mean "verified"."""
    if record.verified_date is None:
        return UNVERIFIED
    return VERIFIED


def dispatch(record: PartiallyValidUser, settings: ParserSettings) -> Result[User]:
    user_type = detect_user_type(record)
    validator = get_variant_validator(user_type)
    logger.debug("Routing record to %s (%s)", user_type, validator.__name__)
    return validator(record, settings)


def parse_user(raw: Any, settings: ParserSettings | None = None) -> Result[User]:
    """Parse an untrusted value into an ``UnverifiedUser`` or ``VerifiedUser``.

    Returns ``Ok(user)`` or ``Err(errors)``; never raises on bad input.
    """
    if settings is None:
        settings = ParserSettings()
    return (
        parse_user_like(raw)
        .and_then(validate_common_fields)
        .and_then(lambda record: dispatch(record, settings))
    )


# ------------------------------------------------------------------
# Batch helper
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Rejection:
    index: int
    errors: tuple[str, ...]


@dataclass
class BatchReport:
    users: list[User] = field(default_factory=list)
    rejections: list[Rejection] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.users) + len(self.rejections)

    @property
    def ok(self) -> bool:
        return not self.rejections


def parse_users(
    records: Iterable[Any], settings: ParserSettings | None = None
) -> BatchReport:
    """Parse every record, keeping valid users and logging rejections.

    A bad record never stops the batch.
    """
    report = BatchReport()
    for idx, raw in enumerate(records):
        result = parse_user(raw, settings)
        if not result.ok:
            report.rejections.append(Rejection(idx, result.errors))
            logger.warning(
                "record %d failed validation — %s", idx, "; ".join(result.errors)
            )
        else:
            report.users.append(result.value)

    logger.info(
        "%d/%d records passed validation (%d rejected)",
        len(report.users),
        report.total,
        len(report.rejections),
    )
    return report
