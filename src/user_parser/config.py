"""Pydantic model for parser settings.

Settings come from an optional YAML file and may be overridden by
environment variables (``USER_PARSER_LOG_LEVEL``,
``USER_PARSER_REJECT_EXTRANEOUS_FIELDS``).  Invalid settings fail fast with a
pydantic ``ValidationError`` before any record is parsed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

ENV_PREFIX = "USER_PARSER_"


class ParserSettings(BaseModel):
    log_level: str = "INFO"
    # Report a non-null remainingReadings on a verified record instead of
    # silently dropping it.
    reject_extraneous_fields: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings(path: str | Path | None = None) -> ParserSettings:
    """Read settings from *path* (if given), then apply env overrides."""
    raw: dict[str, Any] = {}
    if path is not None:
        loaded = yaml.safe_load(Path(path).read_text())
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError(f"Settings file {path} must contain a mapping")
            raw.update(loaded)

    for field_name in ParserSettings.model_fields:
        env_value = os.environ.get(ENV_PREFIX + field_name.upper())
        if env_value:
            raw[field_name] = env_value

    return ParserSettings.model_validate(raw)
