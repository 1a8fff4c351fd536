"""Read raw records from local JSON or JSON Lines files.

A ``.json`` file holding a top-level array is a batch of records; any other
JSON value is a single record.  A ``.jsonl`` file holds one record per
non-blank line.  Records are returned exactly as decoded: validating them is
the engine's job.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> list[Any]:
    """Return the raw records stored in *path*."""
    path = Path(path)
    text = path.read_text()

    if path.suffix == ".jsonl":
        records = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{lineno}: invalid JSON ({exc})") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc})") from exc
        records = data if isinstance(data, list) else [data]

    logger.info("Loaded %d records from %s", len(records), path)
    return records
