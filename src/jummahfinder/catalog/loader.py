"""
Masjid catalog loader.

The catalog is a local JSON file (default: `data/masjids.json`) holding masjids with
coordinates and shift schedules. Rows are validated one by one into typed Pydantic
models; a row that breaks the model invariants (no shift time, bad coordinates) is
skipped with a warning rather than failing the whole catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from jummahfinder.core.env import resolve_project_path
from jummahfinder.domain.models import Masjid

logger = logging.getLogger(__name__)


def parse_catalog(rows: Iterable[Any]) -> list[Masjid]:
    """Validate raw catalog rows, dropping the ones that are not displayable."""
    out: list[Masjid] = []
    for index, row in enumerate(rows):
        try:
            out.append(Masjid.model_validate(row))
        except ValidationError as e:
            row_id = (row.get("id") or row.get("_id")) if isinstance(row, dict) else None
            logger.warning(
                "Skipping catalog row %s (id=%s): %d validation error(s)",
                index,
                row_id,
                e.error_count(),
            )
    return out


def load_catalog(path: str | Path) -> list[Masjid]:
    """Load and validate a masjid catalog JSON file."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Invalid catalog root in {resolved}; expected a list.")
    catalog = parse_catalog(payload)
    logger.info("Loaded %d/%d masjids from %s", len(catalog), len(payload), resolved)
    return catalog
