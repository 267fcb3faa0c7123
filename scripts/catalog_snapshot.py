from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from jummahfinder.backend.client import BackendClient
from jummahfinder.config.settings import get_settings
from jummahfinder.core.env import resolve_project_path
from jummahfinder.core.logging import configure_logging

logger = logging.getLogger("catalog_snapshot")


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


async def _fetch(include_unverified: bool) -> list[dict[str, Any]]:
    async with BackendClient(get_settings()) as client:
        masjids = await client.fetch_masjids()
    if not include_unverified:
        masjids = [m for m in masjids if m.verified]
    return [m.model_dump(mode="json", exclude_none=True) for m in masjids]


def main() -> int:
    ap = argparse.ArgumentParser(description="Snapshot the backend masjid catalog into a local JSON file.")
    ap.add_argument("--out", default=None, help="Output path (defaults to catalog.path from settings).")
    ap.add_argument("--include-unverified", action="store_true")
    args = ap.parse_args()

    configure_logging()
    out_path = resolve_project_path(args.out or get_settings().catalog.path)

    rows = asyncio.run(_fetch(args.include_unverified))
    rows.sort(key=lambda r: str(r.get("id") or ""))
    _write_json(out_path, rows)

    logger.info("Wrote %d masjids to %s", len(rows), out_path)
    print("Wrote catalog:", out_path)
    print("Masjids:", len(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
