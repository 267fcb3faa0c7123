"""
Jummah Finder CLI entrypoint.

Intended for quick local lookups and debugging without the web UI. Each subcommand
delegates to the same search/proximity/extraction functions the API uses.
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any

from jummahfinder.backend.client import BackendClient
from jummahfinder.catalog.loader import load_catalog
from jummahfinder.config.settings import get_settings
from jummahfinder.core.geo import Coordinate
from jummahfinder.core.logging import configure_logging
from jummahfinder.core.time import to_12h, to_24h
from jummahfinder.domain.models import Masjid, MasjidWithDistance
from jummahfinder.maps.extract import extract_coordinates
from jummahfinder.search.matcher import search
from jummahfinder.search.proximity import nearby


def _dump(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _print_item(i: int, item: Masjid | MasjidWithDistance) -> None:
    if isinstance(item, MasjidWithDistance):
        m = item.masjid
        suffix = f"  {item.distance_label}"
    else:
        m = item
        suffix = ""
    times = ", ".join(s.time for s in m.shifts if s.time)
    print(f"{i:>2}. {m.name} ({m.area or m.city})  [{times}]{suffix}")


def _catalog(args: argparse.Namespace) -> list[Masjid]:
    return load_catalog(args.catalog or get_settings().catalog.path)


def _cmd_nearby(args: argparse.Namespace) -> int:
    settings = get_settings()
    radius = settings.search.default_radius_km if args.radius_km is None else float(args.radius_km)
    results = nearby(Coordinate(lat=args.lat, lng=args.lng), radius, _catalog(args))

    if args.json:
        _dump([r.model_dump(mode="json") for r in results])
        return 0

    if not results:
        print(f"No masjids within {radius:g} km.")
        return 0
    for i, item in enumerate(results, start=1):
        _print_item(i, item)
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    origin = None
    if args.lat is not None or args.lng is not None:
        if args.lat is None or args.lng is None:
            raise ValueError("--lat and --lng must be given together")
        origin = Coordinate(lat=args.lat, lng=args.lng)
    result = search(args.query, _catalog(args), origin)

    if args.json:
        _dump(result.model_dump(mode="json"))
        return 0

    if not result.has_query:
        print("Type a name to search.")
        return 0
    if result.is_empty:
        print(f"No masjids found for '{result.query}'.")
        return 0
    for i, item in enumerate(result.items, start=1):
        _print_item(i, item)
    return 0


async def _extract(url: str) -> Coordinate | None:
    async with BackendClient(get_settings()) as client:
        return await extract_coordinates(url, resolver=client)


def _cmd_extract(args: argparse.Namespace) -> int:
    coord = asyncio.run(_extract(args.url))

    if args.json:
        _dump({"found": coord is not None, "lat": coord.lat if coord else None, "lng": coord.lng if coord else None})
        return 0 if coord else 1

    if coord is None:
        print("Could not extract coordinates; enter them manually.")
        return 1
    print(f"{coord.lat},{coord.lng}")
    return 0


def _cmd_time(args: argparse.Namespace) -> int:
    result = to_12h(args.value) if args.to == "12h" else to_24h(args.value)
    if args.json:
        _dump({"value": args.value, "to": args.to, "result": result})
    else:
        print(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the Jummah Finder CLI."""
    parser = argparse.ArgumentParser(prog="jummahfinder")
    sub = parser.add_subparsers(dest="command", required=True)

    near = sub.add_parser("nearby", help="List masjids within a radius, nearest first.")
    near.add_argument("--lat", required=True, type=float)
    near.add_argument("--lng", required=True, type=float)
    near.add_argument("--radius-km", dest="radius_km", type=float, default=None)
    near.add_argument("--catalog", type=str, default=None, help="Catalog JSON path (defaults to settings)")
    near.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    near.set_defaults(func=_cmd_nearby)

    srch = sub.add_parser("search", help="Search masjids by name.")
    srch.add_argument("query")
    srch.add_argument("--lat", type=float, default=None)
    srch.add_argument("--lng", type=float, default=None)
    srch.add_argument("--catalog", type=str, default=None)
    srch.add_argument("--json", action="store_true")
    srch.set_defaults(func=_cmd_search)

    ext = sub.add_parser("extract", help="Extract coordinates from a map link.")
    ext.add_argument("url")
    ext.add_argument("--json", action="store_true")
    ext.set_defaults(func=_cmd_extract)

    tm = sub.add_parser("time", help="Convert a schedule time between 12h and 24h forms.")
    tm.add_argument("value")
    tm.add_argument("--to", choices=["12h", "24h"], required=True)
    tm.add_argument("--json", action="store_true")
    tm.set_defaults(func=_cmd_time)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m jummahfinder.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except ValueError as e:
        parser.exit(2, f"error: {e}\n")


if __name__ == "__main__":
    raise SystemExit(main())
