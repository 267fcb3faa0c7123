"""
Name search over the catalog.

Public search matches on the masjid name only (case-insensitive substring). The admin
list filter is broader: it also matches the area and can narrow by city/area.
"""

from __future__ import annotations

from typing import Iterable

from jummahfinder.core.geo import Coordinate
from jummahfinder.domain.models import DEFAULT_CITY, Masjid, SearchResult, SearchStatus
from jummahfinder.search.proximity import sort_by_distance, with_distances

ALL = "All"


def search(query: str, catalog: Iterable[Masjid], origin: Coordinate | None = None) -> SearchResult:
    """Match `query` against masjid names; rank by distance when `origin` is known."""
    needle = (query or "").strip().casefold()
    if not needle:
        return SearchResult(query=query or "", status=SearchStatus.EMPTY_QUERY)

    matches = [m for m in catalog if needle in m.name.casefold()]
    if not matches:
        return SearchResult(query=query, status=SearchStatus.NO_MATCHES)

    items = matches if origin is None else sort_by_distance(with_distances(origin, matches))
    return SearchResult(query=query, status=SearchStatus.MATCHED, items=items)


def _selected(value: str | None) -> bool:
    return bool(value) and value != ALL


def filter_catalog(
    catalog: Iterable[Masjid],
    *,
    city: str | None = None,
    area: str | None = None,
    query: str = "",
) -> list[Masjid]:
    """Admin list filter: optional city/area equality plus name-or-area text match."""
    needle = (query or "").strip().casefold()
    out: list[Masjid] = []
    for m in catalog:
        if _selected(city) and (m.city or DEFAULT_CITY) != city:
            continue
        if _selected(area) and (m.area or "") != area:
            continue
        if needle and needle not in m.name.casefold() and needle not in (m.area or "").casefold():
            continue
        out.append(m)
    return out
