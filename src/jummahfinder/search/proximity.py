"""
Proximity filtering and ranking.

Given an origin and a radius, keep the masjids within reach and order them nearest
first. Python's sort is stable, so masjids at identical distance keep catalog order.
"""

from __future__ import annotations

from typing import Iterable

from jummahfinder.core.geo import Coordinate, distance_km
from jummahfinder.domain.models import Masjid, MasjidWithDistance


def with_distances(origin: Coordinate, catalog: Iterable[Masjid]) -> list[MasjidWithDistance]:
    """Annotate each masjid with its distance from `origin` (catalog order kept)."""
    return [MasjidWithDistance(masjid=m, distance_km=distance_km(origin, m.coordinate)) for m in catalog]


def sort_by_distance(items: list[MasjidWithDistance]) -> list[MasjidWithDistance]:
    return sorted(items, key=lambda item: item.distance_km)


def nearby(origin: Coordinate, radius_km: float, catalog: Iterable[Masjid]) -> list[MasjidWithDistance]:
    """Return masjids within `radius_km` of `origin` (inclusive), nearest first."""
    if radius_km < 0:
        raise ValueError("radius_km must be >= 0")
    within = [item for item in with_distances(origin, catalog) if item.distance_km <= radius_km]
    return sort_by_distance(within)
