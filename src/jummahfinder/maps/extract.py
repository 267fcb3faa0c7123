"""
Coordinate extraction from map-service links.

Local matchers run first, in order, and the first hit wins:
1. `@lat,lng`         pinned position in place URLs
2. `q=lat,lng`        search query parameter
3. `!3d<lat>!4d<lng>` data parameter used by embeds
4. `daddr=lat,lng`    directions destination

Precise-marker shapes come before looser ones because a URL can carry several
numeric pairs (viewport and pin). Short links (e.g. `maps.app.goo.gl/...`) carry no
coordinates at all, so when every matcher misses we make one call to a resolver
(normally `BackendClient.resolve_coordinates`). Any failure there is reported as
`NOT_FOUND`; callers show a "could not extract" state and allow manual entry.

New URL shapes are added by appending a matcher to `MATCHERS`.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Protocol

import httpx

from jummahfinder.core.geo import Coordinate

logger = logging.getLogger(__name__)

NOT_FOUND = None

_NUM = r"(-?\d+\.\d+)"


class CoordinateResolver(Protocol):
    async def resolve_coordinates(self, url: str) -> Coordinate | None: ...


Matcher = Callable[[str], Coordinate | None]


def _pair_matcher(pattern: str) -> Matcher:
    regex = re.compile(pattern)

    def match(url: str) -> Coordinate | None:
        m = regex.search(url)
        if not m:
            return None
        try:
            return Coordinate(lat=float(m.group(1)), lng=float(m.group(2)))
        except ValueError:
            return None

    return match


match_at_position = _pair_matcher(rf"@{_NUM},{_NUM}")
match_query_param = _pair_matcher(rf"[?&]q={_NUM},{_NUM}")
match_data_param = _pair_matcher(rf"!3d{_NUM}!4d{_NUM}")
match_directions_destination = _pair_matcher(rf"daddr={_NUM},{_NUM}")

MATCHERS: list[Matcher] = [
    match_at_position,
    match_query_param,
    match_data_param,
    match_directions_destination,
]


def match_local(url: str, matchers: list[Matcher] | None = None) -> Coordinate | None:
    """Try each local matcher in order; return the first coordinate found."""
    for matcher in MATCHERS if matchers is None else matchers:
        coord = matcher(url)
        if coord is not None:
            return coord
    return None


async def extract_coordinates(url: str, resolver: CoordinateResolver | None = None) -> Coordinate | None:
    """Extract a coordinate from `url`, falling back to `resolver` for short links.

    Never raises for resolver failures; returns `NOT_FOUND` instead.
    """
    url = (url or "").strip()
    if not url:
        return NOT_FOUND

    coord = match_local(url)
    if coord is not None:
        return coord

    if resolver is None:
        logger.info("No local coordinate pattern matched and no resolver configured")
        return NOT_FOUND

    try:
        coord = await resolver.resolve_coordinates(url)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Server-side coordinate extraction failed: %s", e)
        return NOT_FOUND

    if coord is None:
        logger.info("Server-side coordinate extraction returned no result")
        return NOT_FOUND
    return coord
