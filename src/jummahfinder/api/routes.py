"""
API routes.

Endpoints:
- GET  `/api/masjids/nearby`: masjids within a radius of a point, nearest first.
- GET  `/api/masjids/search`: name search (distance-ranked when lat/lng are given).
- POST `/api/maps/extract`: coordinates from a map link (local patterns, then backend).
- GET  `/api/time/convert`: 12h <-> 24h schedule time conversion.
- GET  `/api/settings`: public settings for the UI (backend token removed).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from jummahfinder.backend.client import BackendClient
from jummahfinder.catalog.loader import load_catalog
from jummahfinder.config.settings import get_settings
from jummahfinder.core.geo import Coordinate
from jummahfinder.core.time import to_12h, to_24h
from jummahfinder.domain.models import DEFAULT_CITY, Masjid, MasjidWithDistance, SearchResult
from jummahfinder.maps.extract import extract_coordinates
from jummahfinder.search.matcher import search
from jummahfinder.search.proximity import nearby

router = APIRouter()


class ExtractRequest(BaseModel):
    url: str


class ExtractResponse(BaseModel):
    found: bool
    lat: float | None = None
    lng: float | None = None


@lru_cache
def _catalog() -> list[Masjid]:
    settings = get_settings()
    return load_catalog(settings.catalog.path)


_backend_client: BackendClient | None = None


def _backend() -> BackendClient:
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient(get_settings())
    return _backend_client


async def close_backend() -> None:
    """Close the shared backend client, if one was created."""
    global _backend_client
    client, _backend_client = _backend_client, None
    if client is not None:
        await client.aclose()


def _validation_error(e: ValueError) -> HTTPException:
    return HTTPException(status_code=400, detail={"code": "VALIDATION_ERROR", "message": str(e)})


def _origin(lat: float | None, lng: float | None) -> Coordinate | None:
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise ValueError("lat and lng must be given together")
    return Coordinate(lat=lat, lng=lng)


@router.get("/api/masjids/nearby", response_model=list[MasjidWithDistance])
def get_nearby(lat: float, lng: float, radius_km: float | None = None) -> list[MasjidWithDistance]:
    """Return masjids within `radius_km` (default from settings), nearest first."""
    settings = get_settings()
    radius = settings.search.default_radius_km if radius_km is None else radius_km
    try:
        if radius > settings.search.max_radius_km:
            raise ValueError(f"radius_km must be <= {settings.search.max_radius_km}")
        return nearby(Coordinate(lat=lat, lng=lng), radius, _catalog())
    except ValueError as e:
        raise _validation_error(e) from e


@router.get("/api/masjids/search", response_model=SearchResult)
def get_search(q: str = "", lat: float | None = None, lng: float | None = None) -> SearchResult:
    """Search masjids by name; `status` tells an empty query apart from no matches."""
    try:
        origin = _origin(lat, lng)
    except ValueError as e:
        raise _validation_error(e) from e
    return search(q, _catalog(), origin)


@router.post("/api/maps/extract", response_model=ExtractResponse)
async def post_extract(body: ExtractRequest) -> ExtractResponse:
    """Extract coordinates from a map link; `found=false` when nothing could be resolved."""
    coord = await extract_coordinates(body.url, resolver=_backend())
    if coord is None:
        return ExtractResponse(found=False)
    return ExtractResponse(found=True, lat=coord.lat, lng=coord.lng)


@router.get("/api/time/convert")
def get_time_convert(value: str = "", to: Literal["12h", "24h"] = Query(...)) -> dict:
    """Convert a schedule time between display (12h) and input (24h) forms."""
    try:
        converted = to_12h(value) if to == "12h" else to_24h(value)
    except ValueError as e:
        raise _validation_error(e) from e
    return {"value": value, "to": to, "result": converted}


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return safe-to-expose settings for UI defaults (credentials removed)."""
    settings = get_settings()
    return {
        "app": {"name": settings.app.name, "default_city": DEFAULT_CITY},
        "search": settings.search.model_dump(mode="json"),
    }
