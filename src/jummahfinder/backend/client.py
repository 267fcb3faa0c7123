"""
REST backend client.

The backend owns storage of masjids, requests, reports and feedback; this package only
talks to it through a narrow async interface:
- `resolve_coordinates`: server-side coordinate extraction (handles short map links)
- `fetch_masjids`: catalog snapshot
- `submit_report` / `submit_request` / `submit_feedback`: public form submissions
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from jummahfinder.catalog.loader import parse_catalog
from jummahfinder.config.settings import Settings
from jummahfinder.core.geo import Coordinate
from jummahfinder.core.http import build_async_client, get_json, post_json
from jummahfinder.domain.models import Masjid
from jummahfinder.domain.submissions import Feedback, MasjidRequest, ReportSubmission

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _wire(model: BaseModel) -> dict[str, Any]:
    """Dump a submission with the backend's camelCase keys, leaving out unset values."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def coordinate_from_payload(payload: Any) -> Coordinate | None:
    """Read `{lat, lng}` from an extraction response; None if either is missing/invalid."""
    if not isinstance(payload, dict):
        return None
    lat = _as_float(payload.get("lat"))
    lng = _as_float(payload.get("lng"))
    if lat is None or lng is None:
        return None
    try:
        return Coordinate(lat=lat, lng=lng)
    except ValueError:
        return None


class BackendClient:
    """Async client for the Jummah Finder REST backend."""

    def __init__(
        self,
        settings: Settings,
        *,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._client = build_async_client(
            settings.backend.base_url,
            token=token or settings.backend.token,
            timeout_seconds=settings.app.http_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def resolve_coordinates(self, url: str) -> Coordinate | None:
        """Ask the backend to extract coordinates from `url`.

        Non-2xx responses and bodies without numeric `lat`/`lng` yield None.

        Raises:
            httpx.TransportError: On network failures.
            ValueError: If a 2xx response body is not valid JSON.
        """
        logger.info("Resolving coordinates server-side for %s", url)
        try:
            payload = await post_json(self._client, "/maps/extract", payload={"url": url})
        except httpx.HTTPStatusError as e:
            logger.warning("Coordinate extraction rejected (status=%s)", e.response.status_code)
            return None
        return coordinate_from_payload(payload)

    async def fetch_masjids(self) -> list[Masjid]:
        """Return the current masjid catalog; rows failing validation are skipped."""
        payload = await get_json(self._client, "/masjids")
        if not isinstance(payload, list):
            raise ValueError("Unexpected /masjids payload; expected a list.")
        return parse_catalog(payload)

    async def submit_report(self, report: ReportSubmission) -> Any:
        return await post_json(self._client, "/reports", payload=_wire(report))

    async def submit_request(self, request: MasjidRequest) -> Any:
        return await post_json(self._client, "/requests", payload=_wire(request))

    async def submit_feedback(self, feedback: Feedback) -> Any:
        return await post_json(self._client, "/feedbacks", payload=_wire(feedback))
