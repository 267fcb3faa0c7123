"""
HTTP helpers.

This module centralizes the minimal async HTTP logic used by the backend client.

Design goals:
- Small surface area (GET JSON, POST JSON).
- Deterministic defaults (timeout + User-Agent).
- Raise on non-2xx so callers can decide how to fail (the coordinate extractor
  turns failures into "not found").
"""

from __future__ import annotations

from typing import Any

import httpx


DEFAULT_USER_AGENT = "jummahfinder/0.1.0 (+https://local)"


def build_async_client(
    base_url: str,
    *,
    token: str | None = None,
    timeout_seconds: float = 15,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with default headers (and bearer auth if given)."""
    headers = {"User-Agent": DEFAULT_USER_AGENT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=timeout_seconds,
        transport=transport,
    )


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, Any] | None = None,
) -> Any:
    """GET `url` and return the decoded JSON response.

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status codes.
        ValueError: If the response body is not valid JSON.
    """
    resp = await client.get(url, params=params)
    resp.raise_for_status()
    return resp.json()


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    payload: Any,
) -> Any:
    """POST `payload` as a JSON body and return the decoded JSON response (None if empty).

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status codes.
        ValueError: If the response body is not valid JSON.
    """
    resp = await client.post(url, json=payload)
    resp.raise_for_status()
    if not resp.content:
        return None
    return resp.json()
