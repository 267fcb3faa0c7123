from __future__ import annotations

import pytest

from jummahfinder.domain.models import Masjid


def _make_masjid(
    id: str,
    name: str,
    lat: float,
    lng: float,
    *,
    shifts: list[dict] | None = None,
    area: str | None = None,
    city: str | None = None,
    **extra,
) -> Masjid:
    return Masjid.model_validate(
        {
            "id": id,
            "name": name,
            "lat": lat,
            "lng": lng,
            "shifts": shifts if shifts is not None else [{"time": "1:30 PM", "lang": "Urdu"}],
            "area": area,
            "city": city,
            **extra,
        }
    )


@pytest.fixture
def make_masjid():
    return _make_masjid


@pytest.fixture
def catalog() -> list[Masjid]:
    # Bellandur-area snapshot, deliberately not in distance order.
    # From "home": hop ~0.34 km, south ~1.8 km, far ~4.4 km.
    return [
        _make_masjid("far", "Tech Park Prayer Hall", 12.9569, 77.7011, area="Marathahalli"),
        _make_masjid("home", "Khadria Masjid", 12.9259, 77.6766, area="Bellandur"),
        _make_masjid("hop", "Masjid-e-Noor", 12.9279, 77.6790, area="Bellandur"),
        _make_masjid("south", "Jamia Masjid Sarjapur Road", 12.9121, 77.6852, area="Sarjapur Road"),
    ]
