import asyncio

import httpx
import pytest

from jummahfinder.core.geo import Coordinate
from jummahfinder.maps.extract import NOT_FOUND, extract_coordinates, match_data_param, match_local


class _RecordingResolver:
    def __init__(self, result=None, exc: Exception | None = None):
        self.calls: list[str] = []
        self._result = result
        self._exc = exc

    async def resolve_coordinates(self, url: str):
        self.calls.append(url)
        if self._exc is not None:
            raise self._exc
        return self._result


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (
            "https://www.google.com/maps/place/Khadria+Masjid/@12.9259147,77.6765922,17z/data=!3m1",
            Coordinate(lat=12.9259147, lng=77.6765922),
        ),
        ("https://maps.google.com/?q=12.9279,77.6790", Coordinate(lat=12.9279, lng=77.679)),
        (
            "https://www.google.com/maps/embed?pb=!1m18!1m12!3m3!1d0!2d0!8m2!3d12.9121!4d77.6852",
            Coordinate(lat=12.9121, lng=77.6852),
        ),
        ("https://maps.google.com/maps?saddr=Current+Location&daddr=-33.8688,151.2093", Coordinate(lat=-33.8688, lng=151.2093)),
    ],
)
def test_match_local_recognizes_each_url_shape(url, expected):
    assert match_local(url) == expected


def test_at_position_wins_over_query_param():
    url = "https://www.google.com/maps/search/masjid/@12.9259,77.6766,15z?q=13.0000,78.0000"
    assert match_local(url) == Coordinate(lat=12.9259, lng=77.6766)


def test_explicit_empty_matcher_list_matches_nothing():
    url = "https://maps.google.com/?q=12.9279,77.6790"
    assert match_local(url, matchers=[]) is None
    assert match_local(url, matchers=[match_data_param]) is None


def test_out_of_range_pair_falls_through_to_next_pattern():
    # The "@" pair is not a valid coordinate, so the data-param pair is used instead.
    url = "https://www.google.com/maps/place/x/@95.1234,200.5678,10z/data=!3d12.9121!4d77.6852"
    assert match_local(url) == Coordinate(lat=12.9121, lng=77.6852)


def test_local_match_skips_resolver():
    resolver = _RecordingResolver(result=Coordinate(lat=1.0, lng=1.0))
    coord = asyncio.run(extract_coordinates("https://maps.google.com/?q=12.9279,77.6790", resolver))
    assert coord == Coordinate(lat=12.9279, lng=77.679)
    assert resolver.calls == []


def test_short_link_uses_resolver_exactly_once():
    resolver = _RecordingResolver(result=Coordinate(lat=12.9259, lng=77.6766))
    url = "https://maps.app.goo.gl/AbCdEf123"

    coord = asyncio.run(extract_coordinates(url, resolver))

    assert coord == Coordinate(lat=12.9259, lng=77.6766)
    assert resolver.calls == [url]


@pytest.mark.parametrize(
    "resolver",
    [
        _RecordingResolver(result=None),
        _RecordingResolver(exc=httpx.ConnectError("connection refused")),
        _RecordingResolver(exc=ValueError("bad json")),
    ],
)
def test_resolver_failure_is_not_found(resolver):
    coord = asyncio.run(extract_coordinates("https://maps.app.goo.gl/broken", resolver))
    assert coord is NOT_FOUND
    assert len(resolver.calls) == 1


def test_empty_url_and_missing_resolver():
    resolver = _RecordingResolver(result=Coordinate(lat=1.0, lng=1.0))
    assert asyncio.run(extract_coordinates("", resolver)) is NOT_FOUND
    assert resolver.calls == []
    assert asyncio.run(extract_coordinates("https://maps.app.goo.gl/x")) is NOT_FOUND
