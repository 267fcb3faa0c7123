"""
Domain models (Pydantic).

These types are the stable "contract" between layers:
- catalog entities (`Masjid`, with its ordered `Shift` schedule and `Facilities`)
- ephemeral query output (`MasjidWithDistance`, `SearchResult`)

Catalog rows come from two places with slightly different key styles: the static
JSON catalog (`id`) and the REST backend (`_id`, camelCase). Validation aliases
accept both; the rest of the code (and every dump of these models) uses snake_case.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from jummahfinder.core.geo import Coordinate, format_distance

DEFAULT_CITY = "Bengaluru"


class Shift(BaseModel):
    """One scheduled congregation time (12-hour display string + optional language)."""

    time: str = ""
    lang: str = ""

    @field_validator("time", "lang", mode="before")
    @classmethod
    def _none_to_blank(cls, value: object) -> object:
        return "" if value is None else value


class Facilities(BaseModel):
    """Facility flags.

    `outsiders_allowed` is tri-state: `None` means no restriction was stated, which is
    kept distinct from an explicit `True`.
    """

    model_config = ConfigDict(populate_by_name=True)

    ladies: bool = False
    parking: bool = False
    outsiders_allowed: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("outsiders_allowed", "outsidersAllowed"),
    )

    @property
    def allows_outsiders(self) -> bool:
        return self.outsiders_allowed is not False


class Masjid(BaseModel):
    """A point of interest with a coordinate and a congregation schedule."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    shifts: list[Shift]
    facilities: Facilities = Field(default_factory=Facilities)
    verified: bool = False

    area: str | None = None
    city: str = DEFAULT_CITY
    map_link: str | None = Field(default=None, validation_alias=AliasChoices("map_link", "mapLink"))

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value

    @field_validator("name")
    @classmethod
    def _require_name(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("name must not be empty")
        return name

    @field_validator("city", mode="before")
    @classmethod
    def _default_city(cls, city: object) -> object:
        if city is None or (isinstance(city, str) and not city.strip()):
            return DEFAULT_CITY
        return city

    @model_validator(mode="after")
    def _require_shift(self) -> "Masjid":
        if not any(s.time.strip() for s in self.shifts):
            raise ValueError("masjid must have at least one shift with a time")
        return self

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)

    @property
    def primary_shift(self) -> Shift:
        return self.shifts[0]

    @property
    def marker_label(self) -> str:
        """Map pin label: the first shift time, flagged when more shifts follow."""
        time = self.primary_shift.time
        return f"1st {time}" if len(self.shifts) > 1 else time


class MasjidWithDistance(BaseModel):
    """A masjid annotated with its distance from a query origin (never persisted)."""

    masjid: Masjid
    distance_km: float = Field(..., ge=0)

    @property
    def distance_label(self) -> str:
        return format_distance(self.distance_km)


class SearchStatus(str, Enum):
    EMPTY_QUERY = "empty_query"
    NO_MATCHES = "no_matches"
    MATCHED = "matched"


class SearchResult(BaseModel):
    """Search output that keeps "nothing typed" apart from "typed, found nothing"."""

    query: str
    status: SearchStatus
    items: list[Masjid | MasjidWithDistance] = Field(default_factory=list)

    @property
    def has_query(self) -> bool:
        return self.status is not SearchStatus.EMPTY_QUERY

    @property
    def is_empty(self) -> bool:
        return not self.items
