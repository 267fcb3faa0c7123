"""
User submissions (reports, new-masjid requests, feedback).

These are the payloads the public forms send to the backend. Builders here hold the
small amount of shaping the forms do before posting: dropping blank shift rows,
enforcing the shift cap and tagging a report with the shift it refers to.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from jummahfinder.domain.models import DEFAULT_CITY, Facilities, Masjid, Shift

MAX_SHIFTS = 5


class IssueType(str, Enum):
    INCORRECT_TIME = "incorrect_time"
    MOSQUE_CLOSED = "mosque_closed"
    OTHER = "other"


class ReportSubmission(BaseModel):
    """A correction report against an existing masjid."""

    model_config = ConfigDict(populate_by_name=True)

    masjid_id: str = Field(serialization_alias="masjidId")
    masjid_name: str = Field(serialization_alias="masjidName")
    issue_type: IssueType = Field(serialization_alias="issueType")
    correct_time: str = Field(default="", serialization_alias="correctTime")
    description: str = ""


class MasjidRequest(BaseModel):
    """A request to add a new masjid; coordinates are filled in by an admin on review."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    area: str
    city: str = DEFAULT_CITY
    map_link: str = Field(default="", serialization_alias="mapLink")
    lat: float = 0
    lng: float = 0
    shifts: list[Shift] = Field(min_length=1, max_length=MAX_SHIFTS)
    facilities: Facilities = Field(default_factory=Facilities)
    submitter_email: str = Field(default="", serialization_alias="submitterEmail")
    admin_note: str = Field(default="", serialization_alias="adminNote")

    @field_serializer("facilities")
    def _facilities_wire(self, facilities: Facilities) -> dict[str, Any]:
        # An unstated outsiders flag is left out of the payload.
        out: dict[str, Any] = {"ladies": facilities.ladies, "parking": facilities.parking}
        if facilities.outsiders_allowed is not None:
            out["outsidersAllowed"] = facilities.outsiders_allowed
        return out


class MasjidRequestDraft(BaseModel):
    """Raw form state for a new-masjid request (may contain blank shift rows)."""

    name: str
    area: str
    city: str = DEFAULT_CITY
    map_link: str = ""
    shifts: list[Shift] = Field(default_factory=lambda: [Shift()])
    facilities: Facilities = Field(default_factory=Facilities)
    notes: str = ""

    @field_validator("name", "area")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class Feedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(min_length=1)
    contact_email: str = Field(default="", serialization_alias="contactEmail")


def build_report(
    masjid: Masjid,
    *,
    issue_type: IssueType | str,
    correct_time: str = "",
    description: str = "",
    shift_index: int | None = None,
) -> ReportSubmission:
    """Build a report payload, appending which shift (if any) the user flagged."""
    if shift_index is None:
        context = "General/All Shifts"
    else:
        if not 0 <= shift_index < len(masjid.shifts):
            raise ValueError(f"shift_index {shift_index} out of range for {len(masjid.shifts)} shifts")
        shift = masjid.shifts[shift_index]
        context = f"Shift: {shift.time} ({shift.lang})"

    return ReportSubmission(
        masjid_id=masjid.id,
        masjid_name=masjid.name,
        issue_type=IssueType(issue_type),
        correct_time=correct_time,
        description=f"{description}\n\n[Context: {context}]",
    )


def build_request(draft: MasjidRequestDraft) -> MasjidRequest:
    """Turn form state into a request payload (blank shifts dropped)."""
    shifts = [s for s in draft.shifts if s.time.strip()]
    if not shifts:
        raise ValueError("at least one jamat time is required")
    if len(shifts) > MAX_SHIFTS:
        raise ValueError(f"at most {MAX_SHIFTS} shifts are allowed")

    return MasjidRequest(
        name=draft.name,
        area=draft.area,
        city=draft.city,
        map_link=draft.map_link,
        shifts=shifts,
        facilities=draft.facilities,
        admin_note=f"Notes: {draft.notes}",
    )
