import pytest
from pydantic import ValidationError

from jummahfinder.domain.models import Facilities, Masjid


def _row(**overrides):
    row = {
        "id": "1",
        "name": "Khadria Masjid",
        "lat": 12.9259,
        "lng": 77.6766,
        "shifts": [{"time": "1:15 PM", "lang": "Urdu"}, {"time": "2:00 PM", "lang": None}],
    }
    row.update(overrides)
    return row


def test_masjid_requires_a_shift_time():
    with pytest.raises(ValidationError):
        Masjid.model_validate(_row(shifts=[]))
    with pytest.raises(ValidationError):
        Masjid.model_validate(_row(shifts=[{"time": " ", "lang": "Urdu"}]))


def test_masjid_rejects_blank_name_and_bad_coordinates():
    with pytest.raises(ValidationError):
        Masjid.model_validate(_row(name="   "))
    with pytest.raises(ValidationError):
        Masjid.model_validate(_row(lat=120))


def test_masjid_keeps_shift_order_and_labels_primary():
    masjid = Masjid.model_validate(_row())
    assert [s.time for s in masjid.shifts] == ["1:15 PM", "2:00 PM"]
    assert masjid.shifts[1].lang == ""
    assert masjid.primary_shift.time == "1:15 PM"
    assert masjid.marker_label == "1st 1:15 PM"
    assert masjid.city == "Bengaluru"

    single = Masjid.model_validate(_row(shifts=[{"time": "1:30 PM"}], city=None))
    assert single.marker_label == "1:30 PM"
    assert single.city == "Bengaluru"


def test_masjid_accepts_backend_keys():
    row = _row(mapLink="https://maps.app.goo.gl/x")
    del row["id"]
    row["_id"] = "65ab"
    masjid = Masjid.model_validate(row)
    assert masjid.id == "65ab"
    assert masjid.map_link == "https://maps.app.goo.gl/x"


def test_outsiders_allowed_is_tri_state():
    unset = Facilities()
    assert unset.outsiders_allowed is None
    assert unset.allows_outsiders

    assert Facilities.model_validate({"outsidersAllowed": True}).allows_outsiders
    denied = Facilities.model_validate({"outsidersAllowed": False})
    assert not denied.allows_outsiders
    assert denied.model_dump(mode="json") == {"ladies": False, "parking": False, "outsiders_allowed": False}
