import json

import pytest

from jummahfinder.catalog.loader import load_catalog


def test_load_catalog_skips_rows_without_shift_times(tmp_path, caplog):
    path = tmp_path / "masjids.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Khadria Masjid", "lat": 12.9259, "lng": 77.6766, "shifts": [{"time": "1:30 PM"}]},
                {"id": 2, "name": "No Times", "lat": 12.93, "lng": 77.68, "shifts": [{"time": ""}]},
                {"id": 3, "name": "Bad Coords", "lat": 123.0, "lng": 77.68, "shifts": [{"time": "1:00 PM"}]},
            ]
        ),
        encoding="utf-8",
    )

    with caplog.at_level("WARNING", logger="jummahfinder.catalog.loader"):
        catalog = load_catalog(path)

    assert [m.id for m in catalog] == ["1"]
    assert "id=2" in caplog.text and "id=3" in caplog.text


def test_load_catalog_rejects_non_list_root(tmp_path):
    path = tmp_path / "masjids.json"
    path.write_text(json.dumps({"masjids": []}), encoding="utf-8")
    with pytest.raises(ValueError, match="expected a list"):
        load_catalog(path)
