"""Tests for the photo read endpoints."""

from datetime import datetime

import pytest
from conftest import make_photo


@pytest.fixture
def april_photos(db_session, seeded_locations):
    """Location 1: two photos on Apr 1, one on Apr 3, one on Apr 10. Location 2: one on Apr 3."""
    photos = [
        make_photo(1, datetime(2025, 4, 3, 9, 0), slot=1),
        make_photo(1, datetime(2025, 4, 1, 0, 0), slot=2),
        make_photo(1, datetime(2025, 4, 1, 0, 0), slot=1),
        make_photo(1, datetime(2025, 4, 10, 18, 30), slot=1),
        make_photo(2, datetime(2025, 4, 3, 12, 0), slot=1),
    ]
    db_session.add_all(photos)
    db_session.commit()
    return photos


def test_photos_for_location_sorted_by_date(client, april_photos):
    response = client.get("/api/photos/location/1")
    assert response.status_code == 200
    data = response.json()
    assert [p["date"][:10] for p in data] == ["2025-04-01", "2025-04-01", "2025-04-03", "2025-04-10"]
    # same timestamp: slot order
    assert data[0]["path"].endswith("_1.jpg")
    assert data[1]["path"].endswith("_2.jpg")
    assert all(p["locationId"] == 1 for p in data)


def test_photo_fields_are_camel_case(client, april_photos):
    photo = client.get("/api/photos/location/2").json()[0]
    assert set(photo) == {"id", "locationId", "date", "path", "caption", "metadata", "tags", "uploadedAt"}
    assert photo["metadata"] == {"width": 800, "height": 600, "size": 1234, "format": "jpg"}
    assert photo["path"] == "/uploads/locationPhotos/2/location_2_2025-04-03_1.jpg"


def test_date_range_filter_includes_whole_end_day(client, april_photos):
    response = client.get("/api/photos/location/1", params={"startDate": "2025-04-02", "endDate": "2025-04-03"})
    assert response.status_code == 200
    assert [p["date"][:10] for p in response.json()] == ["2025-04-03"]


def test_date_range_bounds_are_independent(client, april_photos):
    response = client.get("/api/photos/location/1", params={"startDate": "2025-04-03"})
    assert [p["date"][:10] for p in response.json()] == ["2025-04-03", "2025-04-10"]


def test_date_range_accepts_timestamps(client, april_photos):
    response = client.get(
        "/api/photos/location/1",
        params={"startDate": "2025-04-01T00:00:00Z", "endDate": "2025-04-03T09:00:00Z"},
    )
    assert len(response.json()) == 3


def test_invalid_date_bound_is_400(client, april_photos):
    response = client.get("/api/photos/location/1", params={"startDate": "April first"})
    assert response.status_code == 400
    assert "startDate" in response.json()["message"]


def test_end_bound_on_the_last_calendar_day(client, april_photos):
    response = client.get("/api/photos/location/1", params={"endDate": "9999-12-31"})
    assert response.status_code == 200
    assert len(response.json()) == 4


def test_timestamp_bound_before_year_one_is_400(client, april_photos):
    response = client.get("/api/photos/location/1", params={"startDate": "0001-01-01T00:00:00+01:00"})
    assert response.status_code == 400
    assert "startDate" in response.json()["message"]


def test_photos_for_unknown_location_is_empty_list(client, april_photos):
    response = client.get("/api/photos/location/99")
    assert response.status_code == 200
    assert response.json() == []


def test_photos_by_date_groups_per_day(client, april_photos):
    response = client.get("/api/photos/location/1/by-date")
    assert response.status_code == 200
    data = response.json()
    assert sorted(data) == ["2025-04-01", "2025-04-03", "2025-04-10"]
    assert len(data["2025-04-01"]) == 2
    assert [p["path"][-6:] for p in data["2025-04-01"]] == ["_1.jpg", "_2.jpg"]
    assert sum(len(v) for v in data.values()) == 4


def test_photos_by_date_empty_location_is_empty_mapping(client, seeded_locations):
    response = client.get("/api/photos/location/4/by-date")
    assert response.status_code == 200
    assert response.json() == {}


def test_photos_on_a_day_across_locations(client, april_photos):
    response = client.get("/api/photos/date/2025/4/3")
    assert response.status_code == 200
    assert sorted(p["locationId"] for p in response.json()) == [1, 2]


def test_photos_on_the_last_calendar_day(client, db_session, april_photos):
    db_session.add(make_photo(3, datetime(9999, 12, 31, 23, 59)))
    db_session.commit()
    response = client.get("/api/photos/date/9999/12/31")
    assert response.status_code == 200
    assert [p["locationId"] for p in response.json()] == [3]


def test_photos_on_invalid_day_is_400(client, april_photos):
    response = client.get("/api/photos/date/2025/2/30")
    assert response.status_code == 400


def test_get_single_photo(client, april_photos):
    photo_id = april_photos[0].id
    response = client.get(f"/api/photos/{photo_id}")
    assert response.status_code == 200
    assert response.json()["id"] == photo_id


def test_get_missing_photo_is_404(client, april_photos):
    response = client.get("/api/photos/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Photo not found"}


def test_photo_analysis_shape(client, april_photos):
    response = client.get(f"/api/photos/{april_photos[0].id}/analysis")
    assert response.status_code == 200
    data = response.json()
    assert data["totalPixels"] == 800 * 600
    assert 1 <= data["detections"] <= 8
    assert data["severity"] in {"Low", "Medium", "High"}
    assert {"wastePercentage", "sceneAreaM2", "recommendedAction"} <= set(data)


def test_photo_analysis_missing_photo_is_404(client, april_photos):
    assert client.get("/api/photos/nope/analysis").status_code == 404
