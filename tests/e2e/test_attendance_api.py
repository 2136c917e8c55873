"""End-to-end tests for attendance and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from attend.interface.api.app import create_app
from attend.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client(monkeypatch):
    """Create test client against an office at El Mansoura."""
    monkeypatch.setenv("OFFICE__LATITUDE", "31.0417")
    monkeypatch.setenv("OFFICE__LONGITUDE", "31.3778")
    monkeypatch.setenv("OFFICE__RADIUS_METERS", "100")
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    return TestClient(app_instance)


class TestAttendanceEndpoints:
    """End-to-end tests for the geofence check."""

    def test_at_office(self, client):
        # Act
        response = client.post(
            "/attendance/eligibility", json={"latitude": 31.0417, "longitude": 31.3778}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["admissible"] is True
        assert body["distance"] == 0
        assert body["radius_meters"] == 100

    def test_outside_radius(self, client):
        # Act
        response = client.post(
            "/attendance/eligibility", json={"latitude": 31.0427, "longitude": 31.3778}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["admissible"] is False
        assert body["direction_to_office"] == "S"
        assert body["reported_position"] == {"latitude": 31.0427, "longitude": 31.3778}
        assert body["message"] == "Outside office radius"

    def test_out_of_range_latitude(self, client):
        # Act
        response = client.post(
            "/attendance/eligibility", json={"latitude": 91, "longitude": 31.3778}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_coordinates"

    def test_missing_longitude(self, client):
        # Act
        response = client.post("/attendance/eligibility", json={"latitude": 31.0})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestHealthEndpoint:
    """Health check."""

    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
