"""Tests for the HTTP API.

Feed loading is replaced with FastAPI dependency overrides.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from quake_forecaster import api
from quake_forecaster.core.config import Config
from quake_forecaster.core.parser import parse_feed
from quake_forecaster.core.query import filter_earthquakes, hotspot


@pytest.fixture
def earthquakes(make_record):
    lines = [
        make_record(event_id="sf1", magnitude="2.5", latitude="37.7749",
                    longitude="-122.4194", time="2015-03-01T10:00:00.000Z"),
        make_record(event_id="sf2", magnitude="4.1", latitude="37.8044",
                    longitude="-122.2712", time="2015-03-02T10:00:00.000Z"),
        make_record(event_id="sf3", magnitude="3.3", latitude="37.7000",
                    longitude="-122.4000", time="2015-03-31T23:59:59.500Z"),
        make_record(event_id="la1", magnitude="5.6", latitude="34.0522",
                    longitude="-118.2437", time="2015-04-01T00:00:00.000Z"),
    ]
    return filter_earthquakes(parse_feed(lines))


@pytest.fixture
def config():
    return Config(feed_path="unused.csv", top_limit=2, hotspot_radius_km=20.0)


@pytest.fixture
def client(earthquakes, config):
    api.app.dependency_overrides[api.get_config] = lambda: config
    api.app.dependency_overrides[api.get_earthquakes] = lambda: earthquakes
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


class TestLookup:
    """Tests for GET /lookup."""

    def test_returns_sorted_matches(self, client):
        """Events in range and radius, largest first."""
        response = client.get("/lookup", params={
            "latitude": 37.7749,
            "longitude": -122.4194,
            "radius": 20,
            "start_date": "2015-03-01",
            "end_date": "2015-03-31",
        })

        assert response.status_code == 200
        body = response.json()
        assert [e["id"] for e in body["earthquakes"]] == ["sf2", "sf3", "sf1"]
        assert body["count"] == 3
        assert body["earthquakes"][0]["magnitude"] == 4.1

    def test_end_date_includes_whole_day(self, client):
        """An event late on the end date is included."""
        response = client.get("/lookup", params={
            "latitude": 37.7,
            "longitude": -122.4,
            "radius": 1,
            "start_date": "2015-03-31",
            "end_date": "2015-03-31",
        })

        assert [e["id"] for e in response.json()["earthquakes"]] == ["sf3"]

    def test_invalid_parameters(self, client):
        """Validation errors return 400 with messages."""
        response = client.get("/lookup", params={
            "latitude": 95,
            "longitude": 0,
            "radius": 10,
            "start_date": "2015-03-31",
            "end_date": "2015-03-01",
        })

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert any(e.startswith("latitude") for e in errors)
        assert "start_date: start/end date error" in errors

    def test_start_before_minimum_date(self, client):
        """Dates before the configured minimum are rejected."""
        response = client.get("/lookup", params={
            "latitude": 0,
            "longitude": 0,
            "radius": 10,
            "start_date": "2009-12-31",
            "end_date": "2015-03-01",
        })

        assert response.status_code == 400

    def test_missing_parameter(self, client):
        """A missing required parameter is a 422 from FastAPI."""
        response = client.get("/lookup", params={"latitude": 0})

        assert response.status_code == 422


class TestTopTen:
    """Tests for GET /top-ten."""

    def test_returns_top_limit(self, client):
        """Configured limit of largest events in the range."""
        response = client.get("/top-ten", params={
            "start_date": "2015-01-01",
            "end_date": "2015-12-31",
        })

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["earthquakes"]] == ["la1", "sf2"]

    def test_invalid_range(self, client):
        """start after end is a 400."""
        response = client.get("/top-ten", params={
            "start_date": "2015-12-31",
            "end_date": "2015-01-01",
        })

        assert response.status_code == 400


class TestHotspot:
    """Tests for GET /hotspot."""

    def test_returns_hotspot(self, client):
        """Second-ranked center of the San Francisco cluster."""
        response = client.get("/hotspot")

        assert response.status_code == 200
        body = response.json()
        assert body["radius_km"] == 20.0
        assert body["center"]["id"] == "sf2"
        assert body["count"] == 3
        assert [e["id"] for e in body["neighborhood"]] == ["sf1", "sf2", "sf3"]

    def test_too_few_events(self, earthquakes, config):
        """Fewer than two events is a 422."""
        api.app.dependency_overrides[api.get_config] = lambda: config
        api.app.dependency_overrides[api.get_earthquakes] = lambda: earthquakes[:1]
        try:
            response = TestClient(api.app).get("/hotspot")
        finally:
            api.app.dependency_overrides.clear()

        assert response.status_code == 422

    def test_rejects_non_positive_radius(self, client):
        """radius must be greater than zero."""
        assert client.get("/hotspot", params={"radius": 0}).status_code == 422

    def test_runs_in_threadpool(self):
        """The hotspot search is a plain function, off the event loop."""
        assert not inspect.iscoroutinefunction(api.get_hotspot)

    def test_reuses_hotspot_for_same_feed(self, client, monkeypatch):
        """Repeated requests compute the hotspot once per radius."""
        calls = []

        def counting_hotspot(events, radius_km):
            calls.append(radius_km)
            return hotspot(events, radius_km)

        monkeypatch.setattr(api, "hotspot", counting_hotspot)
        monkeypatch.setattr(api, "_hotspot_cache", {})

        first = client.get("/hotspot").json()
        second = client.get("/hotspot").json()
        client.get("/hotspot", params={"radius": 50})

        assert first == second
        assert calls == [20.0, 50.0]

    def test_recomputes_for_new_feed(self, earthquakes, config, monkeypatch):
        """A different earthquake list is not served a stale hotspot."""
        monkeypatch.setattr(api, "_hotspot_cache", {})
        api.app.dependency_overrides[api.get_config] = lambda: config
        try:
            api.app.dependency_overrides[api.get_earthquakes] = lambda: earthquakes
            assert TestClient(api.app).get("/hotspot").status_code == 200

            api.app.dependency_overrides[api.get_earthquakes] = lambda: earthquakes[:1]
            response = TestClient(api.app).get("/hotspot")
        finally:
            api.app.dependency_overrides.clear()

        assert response.status_code == 422


class TestFeedFailure:
    """Tests for feed loading failures."""

    def test_unreadable_feed_is_502(self, tmp_path, monkeypatch):
        """A feed that cannot be read gives 502."""
        monkeypatch.setattr(api, "_earthquake_cache", [])
        config = Config(feed_path=str(tmp_path / "missing.csv"))
        api.app.dependency_overrides[api.get_config] = lambda: config
        try:
            response = TestClient(api.app).get("/hotspot")
        finally:
            api.app.dependency_overrides.clear()

        assert response.status_code == 502


def test_health():
    """Health check is always healthy."""
    assert TestClient(api.app).get("/health").json() == {"status": "healthy"}
