"""Tests for the query resolution API."""

import pytest
from fastapi.testclient import TestClient

from loganalytics.api import create_app

from tests.conftest import START_LITERAL

TIME_RANGE = {
    "from": "2024-03-01T09:30:00.250Z",
    "to": "2024-03-02T09:30:00.250Z",
    "raw_from": "now-24h",
    "raw_to": "now",
}


@pytest.fixture
def client():
    return TestClient(create_app())


class TestResolveEndpoint:
    """POST /api/queries/resolve"""

    def test_resolves_template(self, client):
        response = client.post(
            "/api/queries/resolve",
            json={
                "template": "T | where $__timeFilter() | summarize count() by bin(TimeGenerated, $__interval)",
                "time_range": TIME_RANGE,
                "interval": "5m",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["raw_query"] == (
            f"T | where TimeGenerated >= {START_LITERAL} "
            "| summarize count() by bin(TimeGenerated, 5m)"
        )
        assert "bin(TimeGenerated%2C%205m)" in data["uri_string"]

    def test_live_range_uses_now(self, client):
        response = client.post(
            "/api/queries/resolve",
            json={"template": "t <= $__to", "time_range": TIME_RANGE},
        )
        assert response.json()["raw_query"] == "t <= now()"

    def test_request_overrides(self, client):
        response = client.post(
            "/api/queries/resolve",
            json={
                "template": "$__timeFilter and $__contains(c, '*')",
                "time_range": TIME_RANGE,
                "default_time_column": "ts",
                "select_all_value": "*",
            },
        )
        assert response.json()["raw_query"] == f"ts >= {START_LITERAL} and 1 == 1"

    def test_settings_defaults_apply(self, client, monkeypatch):
        monkeypatch.setenv("LOGANALYTICS_DEFAULT_TIME_COLUMN", "timestamp")
        from loganalytics.config import reset_settings

        reset_settings()
        response = client.post(
            "/api/queries/resolve",
            json={"template": "$__timeFilter()", "time_range": TIME_RANGE},
        )
        assert response.json()["raw_query"] == f"timestamp >= {START_LITERAL}"

    def test_offset_timestamps_are_normalized(self, client):
        time_range = dict(TIME_RANGE, **{"from": "2024-03-01T11:30:00.250+02:00"})
        response = client.post(
            "/api/queries/resolve",
            json={"template": "$__from", "time_range": time_range},
        )
        assert response.json()["raw_query"] == START_LITERAL

    def test_missing_time_range_is_rejected(self, client):
        response = client.post("/api/queries/resolve", json={"template": "T"})
        assert response.status_code == 422

    def test_empty_column_override_is_rejected(self, client):
        response = client.post(
            "/api/queries/resolve",
            json={"template": "T", "time_range": TIME_RANGE, "default_time_column": ""},
        )
        assert response.status_code == 422


class TestMacrosEndpoint:
    """GET /api/macros"""

    def test_lists_builtin_macros(self, client):
        response = client.get("/api/macros")
        assert response.status_code == 200
        data = response.json()
        tokens = {m["token"] for m in data["macros"]}
        assert {"$__timeFilter", "$__contains", "$__interval", "$__from", "$__to"} <= tokens
        assert data["total_macros"] == len(data["macros"])
