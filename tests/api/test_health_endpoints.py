# This file tests API health, readiness, version, and metrics endpoints.
# It exists to validate operational contracts used by orchestration and monitoring.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from tests.api.support import FakeDBClient, api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["api_version"] == "v1"
    assert payload["schema_version"] == config.schema_version
    assert payload["request_id"]
    assert response.headers["x-request-id"] == payload["request_id"]
    assert "x-response-time-ms" in response.headers


def test_health_endpoint_echoes_incoming_request_id() -> None:
    with api_test_client(db_client=FakeDBClient()) as client:
        response = client.get("/health", headers={"x-request-id": "req-abc"})

    assert response.json()["request_id"] == "req-abc"
    assert response.headers["x-request-id"] == "req-abc"


def test_ready_endpoint_reflects_store_tables() -> None:
    with api_test_client(db_client=FakeDBClient(connected=True)) as client:
        response = client.get("/ready")

    assert response.status_code == 200
    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["customer_store_ready"] is True
    assert payload["credit_store_ready"] is True
    assert payload["ready"] is True
    assert payload["database"] == "reachable"


def test_ready_endpoint_not_ready_when_credit_table_missing() -> None:
    db_client = FakeDBClient(connected=True, existing_tables={"customer"})
    with api_test_client(db_client=db_client) as client:
        payload = client.get("/ready").json()

    assert payload["customer_store_ready"] is True
    assert payload["credit_store_ready"] is False
    assert payload["ready"] is False


def test_ready_endpoint_when_database_unreachable() -> None:
    with api_test_client(db_client=FakeDBClient(connected=False)) as client:
        payload = client.get("/ready").json()

    assert payload["db_connected"] is False
    assert payload["ready"] is False
    assert payload["database"] == "unreachable"


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["api_version_path"] == "/api/v1"
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client(db_client=FakeDBClient()) as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "credit_api_http_requests_total" in response.text
