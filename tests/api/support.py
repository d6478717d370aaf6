# This file provides shared helpers for API endpoint tests.
# It exists so tests can override service dependencies without touching real databases.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from credit_system.api.api_config import ApiConfig
from credit_system.api.app import app
from credit_system.api.dependencies import (
    get_config,
    get_credit_service,
    get_customer_service,
    get_database_client,
)


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Credit API",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=8000,
        environment="test",
        database_url="sqlite+pysqlite:///:memory:",
        enable_request_logging=False,
        create_schema_on_startup=False,
        allowed_origins=[],
        customer_table_name="customer",
        credit_table_name="credit",
        request_log_table_name="api_request_log",
        app_version="0.1.0",
    )


class FakeDBClient:
    """Simple fake DB dependency for health/readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {"customer", "credit"}

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables

    def log_request(self, **_: Any) -> None:
        return None


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    customer_service: Any | None = None,
    credit_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
    if customer_service is not None:
        app.dependency_overrides[get_customer_service] = lambda: customer_service
    if credit_service is not None:
        app.dependency_overrides[get_credit_service] = lambda: credit_service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
