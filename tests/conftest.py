"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

TEST_ENV_DEFAULTS = {
    "PROJECT_NAME": "credit-application-system",
    "ENV": "test",
    "LOG_LEVEL": "INFO",
    "DATABASE_URL": "sqlite+pysqlite:///:memory:",
    "API_HOST": "0.0.0.0",
    "API_PORT": "8000",
}

# The app module builds its FastAPI instance at import time, before fixtures run.
for _key, _value in TEST_ENV_DEFAULTS.items():
    os.environ.setdefault(_key, _value)

from credit_system.common.db import DatabaseClient  # noqa: E402
from credit_system.repositories.ddl import apply_schema  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    for key, value in TEST_ENV_DEFAULTS.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture()
def db_client(tmp_path: Path) -> Iterator[DatabaseClient]:
    """A DatabaseClient backed by a throwaway SQLite file with the schema applied."""

    client = DatabaseClient(database_url=f"sqlite+pysqlite:///{tmp_path / 'credit.db'}")
    apply_schema(client.engine)
    yield client
    client.engine.dispose()
