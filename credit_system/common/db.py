"""
Database access wrapper shared by the customer and credit stores.
It keeps SQL execution details out of services and routers so query behavior is easy to audit.
Queries are always parameterized; table names are checked against a strict identifier pattern.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

Statement = str | TextClause | TextualSelect


def validate_identifier(identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier):
        raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
    return identifier


def _as_clause(query: Statement) -> TextClause | TextualSelect:
    if isinstance(query, str):
        return text(query)
    return query


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for store read/write access."""

    def __init__(self, *, database_url: str | None = None, engine: Engine | None = None) -> None:
        if engine is None:
            if not database_url:
                raise ValueError("DatabaseClient needs a database_url or an engine.")
            engine = create_engine(database_url, pool_pre_ping=True, future=True)
        self._engine: Engine = engine
        self._request_log_table_available: bool | None = None

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect_name(self) -> str:
        return self._engine.dialect.name

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        validate_identifier(table_name)
        return inspect(self._engine).has_table(table_name)

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection whose statements commit or roll back together."""

        with self._engine.begin() as connection:
            yield connection

    def fetch_all(self, query: Statement, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(_as_clause(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: Statement, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(_as_clause(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: Statement, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(_as_clause(query), dict(params or {})).scalar_one()

    def execute(self, query: Statement, params: Mapping[str, Any] | None = None) -> int:
        with self._engine.begin() as connection:
            result = connection.execute(_as_clause(query), dict(params or {}))
            affected = result.rowcount
        return int(affected or 0)

    def insert_returning_id(self, query: Statement, params: Mapping[str, Any] | None = None) -> int:
        """Run an `INSERT ... RETURNING id` statement and return the new key."""

        with self._engine.begin() as connection:
            new_id = connection.execute(_as_clause(query), dict(params or {})).scalar_one()
        return int(new_id)

    def log_request(
        self,
        *,
        table_name: str,
        request_id: str,
        path: str,
        method: str,
        status_code: int,
        duration_ms: float,
    ) -> None:
        safe_table = validate_identifier(table_name)
        if self._request_log_table_available is not True:
            self._request_log_table_available = self.table_exists(safe_table)
        if not self._request_log_table_available:
            return

        query = f"""
        INSERT INTO {safe_table} (request_id, path, method, status_code, duration_ms, created_at)
        VALUES (:request_id, :path, :method, :status_code, :duration_ms, CURRENT_TIMESTAMP)
        """
        self.execute(
            query,
            {
                "request_id": request_id,
                "path": path,
                "method": method,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )
