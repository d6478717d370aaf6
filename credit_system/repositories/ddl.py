"""DDL helpers for the customer, credit, and request-log tables."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from credit_system.common.db import validate_identifier

LOGGER = logging.getLogger("schema")

_PRIMARY_KEY_BY_DIALECT: dict[str, str] = {
    "postgresql": "BIGSERIAL PRIMARY KEY",
    "sqlite": "INTEGER PRIMARY KEY AUTOINCREMENT",
}

CUSTOMER_DDL = """
CREATE TABLE IF NOT EXISTS {customer_table} (
    id {primary_key},
    first_name VARCHAR(120) NOT NULL,
    last_name VARCHAR(120) NOT NULL,
    cpf VARCHAR(11) NOT NULL UNIQUE,
    email VARCHAR(254) NOT NULL UNIQUE,
    income NUMERIC(14, 2) NOT NULL,
    password VARCHAR(255) NOT NULL,
    zip_code VARCHAR(20) NOT NULL,
    street VARCHAR(255) NOT NULL
)
"""

CREDIT_DDL = """
CREATE TABLE IF NOT EXISTS {credit_table} (
    id {primary_key},
    credit_code VARCHAR(36) NOT NULL UNIQUE,
    credit_value NUMERIC(14, 2) NOT NULL,
    day_first_installment DATE NOT NULL,
    number_of_installments INTEGER NOT NULL CHECK (number_of_installments > 0),
    status VARCHAR(20) NOT NULL,
    customer_id BIGINT NOT NULL REFERENCES {customer_table} (id)
)
"""

CREDIT_CUSTOMER_INDEX_DDL = """
CREATE INDEX IF NOT EXISTS idx_{credit_table}_customer_id ON {credit_table} (customer_id)
"""

REQUEST_LOG_DDL = """
CREATE TABLE IF NOT EXISTS {request_log_table} (
    request_id VARCHAR(64) NOT NULL,
    path VARCHAR(255) NOT NULL,
    method VARCHAR(10) NOT NULL,
    status_code INTEGER NOT NULL,
    duration_ms DOUBLE PRECISION NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""


def apply_schema(
    engine: Engine,
    *,
    customer_table: str = "customer",
    credit_table: str = "credit",
    request_log_table: str = "api_request_log",
) -> None:
    """Create the application tables if they do not exist yet."""

    dialect = engine.dialect.name
    primary_key = _PRIMARY_KEY_BY_DIALECT.get(dialect)
    if primary_key is None:
        raise RuntimeError(f"Unsupported database dialect for schema creation: {dialect}")

    names = {
        "customer_table": validate_identifier(customer_table),
        "credit_table": validate_identifier(credit_table),
        "request_log_table": validate_identifier(request_log_table),
        "primary_key": primary_key,
    }
    statements = [CUSTOMER_DDL, CREDIT_DDL, CREDIT_CUSTOMER_INDEX_DDL, REQUEST_LOG_DDL]
    with engine.begin() as connection:
        for statement in statements:
            connection.exec_driver_sql(statement.format(**names))
    LOGGER.info("schema applied dialect=%s customer_table=%s credit_table=%s", dialect, customer_table, credit_table)
