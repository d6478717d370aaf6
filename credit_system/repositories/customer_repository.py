"""Relational store for customer records."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import Numeric, bindparam, text

from credit_system.common.db import DatabaseClient, validate_identifier
from credit_system.domain.entities import Address, Customer

LOGGER = logging.getLogger("customer")

CUSTOMER_COLUMNS = "id, first_name, last_name, cpf, email, income, password, zip_code, street"


def row_to_customer(row: dict[str, Any], *, prefix: str = "") -> Customer:
    return Customer(
        id=int(row[f"{prefix}id"]),
        first_name=str(row[f"{prefix}first_name"]),
        last_name=str(row[f"{prefix}last_name"]),
        cpf=str(row[f"{prefix}cpf"]),
        email=str(row[f"{prefix}email"]),
        income=Decimal(str(row[f"{prefix}income"])),
        password=str(row[f"{prefix}password"]),
        address=Address(
            zip_code=str(row[f"{prefix}zip_code"]),
            street=str(row[f"{prefix}street"]),
        ),
    )


class CustomerRepository:
    """Create, find, update, and delete customers; deleting also removes their credits."""

    def __init__(self, *, db: DatabaseClient, table_name: str = "customer", credit_table_name: str = "credit") -> None:
        self.db = db
        self.table = validate_identifier(table_name)
        self.credit_table = validate_identifier(credit_table_name)

    def save(self, customer: Customer) -> Customer:
        query = text(
            f"""
            INSERT INTO {self.table} (first_name, last_name, cpf, email, income, password, zip_code, street)
            VALUES (:first_name, :last_name, :cpf, :email, :income, :password, :zip_code, :street)
            RETURNING id
            """
        ).bindparams(bindparam("income", type_=Numeric(14, 2)))
        customer.id = self.db.insert_returning_id(query, self._params(customer))
        LOGGER.info("customer inserted id=%s", customer.id)
        return customer

    def find_by_id(self, customer_id: int) -> Customer | None:
        query = f"SELECT {CUSTOMER_COLUMNS} FROM {self.table} WHERE id = :customer_id"
        row = self.db.fetch_one(query, {"customer_id": customer_id})
        return row_to_customer(row) if row is not None else None

    def update(self, customer: Customer) -> Customer:
        if customer.id is None:
            raise ValueError("Cannot update a customer that has not been saved.")
        query = text(
            f"""
            UPDATE {self.table}
            SET first_name = :first_name,
                last_name = :last_name,
                income = :income,
                zip_code = :zip_code,
                street = :street
            WHERE id = :id
            """
        ).bindparams(bindparam("income", type_=Numeric(14, 2)))
        params = {
            "id": customer.id,
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "income": customer.income,
            "zip_code": customer.address.zip_code,
            "street": customer.address.street,
        }
        self.db.execute(query, params)
        LOGGER.info("customer updated id=%s", customer.id)
        return customer

    def delete(self, customer: Customer) -> None:
        with self.db.transaction() as connection:
            connection.execute(
                text(f"DELETE FROM {self.credit_table} WHERE customer_id = :customer_id"),
                {"customer_id": customer.id},
            )
            connection.execute(
                text(f"DELETE FROM {self.table} WHERE id = :customer_id"),
                {"customer_id": customer.id},
            )
        LOGGER.info("customer deleted id=%s", customer.id)

    @staticmethod
    def _params(customer: Customer) -> dict[str, Any]:
        return {
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "cpf": customer.cpf,
            "email": customer.email,
            "income": customer.income,
            "password": customer.password,
            "zip_code": customer.address.zip_code,
            "street": customer.address.street,
        }
