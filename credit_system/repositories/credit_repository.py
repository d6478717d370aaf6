"""Relational store for credit records."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Date, Integer, Numeric, bindparam, text
from sqlalchemy.sql.selectable import TextualSelect

from credit_system.common.db import DatabaseClient, validate_identifier
from credit_system.domain.entities import Credit
from credit_system.domain.status import Status
from credit_system.repositories.customer_repository import row_to_customer

LOGGER = logging.getLogger("credit")

_CREDIT_SELECT = """
SELECT
    cr.id,
    cr.credit_code,
    cr.credit_value,
    cr.day_first_installment,
    cr.number_of_installments,
    cr.status,
    cr.customer_id
"""

_CUSTOMER_SELECT = """,
    cu.id AS customer_id_ref,
    cu.first_name AS customer_first_name,
    cu.last_name AS customer_last_name,
    cu.cpf AS customer_cpf,
    cu.email AS customer_email,
    cu.income AS customer_income,
    cu.password AS customer_password,
    cu.zip_code AS customer_zip_code,
    cu.street AS customer_street
"""


def _typed(query: str) -> TextualSelect:
    return text(query).columns(
        id=Integer,
        credit_value=Numeric(14, 2),
        day_first_installment=Date,
        number_of_installments=Integer,
        customer_id=Integer,
    )


def row_to_credit(row: dict[str, Any]) -> Credit:
    credit = Credit(
        id=int(row["id"]),
        credit_code=UUID(str(row["credit_code"])),
        credit_value=row["credit_value"],
        day_first_installment=row["day_first_installment"],
        number_of_installments=int(row["number_of_installments"]),
        status=Status(row["status"]),
        customer_id=int(row["customer_id"]),
    )
    if row.get("customer_id_ref") is not None:
        joined = dict(row)
        joined["customer_id"] = row["customer_id_ref"]
        credit.customer = row_to_customer(joined, prefix="customer_")
    return credit


class CreditRepository:
    """Insert credits and look them up by public code or by owning customer."""

    def __init__(self, *, db: DatabaseClient, table_name: str = "credit", customer_table_name: str = "customer") -> None:
        self.db = db
        self.table = validate_identifier(table_name)
        self.customer_table = validate_identifier(customer_table_name)

    def save(self, credit: Credit) -> Credit:
        if credit.credit_code is None:
            raise ValueError("A credit needs a credit_code before it can be stored.")
        query = text(
            f"""
            INSERT INTO {self.table}
                (credit_code, credit_value, day_first_installment, number_of_installments, status, customer_id)
            VALUES
                (:credit_code, :credit_value, :day_first_installment, :number_of_installments, :status, :customer_id)
            RETURNING id
            """
        ).bindparams(
            bindparam("credit_value", type_=Numeric(14, 2)),
            bindparam("day_first_installment", type_=Date),
        )
        credit.id = self.db.insert_returning_id(
            query,
            {
                "credit_code": str(credit.credit_code),
                "credit_value": credit.credit_value,
                "day_first_installment": credit.day_first_installment,
                "number_of_installments": credit.number_of_installments,
                "status": credit.status.value,
                "customer_id": credit.customer_id,
            },
        )
        LOGGER.info("credit inserted id=%s credit_code=%s customer_id=%s", credit.id, credit.credit_code, credit.customer_id)
        return credit

    def find_by_credit_code(self, credit_code: UUID) -> Credit | None:
        query = f"""
        {_CREDIT_SELECT}{_CUSTOMER_SELECT}
        FROM {self.table} cr
        JOIN {self.customer_table} cu ON cu.id = cr.customer_id
        WHERE cr.credit_code = :credit_code
        """
        row = self.db.fetch_one(_typed(query), {"credit_code": str(credit_code)})
        return row_to_credit(row) if row is not None else None

    def find_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        query = f"""
        {_CREDIT_SELECT}
        FROM {self.table} cr
        WHERE cr.customer_id = :customer_id
        ORDER BY cr.id ASC
        """
        rows = self.db.fetch_all(_typed(query), {"customer_id": customer_id})
        return [row_to_credit(row) for row in rows]
