# This file implements the credit write workflow and the customer-scoped credit lookups.
# It exists so every credit is tied to an existing customer, gets a fresh public code, and starts IN_PROGRESS.
# Storage constraint failures are re-raised as BusinessException carrying the driver message.
# Lookups by public code never confirm a credit that belongs to a different customer.

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from sqlalchemy.exc import DataError, IntegrityError

from credit_system.api.services.customer_service import CustomerService
from credit_system.domain.entities import Credit
from credit_system.domain.exceptions import BusinessException
from credit_system.domain.status import Status
from credit_system.repositories.protocols import CreditStore

LOGGER = logging.getLogger("credit")

# Scale of the stored credit_value column.
CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class CreditService:
    """Validated creation and owner-checked retrieval of credits."""

    def __init__(
        self,
        *,
        repository: CreditStore,
        customer_service: CustomerService,
        today: Callable[[], date] = date.today,
        code_factory: Callable[[], UUID] = uuid.uuid4,
    ) -> None:
        self.repository = repository
        self.customer_service = customer_service
        self._today = today
        self._code_factory = code_factory

    def save(self, credit: Credit) -> Credit:
        """Store a new credit for an existing customer.

        The caller's `credit` is left untouched; the returned record carries
        the owner, the generated code, the IN_PROGRESS status and the store id.
        """

        owner = self.customer_service.find_by_id(credit.customer_id)
        self._validate(credit)

        record = replace(
            credit,
            credit_value=to_cents(credit.credit_value),
            customer=owner,
            credit_code=self._code_factory(),
            status=Status.IN_PROGRESS,
            id=None,
        )
        try:
            saved = self.repository.save(record)
        except (IntegrityError, DataError) as exc:
            message = str(exc.orig) if exc.orig is not None else str(exc)
            LOGGER.warning("credit rejected by store customer_id=%s reason=%s", credit.customer_id, message)
            raise BusinessException(message) from exc

        LOGGER.info("credit saved credit_code=%s customer_id=%s", saved.credit_code, saved.customer_id)
        return saved

    def find_all_by_customer(self, customer_id: int) -> list[Credit]:
        return list(self.repository.find_all_by_customer_id(customer_id))

    def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        credit = self.repository.find_by_credit_code(credit_code)
        if credit is None:
            raise BusinessException(f"Credit code {credit_code} not found")
        if credit.customer_id != customer_id:
            raise BusinessException(f"Credit code {credit_code} not found for customer {customer_id}")
        return credit

    def _validate(self, credit: Credit) -> None:
        if credit.credit_value is None or to_cents(credit.credit_value) <= 0:
            raise BusinessException("Credit value must be greater than zero")
        if credit.number_of_installments <= 0:
            raise BusinessException("Number of installments must be greater than zero")
        if credit.day_first_installment <= self._today():
            raise BusinessException("Invalid Date")
