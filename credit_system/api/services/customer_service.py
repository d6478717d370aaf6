# This file implements the customer service used by the customer and credit routes.
# It exists so "customer must exist" is checked in one place before any read, update, or delete.
# Missing customers surface as BusinessException so the API answers with one error shape.

from __future__ import annotations

import logging

from credit_system.domain.entities import Customer, CustomerPatch
from credit_system.domain.exceptions import BusinessException
from credit_system.repositories.protocols import CustomerStore

LOGGER = logging.getLogger("customer")


class CustomerService:
    """Lookup, registration, profile update, and removal of customers."""

    def __init__(self, *, repository: CustomerStore) -> None:
        self.repository = repository

    def save(self, customer: Customer) -> Customer:
        saved = self.repository.save(customer)
        LOGGER.info("customer registered id=%s", saved.id)
        return saved

    def find_by_id(self, customer_id: int) -> Customer:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise BusinessException(f"Id {customer_id} not found")
        return customer

    def update(self, customer_id: int, patch: CustomerPatch) -> Customer:
        customer = patch.apply_to(self.find_by_id(customer_id))
        return self.repository.update(customer)

    def delete(self, customer_id: int) -> None:
        customer = self.find_by_id(customer_id)
        self.repository.delete(customer)
