"""
Store contracts the services depend on.

The relational stores in this package satisfy them; tests pass in-memory
fakes with the same methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from credit_system.domain.entities import Credit, Customer


@runtime_checkable
class CustomerStore(Protocol):
    def save(self, customer: Customer) -> Customer:
        """Insert a new customer and return it with its assigned id."""
        ...

    def find_by_id(self, customer_id: int) -> Customer | None:
        ...

    def update(self, customer: Customer) -> Customer:
        ...

    def delete(self, customer: Customer) -> None:
        """Remove the customer together with every credit it owns."""
        ...


@runtime_checkable
class CreditStore(Protocol):
    def save(self, credit: Credit) -> Credit:
        """Insert a new credit and return it with its assigned id.

        Raises `sqlalchemy.exc.IntegrityError` on a constraint violation.
        """
        ...

    def find_by_credit_code(self, credit_code: UUID) -> Credit | None:
        ...

    def find_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        ...
