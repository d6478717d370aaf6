"""Customer and credit records passed between the API, the services, and the stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from credit_system.domain.exceptions import BusinessException
from credit_system.domain.status import Status


@dataclass
class Address:
    zip_code: str = ""
    street: str = ""


@dataclass
class Customer:
    first_name: str = ""
    last_name: str = ""
    cpf: str = ""
    email: str = ""
    income: Decimal = Decimal("0")
    password: str = ""
    address: Address = field(default_factory=Address)
    id: int | None = None


@dataclass
class Credit:
    """A credit application owned by exactly one customer.

    `id` is the storage key and stays internal; `credit_code` is the only
    handle ever shown to API clients. `customer` is filled in once the owner
    has been resolved, while `customer_id` is fixed from construction on:
    reassigning it raises `AttributeError`. Use `dataclasses.replace` to
    derive a record for another owner.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int
    credit_code: UUID | None = None
    status: Status = Status.IN_PROGRESS
    customer: Customer | None = None
    id: int | None = None

    def __setattr__(self, name: str, value: object) -> None:
        if name == "customer_id" and "customer_id" in self.__dict__:
            raise AttributeError("customer_id cannot change once a credit is created")
        super().__setattr__(name, value)

    def transition_to(self, target: Status) -> None:
        if not self.status.can_transition_to(target):
            raise BusinessException(
                f"Invalid status transition {self.status.value} -> {target.value}"
            )
        self.status = target


@dataclass(frozen=True)
class CustomerPatch:
    """Profile fields a customer may change after registration."""

    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str

    def apply_to(self, customer: Customer) -> Customer:
        customer.first_name = self.first_name
        customer.last_name = self.last_name
        customer.income = self.income
        customer.address.zip_code = self.zip_code
        customer.address.street = self.street
        return customer
