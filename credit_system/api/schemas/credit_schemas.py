# This file defines credit request and response schemas.
# It exists so the credit request is checked field by field before the service sees it.
# The request embeds only the customer id; the service resolves the owner.
# Views expose the public credit code and never the internal storage id.

from __future__ import annotations

from uuid import UUID

from pydantic import Field, FutureDate

from credit_system.api.schemas.common import (
    BIGINT_MAX,
    INT_MAX,
    MONEY_DECIMAL_PLACES,
    MONEY_MAX_DIGITS,
    CamelModel,
    CustomerRef,
    Money,
)
from credit_system.domain.entities import Credit
from credit_system.domain.status import Status


class CreditCreateRequest(CamelModel):
    credit_value: Money = Field(gt=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    day_first_of_installment: FutureDate
    number_of_installments: int = Field(gt=0, le=INT_MAX)
    customer_id: int = Field(le=BIGINT_MAX)

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_of_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


class CreditCreatedResponse(CamelModel):
    credit_code: UUID
    customer_email: str
    message: str

    @classmethod
    def from_entity(cls, credit: Credit) -> CreditCreatedResponse:
        email = credit.customer.email if credit.customer is not None else ""
        return cls(
            credit_code=credit.credit_code,
            customer_email=email,
            message=f"Credit {credit.credit_code} - Customer {email} saved!",
        )


class CreditSummaryView(CamelModel):
    credit_code: UUID
    credit_value: Money
    number_of_installments: int
    customer: CustomerRef

    @classmethod
    def from_entity(cls, credit: Credit) -> CreditSummaryView:
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            customer=CustomerRef(id=credit.customer_id),
        )


class CreditView(CamelModel):
    credit_code: UUID
    credit_value: Money
    number_of_installment: int
    status: Status
    email_customer: str | None = None
    income_customer: Money | None = None
    customer: CustomerRef

    @classmethod
    def from_entity(cls, credit: Credit) -> CreditView:
        owner = credit.customer
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installment=credit.number_of_installments,
            status=credit.status,
            email_customer=owner.email if owner is not None else None,
            income_customer=owner.income if owner is not None else None,
            customer=CustomerRef(id=credit.customer_id),
        )
