# This file defines customer request and response schemas.
# It exists so registration and profile-update payloads are validated before reaching the service.
# Request models translate into domain records; the view never carries the password hash.

from __future__ import annotations

from decimal import Decimal

from pydantic import EmailStr, Field, field_validator

from credit_system.api.schemas.common import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS, CamelModel, Money
from credit_system.common.passwords import hash_password
from credit_system.domain.cpf import is_valid_cpf, normalize_cpf
from credit_system.domain.entities import Address, Customer, CustomerPatch


class CustomerCreateRequest(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    cpf: str
    income: Decimal = Field(ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    email: EmailStr
    password: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    street: str = Field(min_length=1)

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, value: str) -> str:
        if not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        return normalize_cpf(value)

    def to_entity(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            income=self.income,
            email=str(self.email),
            password=hash_password(self.password),
            address=Address(zip_code=self.zip_code, street=self.street),
        )


class CustomerUpdateRequest(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    income: Decimal = Field(ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    zip_code: str = Field(min_length=1)
    street: str = Field(min_length=1)

    def to_patch(self) -> CustomerPatch:
        return CustomerPatch(
            first_name=self.first_name,
            last_name=self.last_name,
            income=self.income,
            zip_code=self.zip_code,
            street=self.street,
        )


class CustomerView(CamelModel):
    id: int
    first_name: str
    last_name: str
    cpf: str
    income: Money
    email: str
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerView:
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            income=customer.income,
            email=customer.email,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )


class CustomerCreatedResponse(CamelModel):
    id: int
    email: str
    message: str
