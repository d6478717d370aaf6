# This file defines customer endpoints under the versioned API path.
# It exists so clients can register customers, read and patch their profile, and remove them.
# Routers stay transport-focused; existence checks live in the customer service.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from credit_system.api.dependencies import get_customer_service
from credit_system.api.schemas.common import BIGINT_MAX, ErrorResponse
from credit_system.api.schemas.customer_schemas import (
    CustomerCreatedResponse,
    CustomerCreateRequest,
    CustomerUpdateRequest,
    CustomerView,
)
from credit_system.api.services.customer_service import CustomerService

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    responses={400: {"model": ErrorResponse}},
)
CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
CustomerIdPath = Annotated[int, Path(le=BIGINT_MAX)]


@router.post(
    "",
    response_model=CustomerCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def save_customer(payload: CustomerCreateRequest, service: CustomerServiceDep) -> CustomerCreatedResponse:
    customer = service.save(payload.to_entity())
    return CustomerCreatedResponse(
        id=customer.id,
        email=customer.email,
        message=f"Customer {customer.email} saved!",
    )


@router.get("/{customer_id}", response_model=CustomerView)
def find_customer(customer_id: CustomerIdPath, service: CustomerServiceDep) -> CustomerView:
    return CustomerView.from_entity(service.find_by_id(customer_id))


@router.patch("", response_model=CustomerView)
def update_customer(
    payload: CustomerUpdateRequest,
    service: CustomerServiceDep,
    customer_id: int = Query(alias="customerId", le=BIGINT_MAX),
) -> CustomerView:
    return CustomerView.from_entity(service.update(customer_id, payload.to_patch()))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: CustomerIdPath, service: CustomerServiceDep) -> Response:
    service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
