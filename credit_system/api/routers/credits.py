# This file defines credit endpoints under the versioned API path.
# It exists so clients can request a credit for a customer and read credits back by owner or public code.
# Every lookup by code is scoped to the customer id given in the query string.

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from credit_system.api.dependencies import get_credit_service
from credit_system.api.schemas.common import BIGINT_MAX, ErrorResponse
from credit_system.api.schemas.credit_schemas import (
    CreditCreatedResponse,
    CreditCreateRequest,
    CreditSummaryView,
    CreditView,
)
from credit_system.api.services.credit_service import CreditService

router = APIRouter(
    prefix="/credits",
    tags=["credits"],
    responses={400: {"model": ErrorResponse}},
)
CreditServiceDep = Annotated[CreditService, Depends(get_credit_service)]


@router.post("", response_model=CreditCreatedResponse, status_code=status.HTTP_201_CREATED)
def save_credit(payload: CreditCreateRequest, service: CreditServiceDep) -> CreditCreatedResponse:
    return CreditCreatedResponse.from_entity(service.save(payload.to_entity()))


@router.get("", response_model=list[CreditSummaryView])
def find_all_by_customer(
    service: CreditServiceDep,
    customer_id: int = Query(alias="customerId", le=BIGINT_MAX),
) -> list[CreditSummaryView]:
    return [CreditSummaryView.from_entity(credit) for credit in service.find_all_by_customer(customer_id)]


@router.get("/{credit_code}", response_model=CreditView)
def find_by_credit_code(
    credit_code: UUID,
    service: CreditServiceDep,
    customer_id: int = Query(alias="customerId", le=BIGINT_MAX),
) -> CreditView:
    return CreditView.from_entity(service.find_by_credit_code(customer_id, credit_code))
