# This file defines schema pieces reused by the customer and credit endpoints.
# It exists so wire naming, money serialization, and the error payload stay consistent.
# These classes are also used by tests to validate response shape stability.

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Upper bounds of the BIGINT keys and INTEGER installment column.
BIGINT_MAX = 2**63 - 1
INT_MAX = 2**31 - 1

# NUMERIC(14, 2) columns keep at most 12 integer digits and cents.
MONEY_MAX_DIGITS = 14
MONEY_DECIMAL_PLACES = 2


class CamelModel(BaseModel):
    """Base model whose JSON field names are camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    title: str
    timestamp: datetime
    status: int
    exception: str
    details: list[str]
    request_id: str


class CustomerRef(CamelModel):
    id: int
