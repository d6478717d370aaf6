# This file tests credit endpoints for creation, listing by customer, and lookup by public code.
# It exists to confirm credit routes expose stable camelCase contracts and never the internal id.
# The tests also verify request validation and error payload consistency.

from __future__ import annotations

import uuid
from datetime import date, timedelta
from decimal import Decimal

from credit_system.domain.entities import Address, Credit, Customer
from credit_system.domain.exceptions import BusinessException
from credit_system.domain.status import Status
from tests.api.support import FakeDBClient, api_test_client

URL = "/api/v1/credits"
CREDIT_CODE = uuid.UUID("5b0f3a84-6c1e-4a7b-9a52-0d8e9c1f2a33")


def _owner() -> Customer:
    return Customer(
        id=1,
        first_name="Daniel",
        last_name="Araujo",
        cpf="28475934625",
        email="daniel@email.com",
        income=Decimal("1000.00"),
        password="hashed",
        address=Address(zip_code="000000", street="Rua do Daniel, 123"),
    )


def _stored_credit() -> Credit:
    return Credit(
        id=77,
        credit_code=CREDIT_CODE,
        credit_value=Decimal("1000.00"),
        day_first_installment=date.today() + timedelta(days=90),
        number_of_installments=12,
        status=Status.IN_PROGRESS,
        customer_id=1,
        customer=_owner(),
    )


class FakeCreditService:
    def __init__(self) -> None:
        self.saved: list[Credit] = []

    def save(self, credit: Credit) -> Credit:
        if credit.customer_id != 1:
            raise BusinessException(f"Id {credit.customer_id} not found")
        self.saved.append(credit)
        credit.id = 77
        credit.credit_code = CREDIT_CODE
        credit.customer = _owner()
        return credit

    def find_all_by_customer(self, customer_id: int) -> list[Credit]:
        return [_stored_credit()] if customer_id == 1 else []

    def find_by_credit_code(self, customer_id: int, credit_code: uuid.UUID) -> Credit:
        if credit_code != CREDIT_CODE:
            raise BusinessException(f"Credit code {credit_code} not found")
        if customer_id != 1:
            raise BusinessException(f"Credit code {credit_code} not found for customer {customer_id}")
        return _stored_credit()


def _credit_payload(customer_id: int = 1, *, days_ahead: int = 90) -> dict[str, object]:
    return {
        "creditValue": 1000.0,
        "dayFirstOfInstallment": (date.today() + timedelta(days=days_ahead)).isoformat(),
        "numberOfInstallments": 12,
        "customerId": customer_id,
    }


def _assert_bad_request(payload: dict[str, object], exception: str) -> None:
    assert payload["title"] == "Bad Request ! Consult the documentation"
    assert payload["timestamp"]
    assert payload["status"] == 400
    assert payload["exception"] == exception
    assert payload["details"]


def test_save_credit_returns_201_with_code_and_email() -> None:
    service = FakeCreditService()
    with api_test_client(db_client=FakeDBClient(), credit_service=service) as client:
        response = client.post(URL, json=_credit_payload())

    assert response.status_code == 201
    payload = response.json()
    assert payload["creditCode"] == str(CREDIT_CODE)
    assert payload["customerEmail"] == "daniel@email.com"
    assert payload["message"] == f"Credit {CREDIT_CODE} - Customer daniel@email.com saved!"
    assert service.saved[0].credit_value == Decimal("1000.0")
    assert service.saved[0].customer_id == 1


def test_save_credit_with_invalid_customer_returns_400() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.post(URL, json=_credit_payload(customer_id=999))

    assert response.status_code == 400
    payload = response.json()
    _assert_bad_request(payload, "BusinessException")
    assert payload["details"] == ["Id 999 not found"]


def test_save_credit_with_past_first_installment_returns_400() -> None:
    service = FakeCreditService()
    with api_test_client(db_client=FakeDBClient(), credit_service=service) as client:
        response = client.post(URL, json=_credit_payload(days_ahead=-1))

    assert response.status_code == 400
    payload = response.json()
    _assert_bad_request(payload, "RequestValidationError")
    assert any(detail.startswith("dayFirstOfInstallment:") for detail in payload["details"])
    assert service.saved == []


def test_save_credit_reports_every_invalid_field() -> None:
    body = {"creditValue": 0, "dayFirstOfInstallment": "2001-01-01", "numberOfInstallments": 0}
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.post(URL, json=body)

    assert response.status_code == 400
    fields = {detail.split(":", 1)[0] for detail in response.json()["details"]}
    assert fields == {"creditValue", "dayFirstOfInstallment", "numberOfInstallments", "customerId"}


def test_find_all_by_customer_returns_summaries_without_internal_fields() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(URL, params={"customerId": 1})

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 1
    assert payload[0]["creditCode"] == str(CREDIT_CODE)
    assert payload[0]["creditValue"] == 1000.0
    assert payload[0]["numberOfInstallments"] == 12
    assert payload[0]["customer"]["id"] == 1
    assert "id" not in payload[0]
    assert "dayFirstInstallment" not in payload[0]
    assert "dayFirstOfInstallment" not in payload[0]


def test_find_all_by_customer_without_credits_returns_empty_list() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(URL, params={"customerId": 2})

    assert response.status_code == 200
    assert response.json() == []


def test_find_all_requires_customer_id() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(URL)

    assert response.status_code == 400
    assert response.json()["details"] == ["customerId: Field required"]


def test_get_credit_by_code_returns_full_view() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(f"{URL}/{CREDIT_CODE}", params={"customerId": 1})

    assert response.status_code == 200
    payload = response.json()
    assert payload == {
        "creditCode": str(CREDIT_CODE),
        "creditValue": 1000.0,
        "numberOfInstallment": 12,
        "status": "IN_PROGRESS",
        "emailCustomer": "daniel@email.com",
        "incomeCustomer": 1000.0,
        "customer": {"id": 1},
    }


def test_get_credit_by_unknown_code_returns_400() -> None:
    unknown = uuid.uuid4()
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(f"{URL}/{unknown}", params={"customerId": 1})

    assert response.status_code == 400
    payload = response.json()
    _assert_bad_request(payload, "BusinessException")
    assert payload["details"] == [f"Credit code {unknown} not found"]


def test_get_credit_of_other_customer_returns_400() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(f"{URL}/{CREDIT_CODE}", params={"customerId": 2})

    assert response.status_code == 400
    assert response.json()["details"] == [f"Credit code {CREDIT_CODE} not found for customer 2"]


def test_get_credit_with_malformed_code_returns_400() -> None:
    with api_test_client(db_client=FakeDBClient(), credit_service=FakeCreditService()) as client:
        response = client.get(f"{URL}/not-a-uuid", params={"customerId": 1})

    assert response.status_code == 400
    payload = response.json()
    assert payload["exception"] == "RequestValidationError"
    assert payload["details"][0].startswith("credit_code:")
