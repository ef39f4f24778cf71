from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from clientcontract.adapters.transport import (
    client_view,
    contract_view,
    parse_client,
    parse_client_update,
    parse_contract,
    parse_contract_cost,
)
from clientcontract.domain.clients import CompanyPayload, PersonPayload
from clientcontract.domain.model import ClientType
from tests.helpers.client_contracts import make_contract, make_person


def test_parse_person_document() -> None:
    payload = parse_client(
        '{"type": "PERSON", "name": " Ada ", "email": "ada@example.com",'
        ' "phone": "+41791234567", "birthdate": "1990-12-10"}'
    )

    assert isinstance(payload, PersonPayload)
    assert payload.name == "Ada"
    assert payload.birthdate == date(1990, 12, 10)
    assert payload.type is ClientType.PERSON


def test_parse_company_document_uses_camel_case_identifier() -> None:
    payload = parse_client(
        {"type": "COMPANY", "name": "Acme", "email": "c@acme.ch", "companyIdentifier": "abc-123"}
    )

    assert isinstance(payload, CompanyPayload)
    assert payload.company_identifier == "abc-123"


@pytest.mark.parametrize(
    "document",
    [
        {"type": "ROBOT", "name": "R2", "email": "r2@x"},
        {"type": "PERSON", "name": "", "email": "a@x"},
        {"type": "PERSON", "name": "Ada", "email": "not-an-email"},
        {"type": "PERSON", "name": "Ada", "email": "a@x", "phone": "12"},
        {"type": "PERSON", "name": "Ada", "email": "a@x", "birthdate": "2999-01-01"},
        {"type": "COMPANY", "name": "Acme", "email": "c@x", "companyIdentifier": "ab-1234"},
        {"type": "COMPANY", "name": "Acme", "email": "c@x"},
    ],
)
def test_invalid_client_documents_are_rejected(document: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        parse_client(document)


def test_update_document_ignores_immutable_keys() -> None:
    update = parse_client_update(
        '{"email": "new@example.com", "birthdate": "2000-01-01", "companyIdentifier": "zzz-999"}'
    )

    assert update.email == "new@example.com"
    assert update.name is None
    assert not hasattr(update, "birthdate")


def test_update_document_validates_phone() -> None:
    with pytest.raises(ValidationError):
        parse_client_update({"phone": "call me"})


def test_contract_end_date_must_follow_start_and_today() -> None:
    today = date.today()  # noqa: DTZ011

    with pytest.raises(ValidationError, match="after the start date"):
        parse_contract(
            {"costAmount": "1", "startDate": str(today + timedelta(days=5)),
             "endDate": str(today + timedelta(days=2))}
        )
    with pytest.raises(ValidationError, match="after today"):
        parse_contract({"costAmount": "1", "endDate": str(today - timedelta(days=1))})

    schema = parse_contract({"costAmount": "1", "endDate": str(today + timedelta(days=30))})
    assert schema.end_date == today + timedelta(days=30)


def test_contract_cost_must_be_non_negative() -> None:
    with pytest.raises(ValidationError):
        parse_contract({"costAmount": "-0.01"})
    with pytest.raises(ValidationError):
        parse_contract_cost("abc")

    assert parse_contract_cost("42.5") == Decimal("42.5")


@pytest.mark.parametrize("cost", ["100.125", "0.004"])
def test_contract_cost_is_limited_to_cents(cost: str) -> None:
    with pytest.raises(ValidationError):
        parse_contract({"costAmount": cost})
    with pytest.raises(ValidationError):
        parse_contract_cost(cost)

    assert parse_contract_cost("100.12") == Decimal("100.12")


def test_contract_views() -> None:
    person = make_person()
    contract = make_contract(person, "100.00", start_date=date(2024, 1, 1))

    view = contract_view(contract)

    assert view["clientId"] == str(person.id)
    assert view["startDate"] == "2024-01-01"
    assert view["endDate"] is None
    assert view["costAmount"] == "100.00"


def test_client_view_names_variant_fields() -> None:
    view = client_view(CompanyPayload(name="Acme", email="c@x", company_identifier="abc-123"))

    assert view["type"] == "COMPANY"
    assert view["companyIdentifier"] == "abc-123"
    assert "birthdate" not in view
