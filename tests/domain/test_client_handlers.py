from __future__ import annotations

from datetime import date

import pytest

from clientcontract.domain.clients import (
    ClientUpdatePayload,
    CompanyHandler,
    CompanyPayload,
    CompanyService,
    PersonHandler,
    PersonPayload,
    PersonService,
)
from clientcontract.domain.contracts import ContractService
from clientcontract.domain.errors import (
    BusinessRuleViolationError,
    ClientTypeMismatchError,
    DuplicateCompanyIdentifierError,
)
from clientcontract.domain.model import ClientType
from tests.helpers.client_contracts import (
    FIXED_NOW,
    FakeUnitOfWork,
    fixed_clock,
    make_company,
    make_contract,
    make_person,
)


def _person_handler(uow: FakeUnitOfWork) -> PersonHandler:
    contracts = ContractService(uow, clock=fixed_clock)
    return PersonHandler(PersonService(uow, contracts, clock=fixed_clock))


def _company_handler(uow: FakeUnitOfWork) -> CompanyHandler:
    contracts = ContractService(uow, clock=fixed_clock)
    return CompanyHandler(CompanyService(uow, contracts, clock=fixed_clock))


def test_handler_rejects_service_of_other_variant() -> None:
    uow = FakeUnitOfWork()
    contracts = ContractService(uow)

    with pytest.raises(ValueError, match="PERSON"):
        PersonHandler(CompanyService(uow, contracts))  # type: ignore[arg-type]


def test_create_assigns_identity_and_persists(fake_uow: FakeUnitOfWork) -> None:
    handler = _person_handler(fake_uow)

    created = handler.create(PersonPayload(name="Ada", email="ada@example.com"))

    assert created.id is not None
    assert created.type is ClientType.PERSON
    assert fake_uow.persons.get(created.id) is not None
    assert fake_uow.commits == 1


def test_create_requires_name_and_email(fake_uow: FakeUnitOfWork) -> None:
    handler = _person_handler(fake_uow)

    with pytest.raises(BusinessRuleViolationError) as exc_info:
        handler.create(PersonPayload(email="ada@example.com"))

    assert exc_info.value.field == "name"
    assert fake_uow.persons.added == []
    assert fake_uow.rollbacks == 1


def test_get_by_id_returns_none_for_unknown_id(fake_uow: FakeUnitOfWork) -> None:
    handler = _person_handler(fake_uow)

    assert handler.get_by_id(make_person().id) is None


def test_get_all_returns_payloads(fake_uow: FakeUnitOfWork) -> None:
    first, second = make_person("A"), make_person("B")
    fake_uow.persons.items.update({first.id: first, second.id: second})

    payloads = _person_handler(fake_uow).get_all()

    assert sorted(payload.name or "" for payload in payloads) == ["A", "B"]
    assert all(isinstance(payload, PersonPayload) for payload in payloads)


def test_update_ignores_birthdate_even_when_given(fake_uow: FakeUnitOfWork) -> None:
    person = make_person(birthdate=date(1990, 1, 1))
    fake_uow.persons.items[person.id] = person
    handler = _person_handler(fake_uow)

    updated = handler.update(
        person.id,
        PersonPayload(name="Grace", email=None, phone=None, birthdate=date(2001, 2, 3)),
    )

    assert updated is not None
    assert updated.name == "Grace"
    assert updated.email == person.email
    assert updated.birthdate == date(1990, 1, 1)
    assert person.updated_at == FIXED_NOW


def test_update_ignores_company_identifier(fake_uow: FakeUnitOfWork) -> None:
    company = make_company(company_identifier="aaa-123")
    fake_uow.companies.items[company.id] = company
    handler = _company_handler(fake_uow)

    updated = handler.update(company.id, CompanyPayload(company_identifier="zzz-999"))

    assert updated is not None
    assert updated.company_identifier == "aaa-123"


def test_update_returns_none_for_unknown_id(fake_uow: FakeUnitOfWork) -> None:
    handler = _person_handler(fake_uow)

    assert handler.update(make_person().id, PersonPayload(name="x")) is None


def test_delete_closes_contracts_and_removes_client(fake_uow: FakeUnitOfWork) -> None:
    person = make_person()
    contract = make_contract(person)
    fake_uow.persons.items[person.id] = person
    fake_uow.contracts.add(contract)

    _person_handler(fake_uow).delete(person.id)

    assert fake_uow.persons.removed == [person]
    assert contract.end_date == FIXED_NOW.date()
    assert contract.last_modified == FIXED_NOW


def test_delete_of_unknown_id_is_a_no_op(fake_uow: FakeUnitOfWork) -> None:
    _person_handler(fake_uow).delete(make_person().id)

    assert fake_uow.persons.removed == []


def test_convert_rejects_payload_of_other_variant(fake_uow: FakeUnitOfWork) -> None:
    handler = _person_handler(fake_uow)

    with pytest.raises(ClientTypeMismatchError) as exc_info:
        handler.convert(CompanyPayload(name="Acme"))

    assert exc_info.value.expected == "PersonPayload"
    assert exc_info.value.actual == "CompanyPayload"


def test_convert_update_lifts_partial_update(fake_uow: FakeUnitOfWork) -> None:
    handler = _company_handler(fake_uow)

    payload = handler.convert_update(ClientUpdatePayload(email="new@acme.example"))

    assert isinstance(payload, CompanyPayload)
    assert payload.email == "new@acme.example"
    assert payload.company_identifier is None


def test_duplicate_company_identifier_never_reaches_save(fake_uow: FakeUnitOfWork) -> None:
    existing = make_company(company_identifier="aaa-123")
    fake_uow.companies.items[existing.id] = existing
    handler = _company_handler(fake_uow)

    with pytest.raises(DuplicateCompanyIdentifierError) as exc_info:
        handler.create(
            CompanyPayload(name="Copycat", email="copy@cat.example", company_identifier="aaa-123")
        )

    assert isinstance(exc_info.value, BusinessRuleViolationError)
    assert exc_info.value.value == "aaa-123"
    assert fake_uow.companies.added == []
