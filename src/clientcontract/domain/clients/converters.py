"""Entity <-> payload converters, one per client variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from clientcontract.domain.clients.payloads import CompanyPayload, PersonPayload
from clientcontract.domain.errors import BusinessRuleViolationError
from clientcontract.domain.model import Client, Company, Person

if TYPE_CHECKING:
    from clientcontract.domain.clients.payloads import ClientPayload, ClientUpdatePayload


class ClientConverter[TClient: Client, TPayload: ClientPayload](ABC):
    """Maps one variant between its entity and its payload."""

    payload_type: type[TPayload]

    @abstractmethod
    def to_payload(self, entity: TClient) -> TPayload: ...

    @abstractmethod
    def to_entity(self, payload: TPayload) -> TClient:
        """Build a new entity; identity and timestamps are assigned by the domain."""
        ...

    @abstractmethod
    def from_update(self, update: ClientUpdatePayload) -> TPayload:
        """Lift a partial update into this variant's payload shape."""
        ...


def _required(payload: ClientPayload, field: str) -> str:
    value = getattr(payload, field)
    if value is None:
        raise BusinessRuleViolationError(field, None, f"{field} is required")
    return value


class PersonConverter(ClientConverter[Person, PersonPayload]):
    payload_type = PersonPayload

    def to_payload(self, entity: Person) -> PersonPayload:
        return PersonPayload(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            birthdate=entity.birthdate,
        )

    def to_entity(self, payload: PersonPayload) -> Person:
        return Person(
            name=_required(payload, "name"),
            email=_required(payload, "email"),
            phone=payload.phone,
            birthdate=payload.birthdate,
        )

    def from_update(self, update: ClientUpdatePayload) -> PersonPayload:
        return PersonPayload(name=update.name, email=update.email, phone=update.phone)


class CompanyConverter(ClientConverter[Company, CompanyPayload]):
    payload_type = CompanyPayload

    def to_payload(self, entity: Company) -> CompanyPayload:
        return CompanyPayload(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            company_identifier=entity.company_identifier,
        )

    def to_entity(self, payload: CompanyPayload) -> Company:
        return Company(
            name=_required(payload, "name"),
            email=_required(payload, "email"),
            phone=payload.phone,
            company_identifier=_required(payload, "company_identifier"),
        )

    def from_update(self, update: ClientUpdatePayload) -> CompanyPayload:
        return CompanyPayload(name=update.name, email=update.email, phone=update.phone)
