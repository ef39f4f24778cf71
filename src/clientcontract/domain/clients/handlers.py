"""Variant handlers: the dispatch units behind the handler registry.

A handler binds one :class:`ClientType` to its variant service and converter and
offers the same CRUD + conversion contract for every variant. Because each handler
is parameterised with its own entity and payload types, the orchestration layer
never needs to downcast: whatever ``convert`` returns is exactly what ``create``
and ``update`` of the same handler accept.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from clientcontract.domain.clients.converters import CompanyConverter, PersonConverter
from clientcontract.domain.clients.payloads import (
    ClientPayload,
    ClientUpdatePayload,
    CompanyPayload,
    PersonPayload,
)
from clientcontract.domain.errors import ClientTypeMismatchError
from clientcontract.domain.model import Client, ClientType, Company, Person
from clientcontract.domain.transactions import transactional

if TYPE_CHECKING:
    from uuid import UUID

    from clientcontract.domain.clients.converters import ClientConverter
    from clientcontract.domain.clients.services import (
        ClientService,
        CompanyService,
        PersonService,
    )
    from clientcontract.domain.ports import ClientContractUnitOfWork


log = getLogger(__name__)


class ClientHandler[TClient: Client, TPayload: ClientPayload]:
    """Uniform client operations for a single variant."""

    CLIENT_TYPE: ClassVar[ClientType]

    def __init__(
        self,
        service: ClientService[TClient],
        converter: ClientConverter[TClient, TPayload],
    ) -> None:
        if service.supported_type is not self.CLIENT_TYPE:
            raise ValueError(
                f"{type(self).__name__} needs a {self.CLIENT_TYPE} service, "
                f"got {service.supported_type}"
            )
        self._service = service
        self._converter = converter

    @property
    def supported_type(self) -> ClientType:
        return self.CLIENT_TYPE

    @property
    def service(self) -> ClientService[TClient]:
        return self._service

    @property
    def unit_of_work(self) -> ClientContractUnitOfWork:
        return self._service.unit_of_work

    @transactional
    def get_all(self) -> list[TPayload]:
        return [self._converter.to_payload(entity) for entity in self._service.get_all()]

    @transactional
    def get_by_id(self, client_id: UUID) -> TPayload | None:
        entity = self._service.get_entity_by_id(client_id)
        if entity is None:
            return None
        return self._converter.to_payload(entity)

    @transactional
    def create(self, payload: TPayload) -> TPayload:
        entity = self._converter.to_entity(payload)
        created = self._service.create(entity)
        log.info("Created %s client %s", self.CLIENT_TYPE, created.id)
        return self._converter.to_payload(created)

    @transactional
    def update(self, client_id: UUID, payload: TPayload) -> TPayload | None:
        """Apply name/email/phone from ``payload``; immutable fields are never read."""

        existing = self._service.get_entity_by_id(client_id)
        if existing is None:
            return None
        updated = self._service.update(
            existing,
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
        )
        return self._converter.to_payload(updated)

    @transactional
    def delete(self, client_id: UUID) -> None:
        entity = self._service.get_entity_by_id(client_id)
        if entity is not None:
            self._service.delete(entity)

    def convert(self, generic: ClientPayload) -> TPayload:
        """Narrow a generic payload to this handler's variant."""

        payload_type = self._converter.payload_type
        if not isinstance(generic, payload_type):
            raise ClientTypeMismatchError(payload_type.__name__, type(generic).__name__)
        return generic

    def convert_update(self, update: ClientPayload | ClientUpdatePayload) -> TPayload:
        """Bring an update request into this variant's payload shape."""

        if isinstance(update, ClientUpdatePayload):
            return self._converter.from_update(update)
        return self.convert(update)


class PersonHandler(ClientHandler[Person, PersonPayload]):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.PERSON

    def __init__(self, service: PersonService, converter: PersonConverter | None = None) -> None:
        super().__init__(service, converter or PersonConverter())


class CompanyHandler(ClientHandler[Company, CompanyPayload]):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.COMPANY

    def __init__(
        self,
        service: CompanyService,
        converter: CompanyConverter | None = None,
    ) -> None:
        super().__init__(service, converter or CompanyConverter())
