"""Variant business services for persons and companies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from clientcontract.domain.clock import utcnow
from clientcontract.domain.errors import DuplicateCompanyIdentifierError
from clientcontract.domain.model import Client, ClientType, Company, Person
from clientcontract.domain.transactions import transactional

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from clientcontract.domain.clock import Clock
    from clientcontract.domain.contracts import ContractService
    from clientcontract.domain.ports import (
        ClientContractUnitOfWork,
        ClientRepository,
        CompanyRepository,
        PersonRepository,
    )


log = getLogger(__name__)


class ClientService[TClient: Client](ABC):
    """Shared rules of both client variants.

    Subclasses bind the repository of their variant; creation rules that differ
    per variant live in :meth:`create`.
    """

    CLIENT_TYPE: ClassVar[ClientType]

    def __init__(
        self,
        unit_of_work: ClientContractUnitOfWork,
        contracts: ContractService,
        *,
        clock: Clock = utcnow,
    ) -> None:
        self._uow = unit_of_work
        self._contracts = contracts
        self._clock = clock

    @property
    def unit_of_work(self) -> ClientContractUnitOfWork:
        return self._uow

    @property
    def supported_type(self) -> ClientType:
        return self.CLIENT_TYPE

    @property
    @abstractmethod
    def repository(self) -> ClientRepository[TClient]: ...

    @transactional
    def get_all(self) -> Sequence[TClient]:
        return self.repository.list_all()

    @transactional
    def get_entity_by_id(self, client_id: UUID) -> TClient | None:
        return self.repository.get(client_id)

    @transactional
    def create(self, entity: TClient) -> TClient:
        entity.created_at = entity.updated_at = self._clock()
        self.repository.add(entity)
        return entity

    @transactional
    def update(
        self,
        existing: TClient,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> TClient:
        """Overwrite the shared mutable fields that are given; nothing else changes."""

        if name is not None:
            existing.name = name
        if email is not None:
            existing.email = email
        if phone is not None:
            existing.phone = phone
        existing.touch(self._clock())
        self.repository.add(existing)
        return existing

    @transactional
    def delete(self, entity: TClient) -> None:
        """Close the client's contracts, then remove it (and them) from the store."""

        self._contracts.close_contracts_on_client_deletion(entity)
        self.repository.remove(entity)
        log.info("Deleted %s client %s", self.CLIENT_TYPE, entity.id)


class PersonService(ClientService[Person]):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.PERSON

    @property
    def repository(self) -> PersonRepository:
        return self._uow.repositories.persons


class CompanyService(ClientService[Company]):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.COMPANY

    @property
    def repository(self) -> CompanyRepository:
        return self._uow.repositories.companies

    @transactional
    def get_by_identifier(self, identifier: str) -> Company | None:
        return self.repository.get_by_identifier(identifier)

    @transactional
    def create(self, entity: Company) -> Company:
        """Persist a company whose identifier is not yet taken."""

        if self.repository.exists_by_identifier(entity.company_identifier):
            raise DuplicateCompanyIdentifierError(entity.company_identifier)
        return super().create(entity)
