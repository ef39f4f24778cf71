"""Type-agnostic façade over the client variants.

Every operation resolves the variant handler first, so an unknown client type fails
before any store is touched. Each public method is one unit of work; the handlers,
services and the contract service it calls join that transaction.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from clientcontract.domain.clients.payloads import mask_immutable_fields, merge_client_payloads
from clientcontract.domain.errors import ClientNotFoundError
from clientcontract.domain.transactions import transactional

if TYPE_CHECKING:
    from uuid import UUID

    from clientcontract.domain.clients.handlers import ClientHandler
    from clientcontract.domain.clients.payloads import ClientPayload, ClientUpdatePayload
    from clientcontract.domain.clients.registry import HandlerRegistry
    from clientcontract.domain.clients.resolver import ClientResolver
    from clientcontract.domain.contracts import ContractService
    from clientcontract.domain.model import Client, ClientType
    from clientcontract.domain.ports import ClientContractUnitOfWork


log = getLogger(__name__)


class ClientOrchestrationService:
    def __init__(
        self,
        unit_of_work: ClientContractUnitOfWork,
        registry: HandlerRegistry,
        resolver: ClientResolver,
        contracts: ContractService,
    ) -> None:
        self._uow = unit_of_work
        self._registry = registry
        self._resolver = resolver
        self._contracts = contracts

    @property
    def unit_of_work(self) -> ClientContractUnitOfWork:
        return self._uow

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    def _handler(self, client_type: ClientType) -> ClientHandler[Any, Any]:
        return self._registry.resolve(client_type)

    @transactional
    def get_all_clients(self, client_type: ClientType) -> list[ClientPayload]:
        return self._handler(client_type).get_all()

    @transactional
    def get_client_by_id(self, client_type: ClientType, client_id: UUID) -> ClientPayload | None:
        return self._handler(client_type).get_by_id(client_id)

    @transactional
    def create_client(self, payload: ClientPayload) -> ClientPayload:
        """Create a client of the variant named by the payload's own tag."""

        handler = self._handler(payload.type)
        created = handler.create(handler.convert(payload))
        log.info("Client %s of type %s created", created.id, payload.type)
        return created

    @transactional
    def update_client(
        self,
        client_type: ClientType,
        client_id: UUID,
        update: ClientPayload | ClientUpdatePayload,
    ) -> ClientPayload:
        """Apply a partial update; variant-immutable fields are never changed.

        Only non-null name, email and phone of ``update`` replace the stored values.
        """

        handler = self._handler(client_type)
        existing = handler.get_by_id(client_id)
        if existing is None:
            raise ClientNotFoundError(client_type, client_id)

        incoming = handler.convert_update(update)
        merged = mask_immutable_fields(merge_client_payloads(existing, incoming))
        updated = handler.update(client_id, merged)
        if updated is None:
            raise ClientNotFoundError(client_type, client_id)
        log.info("Client %s of type %s updated", client_id, client_type)
        return updated

    @transactional
    def validate_client_exists(self, client_type: ClientType, client_id: UUID) -> None:
        handler = self._handler(client_type)
        if handler.service.get_entity_by_id(client_id) is None:
            raise ClientNotFoundError(client_type, client_id)

    @transactional
    def get_client_entity(self, client_type: ClientType, client_id: UUID) -> Client:
        """Resolve the entity behind ``client_id``; missing clients raise."""

        self._handler(client_type)
        client = self._resolver.resolve(client_type, client_id)
        if client is None:
            raise ClientNotFoundError(client_type, client_id)
        return client

    @transactional
    def delete_client(self, client_type: ClientType, client_id: UUID) -> None:
        """Close the client's active contracts, then remove the client.

        Both steps share one transaction: either all contracts are closed and the
        client is gone, or nothing changed.
        """

        handler = self._handler(client_type)
        client = self._resolver.resolve(client_type, client_id)
        if client is None:
            raise ClientNotFoundError(client_type, client_id)

        self._contracts.close_contracts_on_client_deletion(client)
        handler.delete(client_id)
        log.info("Client %s of type %s deleted", client_id, client_type)
