"""Type-dispatched entity lookup used by cross-entity operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clientcontract.domain.clients.registry import ClientTypeRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from clientcontract.domain.clients.services import ClientService
    from clientcontract.domain.model import Client, ClientType


class ServiceRegistry(ClientTypeRegistry["ClientService[Any]"]):
    kind = "service"


class ClientResolver:
    """Find a client entity by type and id through its variant service."""

    def __init__(self, services: Iterable[ClientService[Any]]) -> None:
        self._services = ServiceRegistry(services)

    @property
    def supported_types(self) -> frozenset[ClientType]:
        return self._services.supported_types

    def resolve(self, client_type: ClientType, client_id: UUID) -> Client | None:
        return self._services.resolve(client_type).get_entity_by_id(client_id)
