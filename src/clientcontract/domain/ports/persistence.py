"""Ports for persisting clients and contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from clientcontract.domain.model import Client, Company, Contract, Person

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date, datetime
    from decimal import Decimal
    from uuid import UUID


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def get(self, entity_id: UUID) -> TEntity | None: ...

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ClientRepository[TClient: Client](Repository[TClient], Protocol):
    """Persistence contract shared by both client variants."""

    def list_all(self) -> Sequence[TClient]: ...

    def remove(self, entity: TClient) -> None: ...


@runtime_checkable
class PersonRepository(ClientRepository[Person], Protocol):
    """Repository contract for persons."""


@runtime_checkable
class CompanyRepository(ClientRepository[Company], Protocol):
    """Repository contract for companies."""

    def get_by_identifier(self, identifier: str) -> Company | None: ...

    def exists_by_identifier(self, identifier: str) -> bool: ...


@runtime_checkable
class ContractRepository(Repository[Contract], Protocol):
    """Repository contract for contracts."""

    def add_all(self, entities: Iterable[Contract]) -> None: ...

    def find_active(
        self,
        client: Client,
        *,
        today: date,
        updated_after: datetime | None = None,
    ) -> Sequence[Contract]:
        """Contracts of ``client`` whose end date is unset or after ``today``.

        ``updated_after=None`` applies no modification filter.
        """
        ...

    def sum_active_cost(self, client: Client, *, today: date) -> Decimal: ...
