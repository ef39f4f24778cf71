"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from clientcontract.domain.ports.persistence import (
        CompanyRepository,
        ContractRepository,
        PersonRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Generic unit-of-work boundary around a repository collection.

    Entering begins a transaction, ``commit`` makes it durable and leaving with an
    exception rolls it back.
    """

    @property
    def repositories(self) -> TRepositories: ...  # the repo list itself should be immutable

    @property
    def active(self) -> bool:
        """Whether a transaction is currently open."""
        ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class ClientContractRepositories(RepositoryCollection):
    """Repositories required to manage clients and their contracts."""

    persons: PersonRepository
    companies: CompanyRepository
    contracts: ContractRepository


type ClientContractUnitOfWork = UnitOfWork[ClientContractRepositories]
