"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    ClientRepository,
    CompanyRepository,
    ContractRepository,
    PersonRepository,
    Repository,
)
from .unit_of_work import (
    ClientContractRepositories,
    ClientContractUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ClientContractRepositories",
    "ClientContractUnitOfWork",
    "ClientRepository",
    "CompanyRepository",
    "ContractRepository",
    "PersonRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
