"""SQLAlchemy adapter package for the client/contract store."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyContractRepository,
    SqlAlchemyPersonRepository,
)
from .unit_of_work import (
    SqlAlchemyClientContractUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyClientContractUnitOfWork",
    "SqlAlchemyClientRepository",
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyContractRepository",
    "SqlAlchemyPersonRepository",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
