from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from clientcontract.adapters.sqlalchemy import create_all_tables, start_mappers
from clientcontract.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyClientContractUnitOfWork,
    shutdown,
    startup,
)
from clientcontract.app import ClientContractServices, build_services
from tests.helpers.client_contracts import FakeUnitOfWork, fixed_clock

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    start_mappers()
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, expire_on_commit=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyClientContractUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyClientContractUnitOfWork:
        return SqlAlchemyClientContractUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def sqlite_services(
    sqlite_unit_of_work: Callable[[], SqlAlchemyClientContractUnitOfWork],
) -> ClientContractServices:
    return build_services(sqlite_unit_of_work())


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def fake_services(fake_uow: FakeUnitOfWork) -> ClientContractServices:
    return build_services(fake_uow, clock=fixed_clock)
