from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect

from clientcontract.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyClientContractUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from tests.helpers.client_contracts import make_person

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine


def test_unit_of_work_requires_startup() -> None:
    shutdown()

    with pytest.raises(StartupError):
        SqlAlchemyClientContractUnitOfWork()


def test_startup_twice_requires_force(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    try:
        with pytest.raises(StartupError, match="already initialised"):
            startup(engine=sqlite_engine)
        assert is_started()
        assert configured_engine() is sqlite_engine
    finally:
        shutdown()
    assert not is_started()


def test_startup_creates_schema() -> None:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    startup(engine=engine, force=True)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        shutdown()

    assert {"client", "person_client", "company_client", "contract"} <= tables


def test_commit_persists_and_exit_closes_session(
    sqlite_unit_of_work: Callable[[], SqlAlchemyClientContractUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()
    person = make_person()

    assert not uow.active
    with uow:
        assert uow.active
        uow.repositories.persons.add(person)
        uow.commit()
    assert not uow.active
    with pytest.raises(StartupError):
        _ = uow.repositories

    with uow:
        loaded = uow.repositories.persons.get(person.id)
        assert loaded is not None
        assert loaded.name == person.name


def test_exception_rolls_back(
    sqlite_unit_of_work: Callable[[], SqlAlchemyClientContractUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()
    person = make_person()

    with pytest.raises(RuntimeError), uow:
        uow.repositories.persons.add(person)
        uow.session.flush()
        raise RuntimeError("boom")

    with uow:
        assert uow.repositories.persons.get(person.id) is None
