"""Reusable fakes and helpers for client and contract tests."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from clientcontract.domain.model import Client, Company, Contract, Person
from clientcontract.domain.ports import ClientContractRepositories

if TYPE_CHECKING:
    import uuid
    from collections.abc import Iterable, Sequence

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=UTC)
FIXED_TODAY = date(2025, 3, 14)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_person(
    name: str = "Ada Lovelace",
    *,
    email: str = "ada@example.com",
    phone: str | None = "+41791234567",
    birthdate: date | None = date(1990, 12, 10),
) -> Person:
    return Person(name=name, email=email, phone=phone, birthdate=birthdate)


def make_company(
    name: str = "Acme",
    *,
    email: str = "info@acme.example",
    phone: str | None = None,
    company_identifier: str = "aaa-123",
) -> Company:
    return Company(
        name=name,
        email=email,
        phone=phone,
        company_identifier=company_identifier,
    )


def make_contract(
    client: Client,
    cost: str = "100.00",
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Contract:
    return Contract(
        client=client,
        cost_amount=Decimal(cost),
        start_date=start_date,
        end_date=end_date,
    )


class FakeClientRepository[TClient: Client]:
    """In-memory store for one client variant."""

    def __init__(self, initial: Iterable[TClient] | None = None) -> None:
        self.items: dict[uuid.UUID, TClient] = {client.id: client for client in initial or ()}
        self.added: list[TClient] = []
        self.removed: list[TClient] = []

    def get(self, entity_id: uuid.UUID) -> TClient | None:
        return self.items.get(entity_id)

    def add(self, entity: TClient) -> None:
        self.added.append(entity)
        self.items[entity.id] = entity

    def list_all(self) -> Sequence[TClient]:
        return list(self.items.values())

    def remove(self, entity: TClient) -> None:
        self.removed.append(entity)
        self.items.pop(entity.id, None)


class FakePersonRepository(FakeClientRepository[Person]):
    pass


class FakeCompanyRepository(FakeClientRepository[Company]):
    def get_by_identifier(self, identifier: str) -> Company | None:
        return next(
            (item for item in self.items.values() if item.company_identifier == identifier),
            None,
        )

    def exists_by_identifier(self, identifier: str) -> bool:
        return self.get_by_identifier(identifier) is not None


class FakeContractRepository:
    def __init__(self, initial: Iterable[Contract] | None = None) -> None:
        self.items: dict[uuid.UUID, Contract] = {item.id: item for item in initial or ()}
        self.bulk_saves: list[list[Contract]] = []

    def get(self, entity_id: uuid.UUID) -> Contract | None:
        return self.items.get(entity_id)

    def add(self, entity: Contract) -> None:
        self.items[entity.id] = entity

    def add_all(self, entities: Iterable[Contract]) -> None:
        batch = list(entities)
        self.bulk_saves.append(batch)
        for entity in batch:
            self.add(entity)

    def find_active(
        self,
        client: Client,
        *,
        today: date,
        updated_after: datetime | None = None,
    ) -> Sequence[Contract]:
        return [
            item
            for item in self.items.values()
            if item.client.id == client.id
            and item.is_active_on(today)
            and (
                updated_after is None
                or (item.last_modified is not None and item.last_modified > updated_after)
            )
        ]

    def sum_active_cost(self, client: Client, *, today: date) -> Decimal:
        return sum(
            (item.cost_amount for item in self.find_active(client, today=today)),
            Decimal(0),
        )


class FakeUnitOfWork:
    """Unit of work counting transactions over in-memory repositories."""

    def __init__(
        self,
        *,
        persons: FakePersonRepository | None = None,
        companies: FakeCompanyRepository | None = None,
        contracts: FakeContractRepository | None = None,
    ) -> None:
        self.persons = persons or FakePersonRepository()
        self.companies = companies or FakeCompanyRepository()
        self.contracts = contracts or FakeContractRepository()
        self._repositories = ClientContractRepositories(
            persons=self.persons,
            companies=self.companies,
            contracts=self.contracts,
        )
        self._active = False
        self.entered = 0
        self.commits = 0
        self.rollbacks = 0

    @property
    def repositories(self) -> ClientContractRepositories:
        return self._repositories

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> FakeUnitOfWork:
        if self._active:
            raise AssertionError("unit of work entered twice")
        self._active = True
        self.entered += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: object | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self._active = False
        return False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


if TYPE_CHECKING:
    from clientcontract.domain.ports import (
        ClientContractUnitOfWork,
        CompanyRepository,
        ContractRepository,
        PersonRepository,
    )

    _person_repo: PersonRepository = FakePersonRepository()
    _company_repo: CompanyRepository = FakeCompanyRepository()
    _contract_repo: ContractRepository = FakeContractRepository()
    _uow: ClientContractUnitOfWork = FakeUnitOfWork()
