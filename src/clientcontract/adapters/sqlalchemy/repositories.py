"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, cast

from sqlalchemy import exists, func, or_, select

from clientcontract.adapters.sqlalchemy.mappings import (
    MoneyAmount,
    client_table,
    company_client_table,
    contract_table,
)
from clientcontract.domain.model import Client, Company, Contract, Person

if TYPE_CHECKING:
    import uuid
    from collections.abc import Iterable, Sequence
    from datetime import date, datetime

    from sqlalchemy.orm import Session


class SqlAlchemyClientRepository[TClient: Client]:
    """Shared persistence for one client variant."""

    def __init__(self, session: Session, entity_cls: type[TClient]) -> None:
        self.session = session
        self._entity_cls = entity_cls

    def get(self, entity_id: uuid.UUID) -> TClient | None:
        return self.session.get(self._entity_cls, entity_id)

    def add(self, entity: TClient) -> None:
        self.session.add(entity)

    def list_all(self) -> Sequence[TClient]:
        stmt = select(self._entity_cls).order_by(client_table.c.created_at, client_table.c.id)
        return self.session.execute(stmt).scalars().all()

    def remove(self, entity: TClient) -> None:
        self.session.delete(entity)


class SqlAlchemyPersonRepository(SqlAlchemyClientRepository[Person]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Person)


class SqlAlchemyCompanyRepository(SqlAlchemyClientRepository[Company]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Company)

    def get_by_identifier(self, identifier: str) -> Company | None:
        stmt = select(Company).where(company_client_table.c.company_identifier == identifier)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_identifier(self, identifier: str) -> bool:
        stmt = select(
            exists().where(company_client_table.c.company_identifier == identifier)
        )
        return bool(self.session.execute(stmt).scalar())


class SqlAlchemyContractRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, entity_id: uuid.UUID) -> Contract | None:
        return self.session.get(Contract, entity_id)

    def add(self, entity: Contract) -> None:
        self.session.add(entity)

    def add_all(self, entities: Iterable[Contract]) -> None:
        self.session.add_all(list(entities))

    def find_active(
        self,
        client: Client,
        *,
        today: date,
        updated_after: datetime | None = None,
    ) -> Sequence[Contract]:
        stmt = (
            select(Contract)
            .where(contract_table.c._client_id == client.id)  # noqa: SLF001
            .where(or_(contract_table.c.end_date.is_(None), contract_table.c.end_date > today))
            .order_by(contract_table.c.created_at, contract_table.c.id)
        )
        if updated_after is not None:
            stmt = stmt.where(contract_table.c.last_modified > updated_after)
        return self.session.execute(stmt).unique().scalars().all()

    def sum_active_cost(self, client: Client, *, today: date) -> Decimal:
        stmt = (
            select(func.sum(contract_table.c.cost_amount, type_=MoneyAmount()))
            .where(contract_table.c._client_id == client.id)  # noqa: SLF001
            .where(or_(contract_table.c.end_date.is_(None), contract_table.c.end_date > today))
        )
        total: Decimal | None = self.session.execute(stmt).scalar_one()
        return total if total is not None else Decimal(0)


if TYPE_CHECKING:
    from clientcontract.domain.ports import (
        CompanyRepository,
        ContractRepository,
        PersonRepository,
    )

    _session_stub = cast("Session", object())
    _person_repo: PersonRepository = SqlAlchemyPersonRepository(_session_stub)
    _company_repo: CompanyRepository = SqlAlchemyCompanyRepository(_session_stub)
    _contract_repo: ContractRepository = SqlAlchemyContractRepository(_session_stub)
