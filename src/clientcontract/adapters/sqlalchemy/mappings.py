"""SQLAlchemy mapping metadata for the client/contract domain model."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from decimal import ROUND_HALF_EVEN, Decimal
from functools import cache
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    Dialect,
    Enum,
    ForeignKey,
    Index,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from clientcontract.domain.model import Client, ClientType, Company, Contract, Person

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

MONEY_SCALE: Final[int] = 2
_MONEY_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-MONEY_SCALE)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class MoneyAmount(TypeDecorator[Decimal]):
    """Decimal amount stored as an integer count of minor units (cents).

    Sums are computed by the database on integers, so they stay exact on every
    backend, SQLite included. Amounts finer than a cent are rejected, not rounded.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value: Decimal | None, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        quantized = Decimal(value).quantize(_MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)
        if quantized != value:
            raise ValueError(f"Amount {value} is not a whole number of cents")
        return int(quantized.scaleb(MONEY_SCALE))

    def process_result_value(self, value: int | None, dialect: Dialect) -> Decimal | None:
        _ = dialect
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-MONEY_SCALE)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Client tables (joined-table inheritance) -------------------------------------

client_table = Table(
    "client",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("type", Enum(ClientType, native_enum=False), key="_type", nullable=False),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("phone", String, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
)

person_client_table = Table(
    "person_client",
    mapper_registry.metadata,
    Column(
        "id", UUIDColumnType, ForeignKey("client.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("birthdate", Date, nullable=True),
)

company_client_table = Table(
    "company_client",
    mapper_registry.metadata,
    Column(
        "id", UUIDColumnType, ForeignKey("client.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("company_identifier", String(7), nullable=False),
    UniqueConstraint("company_identifier"),
)

# Contracts ---------------------------------------------------------------------

contract_table = Table(
    "contract",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "client_id",
        UUIDColumnType,
        ForeignKey("client.id", ondelete="CASCADE"),
        key="_client_id",
        nullable=False,
    ),
    Column("cost_amount", MoneyAmount(), nullable=False),
    Column("start_date", Date, nullable=True),
    Column("end_date", Date, nullable=True),
    Column("last_modified", UTCDateTime(), nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
)

Index(
    "ix_contract_client_end_date",
    contract_table.c._client_id,  # noqa: SLF001
    contract_table.c.end_date,
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        Client,
        client_table,
        polymorphic_on=client_table.c._type,  # noqa: SLF001
        properties={
            "_contracts": relationship(
                Contract,
                back_populates="client",
                cascade="all, delete-orphan",
                order_by=contract_table.c.created_at,
            ),
        },
    )

    mapper_registry.map_imperatively(
        Person,
        person_client_table,
        inherits=Client,
        polymorphic_identity=ClientType.PERSON,
    )

    mapper_registry.map_imperatively(
        Company,
        company_client_table,
        inherits=Client,
        polymorphic_identity=ClientType.COMPANY,
    )

    mapper_registry.map_imperatively(
        Contract,
        contract_table,
        properties={
            "client": relationship(
                Client,
                back_populates="_contracts",
                lazy="joined",
            ),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
