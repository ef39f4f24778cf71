"""Client aggregate: the abstract client and its two variants."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from clientcontract.domain.clock import utcnow
from clientcontract.domain.model.entity import TimestampedEntity
from clientcontract.domain.model.enums import ClientType

if TYPE_CHECKING:
    from datetime import date, datetime

    from clientcontract.domain.model.contract import Contract


@dataclass(eq=False, kw_only=True)
class Client(TimestampedEntity, ABC):
    """A person or company that can hold contracts.

    The variant tag is a class constant of each concrete subclass, so an instance's
    ``client_type`` can never disagree with its concrete type.
    """

    CLIENT_TYPE: ClassVar[ClientType]

    name: str
    email: str
    phone: str | None = None
    updated_at: datetime = field(default_factory=utcnow)

    _contracts: list[Contract] = field(default_factory=list["Contract"], repr=False)

    @property
    def client_type(self) -> ClientType:
        return self.CLIENT_TYPE

    @property
    def contracts(self) -> tuple[Contract, ...]:
        return tuple(self._contracts)

    def touch(self, moment: datetime) -> None:
        """Record a mutation at ``moment``."""
        self.updated_at = moment

    def _attach_contract(self, contract: Contract) -> None:
        # the ORM back-reference may already have appended it
        if contract not in self._contracts:
            self._contracts.append(contract)


@dataclass(eq=False, kw_only=True)
class Person(Client):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.PERSON

    # immutable after creation
    birthdate: date | None = None


@dataclass(eq=False, kw_only=True)
class Company(Client):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.COMPANY

    # natural key, unique across companies and immutable after creation
    company_identifier: str
