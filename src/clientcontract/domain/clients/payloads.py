"""Client payloads exchanged with the transport (source-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Final

from clientcontract.domain.model import ClientType

if TYPE_CHECKING:
    from datetime import date
    from uuid import UUID

MUTABLE_CLIENT_FIELDS: Final[tuple[str, ...]] = ("name", "email", "phone")


@dataclass(slots=True, kw_only=True)
class ClientPayload:
    """Self-describing client payload; the variant tag is fixed per subclass."""

    CLIENT_TYPE: ClassVar[ClientType]
    # fields that may only be set when the client is created
    IMMUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ()

    id: UUID | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None

    @property
    def type(self) -> ClientType:
        return self.CLIENT_TYPE


@dataclass(slots=True, kw_only=True)
class PersonPayload(ClientPayload):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.PERSON
    IMMUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ("birthdate",)

    birthdate: date | None = None


@dataclass(slots=True, kw_only=True)
class CompanyPayload(ClientPayload):
    CLIENT_TYPE: ClassVar[ClientType] = ClientType.COMPANY
    IMMUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ("company_identifier",)

    company_identifier: str | None = None


@dataclass(slots=True, kw_only=True)
class ClientUpdatePayload:
    """Partial update: ``None`` means "keep the current value"."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None


def merge_client_payloads[P: ClientPayload](existing: P, update: P) -> P:
    """Overlay the non-null mutable fields of ``update`` onto ``existing``."""

    changes = {
        name: value
        for name in MUTABLE_CLIENT_FIELDS
        if (value := getattr(update, name)) is not None
    }
    return replace(existing, **changes)


def mask_immutable_fields[P: ClientPayload](payload: P) -> P:
    """Return a copy of ``payload`` with its variant's immutable fields cleared."""

    return replace(payload, **dict.fromkeys(payload.IMMUTABLE_FIELDS))
