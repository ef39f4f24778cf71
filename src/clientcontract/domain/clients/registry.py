"""Fail-fast lookup tables keyed by client type."""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from clientcontract.domain.errors import DuplicateClientTypeError, UnsupportedClientTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from clientcontract.domain.clients.handlers import ClientHandler
    from clientcontract.domain.model import ClientType


log = getLogger(__name__)


class SupportsClientType(Protocol):
    @property
    def supported_type(self) -> ClientType: ...


class ClientTypeRegistry[T: SupportsClientType]:
    """Immutable ``ClientType -> member`` table built once from its members.

    Every member reports the single type it serves. Two members claiming the same
    type abort construction.
    """

    kind: str = "member"

    def __init__(self, members: Iterable[T]) -> None:
        table: dict[ClientType, T] = {}
        for member in members:
            client_type = member.supported_type
            if client_type in table:
                raise DuplicateClientTypeError(client_type, kind=self.kind)
            table[client_type] = member
        self._members: Mapping[ClientType, T] = MappingProxyType(table)
        log.debug(
            "Registered %s %s(s) for client types: %s",
            len(table),
            self.kind,
            ", ".join(table),
        )

    @property
    def members(self) -> Mapping[ClientType, T]:
        return self._members

    @property
    def supported_types(self) -> frozenset[ClientType]:
        return frozenset(self._members)

    def resolve(self, client_type: ClientType) -> T:
        try:
            return self._members[client_type]
        except KeyError:
            raise UnsupportedClientTypeError(client_type, self._members) from None

    def __contains__(self, client_type: object) -> bool:
        return client_type in self._members

    def __len__(self) -> int:
        return len(self._members)


class HandlerRegistry(ClientTypeRegistry["ClientHandler[Any, Any]"]):
    """Client type to variant handler."""

    kind = "handler"
