"""
Typed domain errors.

Every error carries a machine-readable ``code`` and the structured values that
caused it, so a transport can map each kind to its own response without parsing
messages:

    ClientContractError
    |
    +-- UnsupportedClientTypeError
    +-- DuplicateClientTypeError
    +-- ClientTypeMismatchError
    +-- NotFoundError
    |   +-- ClientNotFoundError
    |   +-- ContractNotFoundError
    +-- BusinessRuleViolationError
        +-- DuplicateCompanyIdentifierError

Storage faults are not part of this hierarchy; they propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from clientcontract.domain.model import ClientType


class ClientContractError(Exception):
    """Base exception for all domain errors."""

    code: str = "CLIENT_CONTRACT_ERROR"


class UnsupportedClientTypeError(ClientContractError):
    """No handler is registered for the requested client type."""

    code: str = "UNSUPPORTED_CLIENT_TYPE"

    def __init__(self, client_type: object, registered: Iterable[ClientType]) -> None:
        self.client_type = client_type
        self.registered = tuple(sorted(registered))
        available = ", ".join(self.registered) or "none"
        super().__init__(
            f"Unsupported client type: {client_type}. Available handlers: [{available}]"
        )


class DuplicateClientTypeError(ClientContractError):
    """Two registry members claim the same client type."""

    code: str = "DUPLICATE_CLIENT_TYPE"

    def __init__(self, client_type: ClientType, kind: str = "handler") -> None:
        self.client_type = client_type
        super().__init__(f"More than one {kind} registered for client type {client_type}")


class ClientTypeMismatchError(ClientContractError):
    """A payload was handed to a handler of a different variant."""

    code: str = "CLIENT_TYPE_MISMATCH"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} but got: {actual}")


class NotFoundError(ClientContractError):
    """Base class for lookups of missing entities by mutating operations."""

    code: str = "NOT_FOUND"


class ClientNotFoundError(NotFoundError):
    code: str = "CLIENT_NOT_FOUND"

    def __init__(self, client_type: ClientType, client_id: UUID) -> None:
        self.client_type = client_type
        self.client_id = client_id
        super().__init__(f"Client not found with id: {client_id} and type: {client_type}")


class ContractNotFoundError(NotFoundError):
    code: str = "CONTRACT_NOT_FOUND"

    def __init__(self, contract_id: UUID) -> None:
        self.contract_id = contract_id
        super().__init__(f"Contract not found with id: {contract_id}")


class BusinessRuleViolationError(ClientContractError):
    """Input is well-formed but breaks a business rule."""

    code: str = "BUSINESS_RULE_VIOLATION"

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class DuplicateCompanyIdentifierError(BusinessRuleViolationError):
    code: str = "DUPLICATE_COMPANY_IDENTIFIER"

    def __init__(self, identifier: str) -> None:
        super().__init__(
            "company_identifier",
            identifier,
            f"Company identifier already exists: {identifier}",
        )
