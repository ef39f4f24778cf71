"""JSON transport adapter: request validation and response views."""

from __future__ import annotations

from .schema import (
    ClientUpdateSchema,
    CompanySchema,
    ContractCostSchema,
    ContractSchema,
    PersonSchema,
    client_schema_adapter,
)
from .translator import (
    client_payload_from_schema,
    client_view,
    contract_view,
    parse_client,
    parse_client_update,
    parse_contract,
    parse_contract_cost,
)

__all__ = [
    "ClientUpdateSchema",
    "CompanySchema",
    "ContractCostSchema",
    "ContractSchema",
    "PersonSchema",
    "client_payload_from_schema",
    "client_schema_adapter",
    "client_view",
    "contract_view",
    "parse_client",
    "parse_client_update",
    "parse_contract",
    "parse_contract_cost",
]
