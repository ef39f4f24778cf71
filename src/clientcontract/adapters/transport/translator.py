"""Translate validated request models into domain payloads and back to JSON views."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from clientcontract.adapters.transport.schema import (
    ClientUpdateSchema,
    CompanySchema,
    ContractCostSchema,
    ContractSchema,
    PersonSchema,
    client_schema_adapter,
)
from clientcontract.domain.clients import (
    ClientPayload,
    ClientUpdatePayload,
    CompanyPayload,
    PersonPayload,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from clientcontract.domain.model import Contract

type RawPayload = str | bytes | Mapping[str, Any]
type JsonView = dict[str, Any]


def parse_client(raw: RawPayload) -> ClientPayload:
    """Validate a type-tagged client document and build its variant payload."""

    if isinstance(raw, Mapping):
        schema = client_schema_adapter.validate_python(raw)
    else:
        schema = client_schema_adapter.validate_json(raw)
    return client_payload_from_schema(schema)


def client_payload_from_schema(schema: PersonSchema | CompanySchema) -> ClientPayload:
    if isinstance(schema, PersonSchema):
        return PersonPayload(
            id=schema.id,
            name=schema.name,
            email=schema.email,
            phone=schema.phone,
            birthdate=schema.birthdate,
        )
    return CompanyPayload(
        id=schema.id,
        name=schema.name,
        email=schema.email,
        phone=schema.phone,
        company_identifier=schema.company_identifier,
    )


def parse_client_update(raw: RawPayload) -> ClientUpdatePayload:
    if isinstance(raw, Mapping):
        schema = ClientUpdateSchema.model_validate(raw)
    else:
        schema = ClientUpdateSchema.model_validate_json(raw)
    return ClientUpdatePayload(name=schema.name, email=schema.email, phone=schema.phone)


def parse_contract(raw: RawPayload) -> ContractSchema:
    if isinstance(raw, Mapping):
        return ContractSchema.model_validate(raw)
    return ContractSchema.model_validate_json(raw)


def parse_contract_cost(value: str | Decimal) -> Decimal:
    return ContractCostSchema.model_validate({"costAmount": value}).cost_amount


def client_view(payload: ClientPayload) -> JsonView:
    view: JsonView = {
        "id": str(payload.id) if payload.id is not None else None,
        "type": payload.type.value,
        "name": payload.name,
        "email": payload.email,
        "phone": payload.phone,
    }
    if isinstance(payload, PersonPayload):
        view["birthdate"] = payload.birthdate.isoformat() if payload.birthdate else None
    elif isinstance(payload, CompanyPayload):
        view["companyIdentifier"] = payload.company_identifier
    return view


def contract_view(contract: Contract) -> JsonView:
    return {
        "id": str(contract.id),
        "clientId": str(contract.client.id),
        "startDate": contract.start_date.isoformat() if contract.start_date else None,
        "endDate": contract.end_date.isoformat() if contract.end_date else None,
        "costAmount": str(contract.cost_amount),
    }
