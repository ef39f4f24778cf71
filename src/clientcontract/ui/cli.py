# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any
from uuid import UUID

from dotenv import load_dotenv

from clientcontract.adapters.transport import (
    client_view,
    contract_view,
    parse_client,
    parse_client_update,
    parse_contract,
    parse_contract_cost,
)
from clientcontract.app import (
    bootstrap,
    create_contract_for_client,
    list_active_contracts,
    total_active_amount,
    update_contract_cost,
)
from clientcontract.config import ConfigurationError, configure_logging
from clientcontract.domain.model import ClientType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from decimal import Decimal
    from types import FrameType

    from clientcontract.adapters.transport.schema import ContractSchema
    from clientcontract.app import ClientContractServices
    from clientcontract.domain.clients import ClientPayload, ClientUpdatePayload

log = logging.getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class _Request:
    """CLI arguments after validation, ready to hand to the services."""

    command: str
    action: str
    client_type: ClientType | None = None
    entity_id: UUID | None = None
    client: ClientPayload | None = None
    update: ClientUpdatePayload | None = None
    contract: ContractSchema | None = None
    cost: Decimal | None = None
    updated_after: datetime | None = None


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage clients and their contracts")
    parser.add_argument(
        "--database-uri",
        type=str,
        default=None,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the data directory)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    client = subparsers.add_parser("client", help="Client management commands")
    client_sub = client.add_subparsers(dest="action", required=True)

    client_list = client_sub.add_parser("list", help="List all clients of a type")
    _add_type_argument(client_list)

    client_get = client_sub.add_parser("get", help="Show one client")
    _add_type_argument(client_get)
    client_get.add_argument("id", type=str, help="Client id")

    client_create = client_sub.add_parser("create", help="Create a client")
    client_create.add_argument(
        "payload",
        type=str,
        help='JSON document, e.g. {"type": "PERSON", "name": "...", "email": "..."}',
    )

    client_update = client_sub.add_parser("update", help="Update name, email or phone")
    _add_type_argument(client_update)
    client_update.add_argument("id", type=str, help="Client id")
    client_update.add_argument("payload", type=str, help="JSON document with changed fields")

    client_delete = client_sub.add_parser("delete", help="Close contracts and delete a client")
    _add_type_argument(client_delete)
    client_delete.add_argument("id", type=str, help="Client id")

    contract = subparsers.add_parser("contract", help="Contract management commands")
    contract_sub = contract.add_subparsers(dest="action", required=True)

    contract_create = contract_sub.add_parser("create", help="Create a contract for a client")
    _add_type_argument(contract_create)
    contract_create.add_argument("id", type=str, help="Client id")
    contract_create.add_argument(
        "payload",
        type=str,
        help='JSON document, e.g. {"costAmount": "100.00", "endDate": "2030-01-01"}',
    )

    contract_active = contract_sub.add_parser("active", help="List active contracts")
    _add_type_argument(contract_active)
    contract_active.add_argument("id", type=str, help="Client id")
    contract_active.add_argument(
        "--updated-after",
        type=str,
        help="ISO-8601 timestamp; only contracts modified after it are listed",
    )

    contract_sum = contract_sub.add_parser("sum", help="Sum the cost of active contracts")
    _add_type_argument(contract_sum)
    contract_sum.add_argument("id", type=str, help="Client id")

    contract_cost = contract_sub.add_parser("update-cost", help="Change a contract's cost")
    contract_cost.add_argument("id", type=str, help="Contract id")
    contract_cost.add_argument("cost", type=str, help="New cost amount")

    return parser.parse_args(list(argv))


def _add_type_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type",
        dest="client_type",
        type=str,
        required=True,
        help="Client type (PERSON or COMPANY)",
    )


def _parse_iso_datetime(value: str) -> datetime:
    try:
        normalized = value.strip()
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        dt = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO timestamp: {value}") from exc
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value}") from exc


def _build_request(args: argparse.Namespace) -> _Request:
    """Validate every argument before any storage is touched."""

    request = _Request(command=args.command, action=args.action)
    if getattr(args, "client_type", None) is not None:
        request.client_type = ClientType.parse(args.client_type)
    if getattr(args, "id", None) is not None:
        request.entity_id = _parse_uuid(args.id)

    command = (args.command, args.action)
    if command == ("client", "create"):
        request.client = parse_client(args.payload)
    elif command == ("client", "update"):
        request.update = parse_client_update(args.payload)
    elif command == ("contract", "create"):
        request.contract = parse_contract(args.payload)
    elif command == ("contract", "active") and args.updated_after:
        request.updated_after = _parse_iso_datetime(args.updated_after)
    elif command == ("contract", "update-cost"):
        request.cost = parse_contract_cost(args.cost)
    return request


def _client_key(request: _Request) -> tuple[ClientType, UUID]:
    if request.client_type is None or request.entity_id is None:
        raise ValueError("Both --type and a client id are required")
    return request.client_type, request.entity_id


def _run_client_command(services: ClientContractServices, request: _Request) -> Any:
    clients = services.clients
    if request.action == "list":
        if request.client_type is None:
            raise ValueError("--type is required")
        return [client_view(payload) for payload in clients.get_all_clients(request.client_type)]
    if request.action == "create" and request.client is not None:
        return client_view(clients.create_client(request.client))

    client_type, client_id = _client_key(request)
    clients.validate_client_exists(client_type, client_id)
    if request.action == "get":
        payload = clients.get_client_by_id(client_type, client_id)
        return client_view(payload) if payload is not None else None
    if request.action == "update" and request.update is not None:
        return client_view(clients.update_client(client_type, client_id, request.update))
    if request.action == "delete":
        clients.delete_client(client_type, client_id)
        return {"deleted": str(client_id)}
    raise ValueError(f"Unsupported client command: {request.action}")


def _run_contract_command(services: ClientContractServices, request: _Request) -> Any:
    if request.action == "update-cost":
        if request.entity_id is None or request.cost is None:
            raise ValueError("A contract id and a cost are required")
        return contract_view(update_contract_cost(services, request.entity_id, request.cost))

    client_type, client_id = _client_key(request)
    if request.action == "create" and request.contract is not None:
        contract = create_contract_for_client(
            services,
            client_type,
            client_id,
            cost_amount=request.contract.cost_amount,
            start_date=request.contract.start_date,
            end_date=request.contract.end_date,
        )
        return contract_view(contract)
    if request.action == "active":
        contracts = list_active_contracts(
            services,
            client_type,
            client_id,
            updated_after=request.updated_after,
        )
        return [contract_view(contract) for contract in contracts]
    if request.action == "sum":
        total = total_active_amount(services, client_type, client_id)
        return {"clientId": str(client_id), "total": str(total)}
    raise ValueError(f"Unsupported contract command: {request.action}")


def _execute(services: ClientContractServices, request: _Request) -> Any:
    if request.command == "client":
        return _run_client_command(services, request)
    if request.command == "contract":
        return _run_contract_command(services, request)
    raise ValueError(f"Unsupported command: {request.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        configure_logging(level=parsed_args.log_level)
        request = _build_request(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        services = bootstrap(database_uri=parsed_args.database_uri)
        result = _execute(services, request)
    except Exception:
        log.exception("Command failed")
        sys.exit(1)

    print(json.dumps(result, indent=2))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
