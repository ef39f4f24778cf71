"""Application composition and contract use cases."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from clientcontract.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyClientContractUnitOfWork,
    is_started,
    startup,
)
from clientcontract.domain.clients import (
    ClientOrchestrationService,
    ClientResolver,
    CompanyHandler,
    CompanyService,
    HandlerRegistry,
    PersonHandler,
    PersonService,
)
from clientcontract.domain.clock import utcnow
from clientcontract.domain.contracts import ContractService
from clientcontract.domain.errors import ContractNotFoundError
from clientcontract.domain.model import Contract
from clientcontract.domain.transactions import transaction

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime
    from decimal import Decimal
    from uuid import UUID

    from sqlalchemy.engine import Engine

    from clientcontract.domain.clock import Clock
    from clientcontract.domain.model import ClientType
    from clientcontract.domain.ports import ClientContractUnitOfWork


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClientContractServices:
    """Everything a transport needs, wired around one unit of work."""

    unit_of_work: ClientContractUnitOfWork
    clients: ClientOrchestrationService
    contracts: ContractService
    handlers: HandlerRegistry
    resolver: ClientResolver


def build_services(
    unit_of_work: ClientContractUnitOfWork,
    *,
    clock: Clock = utcnow,
) -> ClientContractServices:
    """Wire services, handlers, registry and orchestration once."""

    contracts = ContractService(unit_of_work, clock=clock)
    persons = PersonService(unit_of_work, contracts, clock=clock)
    companies = CompanyService(unit_of_work, contracts, clock=clock)
    handlers = HandlerRegistry([PersonHandler(persons), CompanyHandler(companies)])
    resolver = ClientResolver([persons, companies])
    clients = ClientOrchestrationService(unit_of_work, handlers, resolver, contracts)
    return ClientContractServices(
        unit_of_work=unit_of_work,
        clients=clients,
        contracts=contracts,
        handlers=handlers,
        resolver=resolver,
    )


def bootstrap(
    *,
    database_uri: str | None = None,
    engine: Engine | None = None,
    clock: Clock = utcnow,
) -> ClientContractServices:
    """Start the SQLAlchemy adapter (once) and return the wired services."""

    if not is_started():
        startup(engine=engine, database_uri=database_uri)
    return build_services(SqlAlchemyClientContractUnitOfWork(), clock=clock)


def create_contract_for_client(
    services: ClientContractServices,
    client_type: ClientType,
    client_id: UUID,
    *,
    cost_amount: Decimal,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Contract:
    with transaction(services.unit_of_work):
        client = services.clients.get_client_entity(client_type, client_id)
        contract = Contract(
            client=client,
            cost_amount=cost_amount,
            start_date=start_date,
            end_date=end_date,
        )
        return services.contracts.create_contract(contract)


def list_active_contracts(
    services: ClientContractServices,
    client_type: ClientType,
    client_id: UUID,
    *,
    updated_after: datetime | None = None,
) -> Sequence[Contract]:
    with transaction(services.unit_of_work):
        client = services.clients.get_client_entity(client_type, client_id)
        return services.contracts.get_active_contracts(client, updated_after)


def total_active_amount(
    services: ClientContractServices,
    client_type: ClientType,
    client_id: UUID,
) -> Decimal:
    with transaction(services.unit_of_work):
        client = services.clients.get_client_entity(client_type, client_id)
        return services.contracts.get_total_active_contracts_amount(client)


def update_contract_cost(
    services: ClientContractServices,
    contract_id: UUID,
    cost_amount: Decimal,
) -> Contract:
    with transaction(services.unit_of_work):
        contract = services.contracts.get_contract(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)
        updated = services.contracts.update_contract_cost(contract, cost_amount)
        log.info("Contract %s cost set to %s", contract_id, cost_amount)
        return updated
