"""Contract lifecycle: creation, cost changes, active-set queries and closure."""

from __future__ import annotations

from decimal import Decimal
from logging import getLogger
from typing import TYPE_CHECKING

from clientcontract.domain.clock import today, utcnow
from clientcontract.domain.transactions import transactional

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime
    from uuid import UUID

    from clientcontract.domain.clock import Clock
    from clientcontract.domain.model import Client, Contract
    from clientcontract.domain.ports import ClientContractUnitOfWork, ContractRepository


log = getLogger(__name__)


class ContractService:
    """Business rules for contracts; every method joins or opens a unit of work."""

    def __init__(self, unit_of_work: ClientContractUnitOfWork, *, clock: Clock = utcnow) -> None:
        self._uow = unit_of_work
        self._clock = clock

    @property
    def unit_of_work(self) -> ClientContractUnitOfWork:
        return self._uow

    @property
    def _contracts(self) -> ContractRepository:
        return self._uow.repositories.contracts

    def _today(self) -> date:
        return today(self._clock)

    @transactional
    def get_contract(self, contract_id: UUID) -> Contract | None:
        return self._contracts.get(contract_id)

    @transactional
    def create_contract(self, contract: Contract) -> Contract:
        """Persist a new contract, defaulting its start date to today."""

        if contract.start_date is None:
            contract.start_date = self._today()
        contract.created_at = contract.last_modified = self._clock()
        self._contracts.add(contract)
        log.info("Created contract %s for client %s", contract.id, contract.client.id)
        return contract

    @transactional
    def update_contract_cost(self, contract: Contract, new_cost: Decimal) -> Contract:
        # lower bound is an input-validation concern
        contract.change_cost(new_cost, self._clock())
        self._contracts.add(contract)
        return contract

    @transactional
    def get_active_contracts(
        self,
        client: Client,
        updated_after: datetime | None = None,
    ) -> Sequence[Contract]:
        """Active contracts of ``client``; ``updated_after=None`` means no cutoff."""

        return self._contracts.find_active(
            client,
            today=self._today(),
            updated_after=updated_after,
        )

    @transactional
    def get_total_active_contracts_amount(self, client: Client) -> Decimal:
        total = self._contracts.sum_active_cost(client, today=self._today())
        return total if total is not None else Decimal(0)

    @transactional
    def close_contracts_on_client_deletion(self, client: Client) -> Sequence[Contract]:
        """End every active contract of ``client`` today. A second call is a no-op."""

        day = self._today()
        moment = self._clock()
        contracts = list(self._contracts.find_active(client, today=day))
        for contract in contracts:
            contract.close(day, moment)
        if contracts:
            self._contracts.add_all(contracts)
            log.info("Closed %s active contract(s) of client %s", len(contracts), client.id)
        return contracts
