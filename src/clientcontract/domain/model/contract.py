"""Contracts owned by clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from clientcontract.domain.model.entity import TimestampedEntity

if TYPE_CHECKING:
    from datetime import date, datetime
    from decimal import Decimal

    from clientcontract.domain.model.client import Client


@dataclass(eq=False, kw_only=True)
class Contract(TimestampedEntity):
    """A priced agreement with exactly one client.

    Active while ``end_date`` is unset or lies strictly after the reference day.
    Contracts are only ever closed, never deleted on their own; they disappear
    together with their client.
    """

    client: Client = field(repr=False)
    cost_amount: Decimal
    start_date: date | None = None
    end_date: date | None = None
    last_modified: datetime | None = None

    def __post_init__(self) -> None:
        # Keep client graph consistent without ORM.
        self.client._attach_contract(self)  # pyright: ignore[reportPrivateUsage] # noqa: SLF001

    def is_active_on(self, day: date) -> bool:
        return self.end_date is None or self.end_date > day

    def close(self, day: date, moment: datetime) -> None:
        """End the contract on ``day``; closing is the only way to set an end date."""
        self.end_date = day
        self.last_modified = moment

    def change_cost(self, cost: Decimal, moment: datetime) -> None:
        self.cost_amount = cost
        self.last_modified = moment
