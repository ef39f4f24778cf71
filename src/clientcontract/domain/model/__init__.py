"""Public domain model surface."""

from __future__ import annotations

from clientcontract.domain.model.client import Client, Company, Person
from clientcontract.domain.model.contract import Contract
from clientcontract.domain.model.entity import Entity, TimestampedEntity, new_id
from clientcontract.domain.model.enums import ClientType

__all__ = [
    "Client",
    "ClientType",
    "Company",
    "Contract",
    "Entity",
    "Person",
    "TimestampedEntity",
    "new_id",
]
