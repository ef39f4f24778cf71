"""
Base building blocks:
identity and creation/modification timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from clientcontract.domain.clock import utcnow

if TYPE_CHECKING:
    from datetime import datetime


def new_id() -> UUID:
    return uuid4()


@dataclass(eq=False, kw_only=True)
class Entity:
    """Internal identity exists immediately in the domain."""

    id: UUID = field(default_factory=new_id)


@dataclass(eq=False, kw_only=True)
class TimestampedEntity(Entity):
    """Entity carrying an immutable creation timestamp."""

    created_at: datetime = field(default_factory=utcnow)
