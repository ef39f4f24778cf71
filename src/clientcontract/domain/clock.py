"""Time sources used by domain services."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime

type Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


def today(clock: Clock = utcnow) -> date:
    """Calendar day of ``clock`` in UTC."""
    return clock().astimezone(UTC).date()
