"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ClientType(StrEnum):
    """Variant tag of a client. Values double as the wire and storage representation."""

    PERSON = "PERSON"
    COMPANY = "COMPANY"

    @classmethod
    def parse(cls, value: str) -> ClientType:
        """Case-insensitive lookup; raises ``ValueError`` for unknown tags."""
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown client type: {value!r} (expected one of {choices})") from exc
