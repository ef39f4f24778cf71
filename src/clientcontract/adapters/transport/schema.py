"""Pydantic models describing client and contract request payloads."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from decimal import Decimal  # noqa: TC003
from typing import Annotated, Final, Literal
from uuid import UUID  # noqa: TC003

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PastDate,
    TypeAdapter,
    model_validator,
)

from clientcontract.domain.clock import today

EMAIL_PATTERN: Final[str] = r"^[^@\s]+@[^@\s]+$"
PHONE_PATTERN: Final[str] = r"^\+?[0-9]{7,15}$"
COMPANY_IDENTIFIER_PATTERN: Final[str] = r"^[a-zA-Z]{3}-\d{3}$"
# amounts are stored in whole cents
MONEY_DECIMAL_PLACES: Final[int] = 2


class ClientContractBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, str_strip_whitespace=True)


class ClientSchemaBase(ClientContractBaseModel):
    id: UUID | None = None
    name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)


class PersonSchema(ClientSchemaBase):
    type: Literal["PERSON"]
    birthdate: PastDate | None = None


class CompanySchema(ClientSchemaBase):
    type: Literal["COMPANY"]
    company_identifier: str = Field(
        alias="companyIdentifier",
        pattern=COMPANY_IDENTIFIER_PATTERN,
    )


ClientSchema = Annotated[PersonSchema | CompanySchema, Field(discriminator="type")]

client_schema_adapter: TypeAdapter[PersonSchema | CompanySchema] = TypeAdapter(ClientSchema)


class ClientUpdateSchema(ClientContractBaseModel):
    """Partial client update; keys such as ``birthdate`` are dropped on parsing."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)


class ContractSchema(ClientContractBaseModel):
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")
    cost_amount: Decimal = Field(alias="costAmount", ge=0, decimal_places=MONEY_DECIMAL_PLACES)

    @model_validator(mode="after")
    def _check_end_date(self) -> ContractSchema:
        if self.end_date is None:
            return self
        if self.start_date is not None and self.end_date <= self.start_date:
            raise ValueError("End date must be after the start date")
        if self.end_date <= today():
            raise ValueError("End date must be after today's date")
        return self


class ContractCostSchema(ClientContractBaseModel):
    cost_amount: Decimal = Field(alias="costAmount", ge=0, decimal_places=MONEY_DECIMAL_PLACES)
