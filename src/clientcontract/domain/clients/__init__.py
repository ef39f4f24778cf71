"""Client variants: payloads, converters, services, handlers and their dispatch."""

from __future__ import annotations

from .converters import ClientConverter, CompanyConverter, PersonConverter
from .handlers import ClientHandler, CompanyHandler, PersonHandler
from .orchestration import ClientOrchestrationService
from .payloads import (
    ClientPayload,
    ClientUpdatePayload,
    CompanyPayload,
    PersonPayload,
    mask_immutable_fields,
    merge_client_payloads,
)
from .registry import ClientTypeRegistry, HandlerRegistry
from .resolver import ClientResolver
from .services import ClientService, CompanyService, PersonService

__all__ = [
    "ClientConverter",
    "ClientHandler",
    "ClientOrchestrationService",
    "ClientPayload",
    "ClientResolver",
    "ClientService",
    "ClientTypeRegistry",
    "ClientUpdatePayload",
    "CompanyConverter",
    "CompanyHandler",
    "CompanyPayload",
    "CompanyService",
    "HandlerRegistry",
    "PersonConverter",
    "PersonHandler",
    "PersonPayload",
    "PersonService",
    "mask_immutable_fields",
    "merge_client_payloads",
]
