"""Struct definitions for domain entities.

These define data objects and behaviours that are used in the services core.

Domain Entities
---------------

Entities are the core building blocks of the domain layer. They are the
representations of the business objects that are manipulated by the application:
the identity of a service, the requests sent to the control plane about it,
and what the control plane reports back.

By using domain entities in the core, it is ensured that the business logic is
separated from the technical details of the application. In particular, no
entity knows anything about the wire format spoken by the control plane.
"""

from .createrequest import (
    DEFAULT_RELATIONAL_ADMIN,
    CheckInitRequest,
    CreateRequest,
    DocumentStoreCreateRequest,
    GenericCreateRequest,
    GetConfigFileRequest,
    ListServicesRequest,
    RelationalStoreCreateRequest,
    build_create_request,
    build_get_config_request,
)
from .endpoint import resolve_manage_service_url
from .errors import (
    AuthError,
    CatalogError,
    ConfigurationError,
    DeletionError,
    InitTimeoutError,
    NetworkError,
    NotFoundError,
    RemoteError,
    RemoteValidationError,
    ValidationError,
)
from .identity import DEFAULT_RESERVE_CPU_UNITS, DEFAULT_RESERVE_MEMORY_MB, Resources, ServiceIdentity
from .members import ConfigFile, MemberConfig, ServiceAttributes, ServiceMember
from .operations import Operation, ServiceType
from .options import CommandOptions, PollOptions
from .report import DeletionReport
from .tls import TLSMaterial

__all__ = [
    "DEFAULT_RELATIONAL_ADMIN",
    "CheckInitRequest",
    "CreateRequest",
    "DocumentStoreCreateRequest",
    "GenericCreateRequest",
    "GetConfigFileRequest",
    "ListServicesRequest",
    "RelationalStoreCreateRequest",
    "build_create_request",
    "build_get_config_request",
    "resolve_manage_service_url",
    "AuthError",
    "CatalogError",
    "ConfigurationError",
    "DeletionError",
    "InitTimeoutError",
    "NetworkError",
    "NotFoundError",
    "RemoteError",
    "RemoteValidationError",
    "ValidationError",
    "DEFAULT_RESERVE_CPU_UNITS",
    "DEFAULT_RESERVE_MEMORY_MB",
    "Resources",
    "ServiceIdentity",
    "ConfigFile",
    "MemberConfig",
    "ServiceAttributes",
    "ServiceMember",
    "Operation",
    "ServiceType",
    "CommandOptions",
    "PollOptions",
    "DeletionReport",
    "TLSMaterial",
]
