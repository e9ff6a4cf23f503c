"""Domain classes for the requests sent to the control plane.

Create requests are a tagged union over the service type: each variant
carries only the fields valid for it, and refuses to be constructed with
invalid values. The builder functions in this module validate input
before anything is constructed, so that a bad request never costs a
network round-trip.

Relational stores always use their own default superuser as the
administrative principal, whatever the caller supplied; document stores
use the caller-supplied principal.
"""

import dataclasses
from typing import ClassVar

from returns.result import Failure, ResultE, Success

from .errors import ValidationError
from .identity import Resources, ServiceIdentity
from .operations import ServiceType
from .options import CommandOptions

DEFAULT_RELATIONAL_ADMIN: str = "postgres"


@dataclasses.dataclass(slots=True, frozen=True)
class _CreateRequestBase:
    """Fields shared by every create request variant."""

    service_type: ClassVar[ServiceType]

    service: ServiceIdentity
    resources: Resources
    replicas: int
    volume_size_gb: int
    admin: str
    admin_password: str

    def __post_init__(self) -> None:
        """Reject requests that can never succeed."""
        if not self.service.service_name:
            raise ValidationError("please specify the valid service name")
        if self.replicas <= 0 or self.volume_size_gb <= 0:
            raise ValidationError(
                "please specify the valid replica number and volume size, got "
                f"replicas={self.replicas} volume-size={self.volume_size_gb}",
            )


@dataclasses.dataclass(slots=True, frozen=True)
class DocumentStoreCreateRequest(_CreateRequestBase):
    """Request to create a document-store catalog service."""

    service_type: ClassVar[ServiceType] = ServiceType.DOCUMENT_STORE


@dataclasses.dataclass(slots=True, frozen=True)
class RelationalStoreCreateRequest(_CreateRequestBase):
    """Request to create a relational-store catalog service.

    The standby replicas replicate from the primary as the replication user.
    """

    service_type: ClassVar[ServiceType] = ServiceType.RELATIONAL_STORE

    replication_user: str = "repluser"
    replication_password: str = "replpassword"


@dataclasses.dataclass(slots=True, frozen=True)
class GenericCreateRequest(_CreateRequestBase):
    """Request to create a plain service with no catalog-specific setup."""

    service_type: ClassVar[ServiceType] = ServiceType.GENERIC


CreateRequest = DocumentStoreCreateRequest | RelationalStoreCreateRequest | GenericCreateRequest


@dataclasses.dataclass(slots=True, frozen=True)
class CheckInitRequest:
    """Request to check whether a catalog service has finished initializing."""

    service_type: ServiceType
    service: ServiceIdentity
    admin: str
    admin_password: str

    @classmethod
    def for_created(cls, request: CreateRequest) -> "CheckInitRequest":
        """Check with the same identity and credentials the service was created with."""
        return cls(
            service_type=request.service_type,
            service=request.service,
            admin=request.admin,
            admin_password=request.admin_password,
        )


@dataclasses.dataclass(slots=True, frozen=True)
class ListServicesRequest:
    """Request to list the services of a cluster."""

    region: str
    cluster: str
    prefix: str = ""


@dataclasses.dataclass(slots=True, frozen=True)
class GetConfigFileRequest:
    """Request to fetch a single configuration file of a service."""

    region: str
    cluster: str
    service_uuid: str
    file_id: str


def build_create_request(
    service_type: ServiceType,
    options: CommandOptions,
) -> ResultE[CreateRequest]:
    """Build the create request variant for the given service type.

    Args:
        service_type: The variant of service to create.
        options: The options of the invocation.

    Returns:
        The validated request, or a ValidationError.
    """
    if options.replicas <= 0 or options.volume_size_gb <= 0:
        return Failure(
            ValidationError(
                "please specify the valid replica number and volume size, got "
                f"replicas={options.replicas} volume-size={options.volume_size_gb}",
            ),
        )

    resources_result = Resources.reserve(
        cpu_units=options.cpu_units,
        mem_mb=options.soft_memory_mb,
    )
    if isinstance(resources_result, Failure):
        return resources_result
    resources = resources_result.unwrap()

    try:
        match service_type:
            case ServiceType.DOCUMENT_STORE:
                request: CreateRequest = DocumentStoreCreateRequest(
                    service=options.identity(),
                    resources=resources,
                    replicas=options.replicas,
                    volume_size_gb=options.volume_size_gb,
                    admin=options.admin,
                    admin_password=options.admin_password,
                )
            case ServiceType.RELATIONAL_STORE:
                request = RelationalStoreCreateRequest(
                    service=options.identity(),
                    resources=resources,
                    replicas=options.replicas,
                    volume_size_gb=options.volume_size_gb,
                    admin=DEFAULT_RELATIONAL_ADMIN,
                    admin_password=options.admin_password,
                    replication_user=options.replication_user,
                    replication_password=options.replication_password,
                )
            case ServiceType.GENERIC:
                request = GenericCreateRequest(
                    service=options.identity(),
                    resources=resources,
                    replicas=options.replicas,
                    volume_size_gb=options.volume_size_gb,
                    admin=options.admin,
                    admin_password=options.admin_password,
                )
    except ValidationError as e:
        return Failure(e)

    return Success(request)


def build_get_config_request(options: CommandOptions) -> ResultE[GetConfigFileRequest]:
    """Build a request for a configuration file, which needs its UUID and file ID."""
    if not options.service_uuid or not options.file_id:
        return Failure(
            ValidationError("please specify the service uuid and config file id"),
        )
    return Success(
        GetConfigFileRequest(
            region=options.region,
            cluster=options.cluster,
            service_uuid=options.service_uuid,
            file_id=options.file_id,
        ),
    )
