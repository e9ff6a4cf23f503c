"""Domain entities for selecting what the command does.

An `Operation` selects which handler runs and which request shape applies.
A `ServiceType` selects the variant of catalog service a create request
(or an initialization check) refers to.

Both accept the long-form names used by earlier releases of the tool,
e.g. ``create-service`` for ``create`` and ``mongodb`` for ``document-store``.
"""

from enum import StrEnum

from returns.result import Failure, ResultE, Success

from .errors import ValidationError


class Operation(StrEnum):
    """Operations supported against the control plane."""

    CREATE = "create"
    CHECK_INIT = "check-init"
    DELETE = "delete"
    LIST = "list"
    GET = "get"
    LIST_MEMBERS = "list-members"
    GET_CONFIG = "get-config"

    @property
    def requires_service_name(self) -> bool:
        """Whether the operation targets a single named service."""
        return self != Operation.LIST

    @staticmethod
    def parse(value: str | None) -> ResultE["Operation"]:
        """Parse an operation from its command-line name.

        Args:
            value: The name of the operation, case-insensitive.

        Returns:
            The matching operation, or a ValidationError.
        """
        name = (value or "").strip().lower()
        name = _OPERATION_ALIASES.get(name, name)
        try:
            return Success(Operation(name))
        except ValueError:
            return Failure(
                ValidationError(
                    f"Invalid operation '{value}', please specify one of "
                    f"{'|'.join(op.value for op in Operation)}",
                ),
            )


_OPERATION_ALIASES: dict[str, str] = {
    "create-service": Operation.CREATE.value,
    "check-service-init": Operation.CHECK_INIT.value,
    "delete-service": Operation.DELETE.value,
    "list-services": Operation.LIST.value,
    "get-service": Operation.GET.value,
}


class ServiceType(StrEnum):
    """Variants of catalog service."""

    DOCUMENT_STORE = "document-store"
    RELATIONAL_STORE = "relational-store"
    GENERIC = "generic"

    @property
    def catalog_name(self) -> str:
        """The name the control plane uses for the catalog service type."""
        match self:
            case ServiceType.DOCUMENT_STORE:
                return "mongodb"
            case ServiceType.RELATIONAL_STORE:
                return "postgresql"
            case ServiceType.GENERIC:
                return ""

    @staticmethod
    def parse(value: str | None) -> ResultE["ServiceType"]:
        """Parse a service type from its command-line name.

        Args:
            value: The name of the service type, case-insensitive.

        Returns:
            The matching service type, or a ValidationError.
        """
        name = (value or "").strip().lower()
        name = _SERVICE_TYPE_ALIASES.get(name, name)
        try:
            return Success(ServiceType(name))
        except ValueError:
            return Failure(
                ValidationError(
                    f"Invalid service type '{value}', please specify one of "
                    f"{'|'.join(st.value for st in ServiceType)}",
                ),
            )


_SERVICE_TYPE_ALIASES: dict[str, str] = {
    "mongodb": ServiceType.DOCUMENT_STORE.value,
    "postgresql": ServiceType.RELATIONAL_STORE.value,
    "postgres": ServiceType.RELATIONAL_STORE.value,
}
