"""Domain errors for catalog service operations.

Errors are never raised across the boundaries of the core. Instead they are
wrapped in ``returns.result.Failure`` containers and passed up to the driving
actor, which decides how to present them and which exit code to use.

The taxonomy is as follows:

- `ValidationError` - Bad or missing local input, caught before any network call.
- `ConfigurationError` - Incomplete or unreadable TLS material.
- `RemoteError` - A failure reported by (or on the way to) the control plane.
  Subclassed by `NetworkError`, `AuthError`, `NotFoundError`
  and `RemoteValidationError`.
- `InitTimeoutError` - A service did not finish initializing within the wait budget.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .report import DeletionReport


class CatalogError(Exception):
    """Base class for all errors surfaced by the core."""


class ValidationError(CatalogError, ValueError):
    """Local input is missing or invalid."""


class ConfigurationError(CatalogError):
    """Client configuration is incomplete, e.g. partial TLS material."""


class RemoteError(CatalogError, OSError):
    """The control plane call failed."""


class NetworkError(RemoteError):
    """The control plane could not be reached."""


class AuthError(RemoteError):
    """The control plane rejected the TLS handshake or the credentials."""


class NotFoundError(RemoteError):
    """The requested service or resource does not exist."""


class RemoteValidationError(RemoteError):
    """The control plane rejected the request as invalid."""


class InitTimeoutError(CatalogError, TimeoutError):
    """The service was not initialized within the maximum wait budget."""

    def __init__(self, service_name: str, waited_seconds: int) -> None:
        """Create a new instance."""
        self.service_name = service_name
        self.waited_seconds = waited_seconds
        super().__init__(
            f"The catalog service {service_name} is not initialized "
            f"after {waited_seconds} seconds",
        )


class DeletionError(RemoteError):
    """Deleting the service metadata failed after its members were enumerated.

    Carries the report of the captured volumes, since they may still
    require manual cleanup.
    """

    def __init__(self, report: "DeletionReport", cause: Exception) -> None:
        """Create a new instance."""
        self.report = report
        self.cause = cause
        super().__init__(f"Failed to delete service {report.service.service_name}: {cause}")
