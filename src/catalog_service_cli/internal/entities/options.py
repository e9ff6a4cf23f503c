"""Configuration values for a single invocation of the tool.

All input, whether from the command line or from the environment, is parsed
once into a `CommandOptions` value, which is then passed explicitly to every
handler. Nothing is held between invocations.
"""

import dataclasses

from returns.result import Failure, ResultE, Success

from .errors import ValidationError
from .identity import DEFAULT_RESERVE_CPU_UNITS, DEFAULT_RESERVE_MEMORY_MB, ServiceIdentity

DEFAULT_POLL_INTERVAL_SECONDS: int = 10
DEFAULT_MAX_WAIT_SECONDS: int = 120


@dataclasses.dataclass(slots=True, frozen=True)
class PollOptions:
    """Options for waiting on service initialization."""

    interval_seconds: int = DEFAULT_POLL_INTERVAL_SECONDS
    """The time to wait between two initialization checks."""

    max_wait_seconds: int = DEFAULT_MAX_WAIT_SECONDS
    """The total time budget after which the wait is abandoned."""

    @classmethod
    def create(cls, interval_seconds: int, max_wait_seconds: int) -> ResultE["PollOptions"]:
        """Create a new instance, ensuring both durations are positive."""
        if interval_seconds <= 0 or max_wait_seconds <= 0:
            return Failure(
                ValidationError(
                    "poll interval and maximum wait must be positive, got "
                    f"interval={interval_seconds}s max-wait={max_wait_seconds}s",
                ),
            )
        return Success(cls(interval_seconds=interval_seconds, max_wait_seconds=max_wait_seconds))


@dataclasses.dataclass(slots=True, frozen=True)
class CommandOptions:
    """Everything a single invocation of the tool was asked to do."""

    operation: str
    region: str
    cluster: str = "default"
    service_name: str = ""
    service_type: str = ""
    server_url: str = ""

    replicas: int = 3
    volume_size_gb: int = 0
    cpu_units: int = DEFAULT_RESERVE_CPU_UNITS
    soft_memory_mb: int = DEFAULT_RESERVE_MEMORY_MB

    admin: str = "dbadmin"
    admin_password: str = "changeme"
    replication_user: str = "repluser"
    replication_password: str = "replpassword"

    tls_enabled: bool = False
    ca_file: str = ""
    cert_file: str = ""
    key_file: str = ""

    service_uuid: str = ""
    file_id: str = ""
    prefix: str = ""

    poll: PollOptions = dataclasses.field(default_factory=PollOptions)
    request_timeout_seconds: int = 30

    def identity(self) -> ServiceIdentity:
        """The identity of the targeted service."""
        return ServiceIdentity(
            region=self.region,
            cluster=self.cluster,
            service_name=self.service_name,
        )
