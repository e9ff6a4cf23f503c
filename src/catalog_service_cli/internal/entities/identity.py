"""Domain classes identifying a service and the resources it reserves.

Every service managed by the control plane lives in a cluster, which
in turn lives in a region. The triple of region, cluster and service name
uniquely identifies a service, and is shared by almost every request.
"""

import dataclasses

from returns.result import Failure, ResultE, Success

from .errors import ValidationError

DEFAULT_RESERVE_CPU_UNITS: int = 256
DEFAULT_RESERVE_MEMORY_MB: int = 256


@dataclasses.dataclass(slots=True, frozen=True)
class ServiceIdentity:
    """The identity of a service at the control plane."""

    region: str
    """The region the cluster is running in."""

    cluster: str
    """The name of the cluster the service is running on."""

    service_name: str
    """The name of the service.

    Empty only when listing the services of a cluster.
    """

    def __str__(self) -> str:
        """Return a string representation of the identity."""
        return f"{self.service_name} ({self.cluster}, {self.region})"


@dataclasses.dataclass(slots=True, frozen=True)
class Resources:
    """The compute resources a service container is limited to and reserves."""

    max_cpu_units: int
    reserve_cpu_units: int
    max_mem_mb: int
    reserve_mem_mb: int

    def __post_init__(self) -> None:
        """Ensure the reservation is positive and within the maximum."""
        if min(
            self.max_cpu_units, self.reserve_cpu_units, self.max_mem_mb, self.reserve_mem_mb,
        ) <= 0:
            raise ValidationError(
                "cpu units and memory must be positive, "
                f"got cpu={self.reserve_cpu_units}/{self.max_cpu_units} "
                f"memory={self.reserve_mem_mb}/{self.max_mem_mb}MB",
            )
        if self.reserve_cpu_units > self.max_cpu_units:
            raise ValidationError(
                f"reserved cpu units {self.reserve_cpu_units} "
                f"exceed the maximum {self.max_cpu_units}",
            )
        if self.reserve_mem_mb > self.max_mem_mb:
            raise ValidationError(
                f"reserved memory {self.reserve_mem_mb}MB exceeds the maximum {self.max_mem_mb}MB",
            )

    @classmethod
    def reserve(cls, cpu_units: int, mem_mb: int) -> ResultE["Resources"]:
        """Reserve the given resources, using them as the maximum as well.

        Args:
            cpu_units: The number of cpu units to reserve.
            mem_mb: The memory to reserve in megabytes.
        """
        try:
            return Success(
                cls(
                    max_cpu_units=cpu_units,
                    reserve_cpu_units=cpu_units,
                    max_mem_mb=mem_mb,
                    reserve_mem_mb=mem_mb,
                ),
            )
        except ValidationError as e:
            return Failure(e)
