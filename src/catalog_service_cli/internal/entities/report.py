"""Domain entity for the outcome of deleting a service.

Deleting a service only removes its metadata from the control plane.
The durable volumes of its members are never removed automatically,
so the report lists them for the operator to dispose of.
"""

import dataclasses

from .identity import ServiceIdentity


@dataclasses.dataclass(slots=True, frozen=True)
class DeletionReport:
    """The volumes left behind by a service deletion."""

    service: ServiceIdentity
    """The service that was deleted."""

    volume_ids: tuple[str, ...]
    """The volumes of every member, in the order the members were listed."""

    deleted: bool
    """Whether the control plane confirmed the deletion of the service metadata."""

    def __str__(self) -> str:
        """Return a string representation of the report."""
        volumes = ", ".join(self.volume_ids) if self.volume_ids else "(none)"
        if self.deleted:
            return f"Service deleted, please manually delete the volumes:\n\t{volumes}"
        return (
            f"Service {self.service.service_name} may not be deleted, "
            f"its volumes require manual cleanup once it is:\n\t{volumes}"
        )
