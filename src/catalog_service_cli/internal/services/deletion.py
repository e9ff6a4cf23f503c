"""Deleting a service without losing the data stored on its volumes.

Deletion is carried out in two ordered phases:

1. *Enumerate*: the members of the service are listed and their volume IDs
   captured. This has to come first, as the member list may no longer be
   available once the service metadata is gone.
2. *Delete*: the service metadata is removed from the control plane.

Volumes are never deleted automatically. The resulting `entities.DeletionReport`
lists them, so that the operator can dispose of them, even when the
delete phase fails.

.. note:: The two phases are not transactional. A member added to the service
  between the enumeration and the deletion will not have its volume reported.
  The report is best effort in that respect.
"""

import logging

from returns.result import Failure, ResultE, Success

from catalog_service_cli.internal import entities, ports

log = logging.getLogger("catalog-service-cli")


class DeletionWorkflow:
    """Enumerate the volumes of a service, then delete the service."""

    repository: ports.ManagementRepository

    def __init__(self, repository: ports.ManagementRepository) -> None:
        """Create a new instance."""
        self.repository = repository

    def run(self, service: entities.ServiceIdentity) -> ResultE[entities.DeletionReport]:
        """Delete the given service.

        Args:
            service: The service to delete.

        Returns:
            The report of the volumes left behind. If listing the members fails,
            the remote error, and nothing is deleted. If deleting fails, an
            `entities.DeletionError` carrying the report.
        """
        members_result = self.repository.list_service_members(service)
        if isinstance(members_result, Failure):
            log.error(f"Not deleting {service}, unable to list its members")
            return members_result

        volume_ids: tuple[str, ...] = tuple(m.volume_id for m in members_result.unwrap())
        log.debug(f"Captured {len(volume_ids)} volume(s) of {service}: {volume_ids}")

        delete_result = self.repository.delete_service(service)
        if isinstance(delete_result, Failure):
            report = entities.DeletionReport(service=service, volume_ids=volume_ids, deleted=False)
            log.error(f"Failed to delete {service}, volumes to clean up: {volume_ids}")
            return Failure(entities.DeletionError(report=report, cause=delete_result.failure()))

        log.info(f"Deleted {service}, {len(volume_ids)} volume(s) to clean up manually")
        return Success(
            entities.DeletionReport(service=service, volume_ids=volume_ids, deleted=True),
        )
