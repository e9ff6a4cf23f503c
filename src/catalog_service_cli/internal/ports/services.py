"""Service interfaces for catalog services.

These interfaces define the signatures that *driving* actors must conform to
in order to interact with the core.

Sometimes referred to as *primary ports*.
"""

import abc

from returns.result import ResultE

from catalog_service_cli.internal import entities


class CatalogUseCase(abc.ABC):
    """Interface for the catalog service lifecycle use cases.

    Defines the business-critical methods for the following use cases:

    - 'A user should be able to create a catalog service and know when it is ready.'
    - 'A user should be able to inspect the services of a cluster.'
    - 'A user should be able to delete a service without losing its data.'
    """

    @abc.abstractmethod
    def create(self, request: entities.CreateRequest) -> ResultE[str]:
        """Create a service, then wait for it to initialize if it is a catalog service.

        Args:
            request: The validated create request.

        Returns:
            A message describing the created service.
        """
        pass

    @abc.abstractmethod
    def check_init(self, request: entities.CheckInitRequest) -> ResultE[bool]:
        """Check once whether a catalog service has finished initializing."""
        pass

    @abc.abstractmethod
    def delete(self, service: entities.ServiceIdentity) -> ResultE[entities.DeletionReport]:
        """Delete a service, reporting the volumes that require manual cleanup.

        A failure to delete after the members were listed is reported as an
        `entities.DeletionError`, which still carries the report.
        """
        pass

    @abc.abstractmethod
    def list_services(
        self, request: entities.ListServicesRequest,
    ) -> ResultE[list[entities.ServiceAttributes]]:
        """List the services of a cluster."""
        pass

    @abc.abstractmethod
    def get_service(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[entities.ServiceAttributes]:
        """Get the attributes of a service."""
        pass

    @abc.abstractmethod
    def list_members(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[list[entities.ServiceMember]]:
        """List the members of a service."""
        pass

    @abc.abstractmethod
    def get_config(
        self, request: entities.GetConfigFileRequest,
    ) -> ResultE[entities.ConfigFile]:
        """Get a configuration file of a service."""
        pass
