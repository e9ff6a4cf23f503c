"""Repository interfaces for the cluster control plane.

These interfaces define the signatures that *driven* actors must conform to
in order to interact with the core.
Also sometimes referred to as *secondary ports*.

The control plane owns all cluster state: which services exist, where their
members are placed, and which volumes they use. The core only ever talks to
it through the `ManagementRepository` interface, in a synchronous
request/response fashion. Each call blocks until the control plane answers
or the call fails.

Every method returns a ``ResultE``: a ``Success`` wrapping the payload,
or a ``Failure`` wrapping one of the `entities.RemoteError` subclasses:

- `entities.NetworkError` - the control plane could not be reached
- `entities.AuthError` - the TLS handshake or the credentials were rejected
- `entities.NotFoundError` - the target service or file does not exist
- `entities.RemoteValidationError` - the control plane rejected the request
"""

import abc

from returns.result import ResultE

from catalog_service_cli.internal import entities


class ManagementRepository(abc.ABC):
    """Interface for a client of the cluster control plane.

    An instance is created once per invocation, and any TLS session
    configuration it is given applies to every call made through it.
    """

    @classmethod
    @abc.abstractmethod
    def authenticate(
        cls,
        server_url: str,
        tls: entities.TLSMaterial | None = None,
        timeout_seconds: int = 30,
    ) -> ResultE["ManagementRepository"]:
        """Create a new instance of the class talking to the given server.

        Args:
            server_url: The URL of the management service.
            tls: The TLS material to secure the channel with, if any.
            timeout_seconds: How long to wait on any single call.
        """
        pass

    @abc.abstractmethod
    def create_service(self, request: entities.CreateRequest) -> ResultE[None]:
        """Create a service of the variant given by the request.

        Returns once the control plane has accepted the service. Catalog
        services then initialize asynchronously, see `check_service_init`.
        """
        pass

    @abc.abstractmethod
    def check_service_init(self, request: entities.CheckInitRequest) -> ResultE[bool]:
        """Check whether a catalog service has finished initializing."""
        pass

    @abc.abstractmethod
    def list_services(
        self, request: entities.ListServicesRequest,
    ) -> ResultE[list[entities.ServiceAttributes]]:
        """List the services of a cluster."""
        pass

    @abc.abstractmethod
    def get_service_attributes(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[entities.ServiceAttributes]:
        """Get the attributes of a single service."""
        pass

    @abc.abstractmethod
    def list_service_members(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[list[entities.ServiceMember]]:
        """List the members of a service, with their volumes and config files."""
        pass

    @abc.abstractmethod
    def delete_service(self, service: entities.ServiceIdentity) -> ResultE[None]:
        """Delete the metadata of a service.

        The volumes of the members of the service are not touched.
        """
        pass

    @abc.abstractmethod
    def get_config_file(
        self, request: entities.GetConfigFileRequest,
    ) -> ResultE[entities.ConfigFile]:
        """Get a configuration file of a service."""
        pass
