"""Implementation of the catalog service lifecycle use cases."""

import logging
from collections.abc import Callable
from typing import override

from returns.result import Failure, ResultE, Success

from catalog_service_cli.internal import entities, ports

from .deletion import DeletionWorkflow
from .poller import InitializationPoller

log = logging.getLogger("catalog-service-cli")


class CatalogService(ports.CatalogUseCase):
    """Service implementation for managing catalog services.

    Defines the business-critical methods and logic. Every call is a single
    synchronous round-trip to the control plane, except for creation, which
    waits for the service to initialize, and deletion, which is sequenced by
    the `DeletionWorkflow`.
    """

    mr: ports.ManagementRepository
    poll_options: entities.PollOptions

    def __init__(
        self,
        management_repository: ports.ManagementRepository,
        poll_options: entities.PollOptions | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a new instance of the service."""
        self.mr = management_repository
        self.poll_options = poll_options or entities.PollOptions()
        self._sleep = sleep

    @classmethod
    def from_adaptor(
        cls,
        management_adaptor: type[ports.ManagementRepository],
        server_url: str,
        tls: entities.TLSMaterial | None = None,
        poll_options: entities.PollOptions | None = None,
        timeout_seconds: int = 30,
    ) -> ResultE["CatalogService"]:
        """Create a new instance of the service from an adaptor."""
        management_repository_result = management_adaptor.authenticate(
            server_url=server_url,
            tls=tls,
            timeout_seconds=timeout_seconds,
        )
        return management_repository_result.do(
            cls(
                management_repository=management_repository,
                poll_options=poll_options,
            )
            for management_repository in management_repository_result
        )

    @override
    def create(self, request: entities.CreateRequest) -> ResultE[str]:
        create_result = self.mr.create_service(request)
        if isinstance(create_result, Failure):
            log.error(f"create {request.service_type} service {request.service} error")
            return create_result

        if request.service_type == entities.ServiceType.GENERIC:
            return Success(f"The service {request.service} is created")

        log.info(f"The catalog service {request.service} is created, wait till it gets initialized")
        poller = InitializationPoller(
            repository=self.mr,
            options=self.poll_options,
            sleep=self._sleep,
        )
        wait_result = poller.wait(entities.CheckInitRequest.for_created(request))
        return wait_result.map(
            lambda elapsed: f"The catalog service {request.service} is initialized "
            f"after {elapsed} seconds",
        )

    @override
    def check_init(self, request: entities.CheckInitRequest) -> ResultE[bool]:
        return self.mr.check_service_init(request)

    @override
    def delete(self, service: entities.ServiceIdentity) -> ResultE[entities.DeletionReport]:
        return DeletionWorkflow(repository=self.mr).run(service)

    @override
    def list_services(
        self, request: entities.ListServicesRequest,
    ) -> ResultE[list[entities.ServiceAttributes]]:
        return self.mr.list_services(request)

    @override
    def get_service(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[entities.ServiceAttributes]:
        return self.mr.get_service_attributes(service)

    @override
    def list_members(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[list[entities.ServiceMember]]:
        return self.mr.list_service_members(service)

    @override
    def get_config(
        self, request: entities.GetConfigFileRequest,
    ) -> ResultE[entities.ConfigFile]:
        return self.mr.get_config_file(request)
