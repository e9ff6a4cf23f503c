from collections.abc import Iterable
from typing import override

from returns.result import Failure, ResultE, Success

from catalog_service_cli.internal import entities, ports


class DummyManagementRepository(ports.ManagementRepository):
    """In-memory control plane recording the calls made to it.

    Initialization checks answer from a script, one entry per check; an
    exception entry fails that check. Once the script runs out, the last
    entry is repeated.
    """

    def __init__(
        self,
        init_script: Iterable[bool | Exception] = (True,),
        members: Iterable[entities.ServiceMember] = (),
        services: Iterable[entities.ServiceAttributes] = (),
        create_error: Exception | None = None,
        list_members_error: Exception | None = None,
        delete_error: Exception | None = None,
    ) -> None:
        self.init_script = list(init_script)
        self.members = list(members)
        self.services = list(services)
        self.create_error = create_error
        self.list_members_error = list_members_error
        self.delete_error = delete_error
        self.calls: list[str] = []
        self.requests: list[object] = []
        self.init_checks = 0

    @classmethod
    @override
    def authenticate(
        cls,
        server_url: str,
        tls: entities.TLSMaterial | None = None,
        timeout_seconds: int = 30,
    ) -> ResultE["DummyManagementRepository"]:
        return Success(cls())

    def as_adaptor(self) -> type[ports.ManagementRepository]:
        """Return an adaptor class whose authentication yields this very instance."""
        instance = self

        class _Adaptor(DummyManagementRepository):
            server_url: str = ""
            tls: entities.TLSMaterial | None = None

            @classmethod
            @override
            def authenticate(
                cls,
                server_url: str,
                tls: entities.TLSMaterial | None = None,
                timeout_seconds: int = 30,
            ) -> ResultE[DummyManagementRepository]:
                cls.server_url = server_url
                cls.tls = tls
                return Success(instance)

        return _Adaptor

    @override
    def create_service(self, request: entities.CreateRequest) -> ResultE[None]:
        self.calls.append("create_service")
        self.requests.append(request)
        if self.create_error is not None:
            return Failure(self.create_error)
        return Success(None)

    @override
    def check_service_init(self, request: entities.CheckInitRequest) -> ResultE[bool]:
        self.calls.append("check_service_init")
        self.requests.append(request)
        step = self.init_script[min(self.init_checks, len(self.init_script) - 1)]
        self.init_checks += 1
        if isinstance(step, Exception):
            return Failure(step)
        return Success(step)

    @override
    def list_services(
        self, request: entities.ListServicesRequest,
    ) -> ResultE[list[entities.ServiceAttributes]]:
        self.calls.append("list_services")
        self.requests.append(request)
        return Success(
            [s for s in self.services if s.service_name.startswith(request.prefix)],
        )

    @override
    def get_service_attributes(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[entities.ServiceAttributes]:
        self.calls.append("get_service_attributes")
        self.requests.append(service)
        for s in self.services:
            if s.service_name == service.service_name:
                return Success(s)
        return Failure(entities.NotFoundError(f"service {service.service_name} not found"))

    @override
    def list_service_members(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[list[entities.ServiceMember]]:
        self.calls.append("list_service_members")
        self.requests.append(service)
        if self.list_members_error is not None:
            return Failure(self.list_members_error)
        return Success(list(self.members))

    @override
    def delete_service(self, service: entities.ServiceIdentity) -> ResultE[None]:
        self.calls.append("delete_service")
        self.requests.append(service)
        if self.delete_error is not None:
            return Failure(self.delete_error)
        return Success(None)

    @override
    def get_config_file(
        self, request: entities.GetConfigFileRequest,
    ) -> ResultE[entities.ConfigFile]:
        self.calls.append("get_config_file")
        self.requests.append(request)
        return Success(
            entities.ConfigFile(
                service_uuid=request.service_uuid,
                file_id=request.file_id,
                file_name="mongod.conf",
                content="net:\n  port: 27017\n",
            ),
        )
