"""Repository implementation for the HTTP management service of a cluster.

Repository Information
======================

The management service runs inside the cluster it manages, and is reachable
by default at ``openmanage-manageserver.<cluster>-openmanage.com:27040``
(see `entities.endpoint`). It speaks plain HTTP, or HTTPS with mutual TLS
when the cluster was set up with TLS enabled.

Documented Structure
--------------------

Every operation is a ``POST`` to the root of the service, with the operation
name given as the query string and the request as a JSON body:

.. code-block:: none

    POST https://openmanage-manageserver.default-openmanage.com:27040/?List-ServiceMember
    {"Service": {"Region": "us-west-1", "Cluster": "default", "ServiceName": "mymongo"}}

Field names follow the capitalised style of the service, e.g. ``ServiceName``
and ``VolumeSizeGB``. Responses are JSON bodies, decoded with the schemas in
``_models``. Errors are reported through the HTTP status code, with a
plain-text explanation in the body.
"""

import pathlib
from typing import Any, ClassVar, override

import requests
import structlog
from marshmallow import ValidationError as SchemaError
from returns.result import Failure, ResultE, Success

from catalog_service_cli.internal import entities, ports

from ._models import (
    CheckServiceInitResponse,
    GetConfigFileResponse,
    GetServiceAttributesResponse,
    ListServiceMemberResponse,
    ListServiceResponse,
)

log = structlog.getLogger()


def _service_body(service: entities.ServiceIdentity) -> dict[str, str]:
    return {
        "Region": service.region,
        "Cluster": service.cluster,
        "ServiceName": service.service_name,
    }


def _create_body(request: entities.CreateRequest) -> dict[str, Any]:
    """Encode a create request of any variant."""
    body: dict[str, Any] = {
        "Service": _service_body(request.service),
        "Resource": {
            "MaxCPUUnits": request.resources.max_cpu_units,
            "ReserveCPUUnits": request.resources.reserve_cpu_units,
            "MaxMemMB": request.resources.max_mem_mb,
            "ReserveMemMB": request.resources.reserve_mem_mb,
        },
        "Replicas": request.replicas,
        "VolumeSizeGB": request.volume_size_gb,
    }
    match request:
        case entities.DocumentStoreCreateRequest():
            body |= {"Admin": request.admin, "AdminPasswd": request.admin_password}
        case entities.RelationalStoreCreateRequest():
            body |= {
                "Admin": request.admin,
                "AdminPasswd": request.admin_password,
                "ReplUser": request.replication_user,
                "ReplUserPasswd": request.replication_password,
            }
        case entities.GenericCreateRequest():
            pass
    return body


class HTTPManagementRepository(ports.ManagementRepository):
    """Repository implementation for the HTTP management service."""

    create_ops: ClassVar[dict[entities.ServiceType, str]] = {
        entities.ServiceType.DOCUMENT_STORE: "Catalog-Create-MongoDB",
        entities.ServiceType.RELATIONAL_STORE: "Catalog-Create-PostgreSQL",
        entities.ServiceType.GENERIC: "Create-Service",
    }

    server_url: str
    timeout_seconds: int
    _session: requests.Session

    def __init__(
        self,
        server_url: str,
        session: requests.Session | None = None,
        timeout_seconds: int = 30,
    ) -> None:
        """Create a new instance."""
        self.server_url = server_url
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @classmethod
    @override
    def authenticate(
        cls,
        server_url: str,
        tls: entities.TLSMaterial | None = None,
        timeout_seconds: int = 30,
    ) -> ResultE["HTTPManagementRepository"]:
        """Set up a session against the management service.

        When TLS material is given, the session verifies the server against
        the certificate authority and presents the client certificate on
        every call.
        """
        session = requests.Session()
        if tls is not None:
            unreadable = [
                path
                for path in (tls.ca_path, tls.cert_path, tls.key_path)
                if not pathlib.Path(path).expanduser().is_file()
            ]
            if len(unreadable) > 0:
                return Failure(
                    entities.ConfigurationError(
                        f"Cannot set up TLS, files not found: {', '.join(unreadable)}",
                    ),
                )
            session.verify = str(pathlib.Path(tls.ca_path).expanduser())
            session.cert = (
                str(pathlib.Path(tls.cert_path).expanduser()),
                str(pathlib.Path(tls.key_path).expanduser()),
            )
        log.debug(event="created management session", url=server_url, tls=tls is not None)
        return Success(cls(server_url=server_url, session=session, timeout_seconds=timeout_seconds))

    def _call(self, op: str, body: dict[str, Any]) -> ResultE[requests.Response]:
        """Call an operation of the management service.

        Args:
            op: The name of the operation.
            body: The request, to be sent as JSON.

        Returns:
            The successful response, or the classified error.
        """
        url = f"{self.server_url}?{op}"
        log.debug(event="calling management service", op=op, url=url)
        try:
            response: requests.Response = self._session.post(
                url,
                json=body,
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.SSLError as e:
            return Failure(entities.AuthError(f"TLS error calling {op} at '{url}': {e}"))
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            return Failure(entities.NetworkError(f"Unable to reach '{url}' for {op}: {e}"))
        except requests.exceptions.RequestException as e:
            return Failure(entities.RemoteError(f"Error calling {op} at '{url}': {e}"))

        if response.ok:
            return Success(response)

        message = f"{op} error {response.status_code}: {response.text.strip()}"
        log.debug(event="error response from management service", op=op, status=response.status_code)
        match response.status_code:
            case 401 | 403:
                return Failure(entities.AuthError(message))
            case 404:
                return Failure(entities.NotFoundError(message))
            case 400 | 409 | 422:
                return Failure(entities.RemoteValidationError(message))
            case _:
                return Failure(entities.RemoteError(message))

    def _decode[T](self, op: str, response: requests.Response, schema: type[T]) -> ResultE[T]:
        """Decode a response body with the given schema."""
        try:
            return Success(schema.Schema().load(response.json()))  # type: ignore
        except (SchemaError, ValueError) as e:
            log.warning(
                event="response from management service does not match expected schema",
                op=op,
                error=str(e),
            )
            return Failure(
                entities.RemoteError(f"Unable to decode the response to {op}: {e}"),
            )

    @override
    def create_service(self, request: entities.CreateRequest) -> ResultE[None]:
        return self._call(self.create_ops[request.service_type], _create_body(request)).map(
            lambda _: None,
        )

    @override
    def check_service_init(self, request: entities.CheckInitRequest) -> ResultE[bool]:
        op = "Catalog-Check-Service-Init"
        body = {
            "ServiceType": request.service_type.catalog_name,
            "Service": _service_body(request.service),
            "Admin": request.admin,
            "AdminPasswd": request.admin_password,
        }
        return (
            self._call(op, body)
            .bind(lambda r: self._decode(op, r, CheckServiceInitResponse))
            .map(lambda resp: resp.initialized)
        )

    @override
    def list_services(
        self, request: entities.ListServicesRequest,
    ) -> ResultE[list[entities.ServiceAttributes]]:
        op = "List-Service"
        body = {"Region": request.region, "Cluster": request.cluster, "Prefix": request.prefix}
        return (
            self._call(op, body)
            .bind(lambda r: self._decode(op, r, ListServiceResponse))
            .map(lambda resp: [s.to_entity() for s in resp.services or []])
        )

    @override
    def get_service_attributes(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[entities.ServiceAttributes]:
        op = "Get-Service-Attr"
        return (
            self._call(op, _service_body(service))
            .bind(lambda r: self._decode(op, r, GetServiceAttributesResponse))
            .map(lambda resp: resp.service.to_entity())
        )

    @override
    def list_service_members(
        self, service: entities.ServiceIdentity,
    ) -> ResultE[list[entities.ServiceMember]]:
        op = "List-ServiceMember"
        return (
            self._call(op, {"Service": _service_body(service)})
            .bind(lambda r: self._decode(op, r, ListServiceMemberResponse))
            .map(lambda resp: [m.to_entity() for m in resp.members or []])
        )

    @override
    def delete_service(self, service: entities.ServiceIdentity) -> ResultE[None]:
        return self._call("Delete-Service", _service_body(service)).map(lambda _: None)

    @override
    def get_config_file(
        self, request: entities.GetConfigFileRequest,
    ) -> ResultE[entities.ConfigFile]:
        op = "Get-Config"
        body = {
            "Region": request.region,
            "Cluster": request.cluster,
            "ServiceUUID": request.service_uuid,
            "FileID": request.file_id,
        }
        return (
            self._call(op, body)
            .bind(lambda r: self._decode(op, r, GetConfigFileResponse))
            .map(lambda resp: resp.config.to_entity())
        )
