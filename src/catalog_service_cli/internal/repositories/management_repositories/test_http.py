import dataclasses
import json
import pathlib
import tempfile
import unittest
from typing import Any
from unittest.mock import MagicMock

import requests
from returns.result import Failure, Success

from catalog_service_cli.internal import entities

from .http import HTTPManagementRepository

SERVICE = entities.ServiceIdentity(region="us-west-1", cluster="default", service_name="mymongo")
URL = "http://openmanage-manageserver.default-openmanage.com:27040/"


def _response(status: int, body: Any = None, text: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = json.dumps(body).encode() if body is not None else text.encode()
    return response


def _repository(*responses: requests.Response | Exception) -> tuple[HTTPManagementRepository, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.post.side_effect = list(responses)
    return HTTPManagementRepository(server_url=URL, session=session), session


class TestHTTPManagementRepository(unittest.TestCase):
    """Test the business methods of the HTTPManagementRepository class."""

    def test_authenticate(self) -> None:
        """Test the authenticate method."""
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = []
            for name in ["ca.pem", "cert.pem", "key.pem"]:
                p = pathlib.Path(tmpdir) / name
                p.write_text("material")
                paths.append(p.as_posix())

            @dataclasses.dataclass
            class TestCase:
                name: str
                tls: entities.TLSMaterial | None
                should_error: bool

            tests: list[TestCase] = [
                TestCase(name="no_tls", tls=None, should_error=False),
                TestCase(
                    name="readable_tls",
                    tls=entities.TLSMaterial(*paths),
                    should_error=False,
                ),
                TestCase(
                    name="missing_key",
                    tls=entities.TLSMaterial(paths[0], paths[1], f"{tmpdir}/nokey.pem"),
                    should_error=True,
                ),
            ]

            for t in tests:
                with self.subTest(name=t.name):
                    result = HTTPManagementRepository.authenticate(URL, tls=t.tls)
                    if t.should_error:
                        self.assertIsInstance(result, Failure, msg=f"{result!s}")
                        self.assertIsInstance(result.failure(), entities.ConfigurationError)
                    else:
                        self.assertIsInstance(result, Success, msg=f"{result!s}")
                        if t.tls is not None:
                            session = result.unwrap()._session
                            self.assertEqual(session.verify, paths[0])
                            self.assertEqual(session.cert, (paths[1], paths[2]))

    def test_create_service(self) -> None:
        """Test the create_service method encodes a relational-store request."""
        resources = entities.Resources.reserve(cpu_units=256, mem_mb=512).unwrap()
        request = entities.RelationalStoreCreateRequest(
            service=SERVICE,
            resources=resources,
            replicas=3,
            volume_size_gb=20,
            admin="postgres",
            admin_password="secret",
            replication_user="repl",
            replication_password="replpw",
        )
        repo, session = _repository(_response(200, text=""))

        result = repo.create_service(request)

        self.assertIsInstance(result, Success, msg=f"{result!s}")
        url = session.post.call_args.args[0]
        body = session.post.call_args.kwargs["json"]
        self.assertEqual(url, f"{URL}?Catalog-Create-PostgreSQL")
        self.assertEqual(body["Service"]["ServiceName"], "mymongo")
        self.assertEqual(body["Resource"]["ReserveMemMB"], 512)
        self.assertEqual(body["Replicas"], 3)
        self.assertEqual(body["VolumeSizeGB"], 20)
        self.assertEqual(body["Admin"], "postgres")
        self.assertEqual(body["ReplUser"], "repl")
        self.assertEqual(body["ReplUserPasswd"], "replpw")

    def test_create_serviceOtherVariants(self) -> None:
        """Test the document-store and generic bodies carry only their own fields."""
        resources = entities.Resources.reserve(cpu_units=256, mem_mb=256).unwrap()
        common = {
            "service": SERVICE,
            "resources": resources,
            "replicas": 1,
            "volume_size_gb": 10,
            "admin": "dbadmin",
            "admin_password": "changeme",
        }

        @dataclasses.dataclass
        class TestCase:
            name: str
            request: entities.CreateRequest
            expected_op: str
            expected_keys: set[str]

        base_keys = {"Service", "Resource", "Replicas", "VolumeSizeGB"}
        tests: list[TestCase] = [
            TestCase(
                name="document_store",
                request=entities.DocumentStoreCreateRequest(**common),
                expected_op="Catalog-Create-MongoDB",
                expected_keys=base_keys | {"Admin", "AdminPasswd"},
            ),
            TestCase(
                name="generic",
                request=entities.GenericCreateRequest(**common),
                expected_op="Create-Service",
                expected_keys=base_keys,
            ),
        ]

        for t in tests:
            with self.subTest(name=t.name):
                repo, session = _repository(_response(200, text=""))

                result = repo.create_service(t.request)

                self.assertIsInstance(result, Success, msg=f"{result!s}")
                self.assertEqual(session.post.call_args.args[0], f"{URL}?{t.expected_op}")
                body = session.post.call_args.kwargs["json"]
                self.assertEqual(set(body.keys()), t.expected_keys)
                if "Admin" in t.expected_keys:
                    self.assertEqual(body["Admin"], "dbadmin")
                    self.assertEqual(body["AdminPasswd"], "changeme")

    def test_delete_service(self) -> None:
        repo, session = _repository(_response(200, text=""))

        result = repo.delete_service(SERVICE)

        self.assertIsInstance(result, Success, msg=f"{result!s}")
        self.assertEqual(session.post.call_args.args[0], f"{URL}?Delete-Service")
        self.assertEqual(
            session.post.call_args.kwargs["json"],
            {"Region": "us-west-1", "Cluster": "default", "ServiceName": "mymongo"},
        )

    def test_get_service_attributes(self) -> None:
        repo, session = _repository(
            _response(
                200,
                {
                    "Service": {
                        "ServiceUUID": "uuid-1",
                        "ServiceStatus": "ACTIVE",
                        "Replicas": 3,
                        "ClusterName": "default",
                        "ServiceName": "mymongo",
                        "LastModified": 1700000000,
                    },
                },
            ),
        )

        result = repo.get_service_attributes(SERVICE)

        self.assertIsInstance(result, Success, msg=f"{result!s}")
        self.assertEqual(session.post.call_args.args[0], f"{URL}?Get-Service-Attr")
        self.assertEqual(
            result.unwrap(),
            entities.ServiceAttributes(
                service_uuid="uuid-1",
                service_name="mymongo",
                cluster="default",
                status="ACTIVE",
                replicas=3,
                last_modified=1700000000,
            ),
        )

    def test_check_service_init(self) -> None:
        """Test the check_service_init method."""
        request = entities.CheckInitRequest(
            service_type=entities.ServiceType.DOCUMENT_STORE,
            service=SERVICE,
            admin="dbadmin",
            admin_password="changeme",
        )
        repo, session = _repository(
            _response(200, {"Initialized": False, "StatusMessage": "initializing"}),
            _response(200, {"Initialized": True}),
        )

        self.assertEqual(repo.check_service_init(request).unwrap(), False)
        self.assertEqual(repo.check_service_init(request).unwrap(), True)
        self.assertEqual(session.post.call_args.kwargs["json"]["ServiceType"], "mongodb")

    def test_list_service_members(self) -> None:
        """Test the list_service_members method decodes members and configs."""
        repo, session = _repository(
            _response(
                200,
                {
                    "ServiceMembers": [
                        {
                            "ServiceUUID": "uuid-1",
                            "MemberName": "mymongo-0",
                            "VolumeID": "vol-1",
                            "AvailableZone": "us-west-1a",
                            "TaskID": "ignored",
                            "Configs": [{"FileName": "mongod.conf", "FileID": "f-1", "FileMD5": "abc"}],
                        },
                        {
                            "ServiceUUID": "uuid-1",
                            "MemberName": "mymongo-1",
                            "VolumeID": "vol-2",
                            "Configs": None,
                        },
                    ],
                },
            ),
        )

        result = repo.list_service_members(SERVICE)

        self.assertIsInstance(result, Success, msg=f"{result!s}")
        members = result.unwrap()
        self.assertEqual([m.volume_id for m in members], ["vol-1", "vol-2"])
        self.assertEqual(members[0].configs[0].file_id, "f-1")
        self.assertEqual(members[1].configs, ())
        self.assertEqual(session.post.call_args.kwargs["json"]["Service"]["Cluster"], "default")

    def test_list_services(self) -> None:
        """Test the list_services method."""
        repo, _ = _repository(
            _response(
                200,
                {
                    "Services": [
                        {
                            "ServiceUUID": "uuid-1",
                            "ServiceStatus": "ACTIVE",
                            "Replicas": 3,
                            "ClusterName": "default",
                            "ServiceName": "mymongo",
                            "DomainName": "default-openmanage.com",
                        },
                    ],
                },
            ),
            _response(200, {"Services": None}),
        )

        services = repo.list_services(entities.ListServicesRequest("us-west-1", "default")).unwrap()
        self.assertEqual(len(services), 1)
        self.assertEqual(services[0].status, "ACTIVE")
        self.assertEqual(services[0].replicas, 3)

        empty = repo.list_services(entities.ListServicesRequest("us-west-1", "default")).unwrap()
        self.assertEqual(empty, [])

    def test_get_config_file(self) -> None:
        """Test the get_config_file method."""
        repo, _ = _repository(
            _response(
                200,
                {
                    "Config": {
                        "ServiceUUID": "uuid-1",
                        "FileID": "f-1",
                        "FileName": "mongod.conf",
                        "Content": "net:\n  port: 27017\n",
                    },
                },
            ),
        )

        result = repo.get_config_file(
            entities.GetConfigFileRequest("us-west-1", "default", "uuid-1", "f-1"),
        )

        self.assertIsInstance(result, Success, msg=f"{result!s}")
        self.assertEqual(result.unwrap().file_name, "mongod.conf")

    def test_errorClassification(self) -> None:
        """Test failures are classified by status code and exception."""

        @dataclasses.dataclass
        class TestCase:
            name: str
            outcome: requests.Response | Exception
            expected: type[entities.RemoteError]

        tests: list[TestCase] = [
            TestCase("unauthorized", _response(401, text="bad cert"), entities.AuthError),
            TestCase("forbidden", _response(403, text="denied"), entities.AuthError),
            TestCase("not_found", _response(404, text="no service"), entities.NotFoundError),
            TestCase("bad_request", _response(400, text="bad"), entities.RemoteValidationError),
            TestCase("server_error", _response(500, text="oops"), entities.RemoteError),
            TestCase(
                "connection",
                requests.exceptions.ConnectionError("refused"),
                entities.NetworkError,
            ),
            TestCase("timeout", requests.exceptions.ReadTimeout("slow"), entities.NetworkError),
            TestCase("ssl", requests.exceptions.SSLError("handshake"), entities.AuthError),
            TestCase("undecodable", _response(200, text="<html>"), entities.RemoteError),
        ]

        for t in tests:
            with self.subTest(name=t.name):
                repo, _ = _repository(t.outcome)
                result = repo.get_service_attributes(SERVICE)
                self.assertIsInstance(result, Failure, msg=f"{result!s}")
                self.assertIsInstance(result.failure(), t.expected)


if __name__ == "__main__":
    unittest.main()
