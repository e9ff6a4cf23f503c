import unittest

from hypothesis import given
from hypothesis import strategies as st
from returns.pipeline import is_successful

from .errors import ValidationError
from .operations import _OPERATION_ALIASES, Operation, ServiceType

_ACCEPTED_NAMES: set[str] = {op.value for op in Operation} | set(_OPERATION_ALIASES)


class TestOperation(unittest.TestCase):
    """Test the business methods of the Operation class."""

    @given(st.sampled_from(Operation))
    def test_parsesOwnValues(self, op: Operation) -> None:
        self.assertEqual(Operation.parse(op.value).unwrap(), op)
        self.assertEqual(Operation.parse(op.value.upper()).unwrap(), op)

    def test_parsesLongNames(self) -> None:
        self.assertEqual(Operation.parse("create-service").unwrap(), Operation.CREATE)
        self.assertEqual(Operation.parse("check-service-init").unwrap(), Operation.CHECK_INIT)
        self.assertEqual(Operation.parse("delete-service").unwrap(), Operation.DELETE)
        self.assertEqual(Operation.parse("list-services").unwrap(), Operation.LIST)
        self.assertEqual(Operation.parse("get-service").unwrap(), Operation.GET)

    @given(st.text().filter(lambda s: s.strip().lower() not in _ACCEPTED_NAMES))
    def test_rejectsUnknown(self, value: str) -> None:
        result = Operation.parse(value)

        self.assertFalse(is_successful(result), msg=result)
        self.assertIsInstance(result.failure(), ValidationError)

    def test_requires_service_name(self) -> None:
        self.assertFalse(Operation.LIST.requires_service_name)
        for op in Operation:
            if op != Operation.LIST:
                self.assertTrue(op.requires_service_name, msg=op)


class TestServiceType(unittest.TestCase):
    """Test the business methods of the ServiceType class."""

    def test_parse(self) -> None:
        tests = {
            "document-store": ServiceType.DOCUMENT_STORE,
            "MongoDB": ServiceType.DOCUMENT_STORE,
            "relational-store": ServiceType.RELATIONAL_STORE,
            "postgresql": ServiceType.RELATIONAL_STORE,
            "generic": ServiceType.GENERIC,
        }
        for value, expected in tests.items():
            with self.subTest(value=value):
                self.assertEqual(ServiceType.parse(value).unwrap(), expected)

    def test_rejectsUnknown(self) -> None:
        for value in ["", "cassandra", None]:
            with self.subTest(value=value):
                self.assertIsInstance(ServiceType.parse(value).failure(), ValidationError)

    def test_catalog_name(self) -> None:
        self.assertEqual(ServiceType.DOCUMENT_STORE.catalog_name, "mongodb")
        self.assertEqual(ServiceType.RELATIONAL_STORE.catalog_name, "postgresql")


if __name__ == "__main__":
    unittest.main()
