import dataclasses
import unittest
from unittest.mock import MagicMock, patch

from hypothesis import given
from hypothesis import strategies as st
from returns.pipeline import is_successful

from catalog_service_cli.internal import entities

from ._dummy_adaptors import DummyManagementRepository
from .poller import InitializationPoller, PollState

REQUEST = entities.CheckInitRequest(
    service_type=entities.ServiceType.DOCUMENT_STORE,
    service=entities.ServiceIdentity(region="us-west-1", cluster="default", service_name="svcA"),
    admin="dbadmin",
    admin_password="changeme",
)


class TestInitializationPoller(unittest.TestCase):
    """Test the business methods of the InitializationPoller class."""

    def test_wait(self) -> None:
        """Test the outcome of waiting on scripted initialization checks."""

        @dataclasses.dataclass
        class TestCase:
            name: str
            script: list[bool | Exception]
            expected_elapsed: int | None
            expected_checks: int

        tests: list[TestCase] = [
            TestCase(
                name="initialized_immediately",
                script=[True],
                expected_elapsed=0,
                expected_checks=1,
            ),
            TestCase(
                name="initialized_after_two_checks",
                script=[False, False, True],
                expected_elapsed=20,
                expected_checks=3,
            ),
            TestCase(
                name="transient_errors_are_tolerated",
                script=[
                    False,
                    entities.NetworkError("connection reset"),
                    False,
                    entities.RemoteError("internal error"),
                    False,
                    True,
                ],
                expected_elapsed=50,
                expected_checks=6,
            ),
            TestCase(
                name="never_initialized",
                script=[False],
                expected_elapsed=None,
                expected_checks=12,
            ),
            TestCase(
                name="always_failing",
                script=[entities.NetworkError("unreachable")],
                expected_elapsed=None,
                expected_checks=12,
            ),
        ]

        for t in tests:
            with self.subTest(name=t.name):
                repo = DummyManagementRepository(init_script=t.script)
                sleep = MagicMock()
                poller = InitializationPoller(
                    repository=repo,
                    options=entities.PollOptions(interval_seconds=10, max_wait_seconds=120),
                    sleep=sleep,
                )

                result = poller.wait(REQUEST)

                self.assertEqual(repo.init_checks, t.expected_checks)
                if t.expected_elapsed is None:
                    self.assertFalse(is_successful(result), msg=result)
                    self.assertIsInstance(result.failure(), entities.InitTimeoutError)
                    self.assertEqual(result.failure().waited_seconds, 110)
                    self.assertEqual(poller.state, PollState.TIMED_OUT)
                else:
                    self.assertTrue(is_successful(result), msg=result)
                    self.assertEqual(result.unwrap(), t.expected_elapsed)
                    self.assertEqual(poller.state, PollState.INITIALIZED)
                self.assertTrue(all(c.args == (10,) for c in sleep.call_args_list))

    @given(
        st.integers(min_value=0, max_value=30),
        st.integers(min_value=1, max_value=20),
        st.integers(min_value=1, max_value=200),
    )
    def test_waitSucceedsWithinBudget(
        self, not_ready_checks: int, interval: int, max_wait: int,
    ) -> None:
        """Test a service is reported initialized only if seen so within the budget."""
        repo = DummyManagementRepository(init_script=[False] * not_ready_checks + [True])
        poller = InitializationPoller(
            repository=repo,
            options=entities.PollOptions(interval_seconds=interval, max_wait_seconds=max_wait),
            sleep=lambda _: None,
        )

        result = poller.wait(REQUEST)

        if not_ready_checks * interval < max_wait:
            self.assertEqual(result.unwrap(), not_ready_checks * interval)
        else:
            self.assertIsInstance(result.failure(), entities.InitTimeoutError)

    def test_timeoutReportsTimeSpent(self) -> None:
        """Test no sleep follows the last check, and the time slept is reported."""
        repo = DummyManagementRepository(init_script=[False])
        sleep = MagicMock()
        poller = InitializationPoller(
            repository=repo,
            options=entities.PollOptions(interval_seconds=7, max_wait_seconds=20),
            sleep=sleep,
        )

        result = poller.wait(REQUEST)

        self.assertEqual(repo.init_checks, 3)
        self.assertEqual(sleep.call_count, 2)
        self.assertEqual(result.failure().waited_seconds, 14)
        self.assertIn("not initialized after 14 seconds", str(result.failure()))

    def test_sleepsWithTimeByDefault(self) -> None:
        repo = DummyManagementRepository(init_script=[False, True])
        with patch("time.sleep") as sleep:
            poller = InitializationPoller(repository=repo, options=entities.PollOptions())
            result = poller.wait(REQUEST)

        self.assertEqual(result.unwrap(), entities.PollOptions().interval_seconds)
        sleep.assert_called_once_with(entities.PollOptions().interval_seconds)


if __name__ == "__main__":
    unittest.main()
