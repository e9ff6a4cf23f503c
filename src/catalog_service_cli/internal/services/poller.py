"""Waiting for a catalog service to finish initializing.

Once the control plane has accepted a catalog service, it bootstraps the
service asynchronously (for instance, initiating a replica set). The
`InitializationPoller` blocks the caller until that bootstrap is reported
done, or until the wait budget is used up.

Errors from the control plane while polling are considered transient:
they are logged and polling carries on, without resetting the time
already spent waiting.
"""

import logging
import time
from collections.abc import Callable
from enum import StrEnum, auto

from returns.result import Failure, ResultE, Success

from catalog_service_cli.internal import entities, ports

log = logging.getLogger("catalog-service-cli")


class PollState(StrEnum):
    """The states of an initialization wait."""

    POLLING = auto()
    INITIALIZED = auto()
    TIMED_OUT = auto()


class InitializationPoller:
    """Poll the control plane until a service is initialized or the budget runs out."""

    repository: ports.ManagementRepository
    options: entities.PollOptions
    state: PollState

    def __init__(
        self,
        repository: ports.ManagementRepository,
        options: entities.PollOptions,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a new instance.

        Args:
            repository: The control plane to poll.
            options: The interval and overall budget of the wait.
            sleep: Blocks the caller between two checks. Defaults to ``time.sleep``.
        """
        self.repository = repository
        self.options = options
        self.state = PollState.POLLING
        self._sleep = sleep or time.sleep

    def wait(self, request: entities.CheckInitRequest) -> ResultE[int]:
        """Block until the service of the request is initialized.

        Args:
            request: The check to repeat, carrying the identity and admin
                credentials the service was created with.

        Returns:
            The number of seconds spent waiting before the service was
            seen initialized, or an `entities.InitTimeoutError` with the seconds
            spent waiting. No sleep follows a check once the next one would
            fall outside the budget.
        """
        self.state = PollState.POLLING
        elapsed: int = 0
        tick: int = 0
        while elapsed < self.options.max_wait_seconds:
            tick += 1
            check_result = self.repository.check_service_init(request)
            if isinstance(check_result, Failure):
                log.warning(
                    f"check service init error for {request.service} "
                    f"(check {tick}, {elapsed}s elapsed): {check_result.failure()}",
                )
            elif check_result.unwrap():
                self.state = PollState.INITIALIZED
                log.info(f"The catalog service {request.service} is initialized")
                return Success(elapsed)
            else:
                log.info(
                    f"The catalog service {request.service} is initializing "
                    f"(check {tick}, {elapsed}s elapsed)",
                )

            if elapsed + self.options.interval_seconds >= self.options.max_wait_seconds:
                break
            self._sleep(self.options.interval_seconds)
            elapsed += self.options.interval_seconds

        self.state = PollState.TIMED_OUT
        return Failure(
            entities.InitTimeoutError(
                service_name=request.service.service_name,
                waited_seconds=elapsed,
            ),
        )
