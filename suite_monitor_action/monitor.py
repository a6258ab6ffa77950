"""Execution monitor polling a suite execution until it terminates."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Literal

import aiohttp
from pydantic import ValidationError

from suite_monitor_action.client import ApiError, SuiteExecutionClient
from suite_monitor_action.config import MonitorConfig
from suite_monitor_action.models.execution import TestExecutionsResponse
from suite_monitor_action.models.result import ResultBucket

log = logging.getLogger(__name__)

type MonitorState = Literal["polling", "suite-terminal", "timed-out"]


@dataclass(kw_only=True)
class MonitorOutcome:
    """State accumulated while monitoring one suite execution."""

    execution_id: str
    suite_status: str
    results: ResultBucket
    attempts: int = 0
    state: MonitorState = "polling"


class MonitorError(RuntimeError):
    """Raised when monitoring ends without a terminal suite status."""

    def __init__(self, message: str, outcome: MonitorOutcome) -> None:
        super().__init__(message)
        self.outcome = outcome


class MonitorTimeoutError(MonitorError, TimeoutError):
    """Raised when the attempt budget is exhausted."""


class MonitorAbortedError(MonitorError):
    """Raised when a poll fails after monitoring started."""


@dataclass(frozen=True, kw_only=True)
class ExecutionMonitor:
    """Polls a suite execution and records each test result exactly once."""

    client: SuiteExecutionClient
    config: MonitorConfig = field(default_factory=MonitorConfig)

    async def run(self, execution_id: str, initial_status: str) -> MonitorOutcome:
        """Poll until the suite reaches a terminal status.

        Args:
            execution_id: Execution identifier returned by the trigger call
            initial_status: Suite status returned by the trigger call

        Returns:
            Outcome in the ``suite-terminal`` state

        Raises:
            MonitorTimeoutError: If no terminal suite status is observed
                within ``max_attempts`` polls
            MonitorAbortedError: If a poll fails; carries the partial outcome

        """
        outcome = MonitorOutcome(
            execution_id=execution_id,
            suite_status=initial_status,
            results=ResultBucket(passed_status=self.config.passed_status),
        )

        while True:
            outcome.attempts += 1
            log.info(
                "Checking test suite execution status: Attempt %d of %d",
                outcome.attempts,
                self.config.max_attempts,
            )

            try:
                snapshot = await self.client.get_test_executions(execution_id)
            except (ApiError, ValidationError, aiohttp.ClientError) as exc:
                raise MonitorAbortedError(
                    f"Monitoring aborted: {exc}", outcome
                ) from exc

            if self.process_snapshot(outcome, snapshot):
                outcome.state = "suite-terminal"
                log.info("Test suite %s", outcome.suite_status.upper())
                return outcome

            if outcome.attempts >= self.config.max_attempts:
                outcome.state = "timed-out"
                raise MonitorTimeoutError(
                    "Test suite execution did not reach a terminal status "
                    f"after {outcome.attempts} attempts",
                    outcome,
                )

            await asyncio.sleep(self.config.wait_interval)

    def process_snapshot(
        self, outcome: MonitorOutcome, snapshot: TestExecutionsResponse
    ) -> bool:
        """Record newly terminal tests and report whether the suite terminated."""
        for test in snapshot.test_executions:
            if test.status not in self.config.terminal_test_statuses:
                continue
            if outcome.results.record(test):
                log.info("Test: %s - Status: %s", test.test_name, test.status.upper())

        outcome.suite_status = snapshot.test_suite_execution.status
        return outcome.suite_status in self.config.terminal_suite_statuses
