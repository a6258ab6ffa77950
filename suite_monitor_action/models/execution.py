"""Pydantic models for the test suite execution API responses."""

from collections.abc import Sequence

from pydantic import Field

from suite_monitor_action.models.base import Model


class TriggerResponse(Model):
    """Response from starting a test suite execution."""

    id: str = Field(..., description="Execution identifier")
    status: str = Field(..., description="Initial suite status")


class SuiteExecution(Model):
    """Suite execution as mirrored on each poll."""

    id: str | None = None
    status: str


class TestExecution(Model):
    """Single test run within a suite execution."""

    __test__ = False

    id: str
    test_name: str = Field(..., alias="testName")
    status: str


class TestExecutionsResponse(Model):
    """Combined suite and test execution snapshot returned by one poll."""

    __test__ = False

    test_suite_execution: SuiteExecution = Field(..., alias="testSuiteExecution")
    test_executions: Sequence[TestExecution] = Field(
        default_factory=list, alias="testExecutions"
    )
