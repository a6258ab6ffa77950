"""Accumulated test results for one monitoring session."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from suite_monitor_action.models.execution import TestExecution


@dataclass(kw_only=True)
class ResultBucket:
    """Terminal test executions recorded in discovery order.

    Each test id is recorded at most once, so ``len(passed) + len(failed)``
    always equals ``len(seen)``.
    """

    passed_status: str = "passed"
    seen: set[str] = field(default_factory=set)
    passed: list[TestExecution] = field(default_factory=list)
    failed: list[TestExecution] = field(default_factory=list)

    def record(self, test: TestExecution) -> bool:
        """Record a terminal test execution unless its id was already seen.

        Returns:
            True if the test was recorded by this call

        """
        if test.id in self.seen:
            return False

        self.seen.add(test.id)
        if test.status == self.passed_status:
            self.passed.append(test)
        else:
            self.failed.append(test)
        return True

    @property
    def total(self) -> int:
        """Number of recorded tests."""
        return len(self.passed) + len(self.failed)

    def entries(self) -> Sequence[TestExecution]:
        """Passed tests followed by failed tests, each in discovery order."""
        return [*self.passed, *self.failed]
