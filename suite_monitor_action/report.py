"""Final report of a monitored suite execution."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from suite_monitor_action.models.execution import TestExecution
from suite_monitor_action.monitor import MonitorOutcome

COLUMN_WIDTH = 50
STATUS_WIDTH = 7


@dataclass(frozen=True, kw_only=True)
class SuiteReport:
    """Aggregated results and verdict of one suite execution."""

    execution_id: str
    suite_status: str
    passed: int
    failed: int
    entries: Sequence[TestExecution]
    success: bool

    @property
    def total(self) -> int:
        """Number of tests with a recorded result."""
        return self.passed + self.failed


def build_report(outcome: MonitorOutcome, success_status: str) -> SuiteReport:
    """Aggregate a monitor outcome into a report.

    The run succeeds only when the suite reached ``success_status`` and no
    test failed. A timed-out outcome never succeeds.
    """
    results = outcome.results
    success = (
        outcome.state == "suite-terminal"
        and outcome.suite_status == success_status
        and not results.failed
    )
    return SuiteReport(
        execution_id=outcome.execution_id,
        suite_status=outcome.suite_status,
        passed=len(results.passed),
        failed=len(results.failed),
        entries=results.entries(),
        success=success,
    )


def format_cell(content: str, width: int) -> str:
    """Pad content to width, truncating with an ellipsis when too long."""
    if len(content) > width:
        return content[: width - 3] + "..."
    return content.ljust(width)


def render_table(entries: Sequence[TestExecution]) -> str:
    """Render test names and statuses as a markdown table."""
    lines = [
        f"| {format_cell('Test', COLUMN_WIDTH)} | {'Status'.ljust(STATUS_WIDTH)} |",
        f"|{'-' * (COLUMN_WIDTH + 2)}|{'-' * (STATUS_WIDTH + 2)}|",
    ]
    lines.extend(
        f"| {format_cell(test.test_name, COLUMN_WIDTH)} "
        f"| {test.status.upper().ljust(STATUS_WIDTH)} |"
        for test in entries
    )
    return "\n".join(lines)


def render_summary(report: SuiteReport) -> str:
    """Render totals followed by the result table."""
    return "\n".join(
        [
            f"Total Tests: {report.total} | Passed: {report.passed} "
            f"| Failed: {report.failed}",
            "",
            render_table(report.entries),
        ]
    )


def format_output(report: SuiteReport) -> dict[str, Any]:
    """Format the report for JSON output."""
    return {
        "execution_id": report.execution_id,
        "suite_status": report.suite_status,
        "success": report.success,
        "total": report.total,
        "passed": report.passed,
        "failed": report.failed,
        "results": [
            {"id": test.id, "name": test.test_name, "status": test.status}
            for test in report.entries
        ],
    }
