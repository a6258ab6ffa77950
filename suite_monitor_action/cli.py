"""CLI entry point for the test suite execution action."""

import asyncio
import json
import logging
import os
import sys

import aiohttp
from pydantic import ValidationError

from suite_monitor_action.client import (
    ApiError,
    MissingInputError,
    SuiteExecutionClient,
)
from suite_monitor_action.config import ActionInputs
from suite_monitor_action.inputs import select_input_resolver
from suite_monitor_action.monitor import ExecutionMonitor, MonitorError
from suite_monitor_action.report import build_report, format_output, render_summary
from suite_monitor_action.workflow_commands import ActionOutput

log = logging.getLogger("suite_monitor_action")


async def run(inputs: ActionInputs, output: ActionOutput) -> int:
    """Trigger the test suite, monitor it and return exit code."""
    log.info("Starting test suite execution")
    monitor_config = inputs.monitor_config()
    error: str | None = None

    async with SuiteExecutionClient.from_config(inputs.api_config()) as client:
        try:
            trigger = await client.trigger_suite(inputs.test_suite_id)
        except (
            ApiError,
            MissingInputError,
            ValidationError,
            aiohttp.ClientError,
        ) as exc:
            return output.set_failed(str(exc))

        log.info(
            "Triggered Test Suite %s with execution id %s",
            inputs.test_suite_id,
            trigger.id,
        )

        monitor = ExecutionMonitor(client=client, config=monitor_config)
        try:
            outcome = await monitor.run(trigger.id, trigger.status)
        except MonitorError as exc:
            log.warning("%s", exc)
            outcome = exc.outcome
            error = str(exc)

    report = build_report(outcome, monitor_config.success_status)
    print(json.dumps(format_output(report), indent=2))

    summary = render_summary(report)
    if error is not None:
        return output.set_failed(f"{error}\n\n{summary}")
    if report.success:
        output.info(summary)
        return 0
    return output.set_failed(summary)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    output = ActionOutput(
        log=log,
        stream=sys.stdout,
        github_actions=os.environ.get("GITHUB_ACTIONS") == "true",
    )

    resolver = select_input_resolver(os.environ, sys.argv[1:])
    try:
        inputs = resolver.resolve()
    except (MissingInputError, ValidationError) as exc:
        sys.exit(output.set_failed(str(exc)))

    sys.exit(asyncio.run(run(inputs, output)))


if __name__ == "__main__":  # pragma: no cover
    main()
