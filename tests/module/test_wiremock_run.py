"""Module test running the action against a WireMock API."""

import json
import logging
import sys

import pytest
from wiremock.client import (
    HttpMethods,
    Mapping,
    MappingRequest,
    MappingResponse,
    Mappings,
)

from suite_monitor_action import cli
from suite_monitor_action.config import ActionInputs
from suite_monitor_action.testing.payloads import (
    execution_entry,
    executions_response,
    trigger_response,
)
from suite_monitor_action.workflow_commands import ActionOutput

pytestmark = pytest.mark.module


def json_mapping(method: str, url_path: str, status: int, body: object) -> Mapping:
    """Create a WireMock mapping answering with a JSON body."""
    return Mapping(
        request=MappingRequest(method=method, url_path=url_path),
        response=MappingResponse(
            status=status,
            headers={"Content-Type": "application/json"},
            json_body=body,
        ),
    )


@pytest.fixture
def output() -> ActionOutput:
    """Output as on the Actions runner."""
    return ActionOutput(
        log=logging.getLogger("suite_monitor_action"),
        stream=sys.stdout,
        github_actions=True,
    )


async def test_run_against_wiremock(
    wiremock_url: str,
    output: ActionOutput,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Triggers, polls and reports a completed suite over real HTTP."""
    Mappings.delete_all_mappings()
    Mappings.create_mapping(
        json_mapping(
            HttpMethods.POST,
            "/test-suite-executions/suite-1/execute",
            201,
            trigger_response(execution_id="e1"),
        )
    )
    Mappings.create_mapping(
        json_mapping(
            HttpMethods.GET,
            "/test-suite-executions/e1/test-executions",
            200,
            executions_response(
                suite_status="completed",
                entries=[
                    execution_entry(test_id="t1", test_name="login", status="passed"),
                    execution_entry(test_id="t2", test_name="signup", status="passed"),
                ],
            ),
        )
    )

    exit_code = await cli.run(
        ActionInputs(test_suite_id="suite-1", api_base_url=wiremock_url), output
    )

    assert exit_code == 0
    document = json.loads(capsys.readouterr().out)
    assert document["total"] == 2
    assert document["passed"] == 2
    assert document["success"] is True


async def test_trigger_not_found_against_wiremock(
    wiremock_url: str,
    output: ActionOutput,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A 404 trigger response fails the run with status and body."""
    Mappings.delete_all_mappings()
    Mappings.create_mapping(
        json_mapping(
            HttpMethods.POST,
            "/test-suite-executions/missing/execute",
            404,
            {"message": "not found"},
        )
    )

    exit_code = await cli.run(
        ActionInputs(test_suite_id="missing", api_base_url=wiremock_url), output
    )

    assert exit_code == 1
    stdout = capsys.readouterr().out
    assert "404" in stdout
    assert '{"message":"not found"}' in stdout
