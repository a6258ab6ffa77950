"""HTTP client for the test suite execution API."""

import json
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import aiohttp

from suite_monitor_action.config import ApiConfig
from suite_monitor_action.models.execution import (
    TestExecutionsResponse,
    TriggerResponse,
)

log = logging.getLogger(__name__)


class MissingInputError(ValueError):
    """Raised when a required input is missing."""


class ApiError(RuntimeError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"API request failed: {status} - {body}")
        self.status = status
        self.body = body


@dataclass(frozen=True, kw_only=True)
class SuiteExecutionClient:
    """Client starting suite executions and reading their progress."""

    config: ApiConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ApiConfig
    ) -> AsyncGenerator["SuiteExecutionClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers={"Accept": "application/json"},
        ) as session:
            yield cls(config=config, session=session)

    async def trigger_suite(self, suite_id: str) -> TriggerResponse:
        """Start one execution of the given test suite.

        Args:
            suite_id: Identifier of the test suite to execute

        Returns:
            Execution identifier and initial suite status

        Raises:
            MissingInputError: If suite_id is empty, no request is made
            ApiError: If the API rejects the request

        """
        if not suite_id:
            raise MissingInputError(
                "Missing required input: test_suite_id is required"
            )

        url = self.config.trigger_path.format(suite_id=quote(suite_id, safe=""))
        log.debug("Triggering test suite: url=%s", url)

        async with self.session.post(url) as response:
            data = await self._read_json(response)

        return TriggerResponse.model_validate(data)

    async def get_test_executions(self, execution_id: str) -> TestExecutionsResponse:
        """Read the current suite status and all of its test executions."""
        url = self.config.executions_path.format(
            execution_id=quote(execution_id, safe="")
        )

        async with self.session.get(url) as response:
            data = await self._read_json(response)

        return TestExecutionsResponse.model_validate(data)

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        if response.status // 100 != 2:
            raise ApiError(response.status, _compact_body(text))
        try:
            return json.loads(text)
        except ValueError as exc:
            raise ApiError(response.status, f"invalid JSON body: {text}") from exc


def _compact_body(text: str) -> str:
    """Render an error body as compact JSON, or as-is when it is not JSON."""
    try:
        return json.dumps(json.loads(text), separators=(",", ":"))
    except ValueError:
        return text
