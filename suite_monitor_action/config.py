"""Configuration for the suite execution client and monitor."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

DEFAULT_API_BASE_URL = "https://api.numos.ai"
DEFAULT_MAX_ATTEMPTS = 30
DEFAULT_WAIT_INTERVAL = 10.0

_HTTP_URL: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)


def _check_http_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as exc:
        raise ValueError(
            f"api_base_url must be an absolute http(s) URL, got {value!r}"
        ) from exc
    return value


BaseUrl = Annotated[str, AfterValidator(_check_http_url)]
MaxAttempts = Annotated[int, Field(ge=1)]
WaitInterval = Annotated[float, Field(ge=0, description="Seconds")]


class ApiConfig(BaseModel):
    """Location and endpoint layout of the test suite execution API."""

    api_base_url: BaseUrl = DEFAULT_API_BASE_URL
    trigger_path: str = "test-suite-executions/{suite_id}/execute"
    executions_path: str = "test-suite-executions/{execution_id}/test-executions"

    @field_validator("api_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # Endpoint paths are relative and joined onto the base URL
        return value if value.endswith("/") else f"{value}/"


class MonitorConfig(BaseModel):
    """Polling limits and status vocabulary for the execution monitor."""

    model_config = ConfigDict(frozen=True)

    max_attempts: MaxAttempts = DEFAULT_MAX_ATTEMPTS
    wait_interval: WaitInterval = DEFAULT_WAIT_INTERVAL
    success_status: str = "completed"
    passed_status: str = "passed"
    terminal_suite_statuses: frozenset[str] = frozenset(
        ["completed", "failed", "canceled", "error"]
    )
    terminal_test_statuses: frozenset[str] = frozenset(
        ["passed", "failed", "canceled", "error"]
    )


class ActionInputs(BaseModel):
    """Resolved inputs of one action run."""

    test_suite_id: str
    api_base_url: BaseUrl = DEFAULT_API_BASE_URL
    max_attempts: MaxAttempts = DEFAULT_MAX_ATTEMPTS
    wait_interval: WaitInterval = DEFAULT_WAIT_INTERVAL

    def api_config(self) -> ApiConfig:
        """Build the API configuration for these inputs."""
        return ApiConfig(api_base_url=self.api_base_url)

    def monitor_config(self) -> MonitorConfig:
        """Build the monitor configuration for these inputs."""
        return MonitorConfig(
            max_attempts=self.max_attempts, wait_interval=self.wait_interval
        )
