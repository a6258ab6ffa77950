"""Resolution of action inputs from the hosting platform."""

import argparse
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from suite_monitor_action.client import MissingInputError
from suite_monitor_action.config import ActionInputs

log = logging.getLogger(__name__)

INPUT_NAMES: Sequence[str] = (
    "test_suite_id",
    "api_base_url",
    "max_attempts",
    "wait_interval",
)


class InputResolver(ABC):
    """Looks up raw input values by name."""

    @abstractmethod
    def get_input(self, name: str) -> str | None:
        """Return the raw value of an input, None when it was not supplied."""

    def resolve(self) -> ActionInputs:
        """Resolve all inputs into validated action inputs.

        Raises:
            MissingInputError: If test_suite_id is not supplied

        """
        values = {
            name: value
            for name in INPUT_NAMES
            if (value := self.get_input(name))
        }
        if "test_suite_id" not in values:
            raise MissingInputError(
                "Missing required input: test_suite_id is required"
            )
        return ActionInputs.model_validate(values)


@dataclass(frozen=True, kw_only=True)
class GitHubActionsInputResolver(InputResolver):
    """Reads inputs from the ``INPUT_<NAME>`` variables set by the runner."""

    environ: Mapping[str, str]

    def get_input(self, name: str) -> str | None:
        """Return the trimmed input value, None when empty or unset."""
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        return self.environ.get(key, "").strip() or None


@dataclass(frozen=True, kw_only=True)
class CommandLineInputResolver(InputResolver):
    """Reads inputs from command-line flags."""

    argv: Sequence[str] = ()
    _values: Mapping[str, str | None] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        args, unknown = build_parser().parse_known_args(list(self.argv))
        if unknown:
            log.debug("Ignoring unknown arguments: %s", " ".join(unknown))
        object.__setattr__(self, "_values", vars(args))

    def get_input(self, name: str) -> str | None:
        """Return the flag value, None when the flag was not given."""
        return self._values.get(name) or None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, accepting dashed and underscored flags."""
    parser = argparse.ArgumentParser(
        description="Trigger a remote test suite execution and report its results"
    )
    for name in INPUT_NAMES:
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            f"--{name}",
            dest=name,
            default=None,
        )
    return parser


def select_input_resolver(
    environ: Mapping[str, str], argv: Sequence[str]
) -> InputResolver:
    """Choose the resolver for the current platform."""
    if environ.get("GITHUB_ACTIONS") == "true":
        return GitHubActionsInputResolver(environ=environ)
    return CommandLineInputResolver(argv=argv)
