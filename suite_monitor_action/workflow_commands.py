"""Informational and failure channels of the hosting platform."""

import logging
from dataclasses import dataclass
from typing import TextIO


def escape_data(message: str) -> str:
    """Escape a workflow command message so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


@dataclass(frozen=True, kw_only=True)
class ActionOutput:
    """Routes the final summary to the informational or failure channel."""

    log: logging.Logger
    stream: TextIO
    github_actions: bool = False

    def info(self, message: str) -> None:
        """Emit a message on the informational channel."""
        for line in message.splitlines() or [""]:
            self.log.info("%s", line)

    def set_failed(self, message: str) -> int:
        """Emit a message on the failure channel and return the exit code."""
        self.log.error("%s", message)
        if self.github_actions:
            print(f"::error::{escape_data(message)}", file=self.stream)
        return 1
