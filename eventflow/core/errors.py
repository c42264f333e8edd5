"""Error types raised by services and steps.

Prompt validation errors are click.BadParameter and never reach the pipeline.
"""
from typing import List, Optional


class EventFlowError(Exception):
    """Base class for failures that stop the pipeline."""


class ExternalServiceError(EventFlowError):
    """An HTTP API or browser automation call failed."""

    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"[{service}] {message}")


class SubprocessFailedError(EventFlowError):
    """A child process could not be spawned or exited non-zero."""

    def __init__(self, command: List[str], returncode: Optional[int] = None, reason: str = None):
        self.command = list(command)
        self.returncode = returncode
        detail = reason if reason else f"exited with code {returncode}"
        super().__init__(f"Command '{' '.join(self.command)}' {detail}")
