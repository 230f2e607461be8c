"""Exceptions raised by the Todoist client and tool handlers."""
import json
from typing import Any


class TodoistError(Exception):
    """Base class for failures surfaced as error tool results."""


class TodoistAPIError(TodoistError):
    """Raised when Todoist answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str, api: str = ""):
        label = f"Todoist {api} API error" if api else "Todoist API error"
        super().__init__(f"{label} ({status_code}): {body}")
        self.status_code = status_code
        self.body = body
        self.api = api


class MoveTaskError(TodoistError):
    """Raised when the sync endpoint accepted an item_move command but did not apply it."""

    def __init__(self, command_uuid: str, status: Any):
        super().__init__(f"Move task failed: {json.dumps(status)}")
        self.command_uuid = command_uuid
        self.status = status


class ToolPreconditionError(TodoistError):
    """Raised by a handler before any upstream call when its arguments are unusable."""
