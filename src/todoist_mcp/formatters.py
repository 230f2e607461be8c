"""Formatting of handler payloads into tool-result text."""
import json
from typing import Any


def format_payload(payload: Any) -> str:
    """Render a handler payload as tool text.

    Strings are confirmation messages and pass through unchanged; everything
    else is pretty-printed JSON.
    """
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_task_summary(task: dict) -> dict:
    """Reduce a Todoist task to content, description and due date."""
    due = task.get("due") or {}
    return {
        "content": task.get("content"),
        "description": task.get("description"),
        "due_date": due.get("date") or None,
    }


def task_items(result: Any) -> list[dict]:
    """Tasks from a list response, paginated (``results``) or plain."""
    if isinstance(result, dict):
        return result.get("results") or []
    return result or []
