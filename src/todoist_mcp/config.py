"""Server configuration.

The tool-set switch and the essential tool names are plain values carried by
``ServerConfig`` so each session can be built with its own selection.
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_API_BASE_URL = "https://api.todoist.com/rest/v2"
DEFAULT_SYNC_API_URL = "https://api.todoist.com/sync/v9/sync"

# Tools registered when minimal_tool_set is on
ESSENTIAL_TOOLS = frozenset({
    "create_task",
    "get_tasks",
    "update_task",
    "close_task",
    "get_projects",
    "get_project",
    "move_task",
    "get_tasks_by_filter",
    "create_project",
    "update_project",
    "get_sections",
    "delete_task",
    "reopen_task",
    "get_labels",
    "create_section",
    "update_section",
    "get_completed_tasks_by_completion_date",
    "get_completed_tasks_by_due_date",
})

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ServerConfig(BaseModel):
    """Static configuration shared by every tool call of a session."""

    model_config = ConfigDict(frozen=True)

    minimal_tool_set: bool = True
    essential_tools: frozenset[str] = Field(default=ESSENTIAL_TOOLS)
    api_base_url: str = DEFAULT_API_BASE_URL
    sync_api_url: str = DEFAULT_SYNC_API_URL
    timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def get_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build a ServerConfig from ``TODOIST_*`` environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``
    """
    env = os.environ if environ is None else environ
    return ServerConfig(
        minimal_tool_set=_env_flag(env, "TODOIST_MINIMAL_TOOL_SET", True),
        api_base_url=env.get("TODOIST_API_BASE_URL", DEFAULT_API_BASE_URL),
        sync_api_url=env.get("TODOIST_SYNC_API_URL", DEFAULT_SYNC_API_URL),
        timeout=float(env.get("TODOIST_TIMEOUT", "30")),
        log_level=env.get("TODOIST_LOG_LEVEL", "INFO"),
    )
