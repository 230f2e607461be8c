"""Todoist MCP Server - Model Context Protocol integration for Todoist.

This package exposes the Todoist REST and Sync APIs as MCP tools,
enabling AI assistants to manage projects, sections, tasks, labels and comments.

Modules:
- server: stdio MCP server and per-session tool table
- tools: MCP tool catalogue (names, descriptions, schemas, handlers)
- handlers: Tool implementation handlers
- dispatch: Argument validation and result normalization
- registry: Minimal / full tool set selection
- client: Todoist REST and Sync API client
"""

__version__ = "1.0.0"

from . import client
from . import dispatch
from . import handlers
from . import registry
from . import tools

__all__ = ["client", "dispatch", "handlers", "registry", "tools", "__version__"]
