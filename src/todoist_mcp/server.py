"""Todoist MCP Server - Expose Todoist task management to AI assistants."""
import asyncio
import logging
import os
import sys
from typing import Any, Mapping, Optional

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .client import TodoistClient
from .config import ServerConfig, get_config
from .dispatch import invoke, text_result
from .models import AuthorizationContext
from .registry import build_registry

logger = logging.getLogger("todoist-mcp")


class TodoistSession:
    """Per-session tool table bound to one user's authorization context.

    The registered tool table is built once here and only read afterwards,
    so concurrent tool calls can share a session.
    """

    def __init__(
        self,
        context: AuthorizationContext,
        config: Optional[ServerConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.context = context
        self.config = config or ServerConfig()
        self.tools = build_registry(self.config)
        self._transport = transport

    def list_tools(self) -> list[Tool]:
        """List the MCP tools registered for this session."""
        return [descriptor.to_tool() for descriptor in self.tools.values()]

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        """Route a tool call to its descriptor and run it through the dispatcher."""
        logger.info(f"Tool call: {name} with arguments: {sorted((arguments or {}).keys())}")

        descriptor = self.tools.get(name)
        if descriptor is None:
            logger.warning(f"Unknown tool requested: {name}")
            return text_result(f"Unknown tool: {name}", is_error=True)

        async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as http_client:
            client = TodoistClient(
                http_client,
                self.context.access_token,
                api_base_url=self.config.api_base_url,
                sync_api_url=self.config.sync_api_url,
            )
            return await invoke(descriptor, arguments, client, self.context)


def create_server(session: TodoistSession) -> Server:
    """Create a low-level MCP server that serves ``session``'s tools."""
    app = Server("todoist-mcp")

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        return session.list_tools()

    # Arguments are validated by the dispatcher against the same models that produce the schemas
    @app.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await session.call_tool(name, arguments)

    return app


def context_from_env(environ: Optional[Mapping[str, str]] = None) -> AuthorizationContext:
    """Build the authorization context for a stdio session from the environment.

    Raises:
        ValueError: TODOIST_API_TOKEN is not set
    """
    env = os.environ if environ is None else environ
    token = env.get("TODOIST_API_TOKEN", "").strip()
    if not token:
        raise ValueError(
            "TODOIST_API_TOKEN is not set. Create a token under "
            "Todoist Settings > Integrations > Developer and export it."
        )
    return AuthorizationContext(
        access_token=token,
        email=env.get("TODOIST_EMAIL", ""),
        full_name=env.get("TODOIST_FULL_NAME", ""),
    )


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; stdout carries the MCP stdio protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True
    )


async def main(context: AuthorizationContext, config: ServerConfig) -> None:
    """Run the MCP server over stdio."""
    session = TodoistSession(context, config)
    app = create_server(session)
    logger.info(f"MCP Server starting with API base URL: {config.api_base_url}")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run() -> None:
    """Console entry point."""
    # pydantic's ValidationError is a ValueError, as is a non-numeric TODOIST_TIMEOUT
    try:
        config = get_config()
    except ValueError as e:
        raise SystemExit(f"Invalid TODOIST_* configuration: {e}")
    configure_logging(config.log_level)
    try:
        context = context_from_env()
    except ValueError as e:
        raise SystemExit(str(e))
    asyncio.run(main(context, config))


if __name__ == "__main__":
    run()
