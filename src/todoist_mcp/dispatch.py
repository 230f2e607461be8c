"""Single call path shared by every tool: validate, execute, normalize.

Handlers return plain payloads or raise; this module is the only place that
builds ``CallToolResult`` envelopes, so no failure reaches the MCP transport.
"""
import logging
import traceback
from typing import Any, Optional

import httpx
from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from . import formatters
from .client import TodoistClient
from .errors import MoveTaskError, TodoistAPIError, ToolPreconditionError
from .models import AuthorizationContext
from .tools import ToolDescriptor

logger = logging.getLogger("todoist-mcp.dispatch")

UNKNOWN_ERROR = "Unknown error occurred"


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def format_validation_error(error: ValidationError) -> str:
    """One ``field: message`` entry per invalid argument."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return "Input validation error: " + "; ".join(problems)


def error_message(error: BaseException) -> str:
    return str(error) or UNKNOWN_ERROR


async def invoke(
    descriptor: ToolDescriptor,
    arguments: Optional[dict[str, Any]],
    client: TodoistClient,
    context: AuthorizationContext
) -> CallToolResult:
    """Run one tool call and wrap the outcome.

    Args:
        descriptor: Tool being called
        arguments: Raw arguments from the MCP request (None is treated as empty)
        client: Todoist client for this call
        context: The session's authorization context

    Returns:
        Success: a text result with the rendered payload.
        Failure: a text result with isError=True; nothing is raised.
    """
    name = descriptor.name
    try:
        params = descriptor.input_model.model_validate(arguments or {})
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e.error_count()} error(s)")
        return text_result(format_validation_error(e), is_error=True)

    try:
        payload = await descriptor.handler(params, client, context)

    except ToolPreconditionError as e:
        logger.warning(f"Precondition failed for {name}: {e}")
        return text_result(f"Error: {error_message(e)}", is_error=True)

    except TodoistAPIError as e:
        logger.error(f"HTTP error during {name} call:")
        logger.error(f"  Status: {e.status_code}")
        logger.error(f"  Response text: {e.body}")
        return text_result(f"Error {descriptor.action}: {error_message(e)}", is_error=True)

    except MoveTaskError as e:
        logger.error(f"Sync command failed during {name} call:")
        logger.error(f"  Command uuid: {e.command_uuid}")
        logger.error(f"  Command status: {e.status}")
        return text_result(f"Error {descriptor.action}: {error_message(e)}", is_error=True)

    except httpx.RequestError as e:
        logger.error(f"Request error during {name} call:")
        logger.error(f"  Error type: {type(e).__name__}")
        logger.error(f"  Error message: {str(e)}")
        return text_result(f"Error {descriptor.action}: {error_message(e)}", is_error=True)

    except Exception as e:
        logger.error(f"Unexpected error during {name} call:")
        logger.error(f"  Error type: {type(e).__name__}")
        logger.error(f"  Error message: {str(e)}")
        logger.error(f"  Traceback:\n{traceback.format_exc()}")
        return text_result(f"Error {descriptor.action}: {error_message(e)}", is_error=True)

    logger.info(f"Tool {name} succeeded")
    return text_result(formatters.format_payload(payload))
