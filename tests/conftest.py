"""Shared fixtures for the Todoist MCP tests."""
from unittest.mock import AsyncMock

import httpx
import pytest

from helpers import API_BASE_URL, SYNC_API_URL, RecordingTransport
from todoist_mcp.client import TodoistClient
from todoist_mcp.models import AuthorizationContext


@pytest.fixture
def context() -> AuthorizationContext:
    return AuthorizationContext(
        access_token="test-token",
        email="ada@example.com",
        full_name="Ada Lovelace",
    )


@pytest.fixture
def mock_client() -> AsyncMock:
    """TodoistClient stand-in with awaitable get/post/delete/move_task."""
    return AsyncMock(spec=TodoistClient)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
async def todoist_client(transport):
    async with httpx.AsyncClient(transport=transport) as http_client:
        yield TodoistClient(
            http_client,
            "test-token",
            api_base_url=API_BASE_URL,
            sync_api_url=SYNC_API_URL,
        )
