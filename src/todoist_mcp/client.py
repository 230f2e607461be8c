"""Thin async binding to the Todoist REST and Sync APIs.

REST calls (GET/POST/DELETE) go to ``api_base_url``; the only Sync API usage
is the item_move command, since the REST API cannot move tasks.
"""
import logging
import uuid
from typing import Any, Optional

import httpx

from .config import DEFAULT_API_BASE_URL, DEFAULT_SYNC_API_URL
from .errors import MoveTaskError, TodoistAPIError
from .models import Destination

logger = logging.getLogger("todoist-mcp.client")


class TodoistClient:
    """Authenticated Todoist API client on top of a shared ``httpx.AsyncClient``.

    The caller owns the lifetime of ``http_client``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        access_token: str,
        *,
        api_base_url: str = DEFAULT_API_BASE_URL,
        sync_api_url: str = DEFAULT_SYNC_API_URL,
    ):
        self._http = http_client
        self._access_token = access_token
        self.api_base_url = api_base_url.rstrip("/")
        self.sync_api_url = sync_api_url

    def _headers(self, include_content_type: bool = False) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
        }
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    def _url(self, path: str) -> str:
        return f"{self.api_base_url}{path}"

    @staticmethod
    def _handle_response(response: httpx.Response, api: str = "") -> Any:
        if not response.is_success:
            raise TodoistAPIError(response.status_code, response.text, api=api)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET ``path``.

        Only truthy parameter values reach the query string; ``0``, ``False``
        and empty strings are dropped.
        """
        query = {key: value for key, value in (params or {}).items() if value}
        url = self._url(path)
        logger.info(
            f"GET {url}",
            extra={"http_method": "GET", "url": url, "params": query},
        )
        response = await self._http.get(url, params=query, headers=self._headers())
        return self._handle_response(response)

    async def post(self, path: str, data: Optional[dict[str, Any]] = None) -> Any:
        """POST ``data`` as JSON to ``path``."""
        body = data if data is not None else {}
        url = self._url(path)
        logger.info(
            f"POST {url}",
            extra={"http_method": "POST", "url": url, "body": body},
        )
        response = await self._http.post(url, json=body, headers=self._headers(include_content_type=True))
        return self._handle_response(response)

    async def delete(self, path: str) -> Any:
        """DELETE ``path``."""
        url = self._url(path)
        logger.info(f"DELETE {url}", extra={"http_method": "DELETE", "url": url})
        response = await self._http.delete(url, headers=self._headers())
        return self._handle_response(response)

    async def move_task(self, task_id: str, destination: Destination) -> Any:
        """Move a task with a single Sync API ``item_move`` command.

        The HTTP exchange succeeding only means the batch was accepted; the
        command's own outcome is read from ``sync_status`` under the uuid it
        was submitted with.

        Raises:
            TodoistAPIError: non-success HTTP status from the sync endpoint
            MoveTaskError: the command status is anything other than "ok"
        """
        command_uuid = str(uuid.uuid4())
        commands = [{
            "type": "item_move",
            "uuid": command_uuid,
            "args": {"id": task_id, **destination.to_args()},
        }]
        logger.info(
            f"Sync item_move for task {task_id}",
            extra={"http_method": "POST", "url": self.sync_api_url, "body": commands},
        )
        response = await self._http.post(
            self.sync_api_url,
            json={"commands": commands},
            headers=self._headers(include_content_type=True),
        )
        result = self._handle_response(response, api="Sync")

        sync_status = (result or {}).get("sync_status") or {}
        status = sync_status.get(command_uuid)
        if status != "ok":
            raise MoveTaskError(command_uuid, status)
        return result
