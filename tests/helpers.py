"""Wire-level helpers for tests that exercise the real TodoistClient."""
import json
from typing import Callable, Optional

import httpx


API_BASE_URL = "https://todoist.test/rest/v2"
SYNC_API_URL = "https://todoist.test/sync/v9/sync"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, responder: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: list[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json={}))
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def request_json(request: httpx.Request):
    return json.loads(request.content)


def echo_body(request: httpx.Request) -> httpx.Response:
    """Respond with the JSON body that was sent."""
    return httpx.Response(200, json=request_json(request) if request.content else None)


def sync_status_responder(status) -> Callable[[httpx.Request], httpx.Response]:
    """Respond to an item_move batch with ``status`` for the submitted command uuid."""
    def responder(request: httpx.Request) -> httpx.Response:
        command_uuid = request_json(request)["commands"][0]["uuid"]
        return httpx.Response(200, json={"sync_status": {command_uuid: status}, "sync_token": "t1"})
    return responder
