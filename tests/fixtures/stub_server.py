# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Stub provider endpoints built on httpx.MockTransport.

Each endpoint is configured with a HandlerState and a response body. The
stub records how many times each path was requested so tests can assert
that a later stage never ran.
"""

from collections import Counter
from enum import Enum
from typing import Dict, Optional, Tuple

import httpx

STUB_API_URL = "http://provider.test/2.0"
PROFILE_PATH = "/2.0/user"
EMAIL_PATH = "/2.0/user/emails"


class HandlerState(Enum):
    """How a stub endpoint answers."""

    SUCCESS = "success"
    WRONG_CONTENT_TYPE = "wrong_content_type"
    STATUS_NOT_OK = "status_not_ok"
    NOT_JSON_CONTENT = "not_json_content"
    HTTP_ERROR = "http_error"


FAILURE_STATES = [
    HandlerState.WRONG_CONTENT_TYPE,
    HandlerState.STATUS_NOT_OK,
    HandlerState.NOT_JSON_CONTENT,
    HandlerState.HTTP_ERROR,
]


def build_response(state: HandlerState, body: str, request: httpx.Request) -> httpx.Response:
    """Build the stub response for one request."""
    json_headers = {"Content-Type": "application/json; charset=utf-8"}

    if state is HandlerState.SUCCESS:
        return httpx.Response(200, headers=json_headers, content=body.encode("utf-8"))
    if state is HandlerState.WRONG_CONTENT_TYPE:
        return httpx.Response(
            200, headers={"Content-Type": "text/html; charset=utf-8"}, content=body.encode("utf-8")
        )
    if state is HandlerState.STATUS_NOT_OK:
        return httpx.Response(409, headers=json_headers, content=body.encode("utf-8"))
    if state is HandlerState.NOT_JSON_CONTENT:
        return httpx.Response(200, headers=json_headers, content=b"")
    if state is HandlerState.HTTP_ERROR:
        raise httpx.ConnectError("error calling http method", request=request)
    raise ValueError(f"Unhandled state: {state}")


class StubProvider:
    """Routes requests by path to per-endpoint (state, body) pairs.

    Attributes:
        routes: Mapping of URL path to (HandlerState, body)
        calls: Number of requests seen per path
        requests: Every request received, in order
    """

    def __init__(self, routes: Optional[Dict[str, Tuple[HandlerState, str]]] = None):
        self.routes: Dict[str, Tuple[HandlerState, str]] = dict(routes or {})
        self.calls: Counter = Counter()
        self.requests: list[httpx.Request] = []

    def route(self, path: str, state: HandlerState, body: str) -> "StubProvider":
        self.routes[path] = (state, body)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        self.requests.append(request)

        if path not in self.routes:
            return httpx.Response(404, headers={"Content-Type": "application/json"}, content=b"{}")

        state, body = self.routes[path]
        return build_response(state, body, request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))
