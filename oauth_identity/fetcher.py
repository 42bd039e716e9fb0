# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Authenticated HTTP JSON fetcher.

Every provider call goes through JSONFetcher.fetch, which runs a fixed
sequence of checks on the response: transport, HTTP status, content type,
then decode. The first failing check decides the error raised.
"""

import threading
import time
from functools import lru_cache
from typing import Any, NamedTuple, Optional, Type

import httpx
from pydantic import TypeAdapter, ValidationError

from .log import Logger, create_logger
from .provider import (
    DecodeError,
    RemoteStatusError,
    RequestCancelledError,
    RequestTimeoutError,
    TransportError,
    UnexpectedContentTypeError,
    access_token_of,
)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "oauth-identity/0.1"


class FetchResult(NamedTuple):
    """Decoded response body plus the exact bytes it was decoded from."""
    data: Any
    raw: bytes


@lru_cache(maxsize=64)
def _adapter_for(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def is_json_content_type(content_type: str) -> bool:
    """Return True for application/json and structured +json media types."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def validate_base_url(base_url: str) -> str:
    """Check that base_url is an absolute http(s) endpoint root.

    Raises:
        ValueError: If the URL is malformed
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ValueError(f"Invalid base URL {base_url!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"Invalid base URL {base_url!r}: expected an absolute http(s) URL")
    return base_url


class JSONFetcher:
    """Performs bearer-authenticated GET requests and decodes JSON bodies.

    The fetcher holds only read-only configuration and is safe to share
    across threads. No retries and no caching are performed.

    Attributes:
        timeout: Per-request deadline in seconds
        client: Optional httpx.Client to send requests with (tests inject
            one backed by httpx.MockTransport)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Optional[Logger] = None,
    ):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.timeout = timeout
        self.client = client
        self.user_agent = user_agent
        self.logger = logger or create_logger(name="oauth_identity.fetcher")

    def fetch(
        self,
        base_url: str,
        path: str,
        token: str,
        shape: Type[Any],
        cancel_event: Optional[threading.Event] = None,
    ) -> FetchResult:
        """GET base_url/path with a bearer token and decode the JSON body.

        Args:
            base_url: Endpoint root, e.g. https://api.bitbucket.org/2.0
            path: Path below the root, e.g. /user
            token: Bearer access token
            shape: Type the body is decoded into (pydantic model, list, ...)
            cancel_event: Aborts the call before it is sent when set

        Returns:
            FetchResult with the decoded body and the raw response bytes

        Raises:
            ValueError: If base_url is malformed
            AuthenticationError: If token is empty
            TransportError: If the request could not be completed
            RemoteStatusError: If the status is not 2xx
            UnexpectedContentTypeError: If the response is not declared as JSON
            DecodeError: If the body is empty, not JSON, the wrong shape, or
                cannot be decompressed
        """
        validate_base_url(base_url)
        token = access_token_of(token)
        url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"

        response = self._send(url, token, cancel_event)

        if not response.is_success:
            self.logger.warning("Provider returned non-success status", url=url, status_code=response.status_code)
            raise RemoteStatusError(response.status_code, response.content, url=url)

        content_type = response.headers.get("content-type", "")
        if not is_json_content_type(content_type):
            self.logger.warning("Provider returned non-JSON content", url=url, content_type=content_type)
            raise UnexpectedContentTypeError(content_type, url=url)

        raw = response.content
        try:
            data = _adapter_for(shape).validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"Failed to decode response from {url}: {e}") from e

        return FetchResult(data, raw)

    def _send(self, url: str, token: str, cancel_event: Optional[threading.Event]) -> httpx.Response:
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(f"Request to {url} cancelled before it was sent")

        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

        started = time.monotonic()
        try:
            if self.client is not None:
                response = self.client.get(url, headers=headers, timeout=self.timeout)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            self.logger.error("Provider request timed out", url=url, timeout=self.timeout)
            raise RequestTimeoutError(f"Request to {url} timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            self.logger.error("Provider request failed", url=url, error=str(e))
            raise TransportError(f"Request to {url} failed: {e}") from e
        except httpx.DecodingError as e:
            self.logger.error("Provider response could not be decompressed", url=url, error=str(e))
            raise DecodeError(f"Failed to decode response body from {url}: {e}") from e
        except httpx.RequestError as e:
            self.logger.exception("Provider request failed unexpectedly", url=url, error_type=type(e).__name__)
            raise TransportError(f"Request to {url} failed: {e}") from e

        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(f"Request to {url} cancelled")

        self.logger.debug(
            "Provider request completed",
            url=url,
            status_code=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return response
