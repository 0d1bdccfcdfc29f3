"""HTTP client for a remote neural debug endpoint.

Implements the debug interface by sending requests to the endpoint
served by :mod:`neuralcore.debug.server`.
"""

from __future__ import annotations

import logging

import httpx

from neuralcore.debug.base import DebugInterface

logger = logging.getLogger(__name__)


class HttpDebugClient(DebugInterface):
    """Calls the debug operations of a running endpoint over HTTP."""

    def __init__(
        self,
        base_url: str = "http://localhost:8090",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def connect(self) -> None:
        """Create the HTTP client and verify endpoint connectivity."""
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            resp = self._client.get("/health")
            resp.raise_for_status()
            logger.info("Connected to debug endpoint at %s", self._base_url)
        except httpx.HTTPError as e:
            self._client.close()
            self._client = None
            raise DebugClientError(
                f"Failed to connect to debug endpoint: {e}", endpoint=self._base_url
            ) from e

    def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Disconnected from debug endpoint")

    def get_system_status(self) -> str:
        return self._field(self._request("GET", "/status"), "status")

    def run_command(self, command: str) -> str:
        result = self._field(self._request("POST", "/command", {"command": command}), "result")
        logger.debug("Command %s -> %s", command, result)
        return result

    def log_message(self, tag: str, message: str) -> None:
        self._request("POST", "/log", {"tag": tag, "message": message})

    def _request(self, method: str, path: str, payload: dict | None = None) -> httpx.Response:
        if self._client is None:
            raise DebugClientError("Not connected to debug endpoint", endpoint=self._base_url)
        try:
            resp = self._client.request(method, path, json=payload)
            resp.raise_for_status()
            return resp
        except httpx.HTTPError as e:
            raise DebugClientError(
                f"HTTP request to {path} failed: {e}", endpoint=self._base_url
            ) from e

    def _field(self, resp: httpx.Response, key: str) -> str:
        """Extract ``key`` from a JSON response body."""
        try:
            return resp.json()[key]
        except (ValueError, KeyError, TypeError) as e:
            raise DebugClientError(
                f"Malformed response from {resp.request.url.path}: {e!r}",
                endpoint=self._base_url,
            ) from e

    def __enter__(self) -> HttpDebugClient:
        self.connect()
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.disconnect()


class DebugClientError(Exception):
    """Raised when the debug endpoint cannot be reached or answers with an error."""

    def __init__(self, message: str, endpoint: str = "") -> None:
        super().__init__(message)
        self.endpoint = endpoint
