"""SmartCommit Server Client - Local HTTP JSON API"""

import json
import http.client
import socket
import urllib.request
import urllib.error

from smartcommit.llm.base import (
    GenerationRequest,
    LLMClient,
    LLMResponse,
    LLMAuthError,
    LLMConnectionError,
    LLMServerError,
    LLMTimeoutError,
    ensure_message,
)

AUTH_ERROR_CODES = {"MISSING_API_KEY", "INVALID_API_KEY"}


class ServerClient(LLMClient):
    """Client for a SmartCommit generation server. Requires a running server."""

    DEFAULT_URL = "http://localhost:8080"
    DEFAULT_TIMEOUT = 30
    ENDPOINT = "/api/v1/generate"

    def __init__(self, server_url: str | None = None, api_key: str = "",
                 timeout: int | None = None, model: str | None = None):
        self.server_url = (server_url or self.DEFAULT_URL).rstrip('/')
        self.api_key = api_key
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        # The server picks its own model; kept for display only
        self.model = model

    @property
    def name(self) -> str:
        return f"SmartCommit server ({self.server_url})"

    def _call_api(self, payload: dict) -> dict:
        """POST the payload and decode the JSON envelope."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key

        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(self.server_url + self.ENDPOINT, data=data, headers=headers, method="POST")

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return json.loads(response.read().decode('utf-8'))
        except urllib.error.HTTPError as e:
            # Error statuses usually still carry the JSON envelope
            try:
                return json.loads(e.read().decode('utf-8'))
            except (json.JSONDecodeError, UnicodeDecodeError, OSError):
                raise LLMServerError(f"HTTP_{e.code}", str(e.reason))

    def _raise_for_error(self, result: dict) -> None:
        error = result.get("error")
        if not isinstance(error, dict):
            raise LLMServerError("UNKNOWN", str(error) if error else "no error message returned")
        code = error.get("code") or "UNKNOWN"
        message = error.get("message") or "no error message returned"

        if code in AUTH_ERROR_CODES:
            raise LLMAuthError(
                f"Authentication failed: {message}\n"
                "Set api_key in .smartcommitrc.json or the SMARTCOMMIT_API_KEY environment variable"
            )
        raise LLMServerError(code, message)

    def generate(self, request: GenerationRequest) -> LLMResponse:
        """Send the diff to the server and return its commit message."""
        try:
            result = self._call_api(request.to_payload())
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMTimeoutError(f"Request timed out after {self.timeout}s")
            raise LLMConnectionError(
                f"Failed to connect to server: {e.reason}\n"
                f"Make sure the server is running at {self.server_url}"
            )
        except socket.timeout:
            raise LLMTimeoutError(f"Request timed out after {self.timeout}s")
        except json.JSONDecodeError:
            raise LLMServerError("INVALID_RESPONSE", "Server did not return valid JSON")
        except http.client.HTTPException as e:
            raise LLMConnectionError(f"Incomplete response from server: {e}")
        except OSError as e:
            raise LLMConnectionError(f"Connection to server lost: {e}")

        if not isinstance(result, dict):
            raise LLMServerError("INVALID_RESPONSE", "Server returned an unexpected payload")

        if not result.get("success"):
            self._raise_for_error(result)

        data = result.get("data")
        if not isinstance(data, dict):
            data = {}
        return LLMResponse(
            content=ensure_message(data.get("message")),
            model=data.get("model", self.model or ""),
        )
