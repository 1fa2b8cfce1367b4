"""Request/response transport for the Redmine REST API."""

import json
import sys
from collections.abc import Collection, Mapping
from typing import Any

import httpx

from redmine_sdk._internal.redaction import redact_payload
from redmine_sdk.exceptions import (
    RedmineAPIError,
    RedmineConnectionError,
    RedmineUnprocessableEntityError,
)

JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"

STATUS_OK = (200,)
STATUS_CREATED = (201,)
# Redmine 4.x answers PUT and DELETE with 200 and an empty body, while newer
# versions and some proxies answer 204. Group membership POSTs may answer
# 200, 201 or 204 depending on the version. Every form means success.
STATUS_NO_CONTENT_OK = (200, 204)
STATUS_ANY_SUCCESS = (200, 201, 204)

Params = Mapping[str, Any] | None


def build_url(base: str, path: str, params: Params = None) -> str:
    """Join a base URL and a relative resource path, appending a query string.

    Args:
        base: Service root, e.g. "https://redmine.example.com".
        path: Relative resource path, e.g. "issues/1.json".
        params: Optional query parameters. None values are dropped.

    Returns:
        The absolute request URL.
    """
    url = f"{base.rstrip('/')}/{path.lstrip('/')}"
    query = {key: value for key, value in (params or {}).items() if value is not None}
    if not query:
        return url
    return str(httpx.URL(url, params=query))


def status_line(response: httpx.Response) -> str:
    """Return the "<code> <reason>" status line of a response."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def check_response(response: httpx.Response, expected: Collection[int]) -> None:
    """Raise unless the response status is one of the expected codes.

    A 422 body of the form {"errors": [...]} becomes a
    RedmineUnprocessableEntityError with the messages joined by "; ".
    Anything else becomes a RedmineAPIError carrying the status line and the
    raw body text.
    """
    if response.status_code in expected:
        return

    body = response.text
    if response.status_code == 422:
        errors = _validation_errors(response)
        if errors:
            raise RedmineUnprocessableEntityError(errors, body=body)

    raise RedmineAPIError(
        f"{status_line(response)} {body}".strip(),
        status_code=response.status_code,
        body=body,
    )


def _validation_errors(response: httpx.Response) -> list[str]:
    try:
        data = response.json()
    except ValueError:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("errors"), list):
        return []
    return [str(error) for error in data["errors"]]


class Transport:
    """Sends requests relative to a Redmine base URL.

    The transport never retries. Connection failures raise
    RedmineConnectionError, unexpected statuses raise RedmineAPIError and
    malformed JSON bodies propagate as json.JSONDecodeError.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.Client,
        *,
        debug: bool = False,
    ) -> None:
        self._base_url = base_url
        self._client = http_client
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[redmine-sdk] {message}", file=sys.stderr)

    def build_url(self, path: str, params: Params = None) -> str:
        return build_url(self._base_url, path, params)

    def send(
        self,
        method: str,
        url: str,
        *,
        content_type: str = JSON_CONTENT_TYPE,
        body: bytes | None = None,
    ) -> httpx.Response:
        """Send one request and read the full response.

        The status code is not inspected here.

        Raises:
            RedmineConnectionError: The request could not be completed.
        """
        try:
            response = self._client.request(
                method,
                url,
                content=body,
                headers={"Content-Type": content_type},
            )
        except httpx.TransportError as e:
            self._log_debug(f"{method} {url} failed: {e}")
            raise RedmineConnectionError(f"{method} {url} failed: {e}") from e

        self._log_debug(f"{method} {url} -> {status_line(response)}")
        return response

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Params = None,
        payload: Any = None,
        expected: Collection[int] = STATUS_OK,
    ) -> Any:
        """Send a JSON request and return the decoded JSON body.

        Returns:
            The decoded body, or None when the response has no content.
        """
        url = self.build_url(path, params)
        body = None
        if payload is not None:
            self._log_debug(f"{method} {url} body: {json.dumps(redact_payload(payload))}")
            body = json.dumps(payload).encode("utf-8")

        response = self.send(method, url, body=body)
        check_response(response, expected)
        if not response.content.strip():
            return None
        return response.json()

    def get(self, path: str, params: Params = None) -> Any:
        return self.request("GET", path, params=params, expected=STATUS_OK)

    def post(
        self,
        path: str,
        payload: Any,
        *,
        expected: Collection[int] = STATUS_CREATED,
    ) -> Any:
        return self.request("POST", path, payload=payload, expected=expected)

    def put(self, path: str, payload: Any) -> None:
        self.request("PUT", path, payload=payload, expected=STATUS_NO_CONTENT_OK)

    def delete(self, path: str, params: Params = None) -> None:
        self.request("DELETE", path, params=params, expected=STATUS_NO_CONTENT_OK)

    def upload(self, path: str, data: bytes, params: Params = None) -> Any:
        """POST raw bytes as application/octet-stream and return the JSON body."""
        url = self.build_url(path, params)
        self._log_debug(f"POST {url} uploading {len(data)} bytes")
        response = self.send(
            "POST",
            url,
            content_type=OCTET_STREAM_CONTENT_TYPE,
            body=data,
        )
        check_response(response, STATUS_CREATED)
        return response.json()
