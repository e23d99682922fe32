"""HTTP transport for the HR backend.

Every call returns a ``ResultEnvelope``; nothing raises past this module
except asyncio cancellation. Failures are logged and surfaced as error
notices. There are no retries, no queueing and no back-off: a failed call is
final and retry policy belongs to the caller.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from hrsync.config.settings import ClientSettings
from hrsync.errors import ServerError, TransportError, error_message
from hrsync.models.envelope import ResultEnvelope
from hrsync.transport.notify import LoggingNotifier, NoticeLevel, Notifier, notify_safely
from hrsync.transport.session import AuthSession, FileTokenStore

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def encode_body(body: Any) -> Any:
    """Turn a payload model into plain JSON data; pass anything else through."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


def query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Serialize a key/value map into ordered query pairs.

    ``None`` values are dropped, booleans become ``true``/``false``, enums use
    their value and lists/tuples expand into repeated keys.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            pairs.append((key, _param_text(item)))
    return pairs


def _param_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _parse_body(response: httpx.Response) -> Any:
    """Parse a JSON body, returning None for empty or malformed content."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.debug(
            "Ignoring non-JSON body from %s (status %d)",
            response.request.url,
            response.status_code,
        )
        return None


def _server_message(body: Any, status: int) -> str:
    if isinstance(body, dict):
        for field in ("message", "error"):
            value = body.get(field)
            if isinstance(value, str) and value.strip():
                return value
    return f"Request failed with status {status}"


class ApiClient:
    """Async HTTP client with bearer auth and uniform result envelopes.

    Parameters
    ----------
    base_url:
        Backend root (e.g. "http://localhost:5000"); endpoints are appended.
    session:
        Token holder; a fresh in-memory session when omitted.
    notifier:
        Receives an error notice for every failed call.
    timeout_seconds:
        Per-request timeout; None waits for the network stack.
    transport:
        Optional httpx transport (ASGI app, mock) used instead of the network.
    """

    def __init__(
        self,
        base_url: str,
        session: AuthSession | None = None,
        notifier: Notifier | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session if session is not None else AuthSession()
        self._notifier = notifier if notifier is not None else LoggingNotifier()
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiClient":
        session = AuthSession(FileTokenStore(settings.token_store_path), key=settings.token_key)
        return cls(
            base_url=settings.api_base_url,
            session=session,
            notifier=notifier,
            timeout_seconds=settings.request_timeout_seconds,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> AuthSession:
        return self._session

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def set_auth_token(self, token: str) -> None:
        self._session.set_token(token)

    def clear_auth_token(self) -> None:
        self._session.clear_token()

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ResultEnvelope[Any]:
        """Issue one request and shape the outcome into an envelope."""
        url = f"{self._base_url}{endpoint}"

        # Multipart bodies need httpx to write the boundary into Content-Type
        merged: dict[str, str] = {} if files is not None else dict(_JSON_HEADERS)
        merged.update(headers or {})
        # Token read now; a later change does not affect this call
        merged.update(self._session.authorization_header())

        started = time.monotonic()
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=query_params(params) or None,
                    json=encode_body(json),
                    data=data,
                    files=files,
                    headers=merged,
                )
        except httpx.HTTPError as exc:
            failure = TransportError(error_message(exc, f"{type(exc).__name__} during request"))
            return self._fail(method, url, failure.message, failure.status, started)
        except Exception as exc:
            return self._fail(method, url, error_message(exc), 0, started)

        body = _parse_body(response)
        if not response.is_success:
            rejected = ServerError(_server_message(body, response.status_code), response.status_code)
            return self._fail(method, url, rejected.message, rejected.status, started)

        logger.debug(
            "%s %s -> %d",
            method,
            url,
            response.status_code,
            extra={
                "method": method,
                "url": url,
                "status": response.status_code,
                "duration_ms": round((time.monotonic() - started) * 1000, 2),
            },
        )
        return ResultEnvelope.success(body, response.status_code)

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> ResultEnvelope[Any]:
        return await self.request(endpoint, params=params)

    async def post(self, endpoint: str, body: Any = None) -> ResultEnvelope[Any]:
        return await self.request(endpoint, method="POST", json=body)

    async def put(self, endpoint: str, body: Any = None) -> ResultEnvelope[Any]:
        return await self.request(endpoint, method="PUT", json=body)

    async def patch(self, endpoint: str, body: Any = None) -> ResultEnvelope[Any]:
        return await self.request(endpoint, method="PATCH", json=body)

    async def delete(self, endpoint: str) -> ResultEnvelope[Any]:
        return await self.request(endpoint, method="DELETE")

    async def upload(
        self,
        endpoint: str,
        files: Mapping[str, Any],
        data: Mapping[str, Any] | None = None,
    ) -> ResultEnvelope[Any]:
        """POST multipart form data."""
        return await self.request(endpoint, method="POST", files=files, data=data)

    def _fail(
        self, method: str, url: str, message: str, status: int, started: float
    ) -> ResultEnvelope[Any]:
        logger.warning(
            "API request failed: %s %s (status %d): %s",
            method,
            url,
            status,
            message,
            extra={
                "method": method,
                "url": url,
                "status": status,
                "duration_ms": round((time.monotonic() - started) * 1000, 2),
                "error_reason": message,
            },
        )
        notify_safely(self._notifier, NoticeLevel.ERROR, message)
        return ResultEnvelope.failure(message, status)
