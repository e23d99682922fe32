"""Property tests for ApiClient outcome shaping and auth headers."""

# Feature: hrsync, Property 7: Transport failures yield status 0 and a non-empty error
# Feature: hrsync, Property 8: Non-2xx responses yield an error envelope with that status
# Feature: hrsync, Property 9: A stored token is sent as a Bearer header until cleared

from __future__ import annotations

import asyncio

import httpx
from hypothesis import given, settings
from hypothesis import strategies as st

from hrsync.transport.client import ApiClient
from hrsync.transport.notify import CollectingNotifier
from hrsync.transport.session import AuthSession, MemoryTokenStore

tokens = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.",
    min_size=1,
    max_size=64,
)

http_error_statuses = st.sampled_from([400, 401, 403, 404, 409, 422, 429, 500, 502, 503])

exception_messages = st.text(max_size=40)

exception_types = st.sampled_from(
    [RuntimeError, ValueError, OSError, httpx.ConnectError, httpx.ReadTimeout]
)


def _client(handler) -> ApiClient:
    return ApiClient(
        "http://hr.test",
        session=AuthSession(MemoryTokenStore()),
        notifier=CollectingNotifier(),
        transport=httpx.MockTransport(handler),
    )


@settings(max_examples=100)
@given(exc_type=exception_types, message=exception_messages)
def test_raised_errors_become_status_zero(exc_type, message: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message)

    envelope = asyncio.run(_client(handler).get("/api/employees"))

    assert envelope.status == 0
    assert envelope.data is None
    assert envelope.error
    assert envelope.error.strip()


@settings(max_examples=100)
@given(status=http_error_statuses, body=st.one_of(st.none(), st.just({}), st.just({"message": "nope"})))
def test_error_statuses_become_error_envelopes(status: int, body) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    client = _client(handler)
    envelope = asyncio.run(client.get("/api/employees"))

    assert envelope.status == status
    assert envelope.data is None
    assert envelope.error == ("nope" if body else f"Request failed with status {status}")
    assert [n.message for n in client.notifier.notices] == [envelope.error]


@settings(max_examples=100)
@given(token=tokens)
def test_token_sent_until_cleared(token: str) -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("authorization"))
        return httpx.Response(200, json={})

    client = _client(handler)
    client.set_auth_token(token)
    asyncio.run(client.get("/api/auth/profile"))
    client.clear_auth_token()
    asyncio.run(client.get("/api/auth/profile"))

    assert seen == [f"Bearer {token}", None]
