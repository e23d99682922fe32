"""Authentication endpoints.

A successful login stores the returned token on the client session; logout
always clears it, even when the server call fails. A token store that cannot
be written turns the call into a failed envelope (status 0) and the session
keeps its previous token.
"""

from __future__ import annotations

import logging
from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.errors import TokenStoreError
from hrsync.models.envelope import ResultEnvelope
from hrsync.transport.notify import NoticeLevel, notify_safely

logger = logging.getLogger(__name__)


class AuthApi(ResourceApi):
    async def login(self, username: str, password: str) -> Envelope:
        envelope = await self._client.post(
            "/api/auth/login", {"username": username, "password": password}
        )
        token = envelope.data.get("token") if isinstance(envelope.data, dict) else None
        if token:
            try:
                self._client.set_auth_token(token)
            except TokenStoreError as exc:
                return self._storage_failure(exc)
        return envelope

    async def logout(self) -> Envelope:
        failure: Envelope | None = None
        try:
            envelope = await self._client.post("/api/auth/logout")
        finally:
            try:
                self._client.clear_auth_token()
            except TokenStoreError as exc:
                failure = self._storage_failure(exc)
        return failure if failure is not None else envelope

    async def register(self, payload: dict[str, Any]) -> Envelope:
        return await self._client.post("/api/auth/register", payload)

    async def profile(self) -> Envelope:
        return await self._client.get("/api/auth/profile")

    def _storage_failure(self, exc: TokenStoreError) -> Envelope:
        logger.warning("Token storage failed: %s", exc.message)
        notify_safely(self._client.notifier, NoticeLevel.ERROR, exc.message)
        return ResultEnvelope.failure(exc.message, exc.status)
