"""Security audit log."""

from __future__ import annotations

from hrsync.api.base import Envelope, ResourceApi


class SecurityApi(ResourceApi):
    async def logs(self, start_date: str | None = None, end_date: str | None = None) -> Envelope:
        return await self._client.get(
            "/api/security/logs", {"start_date": start_date, "end_date": end_date}
        )
