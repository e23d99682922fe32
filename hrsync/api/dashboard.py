"""Dashboard widgets, notifications and global search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hrsync.api.base import Envelope, ResourceApi


class DashboardApi(ResourceApi):
    async def widgets(self) -> Envelope:
        return await self._client.get("/api/dashboard/widgets")

    async def update_widget(self, widget_id: str, config: dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/dashboard/widgets/{widget_id}", config)


class NotificationsApi(ResourceApi):
    async def list(self) -> Envelope:
        return await self._client.get("/api/notifications")

    async def mark_read(self, notification_id: str | int) -> Envelope:
        return await self._client.put(f"/api/notifications/{notification_id}/read")

    async def create(self, payload: dict[str, Any]) -> Envelope:
        return await self._client.post("/api/notifications", payload)


class SearchApi(ResourceApi):
    async def global_search(self, query: str, modules: Sequence[str] | None = None) -> Envelope:
        """Search across modules; the result maps module name to matching rows."""
        params: dict[str, Any] = {"q": query}
        if modules:
            params["modules"] = ",".join(modules)
        return await self._client.get("/api/search", params)
