"""Leave requests and balances."""

from __future__ import annotations

from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import LeaveRequestCreate, LeaveStatus


class LeaveApi(ResourceApi):
    async def submit(self, payload: LeaveRequestCreate | dict[str, Any]) -> Envelope:
        return await self._client.post("/api/leave/requests", payload)

    async def requests(self, status: LeaveStatus | str | None = None) -> Envelope:
        return await self._client.get("/api/leave/requests", {"status": status})

    async def update_status(
        self,
        request_id: str | int,
        status: LeaveStatus | str,
        comments: str | None = None,
    ) -> Envelope:
        body: dict[str, Any] = {"status": LeaveStatus(status).value}
        if comments is not None:
            body["comments"] = comments
        return await self._client.put(f"/api/leave/requests/{request_id}", body)

    async def balance(self) -> Envelope:
        return await self._client.get("/api/leave/balance")
