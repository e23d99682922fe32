"""Attendance clock and logs."""

from __future__ import annotations

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import ClockAction, ClockRequest


class AttendanceApi(ResourceApi):
    async def clock(self, action: ClockAction | str, location: str | None = None) -> Envelope:
        payload = ClockRequest(action=ClockAction(action), location=location)
        return await self._client.post("/api/attendance/clock", payload)

    async def logs(self, start_date: str | None = None, end_date: str | None = None) -> Envelope:
        return await self._client.get(
            "/api/attendance/logs", {"start_date": start_date, "end_date": end_date}
        )

    async def summary(self, period: str = "current_month") -> Envelope:
        return await self._client.get("/api/attendance/summary", {"period": period})
