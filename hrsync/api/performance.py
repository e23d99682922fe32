"""Goals and performance reviews."""

from __future__ import annotations

from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import GoalCreate


class PerformanceApi(ResourceApi):
    async def goals(self) -> Envelope:
        return await self._client.get("/api/performance/goals")

    async def create_goal(self, payload: GoalCreate | dict[str, Any]) -> Envelope:
        return await self._client.post("/api/performance/goals", payload)

    async def update_goal(self, goal_id: str | int, payload: dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/performance/goals/{goal_id}", payload)

    async def reviews(self) -> Envelope:
        return await self._client.get("/api/performance/reviews")
