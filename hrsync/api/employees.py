"""Employee records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import EmployeeCreate, EmployeeUpdate


class EmployeeApi(ResourceApi):
    async def list(self, filters: dict[str, Any] | None = None) -> Envelope:
        """List employees; filters (department, status, page, limit, search) go to the query string."""
        return await self._client.get("/api/employees", filters)

    async def get(self, employee_id: str | int) -> Envelope:
        return await self._client.get(f"/api/employees/{employee_id}")

    async def create(self, payload: EmployeeCreate | dict[str, Any]) -> Envelope:
        return await self._client.post("/api/employees", payload)

    async def update(self, employee_id: str | int, payload: EmployeeUpdate | dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/employees/{employee_id}", payload)

    async def delete(self, employee_id: str | int) -> Envelope:
        return await self._client.delete(f"/api/employees/{employee_id}")

    async def bulk_update(self, updates: Sequence[dict[str, Any]]) -> Envelope:
        """Apply ``[{"id": ..., "data": {...}}, ...]`` in one call."""
        return await self._client.post("/api/employees/bulk", {"updates": list(updates)})
