"""IT operations: support tickets, hardware assets, system deployments and access requests."""

from __future__ import annotations

from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import AccessRequestCreate, TicketCreate


class SupportApi(ResourceApi):
    async def tickets(self, filters: dict[str, Any] | None = None) -> Envelope:
        return await self._client.get("/api/support/tickets", filters)

    async def ticket(self, ticket_id: str | int) -> Envelope:
        return await self._client.get(f"/api/support/tickets/{ticket_id}")

    async def create(self, payload: TicketCreate | dict[str, Any]) -> Envelope:
        return await self._client.post("/api/support/tickets", payload)

    async def update(self, ticket_id: str | int, payload: dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/support/tickets/{ticket_id}", payload)

    async def assign(self, ticket_id: str | int, assignee: str) -> Envelope:
        return await self._client.post(
            f"/api/support/tickets/{ticket_id}/assign", {"assignee": assignee}
        )

    async def resolve(self, ticket_id: str | int, resolution: str) -> Envelope:
        return await self._client.post(
            f"/api/support/tickets/{ticket_id}/resolve", {"resolution": resolution}
        )


class AssetApi(ResourceApi):
    async def list(self, filters: dict[str, Any] | None = None) -> Envelope:
        return await self._client.get("/api/assets", filters)

    async def get(self, asset_id: str | int) -> Envelope:
        return await self._client.get(f"/api/assets/{asset_id}")

    async def create(self, payload: dict[str, Any]) -> Envelope:
        return await self._client.post("/api/assets", payload)

    async def update(self, asset_id: str | int, payload: dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/assets/{asset_id}", payload)

    async def assign(self, asset_id: str | int, employee_id: str | int) -> Envelope:
        return await self._client.post(
            f"/api/assets/{asset_id}/assign", {"employee_id": employee_id}
        )

    async def return_asset(
        self, asset_id: str | int, condition: str | None = None, notes: str | None = None
    ) -> Envelope:
        return await self._client.post(
            f"/api/assets/{asset_id}/return", {"condition": condition, "notes": notes}
        )


class DeploymentApi(ResourceApi):
    """Rollouts of internal systems; start and rollback are server-side state transitions."""

    async def list(self, filters: dict[str, Any] | None = None) -> Envelope:
        return await self._client.get("/api/deployments", filters)

    async def create(self, payload: dict[str, Any]) -> Envelope:
        return await self._client.post("/api/deployments", payload)

    async def start(self, deployment_id: str | int) -> Envelope:
        return await self._client.post(f"/api/deployments/{deployment_id}/start")

    async def rollback(self, deployment_id: str | int) -> Envelope:
        return await self._client.post(f"/api/deployments/{deployment_id}/rollback")


class AccessApi(ResourceApi):
    async def requests(self, filters: dict[str, Any] | None = None) -> Envelope:
        return await self._client.get("/api/access/requests", filters)

    async def create(self, payload: AccessRequestCreate | dict[str, Any]) -> Envelope:
        return await self._client.post("/api/access/requests", payload)

    async def approve(self, request_id: str | int, notes: str | None = None) -> Envelope:
        return await self._client.post(
            f"/api/access/requests/{request_id}/approve", {"notes": notes}
        )

    async def reject(self, request_id: str | int, reason: str) -> Envelope:
        return await self._client.post(
            f"/api/access/requests/{request_id}/reject", {"reason": reason}
        )
