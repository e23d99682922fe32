"""Onboarding processes, tasks and document upload."""

from __future__ import annotations

from typing import IO, Any

from hrsync.api.base import Envelope, ResourceApi


class OnboardingApi(ResourceApi):
    async def processes(self, filters: dict[str, Any] | None = None) -> Envelope:
        return await self._client.get("/api/onboarding/processes", filters)

    async def process(self, process_id: str | int) -> Envelope:
        return await self._client.get(f"/api/onboarding/processes/{process_id}")

    async def create_process(self, payload: dict[str, Any]) -> Envelope:
        return await self._client.post("/api/onboarding/processes", payload)

    async def update_process(self, process_id: str | int, payload: dict[str, Any]) -> Envelope:
        return await self._client.put(f"/api/onboarding/processes/{process_id}", payload)

    async def tasks(self, process_id: str | int) -> Envelope:
        return await self._client.get(f"/api/onboarding/processes/{process_id}/tasks")

    async def update_task(self, process_id: str | int, task_id: str | int, status: str) -> Envelope:
        return await self._client.put(
            f"/api/onboarding/processes/{process_id}/tasks/{task_id}", {"status": status}
        )

    async def complete_task(
        self, process_id: str | int, task_id: str | int, notes: str | None = None
    ) -> Envelope:
        return await self._client.post(
            f"/api/onboarding/processes/{process_id}/tasks/{task_id}/complete", {"notes": notes}
        )

    async def upload_document(
        self,
        content: bytes | IO[bytes],
        filename: str,
        document_type: str,
        process_id: str | int | None = None,
    ) -> Envelope:
        """Upload a file as multipart form data (file, document_type, process_id)."""
        form = {"document_type": document_type}
        if process_id is not None:
            form["process_id"] = str(process_id)
        return await self._client.upload(
            "/api/onboarding/upload",
            files={"file": (filename, content)},
            data=form,
        )
