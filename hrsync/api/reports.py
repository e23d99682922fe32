"""Report generation and export."""

from __future__ import annotations

from typing import Any

from hrsync.api.base import Envelope, ResourceApi
from hrsync.models.payloads import ExportFormat, ReportRequest


class ReportsApi(ResourceApi):
    async def generate(self, report_type: str, filters: dict[str, Any] | None = None) -> Envelope:
        payload = ReportRequest(type=report_type, filters=filters or {})
        return await self._client.post("/api/reports/generate", payload)

    async def export(self, report_id: str, export_format: ExportFormat | str) -> Envelope:
        return await self._client.get(
            f"/api/reports/{report_id}/export", {"format": ExportFormat(export_format)}
        )

    async def analytics(self, module: str, date_range: dict[str, str]) -> Envelope:
        return await self._client.post(
            "/api/reports/analytics", {"module": module, "date_range": date_range}
        )

    async def attendance_report(
        self, start_date: str, end_date: str, department: str | None = None
    ) -> Envelope:
        return await self._client.get(
            "/api/advanced-reports/attendance",
            {"start_date": start_date, "end_date": end_date, "department": department},
        )

    async def performance_report(
        self, start_date: str, end_date: str, department: str | None = None
    ) -> Envelope:
        return await self._client.get(
            "/api/advanced-reports/performance",
            {"start_date": start_date, "end_date": end_date, "department": department},
        )
