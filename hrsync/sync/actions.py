"""Write-side mutations bound to one REST call each, with fixed notice texts."""

from __future__ import annotations

from typing import Any

from hrsync.api import HrApi
from hrsync.models.payloads import (
    ClockAction,
    EmployeeCreate,
    EmployeeUpdate,
    ExportFormat,
    GoalCreate,
    LeaveRequestCreate,
)
from hrsync.sync.mutation import Mutation, MutationOptions
from hrsync.transport.notify import Notifier


class ApiMutation(Mutation):
    """Mutation that reports through the client's notifier by default."""

    def __init__(self, api: HrApi, notifier: Notifier | None = None) -> None:
        super().__init__(notifier if notifier is not None else api.client.notifier)
        self._api = api


class ClockInOut(ApiMutation):
    async def clock_in_out(self, action: ClockAction | str, location: str | None = None) -> Any | None:
        label = action.value if isinstance(action, ClockAction) else action
        return await self.mutate(
            lambda v: self._api.attendance.clock(v["action"], v["location"]),
            {"action": action, "location": location},
            MutationOptions(
                success_message=f"Successfully clocked {label}",
                error_message=f"Failed to clock {label}",
            ),
        )


class SubmitLeaveRequest(ApiMutation):
    async def submit_request(self, payload: LeaveRequestCreate | dict[str, Any]) -> Any | None:
        return await self.mutate(
            self._api.leave.submit,
            payload,
            MutationOptions(
                success_message="Leave request submitted successfully",
                error_message="Failed to submit leave request",
            ),
        )


class CreateEmployee(ApiMutation):
    async def create_employee(self, payload: EmployeeCreate | dict[str, Any]) -> Any | None:
        return await self.mutate(
            self._api.employees.create,
            payload,
            MutationOptions(
                success_message="Employee created successfully",
                error_message="Failed to create employee",
            ),
        )


class UpdateEmployee(ApiMutation):
    async def update_employee(
        self, employee_id: str | int, payload: EmployeeUpdate | dict[str, Any]
    ) -> Any | None:
        return await self.mutate(
            lambda v: self._api.employees.update(v["id"], v["data"]),
            {"id": employee_id, "data": payload},
            MutationOptions(
                success_message="Employee updated successfully",
                error_message="Failed to update employee",
            ),
        )


class CreateGoal(ApiMutation):
    async def create_goal(self, payload: GoalCreate | dict[str, Any]) -> Any | None:
        return await self.mutate(
            self._api.performance.create_goal,
            payload,
            MutationOptions(
                success_message="Goal created successfully",
                error_message="Failed to create goal",
            ),
        )


class ReportGeneration(ApiMutation):
    async def generate_report(self, report_type: str, filters: dict[str, Any] | None = None) -> Any | None:
        return await self.mutate(
            lambda v: self._api.reports.generate(v["type"], v["filters"]),
            {"type": report_type, "filters": filters},
            MutationOptions(
                success_message="Report generated successfully",
                error_message="Failed to generate report",
            ),
        )

    async def export_report(self, report_id: str, export_format: ExportFormat | str) -> Any | None:
        return await self.mutate(
            lambda v: self._api.reports.export(v["report_id"], v["format"]),
            {"report_id": report_id, "format": export_format},
            MutationOptions(
                success_message="Report exported successfully",
                error_message="Failed to export report",
            ),
        )


class MarkNotificationRead(ApiMutation):
    async def mark_read(self, notification_id: str | int) -> Any | None:
        return await self.mutate(
            self._api.notifications.mark_read,
            notification_id,
            MutationOptions(error_message="Failed to mark notification as read"),
        )


class ResolveTicket(ApiMutation):
    async def resolve(self, ticket_id: str | int, resolution: str) -> Any | None:
        return await self.mutate(
            lambda v: self._api.support.resolve(v["id"], v["resolution"]),
            {"id": ticket_id, "resolution": resolution},
            MutationOptions(
                success_message="Ticket resolved",
                error_message="Failed to resolve ticket",
            ),
        )


class ReviewAccessRequest(ApiMutation):
    async def approve(self, request_id: str | int, notes: str | None = None) -> Any | None:
        return await self.mutate(
            lambda v: self._api.access.approve(v["id"], v["notes"]),
            {"id": request_id, "notes": notes},
            MutationOptions(
                success_message="Access request approved",
                error_message="Failed to approve access request",
            ),
        )

    async def reject(self, request_id: str | int, reason: str) -> Any | None:
        return await self.mutate(
            lambda v: self._api.access.reject(v["id"], v["reason"]),
            {"id": request_id, "reason": reason},
            MutationOptions(
                success_message="Access request rejected",
                error_message="Failed to reject access request",
            ),
        )


class CompleteOnboardingTask(ApiMutation):
    async def complete_task(
        self, process_id: str | int, task_id: str | int, notes: str | None = None
    ) -> Any | None:
        return await self.mutate(
            lambda v: self._api.onboarding.complete_task(v["process_id"], v["task_id"], v["notes"]),
            {"process_id": process_id, "task_id": task_id, "notes": notes},
            MutationOptions(
                success_message="Onboarding task completed",
                error_message="Failed to complete onboarding task",
            ),
        )


class DeploymentControl(ApiMutation):
    async def start(self, deployment_id: str | int) -> Any | None:
        return await self.mutate(
            self._api.deployments.start,
            deployment_id,
            MutationOptions(
                success_message="Deployment started",
                error_message="Failed to start deployment",
            ),
        )

    async def rollback(self, deployment_id: str | int) -> Any | None:
        return await self.mutate(
            self._api.deployments.rollback,
            deployment_id,
            MutationOptions(
                success_message="Deployment rolled back",
                error_message="Failed to roll back deployment",
            ),
        )
