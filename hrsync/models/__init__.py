"""Public models for the HR console client."""

from hrsync.models.envelope import ResultEnvelope
from hrsync.models.payloads import (
    AccessRequestCreate,
    ClockAction,
    ClockRequest,
    EmployeeCreate,
    EmployeeUpdate,
    ExportFormat,
    GoalCreate,
    LeaveRequestCreate,
    LeaveStatus,
    ReportRequest,
    TicketCreate,
)

__all__ = [
    "AccessRequestCreate",
    "ClockAction",
    "ClockRequest",
    "EmployeeCreate",
    "EmployeeUpdate",
    "ExportFormat",
    "GoalCreate",
    "LeaveRequestCreate",
    "LeaveStatus",
    "ReportRequest",
    "ResultEnvelope",
    "TicketCreate",
]
