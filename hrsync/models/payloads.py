"""Pydantic request payloads sent to the HR backend.

Resource methods accept either one of these models or a plain dict; models
are dumped with ``exclude_none`` so optional fields never reach the wire as
nulls.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class ClockAction(str, Enum):
    """Attendance clock direction."""

    IN = "in"
    OUT = "out"


class ExportFormat(str, Enum):
    """Report export formats understood by the backend."""

    CSV = "csv"
    PDF = "pdf"
    XLSX = "xlsx"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ClockRequest(BaseModel):
    action: ClockAction
    location: str | None = None


class EmployeeCreate(BaseModel):
    """New employee record."""

    employee_id: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    department: str | None = None
    position: str | None = None
    hire_date: date | None = None
    manager_id: int | None = None
    status: str = "active"


class EmployeeUpdate(BaseModel):
    """Partial employee update; unset fields are left untouched."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    manager_id: int | None = None
    status: str | None = None


class LeaveRequestCreate(BaseModel):
    leave_type: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    reason: str | None = None


class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    target_date: date | None = None
    weight: int | None = Field(default=None, ge=0, le=100)


class ReportRequest(BaseModel):
    type: str = Field(..., min_length=1)
    filters: dict = Field(default_factory=dict)


class TicketCreate(BaseModel):
    """IT support ticket."""

    subject: str = Field(..., min_length=1)
    description: str = ""
    priority: str = "medium"
    category: str | None = None


class AccessRequestCreate(BaseModel):
    """Request for access to an internal system."""

    system: str = Field(..., min_length=1)
    access_level: str = "read"
    justification: str | None = None
    employee_id: int | None = None
