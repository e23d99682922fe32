"""Read-side queries bound to one REST resource each.

Every factory returns a ``ResourceQuery`` whose dependency list is its own
input parameters; call ``rebind(...)`` with new inputs to re-fetch.
"""

from __future__ import annotations

from typing import Any

from hrsync.api import HrApi
from hrsync.sync.query import ResourceQuery


def employees_query(api: HrApi, filters: dict[str, Any] | None = None, **options: Any) -> ResourceQuery:
    """Employee list; ``filters`` is compared by identity, reuse the same dict to avoid re-fetches."""
    return ResourceQuery(api.employees.list, filters, **options)


def employee_query(api: HrApi, employee_id: str | int | None, **options: Any) -> ResourceQuery:
    """Single employee; does not auto-fetch until an id is set."""
    return ResourceQuery(api.employees.get, employee_id, require_args=True, **options)


def attendance_logs_query(
    api: HrApi, start_date: str | None = None, end_date: str | None = None, **options: Any
) -> ResourceQuery:
    return ResourceQuery(api.attendance.logs, start_date, end_date, **options)


def attendance_summary_query(api: HrApi, period: str = "current_month", **options: Any) -> ResourceQuery:
    return ResourceQuery(api.attendance.summary, period, **options)


def leave_requests_query(api: HrApi, status: str | None = None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.leave.requests, status, **options)


def leave_balance_query(api: HrApi, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.leave.balance, **options)


def goals_query(api: HrApi, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.performance.goals, **options)


def reviews_query(api: HrApi, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.performance.reviews, **options)


def dashboard_widgets_query(api: HrApi, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.dashboard.widgets, **options)


def notifications_query(api: HrApi, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.notifications.list, **options)


def support_tickets_query(api: HrApi, filters: dict[str, Any] | None = None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.support.tickets, filters, **options)


def assets_query(api: HrApi, filters: dict[str, Any] | None = None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.assets.list, filters, **options)


def access_requests_query(api: HrApi, filters: dict[str, Any] | None = None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.access.requests, filters, **options)


def onboarding_process_query(api: HrApi, process_id: str | int | None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.onboarding.process, process_id, require_args=True, **options)


def onboarding_tasks_query(api: HrApi, process_id: str | int | None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.onboarding.tasks, process_id, require_args=True, **options)


def deployments_query(api: HrApi, filters: dict[str, Any] | None = None, **options: Any) -> ResourceQuery:
    return ResourceQuery(api.deployments.list, filters, **options)


def security_logs_query(
    api: HrApi, start_date: str | None = None, end_date: str | None = None, **options: Any
) -> ResourceQuery:
    return ResourceQuery(api.security.logs, start_date, end_date, **options)
