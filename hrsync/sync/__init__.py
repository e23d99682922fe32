"""Data synchronization: read queries, write mutations, search."""

from hrsync.sync.actions import (
    ApiMutation,
    ClockInOut,
    CompleteOnboardingTask,
    CreateEmployee,
    CreateGoal,
    DeploymentControl,
    MarkNotificationRead,
    ReportGeneration,
    ResolveTicket,
    ReviewAccessRequest,
    SubmitLeaveRequest,
    UpdateEmployee,
)
from hrsync.sync.deps import dependencies_changed, same_value
from hrsync.sync.mutation import Mutation, MutationOptions
from hrsync.sync.query import Query, QueryState, QueryStatus, ResourceQuery
from hrsync.sync.resources import (
    access_requests_query,
    assets_query,
    attendance_logs_query,
    attendance_summary_query,
    dashboard_widgets_query,
    deployments_query,
    employee_query,
    employees_query,
    goals_query,
    leave_balance_query,
    leave_requests_query,
    notifications_query,
    onboarding_process_query,
    onboarding_tasks_query,
    reviews_query,
    security_logs_query,
    support_tickets_query,
)
from hrsync.sync.search import MIN_QUERY_LENGTH, GlobalSearch

__all__ = [
    "MIN_QUERY_LENGTH",
    "ApiMutation",
    "ClockInOut",
    "CompleteOnboardingTask",
    "CreateEmployee",
    "CreateGoal",
    "DeploymentControl",
    "GlobalSearch",
    "MarkNotificationRead",
    "Mutation",
    "MutationOptions",
    "Query",
    "QueryState",
    "QueryStatus",
    "ReportGeneration",
    "ResolveTicket",
    "ResourceQuery",
    "ReviewAccessRequest",
    "SubmitLeaveRequest",
    "UpdateEmployee",
    "access_requests_query",
    "assets_query",
    "attendance_logs_query",
    "attendance_summary_query",
    "dashboard_widgets_query",
    "dependencies_changed",
    "deployments_query",
    "employee_query",
    "employees_query",
    "goals_query",
    "leave_balance_query",
    "leave_requests_query",
    "notifications_query",
    "onboarding_process_query",
    "onboarding_tasks_query",
    "reviews_query",
    "same_value",
    "security_logs_query",
    "support_tickets_query",
]
