"""REST resource wrappers and the ``HrApi`` facade.

Every endpoint lives under ``/api``; each wrapper returns ``ResultEnvelope``
objects from the shared ``ApiClient``.
"""

from __future__ import annotations

import httpx

from hrsync.api.attendance import AttendanceApi
from hrsync.api.auth import AuthApi
from hrsync.api.dashboard import DashboardApi, NotificationsApi, SearchApi
from hrsync.api.employees import EmployeeApi
from hrsync.api.it_ops import AccessApi, AssetApi, DeploymentApi, SupportApi
from hrsync.api.leave import LeaveApi
from hrsync.api.onboarding import OnboardingApi
from hrsync.api.performance import PerformanceApi
from hrsync.api.reports import ReportsApi
from hrsync.api.security import SecurityApi
from hrsync.config.settings import ClientSettings
from hrsync.transport.client import ApiClient
from hrsync.transport.notify import Notifier


class HrApi:
    """All resource groups over one client."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.auth = AuthApi(client)
        self.employees = EmployeeApi(client)
        self.attendance = AttendanceApi(client)
        self.leave = LeaveApi(client)
        self.performance = PerformanceApi(client)
        self.dashboard = DashboardApi(client)
        self.notifications = NotificationsApi(client)
        self.search = SearchApi(client)
        self.reports = ReportsApi(client)
        self.onboarding = OnboardingApi(client)
        self.support = SupportApi(client)
        self.assets = AssetApi(client)
        self.deployments = DeploymentApi(client)
        self.access = AccessApi(client)
        self.security = SecurityApi(client)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HrApi":
        return cls(ApiClient.from_settings(settings, notifier=notifier, transport=transport))


__all__ = [
    "AccessApi",
    "AssetApi",
    "AttendanceApi",
    "AuthApi",
    "DashboardApi",
    "DeploymentApi",
    "EmployeeApi",
    "HrApi",
    "LeaveApi",
    "NotificationsApi",
    "OnboardingApi",
    "PerformanceApi",
    "ReportsApi",
    "SearchApi",
    "SecurityApi",
    "SupportApi",
]
