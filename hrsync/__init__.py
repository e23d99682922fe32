"""HR console API client with data-synchronization queries and mutations."""

from hrsync.api import HrApi
from hrsync.config.settings import ClientSettings
from hrsync.main import create_api
from hrsync.models.envelope import ResultEnvelope
from hrsync.transport.client import ApiClient
from hrsync.transport.session import AuthSession

__all__ = [
    "ApiClient",
    "AuthSession",
    "ClientSettings",
    "HrApi",
    "ResultEnvelope",
    "create_api",
]
