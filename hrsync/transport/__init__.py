"""HTTP transport: client, auth session, notifications."""

from hrsync.transport.client import ApiClient
from hrsync.transport.notify import (
    CollectingNotifier,
    LoggingNotifier,
    Notice,
    NoticeLevel,
    Notifier,
    notify_safely,
)
from hrsync.transport.session import AuthSession, FileTokenStore, MemoryTokenStore, TokenStore

__all__ = [
    "ApiClient",
    "AuthSession",
    "CollectingNotifier",
    "FileTokenStore",
    "LoggingNotifier",
    "MemoryTokenStore",
    "Notice",
    "NoticeLevel",
    "Notifier",
    "TokenStore",
    "notify_safely",
]
