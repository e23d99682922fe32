"""User-facing notifications (toasts).

Notifications are a UX side channel: delivering one must never change the
outcome of the call that produced it, so callers go through
``notify_safely``.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)

_notify_logger = logging.getLogger("hrsync.notify")


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class LoggingNotifier:
    """Default notifier: writes notices to the ``hrsync.notify`` logger."""

    def success(self, message: str) -> None:
        _notify_logger.info("%s", message)

    def error(self, message: str) -> None:
        _notify_logger.warning("%s", message)

    def info(self, message: str) -> None:
        _notify_logger.info("%s", message)


class CollectingNotifier:
    """Keeps the most recent notices for a UI to render.

    Parameters
    ----------
    max_items:
        Oldest notices are dropped beyond this many (default 50).
    """

    def __init__(self, max_items: int = 50) -> None:
        self._notices: deque[Notice] = deque(maxlen=max_items)

    @property
    def notices(self) -> list[Notice]:
        return list(self._notices)

    def success(self, message: str) -> None:
        self._notices.append(Notice(NoticeLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self._notices.append(Notice(NoticeLevel.ERROR, message))

    def info(self, message: str) -> None:
        self._notices.append(Notice(NoticeLevel.INFO, message))

    def drain(self) -> list[Notice]:
        """Return all pending notices and forget them."""
        notices = list(self._notices)
        self._notices.clear()
        return notices


def notify_safely(notifier: Notifier | None, level: NoticeLevel, message: str) -> None:
    """Deliver a notice, logging instead of raising if the notifier fails."""
    if notifier is None:
        return
    try:
        getattr(notifier, level.value)(message)
    except Exception:
        logger.exception("Notifier failed to deliver %s notice", level.value)
