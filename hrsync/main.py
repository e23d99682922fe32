"""Client wiring entry point.

Loads ``ClientSettings`` from the environment, configures logging, and builds
an ``HrApi`` whose session persists the bearer token in the configured file.
"""

from __future__ import annotations

import logging

import httpx

from hrsync.api import HrApi
from hrsync.config.settings import ClientSettings
from hrsync.logging_config import configure_logging
from hrsync.transport.notify import CollectingNotifier, Notifier

logger = logging.getLogger(__name__)


def create_api(
    settings: ClientSettings | None = None,
    *,
    notifier: Notifier | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HrApi:
    """Create and configure the API facade.

    When no notifier is given, notices are collected in memory (bounded by
    ``notification_history``) for the UI to drain.
    """
    settings = settings or ClientSettings()
    configure_logging(settings.log_level, json_format=settings.log_json)

    if notifier is None:
        notifier = CollectingNotifier(max_items=settings.notification_history)

    api = HrApi.from_settings(settings, notifier=notifier, transport=transport)
    logger.info(
        "HR console client ready for %s (authenticated=%s)",
        api.client.base_url,
        api.client.session.is_authenticated,
    )
    return api
