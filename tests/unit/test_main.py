"""Unit tests for client wiring."""

from __future__ import annotations

import logging

import httpx
import pytest

from hrsync.api import HrApi
from hrsync.config.settings import ClientSettings
from hrsync.main import create_api
from hrsync.transport.notify import CollectingNotifier
from hrsync.transport.session import FileTokenStore


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]


class TestCreateApi:
    def test_builds_facade_from_settings(self, settings: ClientSettings) -> None:
        api = create_api(settings)

        assert isinstance(api, HrApi)
        assert api.client.base_url == "http://hr.test"
        assert isinstance(api.client.notifier, CollectingNotifier)
        assert api.employees.client is api.client

    def test_loads_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRSYNC_API_BASE_URL", "https://hr.example.com/")

        api = create_api()

        assert api.client.base_url == "https://hr.example.com"

    def test_restores_persisted_token(self, settings: ClientSettings) -> None:
        FileTokenStore(settings.token_store_path).save(settings.token_key, "persisted")

        api = create_api(settings)

        assert api.client.session.token == "persisted"

    @pytest.mark.asyncio
    async def test_login_persists_token_to_file(self, settings: ClientSettings, backend_app) -> None:
        api = create_api(settings, transport=httpx.ASGITransport(app=backend_app))

        envelope = await api.auth.login("ada", "secret")

        assert envelope.ok
        assert FileTokenStore(settings.token_store_path).load("authToken") == "tok-123"
