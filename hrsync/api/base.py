"""Shared base for REST resource wrappers."""

from __future__ import annotations

from typing import Any

from hrsync.models.envelope import ResultEnvelope
from hrsync.transport.client import ApiClient

Envelope = ResultEnvelope[Any]


class ResourceApi:
    """Binds a group of endpoints to one ``ApiClient``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client
