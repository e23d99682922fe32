"""Global search with client-side suppression of trivial queries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from hrsync.api import HrApi
from hrsync.errors import error_message

logger = logging.getLogger(__name__)

# Queries shorter than this never reach the backend
MIN_QUERY_LENGTH = 2


class GlobalSearch:
    """Search across HR modules; ``results`` maps module name to rows."""

    def __init__(self, api: HrApi) -> None:
        self._api = api
        self._results: dict[str, Any] = {}
        self._loading = False
        self._error: str | None = None
        self._sequence = 0

    @property
    def results(self) -> dict[str, Any]:
        return self._results

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    async def search(self, query: str, modules: Sequence[str] | None = None) -> None:
        self._sequence += 1
        call_id = self._sequence

        if not query or len(query) < MIN_QUERY_LENGTH:
            # Also invalidates any search still in flight
            self._results = {}
            self._loading = False
            return

        self._loading = True
        self._error = None
        try:
            envelope = await self._api.search.global_search(query, modules)
            if call_id != self._sequence:
                logger.debug("Discarding results for superseded query %r", query)
                return
            if envelope.error is not None:
                self._error = envelope.error
            elif envelope.data is not None:
                self._results = envelope.data
        except Exception as exc:
            if call_id == self._sequence:
                self._error = error_message(exc, "Search failed")
        finally:
            if call_id == self._sequence:
                self._loading = False
