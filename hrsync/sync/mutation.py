"""Write-side operations with loading/error tracking and notices.

A ``Mutation`` never fires on its own and never caches results: ``mutate``
returns the response data (or None on failure) and the caller updates its
read-side queries through ``set_data`` or ``refetch``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from hrsync.errors import error_message
from hrsync.models.envelope import ResultEnvelope
from hrsync.transport.notify import LoggingNotifier, NoticeLevel, Notifier, notify_safely

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass
class MutationOptions:
    """Per-call callbacks and notice texts."""

    on_success: Callable[[Any], None] | None = None
    on_error: Callable[[str], None] | None = None
    success_message: str | None = None
    error_message: str | None = None


class Mutation:
    """Tracks ``loading``/``error`` for manually triggered writes."""

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._notifier = notifier if notifier is not None else LoggingNotifier()
        self._loading = False
        self._error: str | None = None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    async def mutate(
        self,
        mutation_fn: Callable[[V], Awaitable[ResultEnvelope[Any]]],
        variables: V,
        options: MutationOptions | None = None,
    ) -> Any | None:
        """Run ``mutation_fn(variables)``; return its data or None on failure."""
        opts = options or MutationOptions()
        self._loading = True
        self._error = None

        try:
            envelope = await mutation_fn(variables)
            if envelope.error is not None:
                return self._fail(envelope.error, opts)
            if envelope.data is None:
                return None

            if opts.on_success is not None:
                opts.on_success(envelope.data)
            if opts.success_message:
                notify_safely(self._notifier, NoticeLevel.SUCCESS, opts.success_message)
            return envelope.data
        except Exception as exc:
            return self._fail(error_message(exc), opts)
        finally:
            self._loading = False

    def _fail(self, message: str, opts: MutationOptions) -> None:
        self._error = message
        logger.info("Mutation failed: %s", message)
        if opts.on_error is not None:
            try:
                opts.on_error(message)
            except Exception:
                logger.exception("on_error callback raised")
        if opts.error_message:
            notify_safely(self._notifier, NoticeLevel.ERROR, opts.error_message)
        return None
