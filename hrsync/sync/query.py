"""Generic read-side data synchronization.

A ``Query`` wraps a zero-argument async fetch function returning a
``ResultEnvelope`` and owns ``data``/``loading``/``error`` for one consumer.

State machine (re-entrant):
- Idle → Loading: ``mount()`` with auto-fetch, ``refetch()``, or ``update()``
  with changed dependencies
- Loading → Success: envelope carries data (error cleared, data replaced)
- Loading → Error: envelope carries an error or the fetch raised (data kept)

Each fetch gets a sequence number; a settle whose number is older than the
latest issued one is discarded, so overlapping fetches can never overwrite a
newer result. In-flight fetches run as asyncio tasks that are cancelled when
dependencies change or the query is unmounted.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from hrsync.errors import error_message
from hrsync.models.envelope import ResultEnvelope
from hrsync.sync.deps import dependencies_changed

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchFn = Callable[[], Awaitable[ResultEnvelope[Any]]]


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class QueryState(Generic[T]):
    """Snapshot handed to listeners."""

    data: T | None
    loading: bool
    error: str | None
    status: QueryStatus


async def _invoke(fetch_fn: FetchFn) -> ResultEnvelope[Any]:
    return await fetch_fn()


class Query(Generic[T]):
    """Owns fetch state for one consumer.

    Parameters
    ----------
    fetch_fn:
        Async callable returning a ``ResultEnvelope``. It is part of the
        dependency keys: pass the same object across ``update()`` calls
        unless a re-fetch is intended.
    initial_data:
        Value of ``data`` before the first successful fetch.
    on_success / on_error:
        Called with the data or the error message after each settle.
    auto_fetch:
        Fetch on ``mount()`` and on dependency changes (default True).
    dependencies:
        Positional comparison keys; see ``hrsync.sync.deps``.
    """

    def __init__(
        self,
        fetch_fn: FetchFn,
        *,
        initial_data: T | None = None,
        on_success: Callable[[T], None] | None = None,
        on_error: Callable[[str], None] | None = None,
        auto_fetch: bool = True,
        dependencies: Sequence[Any] = (),
    ) -> None:
        self._fetch_fn = fetch_fn
        self._on_success = on_success
        self._on_error = on_error
        self._auto_fetch = auto_fetch
        self._dependencies = tuple(dependencies)
        self._effect_keys = self._keys()

        self._data: T | None = initial_data
        self._loading = False
        self._error: str | None = None
        self._settled = False

        self._sequence = 0
        self._inflight: set[asyncio.Task] = set()
        self._listeners: list[Callable[[QueryState[T]], None]] = []
        self._mounted = False
        self._closed = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def auto_fetch(self) -> bool:
        return self._auto_fetch

    @property
    def status(self) -> QueryStatus:
        if self._loading:
            return QueryStatus.LOADING
        if self._error is not None:
            return QueryStatus.ERROR
        if self._settled:
            return QueryStatus.SUCCESS
        return QueryStatus.IDLE

    @property
    def state(self) -> QueryState[T]:
        return QueryState(
            data=self._data, loading=self._loading, error=self._error, status=self.status
        )

    def set_data(self, value: T | None) -> None:
        """Overwrite ``data`` directly (optimistic updates); loading/error untouched."""
        self._data = value
        self._emit()

    def subscribe(self, listener: Callable[[QueryState[T]], None]) -> Callable[[], None]:
        """Call ``listener`` on every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def mount(self) -> None:
        """Start the query; fetches once when auto-fetch is on."""
        if self._closed:
            raise RuntimeError("Query was unmounted and cannot be mounted again")
        self._mounted = True
        if self._auto_fetch:
            await self.refetch()

    async def update(
        self,
        fetch_fn: FetchFn | None = None,
        *,
        dependencies: Sequence[Any] | None = None,
        auto_fetch: bool | None = None,
    ) -> bool:
        """Apply new inputs; re-fetch if the dependency keys changed.

        Returns True when a fetch cycle ran.
        """
        if fetch_fn is not None:
            self._fetch_fn = fetch_fn
        if dependencies is not None:
            self._dependencies = tuple(dependencies)
        if auto_fetch is not None:
            self._auto_fetch = auto_fetch

        keys = self._keys()
        changed = dependencies_changed(self._effect_keys, keys)
        self._effect_keys = keys

        if not (changed and self._auto_fetch and self._mounted):
            return False

        self._cancel_inflight()
        await self.refetch()
        return True

    def unmount(self) -> None:
        """Stop the query: cancel in-flight fetches and ignore late settles."""
        self._closed = True
        self._mounted = False
        self._cancel_inflight()
        self._loading = False
        self._listeners.clear()

    async def __aenter__(self) -> "Query[T]":
        await self.mount()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.unmount()

    # ------------------------------------------------------------------
    # Fetch cycle
    # ------------------------------------------------------------------

    async def refetch(self) -> None:
        """Run one fetch cycle regardless of auto-fetch or dependencies."""
        if self._closed:
            logger.debug("Ignoring refetch on unmounted query")
            return

        self._sequence += 1
        call_id = self._sequence
        self._loading = True
        self._error = None
        self._emit()

        task = asyncio.ensure_future(_invoke(self._fetch_fn))
        self._inflight.add(task)
        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            if call_id == self._sequence and not self._closed:
                self._loading = False
                self._emit()
            raise
        finally:
            self._inflight.discard(task)

        if self._closed or call_id != self._sequence:
            logger.debug(
                "Discarding stale fetch result (call %d, latest %d)", call_id, self._sequence
            )
            if not task.cancelled() and task.exception() is not None:
                logger.debug("Stale fetch had failed: %s", task.exception())
            return

        try:
            if task.cancelled():
                logger.debug("Fetch %d was cancelled", call_id)
            else:
                self._settle(task.result())
        except Exception as exc:
            self._fail(error_message(exc))
        finally:
            self._loading = False
            self._emit()

    def _settle(self, envelope: ResultEnvelope[Any]) -> None:
        if envelope.error is not None:
            self._fail(envelope.error)
        elif envelope.data is not None:
            self._data = envelope.data
            self._error = None
            self._settled = True
            if self._on_success is not None:
                self._on_success(envelope.data)

    def _fail(self, message: str) -> None:
        # Previous data stays visible next to the error
        self._error = message
        self._settled = True
        if self._on_error is not None:
            try:
                self._on_error(message)
            except Exception:
                logger.exception("on_error callback raised")

    def _cancel_inflight(self) -> None:
        for task in list(self._inflight):
            task.cancel()

    def _keys(self) -> tuple[Any, ...]:
        return (self._fetch_fn, self._auto_fetch, *self._dependencies)

    def _emit(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Query listener raised")


class ResourceQuery(Query[T]):
    """Query whose fetch function calls ``loader(*args)``.

    The args double as the dependency list; ``rebind()`` swaps them in and
    re-fetches when they changed. With ``require_args`` auto-fetch stays off
    while any arg is falsy (e.g. no id selected yet).
    """

    def __init__(
        self,
        loader: Callable[..., Awaitable[ResultEnvelope[Any]]],
        *args: Any,
        require_args: bool = False,
        auto_fetch: bool = True,
        **options: Any,
    ) -> None:
        self._loader = loader
        self._args = args
        self._require_args = require_args
        self._wants_auto_fetch = auto_fetch
        super().__init__(
            self._load,
            auto_fetch=self._should_auto_fetch(),
            dependencies=args,
            **options,
        )

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    async def rebind(self, *args: Any) -> bool:
        self._args = args
        return await self.update(dependencies=args, auto_fetch=self._should_auto_fetch())

    async def _load(self) -> ResultEnvelope[Any]:
        return await self._loader(*self._args)

    def _should_auto_fetch(self) -> bool:
        if not self._wants_auto_fetch:
            return False
        return not self._require_args or all(self._args)
