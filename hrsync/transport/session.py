"""Bearer-token session and durable token stores.

The token lives in an explicitly passed ``AuthSession`` rather than in module
state, so several clients (tenants, tests) can run side by side. The session
reads its token once at construction and writes every change through to its
store immediately.

SECURITY: Token values are never logged.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from hrsync.errors import TokenStoreError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_KEY = "authToken"


class TokenStore(Protocol):
    """Key/value string storage that outlives the process."""

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryTokenStore:
    """Process-local store, used by tests and short-lived scripts."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._values.get(key)

    def save(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)


class FileTokenStore:
    """JSON file of key -> string, replaced atomically on every write.

    Parameters
    ----------
    path:
        File location; ``~`` is expanded and parent directories are created
        on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def save(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        self._write(values)

    def delete(self, key: str) -> None:
        values = self._read()
        if key in values:
            del values[key]
            self._write(values)

    def _read(self) -> dict:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Token store %s unreadable: %s", self._path, exc)
            return {}

        try:
            values = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Token store %s is corrupt, treating as empty", self._path)
            return {}
        return values if isinstance(values, dict) else {}

    def _write(self, values: dict) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=".tokens-", suffix=".json"
            )
        except OSError as exc:
            raise TokenStoreError(f"Cannot write token store {self._path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(values, fh)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            _discard(tmp_name)
            raise TokenStoreError(f"Cannot write token store {self._path}: {exc}") from exc
        except BaseException:
            _discard(tmp_name)
            raise


def _discard(tmp_name: str) -> None:
    # Leftover temp file from a failed write
    with contextlib.suppress(OSError):
        os.unlink(tmp_name)


class AuthSession:
    """Holds the bearer token for one client.

    Parameters
    ----------
    store:
        Durable storage mirrored on every change (default: in-memory).
    key:
        Storage key holding the token.
    """

    def __init__(self, store: TokenStore | None = None, key: str = DEFAULT_TOKEN_KEY) -> None:
        self._store: TokenStore = store if store is not None else MemoryTokenStore()
        self._key = key
        self._token: str | None = self._store.load(key) or None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str) -> None:
        """Replace the token and persist it."""
        if not token:
            raise ValueError("token must be a non-empty string")
        self._store.save(self._key, token)
        self._token = token
        logger.info("Auth token updated")

    def clear_token(self) -> None:
        """Forget the token and remove it from storage."""
        self._store.delete(self._key)
        self._token = None
        logger.info("Auth token cleared")

    def authorization_header(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
