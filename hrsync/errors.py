"""Error hierarchy for the HR console client.

Errors never cross the transport boundary: ``ApiClient`` converts them into
``ResultEnvelope`` failures, and queries/mutations convert them into state.
``status`` mirrors the envelope status (0 for transport-level failures).
"""

from __future__ import annotations

GENERIC_ERROR = "Unknown error"


class HrSyncError(Exception):
    """Base error for all client-specific errors."""

    status: int = 0
    message: str = GENERIC_ERROR

    def __init__(self, message: str | None = None, status: int | None = None) -> None:
        self.message = message or self.__class__.message
        if status is not None:
            self.status = status
        super().__init__(self.message)


class TransportError(HrSyncError):
    """No response was obtained (DNS, connection, protocol failure)."""

    status = 0
    message = "Network request failed"


class ServerError(HrSyncError):
    """The server answered with a non-2xx status."""

    status = 500
    message = "Request failed"


class TokenStoreError(HrSyncError):
    """Durable token storage could not be written."""

    message = "Token storage is not writable"


def error_message(exc: BaseException, fallback: str = GENERIC_ERROR) -> str:
    """Return a non-empty human-readable message for an exception."""
    if isinstance(exc, HrSyncError):
        return exc.message or fallback
    text = str(exc).strip()
    return text or fallback
