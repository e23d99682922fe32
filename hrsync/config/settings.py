"""Pydantic Settings for the HR console client.

All environment variables use the HRSYNC_ prefix.
Example: HRSYNC_API_BASE_URL=https://hr.example.com, HRSYNC_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Backend
    api_base_url: str = "http://localhost:5000"
    request_timeout_seconds: float | None = Field(default=None, gt=0)  # None = no timeout

    # Durable token storage
    token_store_path: str = "~/.hrsync/storage.json"
    token_key: str = "authToken"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Notifications kept for the UI
    notification_history: int = Field(default=50, ge=1)

    model_config = {"env_prefix": "HRSYNC_"}
