"""Generic result envelope returned by every transport call.

{ data: T | None, error: str | None, status: int }

Exactly one of ``data``/``error`` is populated on a completed call (``data``
may also be absent on a 2xx with an empty or malformed body). ``status == 0``
marks a transport failure, ``status >= 400`` a server rejection.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from hrsync.errors import GENERIC_ERROR

T = TypeVar("T")


class ResultEnvelope(BaseModel, Generic[T]):
    """Uniform result of an API call."""

    data: T | None = None
    error: str | None = Field(default=None, min_length=1)
    status: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _data_or_error(self) -> "ResultEnvelope[T]":
        if self.data is not None and self.error is not None:
            raise ValueError("envelope cannot carry both data and error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any, status: int = 200) -> "ResultEnvelope[Any]":
        return cls(data=data, status=status)

    @classmethod
    def failure(cls, error: str | None, status: int = 0) -> "ResultEnvelope[Any]":
        return cls(error=error or GENERIC_ERROR, status=status)
