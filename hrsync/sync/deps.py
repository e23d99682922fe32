"""Dependency-list comparison for query re-fetch decisions.

Comparison is shallow and positional: element ``i`` of the previous list is
compared with element ``i`` of the new one. Scalars compare by value (``1``
and ``1.0`` are the same number, ``True`` and ``1`` are not) and every other
object by identity, so a caller that builds a new dict per update triggers a
re-fetch even when the contents are equal. Keep list length and
order stable across updates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

_SCALARS = (type(None), bool, int, float, complex, str, bytes)


def _kind(value: Any) -> type:
    # int and float are one number kind; bool stays separate
    if type(value) in (int, float):
        return float
    return type(value)


def same_value(a: Any, b: Any) -> bool:
    """Return True when two dependency entries count as unchanged."""
    if a is b:
        return True
    if _kind(a) is not _kind(b) or not isinstance(a, _SCALARS):
        return False
    if isinstance(a, float) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def dependencies_changed(previous: Sequence[Any] | None, current: Sequence[Any]) -> bool:
    """Return True when any position differs (or there was no previous list)."""
    if previous is None:
        return True
    if len(previous) != len(current):
        logger.warning(
            "Dependency list changed length from %d to %d; keep it stable",
            len(previous),
            len(current),
        )
        return True
    return any(not same_value(a, b) for a, b in zip(previous, current))
