"""Shared types and validation helpers for resources.

This module contains:
- The response envelope type and its unwrapping helper
- Query construction
- Leaderboard count normalization
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, TypedDict, Union

from typing_extensions import ReadOnly

from ..errors import InvalidArgumentError

QueryValue = Union[str, int, float]
Count = Union[int, float]


class Envelope(TypedDict, total=False):
    """Outer object some endpoints wrap their payload in."""
    data: ReadOnly[Any]


class EndpointsResponse(TypedDict, total=False):
    """Payload of the discovery endpoint."""
    endpoints: ReadOnly[list[str]]


def _unwrap_envelope(payload: Any) -> Any:
    """Return the ``data`` field of an enveloped payload, or the payload itself."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def build_query(params: Optional[Mapping[str, Any]] = None) -> dict[str, QueryValue]:
    """Build a query mapping, leaving out keys with ``None`` or empty values."""
    query: dict[str, QueryValue] = {}
    for key, value in (params or {}).items():
        if not key or value is None or value == "":
            continue
        query[key] = value
    return query


def _normalize_count(count: object) -> Optional[Count]:
    """Validate a leaderboard ``count`` argument.

    Parameters
    ----------
    count
        Number of entries to request, or ``None`` for the API default.

    Returns
    -------
    int | float | None
        The count unchanged, or ``None`` for ``0`` so the API default applies.

    Raises
    ------
    InvalidArgumentError
        If ``count`` is not a finite, non-negative int or float. Booleans
        and numeric strings are rejected.
    """
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        raise InvalidArgumentError("count", count, "a number")
    if not math.isfinite(count) or count < 0:
        raise InvalidArgumentError("count", count, "a finite, non-negative number")
    return count or None
