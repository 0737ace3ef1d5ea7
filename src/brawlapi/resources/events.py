"""Event rotation resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .events_types import EventsResponse, EventType


class Events(Resource):
    """Current and upcoming event rotations."""

    def _events(self, event_type: EventType, *, timeout: Optional[int] = None) -> EventsResponse:
        return self._get("events", params={"type": event_type}, timeout=timeout)

    def upcoming(self, *, timeout: Optional[int] = None) -> EventsResponse:
        """Fetch the upcoming events payload as returned by the API."""
        return self._events("upcoming", timeout=timeout)

    def current(self, *, timeout: Optional[int] = None) -> EventsResponse:
        """Fetch the current events payload as returned by the API."""
        return self._events("current", timeout=timeout)
