"""Types for the events resource."""

from __future__ import annotations

from typing import Literal, TypedDict, get_args

from typing_extensions import ReadOnly

EventType = Literal["upcoming", "current"]
EVENT_TYPES: tuple[EventType, ...] = get_args(EventType)


class EventResponse(TypedDict, total=False):
    """Readonly event slot entry."""
    slot: ReadOnly[int]
    slotName: ReadOnly[str]
    mapName: ReadOnly[str]
    gameMode: ReadOnly[str]
    startTime: ReadOnly[str]
    endTime: ReadOnly[str]


class EventsResponse(TypedDict, total=False):
    """Readonly events payload keyed by event type."""
    upcoming: ReadOnly[list[EventResponse]]
    current: ReadOnly[list[EventResponse]]

__all__ = ["EVENT_TYPES", "EventResponse", "EventType", "EventsResponse"]
