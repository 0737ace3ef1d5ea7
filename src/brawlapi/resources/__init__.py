"""Resource module exports."""

from .clubs import Clubs
from .events import Events
from .players import Players

__all__ = [
    "Clubs",
    "Events",
    "Players",
]
