"""Public package surface for the brawlapi Python client."""

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, BrawlAPI
from .errors import (
    BrawlAPIError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidTagError,
    TransportError,
)
from .resources.clubs_types import *
from .resources.events_types import *
from .resources.players_types import *
from .structures import Club, Player
from .utils import clean_tag, validate_tag



__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "BrawlAPI",
    "BrawlAPIError",
    "Club",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidTagError",
    "Player",
    "TransportError",
    "clean_tag",
    "validate_tag",
]
