"""Domain objects built from API responses.

Every object wraps one JSON record and keeps a weak reference to the client
that fetched it, so follow-up calls (a player's club, a club's members) go
through the same client without keeping it alive.
"""

from __future__ import annotations

import weakref
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence, TYPE_CHECKING, TypeVar

from .errors import ConfigurationError, TransportError

if TYPE_CHECKING:  # pragma: no cover
    from .client import BrawlAPI

S = TypeVar("S", bound="Structure")


class Structure:
    """Read-only wrapper around a single JSON record."""

    __slots__ = ("_client_ref", "_data", "__weakref__")

    def __init__(self, client: Optional["BrawlAPI"], data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_client_ref", weakref.ref(client) if client is not None else None)
        object.__setattr__(self, "_data", MappingProxyType(dict(data)))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} objects are read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are read-only")

    @property
    def client(self) -> Optional["BrawlAPI"]:
        """Client that produced this object, or ``None`` once it is gone."""
        if self._client_ref is None:
            return None
        return self._client_ref()

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def tag(self) -> Optional[str]:
        return self._data.get("tag")

    @property
    def name(self) -> Optional[str]:
        return self._data.get("name")

    @property
    def trophies(self) -> Optional[int]:
        return self._data.get("trophies")

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._data) == dict(other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, name={self.name!r})"

    def _require_client(self) -> "BrawlAPI":
        client = self.client
        if client is None:
            raise ConfigurationError(f"The client that fetched this {type(self).__name__} no longer exists.")
        return client


class Player(Structure):
    """A player record."""

    __slots__ = ()

    @property
    def club_tag(self) -> Optional[str]:
        club = self._data.get("club")
        if isinstance(club, Mapping):
            return club.get("tag") or None
        return None

    def get_club(self, *, timeout: Optional[int] = None) -> Optional["Club"]:
        """Fetch the full record of this player's club.

        Returns ``None`` when the player is not in a club.
        """
        tag = self.club_tag
        if tag is None:
            return None
        return self._require_client().get_club(tag, timeout=timeout)


class Club(Structure):
    """A club record."""

    __slots__ = ()

    @property
    def members(self) -> list[Player]:
        """Members of the club as :class:`Player` objects, in API order."""
        members = self._data.get("members")
        if not members:
            return []
        return wrap_many(self.client, members, Player)

    def search_similar(self, *, timeout: Optional[int] = None) -> list["Club"]:
        """Search for clubs matching this club's name."""
        return self._require_client().club_search(self.name or "", timeout=timeout)


def wrap_one(client: Optional["BrawlAPI"], raw: object, cls: type[S]) -> S:
    """Build a single ``cls`` object from one JSON record.

    Raises
    ------
    TransportError
        If ``raw`` is not a JSON object.
    """
    if not isinstance(raw, Mapping):
        raise TransportError(f"Expected a JSON object for {cls.__name__}, got {type(raw).__name__}")
    return cls(client, raw)


def wrap_many(client: Optional["BrawlAPI"], raw_list: object, cls: type[S]) -> list[S]:
    """Build ``cls`` objects from a JSON array, keeping the API order."""
    if not isinstance(raw_list, Sequence) or isinstance(raw_list, (str, bytes)):
        raise TransportError(f"Expected a JSON array of {cls.__name__}, got {type(raw_list).__name__}")
    return [wrap_one(client, raw, cls) for raw in raw_list]


__all__ = ["Club", "Player", "Structure", "wrap_many", "wrap_one"]
