"""Types for the players resource."""

from __future__ import annotations

from typing import TypedDict

from typing_extensions import ReadOnly


class PlayerClubResponse(TypedDict, total=False):
    """Club summary embedded in a player record."""
    tag: ReadOnly[str]
    name: ReadOnly[str]
    role: ReadOnly[str]


class PlayerResponse(TypedDict, total=False):
    """Readonly player dict returned by player and leaderboard endpoints."""
    tag: ReadOnly[str]
    name: ReadOnly[str]
    trophies: ReadOnly[int]
    highestTrophies: ReadOnly[int]
    expLevel: ReadOnly[int]
    rank: ReadOnly[int]
    club: ReadOnly[PlayerClubResponse]
    brawlers: ReadOnly[list[dict[str, object]]]

__all__ = ["PlayerClubResponse", "PlayerResponse"]
