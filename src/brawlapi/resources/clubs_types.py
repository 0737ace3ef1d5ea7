"""Types for the clubs resource."""

from __future__ import annotations

from typing import TypedDict

from typing_extensions import ReadOnly


class ClubMemberResponse(TypedDict, total=False):
    """Readonly member entry inside a club record."""
    tag: ReadOnly[str]
    name: ReadOnly[str]
    role: ReadOnly[str]
    trophies: ReadOnly[int]


class ClubResponse(TypedDict, total=False):
    """Readonly club dict returned by club, leaderboard and search endpoints."""
    tag: ReadOnly[str]
    name: ReadOnly[str]
    description: ReadOnly[str]
    trophies: ReadOnly[int]
    requiredTrophies: ReadOnly[int]
    membersCount: ReadOnly[int]
    rank: ReadOnly[int]
    members: ReadOnly[list[ClubMemberResponse]]

__all__ = ["ClubMemberResponse", "ClubResponse"]
