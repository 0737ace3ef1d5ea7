"""Club resource wrapper."""

from __future__ import annotations

from typing import Optional

from ..errors import InvalidArgumentError
from ..structures import Club, wrap_many, wrap_one
from ._common_types import Count, _normalize_count
from .base import Resource
from .clubs_types import ClubResponse


class Clubs(Resource):
    """Club lookups, search and the club leaderboard."""

    def get(self, tag: str, *, timeout: Optional[int] = None) -> Club:
        """Fetch a club by tag.

        Parameters
        ----------
        tag
            Club tag, with or without the leading ``#``.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Club
            The requested club.

        Raises
        ------
        InvalidTagError
            If the tag is invalid. No request is sent.
        TransportError
            If the request fails.
        """
        cleaned = self._clean_tag(tag)
        response: ClubResponse = self._get("club", params={"tag": cleaned}, timeout=timeout)
        return wrap_one(self._client, response, Club)

    def top(self, count: Optional[Count] = None, *, timeout: Optional[int] = None) -> list[Club]:
        """Fetch the top clubs.

        Parameters
        ----------
        count
            Number of clubs to return. Leave empty for all of them.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[Club]
            Clubs in leaderboard order.

        Raises
        ------
        InvalidArgumentError
            If ``count`` is not a number. No request is sent.
        """
        try:
            count = _normalize_count(count)
        except InvalidArgumentError:
            self._logger.warning("Invalid count for top clubs: %r", count)
            raise

        response: list[ClubResponse] = self._get("leaderboards/clubs", params={"count": count}, timeout=timeout)
        return wrap_many(self._client, response, Club)

    def search(self, query: str, *, timeout: Optional[int] = None) -> list[Club]:
        """Search clubs by name. The query is sent as-is."""
        response: list[ClubResponse] = self._get("clubSearch", params={"query": query}, timeout=timeout)
        return wrap_many(self._client, response, Club)
