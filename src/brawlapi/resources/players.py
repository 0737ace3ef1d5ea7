"""Player resource wrapper."""

from __future__ import annotations

from typing import Optional

from ..errors import InvalidArgumentError
from ..structures import Player, wrap_many, wrap_one
from ._common_types import Count, _normalize_count
from .base import Resource
from .players_types import PlayerResponse


class Players(Resource):
    """Player lookups and the player leaderboard."""

    def get(self, tag: str, *, timeout: Optional[int] = None) -> Player:
        """Fetch a player by tag.

        Parameters
        ----------
        tag
            Player tag, with or without the leading ``#``.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Player
            The requested player.

        Raises
        ------
        InvalidTagError
            If the tag is invalid. No request is sent.
        TransportError
            If the request fails.
        """
        cleaned = self._clean_tag(tag)
        response: PlayerResponse = self._get("player", params={"tag": cleaned}, timeout=timeout)
        return wrap_one(self._client, response, Player)

    def top(
        self,
        *,
        count: Optional[Count] = None,
        brawler: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> list[Player]:
        """Fetch the top players, optionally for a single brawler.

        Parameters
        ----------
        count
            Number of players to return. Leave empty for the API default.
        brawler
            Brawler name to rank players by.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[Player]
            Players in leaderboard order.

        Raises
        ------
        InvalidArgumentError
            If ``count`` is not a number. No request is sent.
        """
        try:
            count = _normalize_count(count)
        except InvalidArgumentError:
            self._logger.warning("Invalid count for top players: %r", count)
            raise

        params = {"count": count, "brawler": brawler}
        response: list[PlayerResponse] = self._get("leaderboards/players", params=params, timeout=timeout)
        return wrap_many(self._client, response, Player)
