"""Core BrawlAPI client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

import requests

from .errors import ConfigurationError, TransportError
from .resources._common_types import Count, EndpointsResponse, _unwrap_envelope, build_query
from .resources.clubs import Clubs
from .resources.events import Events
from .resources.players import Players
from .structures import Club, Player

DEFAULT_BASE_URL = os.environ.get("BRAWLAPI_BASE_URL", "https://brawlapi.cf/api/")
DEFAULT_TIMEOUT = int(os.environ.get("BRAWLAPI_TIMEOUT", "20"))


class BrawlAPI:
    """Resource-grouped client for the BrawlAPI game statistics API."""

    players: Players
    clubs: Clubs
    events: Events

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        default_timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        strict_tags: bool = False,
    ) -> None:
        """Create a client bound to an authorization token.

        Parameters
        ----------
        token
            Authorization token sent with every request.
        base_url
            Root URL of the API. Endpoints are appended to it.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        strict_tags
            Only accept the characters Supercell uses in tags.

        Raises
        ------
        ConfigurationError
            If no token is given.
        """
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError("Missing Authorization Token.")
        self._token = token
        base_url = base_url or DEFAULT_BASE_URL
        if not base_url.endswith("/"):
            base_url += "/"
        self._base_url = base_url
        self.default_timeout = default_timeout
        self.strict_tags = strict_tags
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.players: Players = Players(self)
        self.clubs: Clubs = Clubs(self)
        self.events: Events = Events(self)

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def request(
        self,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """Send a raw GET request to the API.

        Parameters
        ----------
        endpoint
            Endpoint path relative to the base URL, e.g. ``"player"`` or
            ``"leaderboards/clubs"``. An empty string addresses the API root.
        params
            Query parameters. Keys with ``None`` or empty values are left out.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        Any
            Parsed JSON payload, with the ``data`` envelope removed when present.

        Raises
        ------
        TransportError
            If the request fails, the server answers with an error status, or
            the body is not JSON.
        """
        url = self._base_url + endpoint.lstrip("/")
        query = build_query(params)
        headers = {"Authorization": self._token}

        requester = self._session or requests
        self._logger.debug("GET %s params=%s", url, query)
        response = None
        try:
            response = requester.request(
                "GET",
                url,
                params=query,
                headers=headers,
                timeout=timeout if timeout is not None else self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            failed = exc.response if exc.response is not None else response
            status_code = getattr(failed, "status_code", None)
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = failed.json() if failed is not None else None
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
                    elif "detail" in error_body:
                        error_msg = f"{exc}\nDetails: {error_body['detail']}"
            except ValueError:
                pass  # Response wasn't JSON
            self._logger.warning("Request failed for GET %s: %s", url, error_msg)
            raise TransportError(error_msg, url=url, status_code=status_code, cause=exc) from exc
        except requests.RequestException as exc:
            self._logger.warning("Request failed for GET %s: %s", url, exc)
            raise TransportError(str(exc), url=url, cause=exc) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.warning("Response from GET %s was not JSON", url)
            raise TransportError(
                f"Response from {url} was not JSON",
                url=url,
                status_code=getattr(response, "status_code", None),
                cause=exc,
            ) from exc
        return _unwrap_envelope(payload)

    def get_endpoints(self, *, timeout: Optional[int] = None) -> list[str]:
        """Return the names of all endpoints the API offers."""
        payload: EndpointsResponse = self.request("", timeout=timeout)
        endpoints = payload.get("endpoints") if isinstance(payload, dict) else None
        if not isinstance(endpoints, list):
            self._logger.warning("Endpoints response missing expected endpoints list.")
            raise TransportError("Endpoints response missing expected endpoints list.", url=self._base_url)
        return endpoints

    def get_player(self, tag: str, *, timeout: Optional[int] = None) -> Player:
        """Fetch a player by tag. See :meth:`Players.get`."""
        return self.players.get(tag, timeout=timeout)

    def get_club(self, tag: str, *, timeout: Optional[int] = None) -> Club:
        """Fetch a club by tag. See :meth:`Clubs.get`."""
        return self.clubs.get(tag, timeout=timeout)

    def about(self, *, timeout: Optional[int] = None) -> Any:
        """Return some info about the API."""
        return self.request("about", timeout=timeout)

    def get_top_players(
        self,
        *,
        count: Optional[Count] = None,
        brawler: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> list[Player]:
        """Fetch the top players. See :meth:`Players.top`."""
        return self.players.top(count=count, brawler=brawler, timeout=timeout)

    def get_top_clubs(self, count: Optional[Count] = None, *, timeout: Optional[int] = None) -> list[Club]:
        """Fetch the top clubs. See :meth:`Clubs.top`."""
        return self.clubs.top(count, timeout=timeout)

    def get_upcoming_events(self, *, timeout: Optional[int] = None) -> Any:
        return self.events.upcoming(timeout=timeout)

    def get_current_events(self, *, timeout: Optional[int] = None) -> Any:
        return self.events.current(timeout=timeout)

    def get_misc(self, *, timeout: Optional[int] = None) -> Any:
        """Return misc data such as the season and shop reset times."""
        return self.request("misc", timeout=timeout)

    def club_search(self, query: str, *, timeout: Optional[int] = None) -> list[Club]:
        """Search clubs by name. See :meth:`Clubs.search`."""
        return self.clubs.search(query, timeout=timeout)
