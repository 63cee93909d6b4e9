# rlstats/api/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from rlstats.api.models import Platform, Player, Playlist, SearchPage, Season, Stat, Tier
from rlstats.api.normalize import (
    normalize_platforms,
    normalize_player,
    normalize_players,
    normalize_playlists,
    normalize_search_page,
    normalize_seasons,
    normalize_tiers,
)
from rlstats.config.env import ApiConfig
from rlstats.errors import RemoteQueryError

# Type aliases
Json = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


def _fetch(
    session: requests.Session,
    base_url: str,
    endpoint: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[int] = None,
) -> Json:
    """Fetch one endpoint and decode its JSON body.

    Args:
        session: Session carrying the Authorization header
        base_url: API root, without trailing slash
        endpoint: Path below the root, e.g. '/data/platforms'
        params: Optional query string parameters
        timeout: Request timeout in seconds

    Returns:
        Decoded JSON payload

    Raises:
        RemoteQueryError: For connection failures, HTTP errors or a body
            that is not JSON
    """
    url = f"{base_url}{endpoint}"
    logging.debug("GET %s params=%s", url, params)

    try:
        response = session.get(
            url,
            params=params,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        logging.warning("GET %s failed with status %s", url, status)
        raise RemoteQueryError(endpoint, f"HTTP {status}", status_code=status) from exc
    except requests.RequestException as exc:
        logging.warning("GET %s failed: %s", url, exc)
        raise RemoteQueryError(endpoint, str(exc)) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise RemoteQueryError(endpoint, "response was not valid JSON") from exc


class RlStatsClient:
    """Read-only client for the Rocket League stats API."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None) -> None:
        """Initialize the client.

        Args:
            config: Resolved configuration; supplies the API key and base URL
            session: Optional preconfigured session. If None, a new one is created.
        """
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": config.api_key})

    def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Json:
        """Query an endpoint and return its decoded JSON without normalizing it."""
        return _fetch(
            self.session,
            self.config.base_url,
            endpoint,
            params=params,
            timeout=self.config.http_timeout,
        )

    def _fetch_list(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        payload = self.fetch(endpoint, params)
        if not isinstance(payload, list):
            raise RemoteQueryError(endpoint, "unexpected response shape")
        return payload

    def get_platforms(self) -> List[Platform]:
        return normalize_platforms(self._fetch_list("/data/platforms"))

    def get_seasons(self) -> List[Season]:
        return normalize_seasons(self._fetch_list("/data/seasons"))

    def get_playlists(self) -> List[Playlist]:
        """Return one Playlist record per (playlist, platform) pair."""
        return normalize_playlists(self._fetch_list("/data/playlists"))

    def get_tiers(self) -> List[Tier]:
        return normalize_tiers(self._fetch_list("/data/tiers"))

    def get_player(self, unique_id: str, platform_id: int) -> Player:
        """Fetch one player profile.

        Args:
            unique_id: Platform specific player id
            platform_id: Id of the platform the player is on

        Raises:
            RemoteQueryError: If the player is unknown or the query fails
        """
        payload = self.fetch("/player", {"unique_id": unique_id, "platform_id": platform_id})
        if not isinstance(payload, dict):
            raise RemoteQueryError("/player", "unexpected response shape")
        return normalize_player(payload)

    def search_players(self, display_name: str, page: int = 0) -> SearchPage:
        """Search players by display name, one page at a time."""
        payload = self.fetch("/search/players", {"display_name": display_name, "page": page})
        if not isinstance(payload, dict):
            raise RemoteQueryError("/search/players", "unexpected response shape")
        return normalize_search_page(payload)

    def get_ranked_leaderboard(self, playlist_id: int) -> List[Player]:
        """Return players ranked by rank points in one playlist, best first."""
        return normalize_players(self._fetch_list("/leaderboard/ranked", {"playlist_id": playlist_id}))

    def get_stat_leaderboard(self, stat: Stat) -> List[Player]:
        """Return players ranked by one cumulative stat, best first."""
        return normalize_players(self._fetch_list("/leaderboard/stat", {"type": stat.value}))
