"""Conversion of raw API payloads into record types."""

from typing import Any, Dict, List, Optional, Tuple

from rlstats.api.models import (
    Platform,
    Player,
    PlayerStats,
    Playlist,
    RankedInfo,
    SearchPage,
    Season,
    SeasonPlaylists,
    Tier,
)


def _safe_convert_to_int(value: Any) -> Optional[int]:
    """Safely convert value to integer.

    Args:
        value: Value to convert to integer

    Returns:
        Integer value if conversion successful, None otherwise
    """
    try:
        return int(value) if value is not None else None
    except (ValueError, TypeError):
        return None


def _int_or_zero(value: Any) -> int:
    converted = _safe_convert_to_int(value)
    return 0 if converted is None else converted


def _as_list(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    return []


def normalize_platform(raw: Dict[str, Any]) -> Platform:
    return Platform(id=_int_or_zero(raw.get("id")), name=str(raw.get("name") or ""))


def normalize_platforms(payload: Any) -> List[Platform]:
    return [normalize_platform(item) for item in _as_list(payload)]


def normalize_playlists(payload: Any) -> List[Playlist]:
    """Normalize the playlist population listing.

    Population arrives nested as ``{"players": n, "updatedAt": ts}``; a
    playlist without population data counts as 0 players.
    """
    playlists: List[Playlist] = []

    for raw in _as_list(payload):
        population = raw.get("population")
        if not isinstance(population, dict):
            population = {}

        playlists.append(Playlist(
            id=_int_or_zero(raw.get("id")),
            name=str(raw.get("name") or ""),
            platform_id=_int_or_zero(raw.get("platformId")),
            population=_int_or_zero(population.get("players")),
            updated_at=_safe_convert_to_int(population.get("updatedAt")),
        ))

    return playlists


def normalize_seasons(payload: Any) -> List[Season]:
    return [
        Season(
            season_id=_int_or_zero(raw.get("seasonId")),
            started_on=_int_or_zero(raw.get("startedOn")),
            ended_on=_safe_convert_to_int(raw.get("endedOn")),
        )
        for raw in _as_list(payload)
    ]


def normalize_tiers(payload: Any) -> List[Tier]:
    return [
        Tier(id=_int_or_zero(raw.get("tierId")), name=str(raw.get("tierName") or ""))
        for raw in _as_list(payload)
    ]


def _normalize_stats(raw: Any) -> PlayerStats:
    if not isinstance(raw, dict):
        return PlayerStats()
    return PlayerStats(
        wins=_int_or_zero(raw.get("wins")),
        goals=_int_or_zero(raw.get("goals")),
        mvps=_int_or_zero(raw.get("mvps")),
        saves=_int_or_zero(raw.get("saves")),
        shots=_int_or_zero(raw.get("shots")),
        assists=_int_or_zero(raw.get("assists")),
    )


def _normalize_ranked_seasons(raw: Any) -> Tuple[Tuple[str, SeasonPlaylists], ...]:
    """Flatten ``{season: {playlist_id: info}}`` into ordered pairs.

    Key order of the decoded JSON objects is preserved.
    """
    if not isinstance(raw, dict):
        return ()

    seasons = []
    for season, playlists in raw.items():
        entries = []
        if isinstance(playlists, dict):
            for playlist_id, info in playlists.items():
                if not isinstance(info, dict):
                    info = {}
                entries.append((str(playlist_id), RankedInfo(
                    rank_points=_safe_convert_to_int(info.get("rankPoints")),
                    matches_played=_safe_convert_to_int(info.get("matchesPlayed")),
                    tier=_safe_convert_to_int(info.get("tier")),
                    division=_safe_convert_to_int(info.get("division")),
                )))
        seasons.append((str(season), tuple(entries)))

    return tuple(seasons)


def normalize_player(raw: Dict[str, Any]) -> Player:
    platform = raw.get("platform")
    return Player(
        display_name=str(raw.get("displayName") or ""),
        unique_id=str(raw.get("uniqueId") or ""),
        platform=normalize_platform(platform if isinstance(platform, dict) else {}),
        profile_url=str(raw.get("profileUrl") or ""),
        last_requested=_int_or_zero(raw.get("lastRequested")),
        created_at=_int_or_zero(raw.get("createdAt")),
        updated_at=_int_or_zero(raw.get("updatedAt")),
        next_update_at=_int_or_zero(raw.get("nextUpdateAt")),
        stats=_normalize_stats(raw.get("stats")),
        ranked_seasons=_normalize_ranked_seasons(raw.get("rankedSeasons")),
        avatar=raw.get("avatar"),
        signature_url=raw.get("signatureUrl"),
    )


def normalize_players(payload: Any) -> List[Player]:
    return [normalize_player(item) for item in _as_list(payload)]


def normalize_search_page(payload: Any) -> SearchPage:
    """Normalize a search response.

    Returns:
        SearchPage; an unrecognized payload yields an empty page
    """
    if not isinstance(payload, dict):
        return SearchPage(page=None, results=0, total_results=0, max_results_per_page=0)

    players = tuple(normalize_players(payload.get("data")))
    results = _safe_convert_to_int(payload.get("results"))

    return SearchPage(
        page=_safe_convert_to_int(payload.get("page")),
        results=len(players) if results is None else results,
        total_results=_int_or_zero(payload.get("totalResults")),
        max_results_per_page=_int_or_zero(payload.get("maxResultsPerPage")),
        players=players,
    )
