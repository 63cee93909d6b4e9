"""Report builders: turn API records into ordered table rows."""

from .catalog import platforms_report, search_report, seasons_report, tiers_report
from .leaderboard import (
    DEFAULT_LIMIT,
    LEADERBOARD_SIZE,
    parse_stat,
    ranked_leaderboard_report,
    select_entry,
    stat_leaderboard_report,
)
from .lookup import UNKNOWN_PLAYLIST, build_playlist_index, resolve_playlist_name
from .player import compose_player_report
from .playlists import PlaylistAggregate, aggregate_playlists, playlist_population_report
from .tables import EMPHASIS, HEADER, Report, Row

__all__ = [
    "DEFAULT_LIMIT",
    "EMPHASIS",
    "HEADER",
    "LEADERBOARD_SIZE",
    "PlaylistAggregate",
    "Report",
    "Row",
    "UNKNOWN_PLAYLIST",
    "aggregate_playlists",
    "build_playlist_index",
    "compose_player_report",
    "parse_stat",
    "platforms_report",
    "playlist_population_report",
    "ranked_leaderboard_report",
    "resolve_playlist_name",
    "search_report",
    "seasons_report",
    "select_entry",
    "stat_leaderboard_report",
    "tiers_report",
]
