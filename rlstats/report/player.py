"""Player profile report sections."""

from __future__ import annotations

from typing import Dict, List, Optional

from rlstats.api.models import Player
from rlstats.report.lookup import resolve_playlist_name
from rlstats.report.tables import Report, Row, make_report, row
from rlstats.util_time import format_calendar_date

RANKED_COLUMNS = ("Season", "Playlist", "Points", "Played", "Tier", "Division")


def _or_zero(value: Optional[int]) -> int:
    return 0 if value is None else value


def identity_section(player: Player) -> Report:
    return make_report(
        "Identity",
        (),
        [
            row("Display Name", player.display_name),
            row("UniqueID", player.unique_id),
            row("Platform", player.platform.name),
            row("Profile URL", player.profile_url),
        ],
        label_column=True,
    )


def timestamp_section(player: Player) -> Report:
    return make_report(
        "Timestamps",
        ("Requested", "Created", "Updated", "Next Update"),
        [row(
            format_calendar_date(player.last_requested),
            format_calendar_date(player.created_at),
            format_calendar_date(player.updated_at),
            format_calendar_date(player.next_update_at),
        )],
    )


def statistics_section(player: Player) -> Report:
    stats = player.stats
    return make_report(
        "Statistics",
        (),
        [
            row("Wins", stats.wins),
            row("Goals", stats.goals),
            row("MVPs", stats.mvps),
            row("Saves", stats.saves),
            row("Shots", stats.shots),
            row("Assists", stats.assists),
        ],
        label_column=True,
    )


def ranked_season_section(player: Player, playlist_index: Dict[int, str]) -> Report:
    """One row per (season, playlist) pair in source order.

    The season label is only written on the first row of each season block.
    Missing ranked values show as 0 and unknown playlists as "Unknown".
    """
    rows: List[Row] = []

    for season, playlists in player.ranked_seasons:
        for position, (playlist_id, info) in enumerate(playlists):
            rows.append(row(
                season if position == 0 else "",
                resolve_playlist_name(playlist_index, playlist_id),
                _or_zero(info.rank_points),
                _or_zero(info.matches_played),
                _or_zero(info.tier),
                _or_zero(info.division),
            ))

    return make_report("Ranked", RANKED_COLUMNS, rows)


def compose_player_report(player: Player, playlist_index: Dict[int, str]) -> List[Report]:
    """Return the identity, timestamp, statistics and ranked sections, in that order."""
    return [
        identity_section(player),
        timestamp_section(player),
        statistics_section(player),
        ranked_season_section(player, playlist_index),
    ]
