"""Record types returned by the statistics API.

Every record is an immutable snapshot built fresh for one CLI invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Platform:
    id: int
    name: str


@dataclass(frozen=True)
class Playlist:
    """Population of one playlist on one platform.

    The same playlist id appears once per platform it is offered on.
    """
    id: int
    name: str
    platform_id: int
    population: int
    updated_at: Optional[int] = None


@dataclass(frozen=True)
class Season:
    season_id: int
    started_on: int
    ended_on: Optional[int] = None  # None while the season is running

    @property
    def is_current(self) -> bool:
        return self.ended_on is None


@dataclass(frozen=True)
class Tier:
    id: int
    name: str


@dataclass(frozen=True)
class PlayerStats:
    wins: int = 0
    goals: int = 0
    mvps: int = 0
    saves: int = 0
    shots: int = 0
    assists: int = 0


@dataclass(frozen=True)
class RankedInfo:
    """Progress in one playlist for one ranked season; any member may be missing."""
    rank_points: Optional[int] = None
    matches_played: Optional[int] = None
    tier: Optional[int] = None
    division: Optional[int] = None


# (playlist id as sent by the API, progress) pairs, in source order
SeasonPlaylists = Tuple[Tuple[str, RankedInfo], ...]


@dataclass(frozen=True)
class Player:
    """Player profile snapshot.

    Attributes:
        display_name: Current display name on the platform
        unique_id: Platform specific identifier (Steam id, PSN name, ...)
        platform: Platform the profile belongs to
        profile_url: Link to the public profile page
        last_requested: Unix seconds of the last profile request
        created_at: Unix seconds when the profile was first tracked
        updated_at: Unix seconds of the last refresh
        next_update_at: Unix seconds of the next scheduled refresh
        stats: Cumulative career stats
        ranked_seasons: (season label, playlists) pairs, in source order
    """
    display_name: str
    unique_id: str
    platform: Platform
    profile_url: str = ""
    last_requested: int = 0
    created_at: int = 0
    updated_at: int = 0
    next_update_at: int = 0
    stats: PlayerStats = field(default_factory=PlayerStats)
    ranked_seasons: Tuple[Tuple[str, SeasonPlaylists], ...] = ()
    avatar: Optional[str] = None
    signature_url: Optional[str] = None


@dataclass(frozen=True)
class SearchPage:
    """One page of a player name search."""
    page: Optional[int]
    results: int
    total_results: int
    max_results_per_page: int
    players: Tuple[Player, ...] = ()


class Stat(Enum):
    """Cumulative stats a stat leaderboard can be ranked by.

    The value is the name used on the command line and in the API query.
    """
    WINS = "wins"
    GOALS = "goals"
    MVPS = "mvps"
    SAVES = "saves"
    SHOTS = "shots"
    ASSISTS = "assists"

    @property
    def title(self) -> str:
        return _STAT_TITLES[self]

    def value_of(self, stats: PlayerStats) -> int:
        return getattr(stats, self.value)


_STAT_TITLES = {
    Stat.WINS: "Wins",
    Stat.GOALS: "Goals",
    Stat.MVPS: "MVPs",
    Stat.SAVES: "Saves",
    Stat.SHOTS: "Shots",
    Stat.ASSISTS: "Assists",
}
