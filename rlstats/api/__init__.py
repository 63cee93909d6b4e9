"""Remote data source: HTTP transport and record types."""

from .client import RlStatsClient
from .models import (
    Platform,
    Player,
    PlayerStats,
    Playlist,
    RankedInfo,
    SearchPage,
    Season,
    Stat,
    Tier,
)

__all__ = [
    "RlStatsClient",
    "Platform",
    "Player",
    "PlayerStats",
    "Playlist",
    "RankedInfo",
    "SearchPage",
    "Season",
    "Stat",
    "Tier",
]
