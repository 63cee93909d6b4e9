"""Shared test factories.

Builds record objects and raw API payloads with sensible defaults, plus
stand-ins for the HTTP session and the API client.
"""

import sys
from pathlib import Path

import requests

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from rlstats.api.models import (  # noqa: E402
    Platform,
    Player,
    PlayerStats,
    Playlist,
    RankedInfo,
    SearchPage,
    Season,
    Tier,
)

STEAM = Platform(1, "Steam")
PS4 = Platform(2, "Ps4")
XBOX = Platform(3, "XboxOne")

# 2018-03-07 00:00:00 UTC
MAR_7_2018 = 1520380800


# ─── Record factories ─────────────────────────────────────────────

def make_playlist(id=10, platform_id=1, population=100, name=None):
    return Playlist(id=id, name=name or f"Playlist {id}", platform_id=platform_id, population=population)


def make_player(n=0, **overrides):
    """Build a Player; ``n`` varies the identity fields."""
    fields = dict(
        display_name=f"player{n}",
        unique_id=f"7656119800000000{n}",
        platform=STEAM,
        profile_url=f"https://rocketleaguestats.com/profile/steam/{n}",
        last_requested=MAR_7_2018,
        created_at=MAR_7_2018,
        updated_at=MAR_7_2018,
        next_update_at=MAR_7_2018,
        stats=PlayerStats(wins=100 - n, goals=200 - n, mvps=50, saves=75, shots=400, assists=60),
        ranked_seasons=(),
    )
    fields.update(overrides)
    return Player(**fields)


def make_players(count):
    return [make_player(n) for n in range(count)]


# ─── Raw payload factories ────────────────────────────────────────

def raw_player(**overrides):
    payload = {
        "uniqueId": "76561198000000000",
        "displayName": "Kronovi",
        "platform": {"id": 1, "name": "Steam"},
        "avatar": None,
        "profileUrl": "https://rocketleaguestats.com/profile/steam/76561198000000000",
        "signatureUrl": "https://signature.rocketleaguestats.com/normal/steam/76561198000000000.png",
        "stats": {"wins": 1200, "goals": 3400, "mvps": 600, "saves": 2100, "shots": 7000, "assists": 900},
        "rankedSeasons": {
            "7": {
                "10": {"rankPoints": 1100, "matchesPlayed": 40, "tier": 15, "division": 2},
                "11": {"rankPoints": 1300, "matchesPlayed": 120},
            },
            "8": {"13": {"rankPoints": 900}},
        },
        "lastRequested": MAR_7_2018,
        "createdAt": MAR_7_2018,
        "updatedAt": MAR_7_2018,
        "nextUpdateAt": MAR_7_2018,
    }
    payload.update(overrides)
    return payload


# ─── Transport stand-ins ──────────────────────────────────────────

class StubResponse:
    def __init__(self, payload=None, status_code=200, json_error=False):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.json_error:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class StubSession:
    """Records GET calls and answers them from a queue of responses or exceptions."""

    def __init__(self, *responses):
        self.headers = {}
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClient:
    """In-memory RlStatsClient that records every query it answers."""

    def __init__(self, platforms=(), playlists=(), seasons=(), tiers=(), player=None,
                 search_page=None, leaderboard=()):
        self.platforms = list(platforms)
        self.playlists = list(playlists)
        self.seasons = list(seasons)
        self.tiers = list(tiers)
        self.player = player
        self.search_page = search_page or SearchPage(page=0, results=0, total_results=0, max_results_per_page=10)
        self.leaderboard = list(leaderboard)
        self.calls = []

    def get_platforms(self):
        self.calls.append(("get_platforms",))
        return list(self.platforms)

    def get_playlists(self):
        self.calls.append(("get_playlists",))
        return list(self.playlists)

    def get_seasons(self):
        self.calls.append(("get_seasons",))
        return list(self.seasons)

    def get_tiers(self):
        self.calls.append(("get_tiers",))
        return list(self.tiers)

    def get_player(self, unique_id, platform_id):
        self.calls.append(("get_player", unique_id, platform_id))
        return self.player

    def search_players(self, display_name, page=0):
        self.calls.append(("search_players", display_name, page))
        return self.search_page

    def get_ranked_leaderboard(self, playlist_id):
        self.calls.append(("get_ranked_leaderboard", playlist_id))
        return list(self.leaderboard)

    def get_stat_leaderboard(self, stat):
        self.calls.append(("get_stat_leaderboard", stat))
        return list(self.leaderboard)


__all__ = [
    "FakeClient",
    "MAR_7_2018",
    "PS4",
    "Platform",
    "PlayerStats",
    "RankedInfo",
    "STEAM",
    "SearchPage",
    "Season",
    "StubResponse",
    "StubSession",
    "Tier",
    "XBOX",
    "make_player",
    "make_players",
    "make_playlist",
    "raw_player",
]
