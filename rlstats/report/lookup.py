"""Playlist id to display name index used to label ranked-season rows."""

from __future__ import annotations

from typing import Dict, Iterable, Union

from rlstats.api.models import Playlist

UNKNOWN_PLAYLIST = "Unknown"


def build_playlist_index(playlists: Iterable[Playlist]) -> Dict[int, str]:
    """Map each playlist id to its display name.

    A playlist id is listed once per platform; the first name seen for an id
    is kept.
    """
    index: Dict[int, str] = {}
    for playlist in playlists:
        index.setdefault(playlist.id, playlist.name)
    return index


def resolve_playlist_name(index: Dict[int, str], playlist_id: Union[int, str]) -> str:
    """Look up a playlist name, returning "Unknown" for ids not in the index.

    Ranked-season data carries playlist ids as strings; ids that are not
    numeric also resolve to "Unknown".
    """
    try:
        key = int(playlist_id)
    except (TypeError, ValueError):
        return UNKNOWN_PLAYLIST
    return index.get(key, UNKNOWN_PLAYLIST)
