"""Cross-platform playlist population report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from rlstats.api.models import Platform, Playlist
from rlstats.report.tables import HEADER, Report, Row, make_report

NOT_AVAILABLE = "N/A"


@dataclass
class PlaylistAggregate:
    """Population of one playlist id summed over every platform.

    Attributes:
        id: Playlist id shared by all platforms
        name: First name seen for the id
        per_platform: platform id -> population from the first record seen
            for that platform
        total: Sum of every population record contributed to the id
    """
    id: int
    name: str
    per_platform: Dict[int, int] = field(default_factory=dict)
    total: int = 0


def aggregate_playlists(playlists: Iterable[Playlist]) -> Tuple[List[PlaylistAggregate], int]:
    """Fold per-platform playlist records into one aggregate per playlist id.

    Returns:
        (aggregates sorted by playlist id, grand total over every record)
    """
    aggregates: Dict[int, PlaylistAggregate] = {}
    grand_total = 0

    for playlist in playlists:
        aggregate = aggregates.get(playlist.id)
        if aggregate is None:
            aggregate = aggregates[playlist.id] = PlaylistAggregate(playlist.id, playlist.name)

        aggregate.total += playlist.population
        # a repeated (id, platform) pair only counts toward the total
        aggregate.per_platform.setdefault(playlist.platform_id, playlist.population)
        grand_total += playlist.population

    return [aggregates[key] for key in sorted(aggregates)], grand_total


def playlist_population_report(
    platforms: Sequence[Platform],
    playlists: Iterable[Playlist],
) -> Report:
    """Build the playlist population table.

    Columns are ID, Playlist, one column per platform in ascending platform id
    order, and Total. A platform that never reported a playlist shows "N/A".
    The last row carries only the grand total, in the Total column.
    """
    ordered_platforms = sorted(platforms, key=lambda p: p.id)
    aggregates, grand_total = aggregate_playlists(playlists)

    columns = ["ID", "Playlist"] + [p.name for p in ordered_platforms] + ["Total"]
    rows: List[Row] = []

    for aggregate in aggregates:
        cells = [aggregate.id, aggregate.name]
        cells.extend(
            aggregate.per_platform.get(platform.id, NOT_AVAILABLE)
            for platform in ordered_platforms
        )
        cells.append(aggregate.total)
        rows.append(Row(tuple(cells)))

    summary = [""] * (len(columns) - 1) + [grand_total]
    rows.append(Row(tuple(summary), HEADER))

    return make_report("Playlists", columns, rows)
