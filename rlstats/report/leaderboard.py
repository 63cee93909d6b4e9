"""Leaderboard paging and single-player selection.

Rank is never stored on a player; it is the 0-based position in the list the
service returned and is computed when rows are built.
"""

from __future__ import annotations

from typing import List, MutableSequence, Sequence, TypeVar

from rlstats.api.models import Player, Stat
from rlstats.errors import InvalidStatError, OutOfRangeError
from rlstats.report.tables import HEADER, Report, Row, make_report, row

# Number of players the service returns for any leaderboard.
LEADERBOARD_SIZE = 100
DEFAULT_LIMIT = 10

T = TypeVar("T")


def parse_stat(name: str) -> Stat:
    """Resolve a command line stat name to a Stat.

    Raises:
        InvalidStatError: If the name is not one of the known stats
    """
    try:
        return Stat(name.strip().lower())
    except ValueError:
        raise InvalidStatError(name, [s.value for s in Stat]) from None


def select_entry(entries: MutableSequence[T], index: int) -> T:
    """Remove and return the entry at ``index``.

    Raises:
        OutOfRangeError: If index is outside [0, len(entries)); entries is
            left untouched
    """
    if not 0 <= index < len(entries):
        raise OutOfRangeError(index, len(entries))
    return entries.pop(index)


def _summary(limit: int, width: int) -> Row:
    cells = [""] * (width - 1) + [f"{limit} of {LEADERBOARD_SIZE} results"]
    return Row(tuple(cells), HEADER)


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")


def ranked_leaderboard_report(players: Sequence[Player], limit: int = DEFAULT_LIMIT) -> Report:
    """First ``limit`` players of a ranked leaderboard plus a summary row."""
    _check_limit(limit)
    columns = ("Rank", "Display Name", "Platform", "UniqueID")

    rows: List[Row] = [
        row(rank, p.display_name, p.platform.name, p.unique_id)
        for rank, p in enumerate(players[:limit])
    ]
    rows.append(_summary(limit, len(columns)))

    return make_report("Ranked Leaderboard", columns, rows)


def stat_leaderboard_report(
    players: Sequence[Player],
    stat: Stat,
    limit: int = DEFAULT_LIMIT,
) -> Report:
    """First ``limit`` players of a stat leaderboard with the ranked stat value."""
    _check_limit(limit)
    columns = ("Rank", stat.title, "Display Name", "Platform", "UniqueID")

    rows: List[Row] = [
        row(rank, stat.value_of(p.stats), p.display_name, p.platform.name, p.unique_id)
        for rank, p in enumerate(players[:limit])
    ]
    rows.append(_summary(limit, len(columns)))

    return make_report(f"{stat.title} Leaderboard", columns, rows)
