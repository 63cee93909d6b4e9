"""Reference data reports: platforms, seasons, tiers and search pages."""

from __future__ import annotations

from typing import Iterable, List

from rlstats.api.models import Platform, SearchPage, Season, Tier
from rlstats.report.tables import EMPHASIS, HEADER, Report, Row, make_report, row
from rlstats.util_time import format_calendar_date

CURRENT_SEASON = "Current"


def platforms_report(platforms: Iterable[Platform]) -> Report:
    return make_report("Platforms", ("ID", "Platform"), [row(p.id, p.name) for p in platforms])


def seasons_report(seasons: Iterable[Season]) -> Report:
    """Seasons in ascending id order; the running season is marked "Current"."""
    rows: List[Row] = []

    for season in sorted(seasons, key=lambda s: s.season_id):
        started = format_calendar_date(season.started_on)
        if season.is_current:
            rows.append(row(season.season_id, started, CURRENT_SEASON, tag=EMPHASIS))
        else:
            rows.append(row(season.season_id, started, format_calendar_date(season.ended_on)))

    return make_report("Seasons", ("Season", "Started", "Ended"), rows)


def tiers_report(tiers: Iterable[Tier]) -> Report:
    return make_report("Tiers", ("ID", "Name"), [row(t.id, t.name) for t in tiers])


def search_report(page: SearchPage) -> Report:
    """Players on one search page with their position and a paging footer."""
    rows: List[Row] = [
        row(position, p.display_name, p.platform.name, p.unique_id)
        for position, p in enumerate(page.players)
    ]
    rows.append(row(
        f"Page {page.page or 0}",
        "",
        "",
        f"{page.results} of {page.total_results} results",
        tag=HEADER,
    ))

    return make_report("Search", ("", "Display Name", "Platform", "UniqueID"), rows)
