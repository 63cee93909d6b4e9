#!/usr/bin/env python3
"""Command line reports for the Rocket League stats API.

Usage examples:
  python -m rlstats platforms
  python -m rlstats playlists --to-excel
  python -m rlstats player 76561198000000000 1
  python -m rlstats search kronovi --page 1 --select 0
  python -m rlstats leaderboard ranked 10 --limit 25
  python -m rlstats leaderboard stat goals --select 3

The API key is read from the RLSTATS environment variable (or a .env file).
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from rlstats.api.client import RlStatsClient
from rlstats.api.models import Player
from rlstats.config.env import ApiConfig, configure_logging, load_config
from rlstats.errors import (
    InvalidStatError,
    MissingCredentialError,
    OutOfRangeError,
    RemoteQueryError,
    RlStatsError,
)
from rlstats.export.excel import reports_to_excel
from rlstats.export.jsonio import reports_to_json
from rlstats.render import console, err_console, render_reports
from rlstats.report.catalog import platforms_report, search_report, seasons_report, tiers_report
from rlstats.report.leaderboard import (
    DEFAULT_LIMIT,
    parse_stat,
    ranked_leaderboard_report,
    select_entry,
    stat_leaderboard_report,
)
from rlstats.report.lookup import build_playlist_index
from rlstats.report.player import compose_player_report
from rlstats.report.playlists import playlist_population_report
from rlstats.report.tables import Report
from rlstats.util_time import make_run_timestamps


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def _add_select(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s", "--select", type=_non_negative_int, metavar="index",
        help="Display information about a specific player.",
    )


def _add_limit(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-l", "--limit", type=_non_negative_int, default=DEFAULT_LIMIT,
        help=f"Limit the amount of players returned (default: {DEFAULT_LIMIT}).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlstats",
        description="Displays information from https://rocketleaguestats.com/.",
    )
    parser.add_argument("--to-excel", action="store_true", help="Also write the reports to an Excel workbook")
    parser.add_argument("--to-json", action="store_true", help="Also write the reports to a JSON file")

    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.required = True

    commands.add_parser("platforms", help="Display the platforms that Rocket League supports.") \
        .set_defaults(report_name="platforms")
    commands.add_parser("seasons", help="Display Rocket League seasons.") \
        .set_defaults(report_name="seasons")
    commands.add_parser("playlists", help="Display Rocket League playlist stats.") \
        .set_defaults(report_name="playlists")
    commands.add_parser("tiers", help="Display the current ranked tiers.") \
        .set_defaults(report_name="tiers")

    player = commands.add_parser("player", help="Get a specific player on a specific platform by UniqueID.")
    player.add_argument("id", help="The UniqueID of the player.")
    player.add_argument("platform_id", type=int, help="The platformID the player is from.")
    player.set_defaults(report_name="player")

    search = commands.add_parser("search", help="Searches for a player.")
    search.add_argument("name", help="The name of the player to search for.")
    search.add_argument("-p", "--page", type=_non_negative_int, default=0, help="The page that should be returned.")
    _add_select(search)
    search.set_defaults(report_name="search")

    leaderboard = commands.add_parser("leaderboard", help="Display ranked or stat leaderboards.")
    boards = leaderboard.add_subparsers(dest="board", metavar="board")
    boards.required = True

    ranked = boards.add_parser("ranked", help="Display rankings for a specific playlist id.")
    ranked.add_argument("playlist_id", type=int, help="The ID of the playlist to get rankings for.")
    _add_limit(ranked)
    _add_select(ranked)
    ranked.set_defaults(report_name="leaderboard-ranked")

    stat = boards.add_parser("stat", help="Get rankings based on a specific stat.")
    stat.add_argument("stat", help="The stat to get the rankings for (wins, goals, mvps, saves, shots, assists).")
    _add_limit(stat)
    _add_select(stat)
    stat.set_defaults(report_name="leaderboard-stat")

    return parser


def _player_reports(client: RlStatsClient, player: Player) -> List[Report]:
    # playlist names label the ranked-season rows
    index = build_playlist_index(client.get_playlists())
    return compose_player_report(player, index)


def _selected_or_board(client: RlStatsClient, players: List[Player], select: Optional[int], board) -> List[Report]:
    if select is not None:
        return _player_reports(client, select_entry(players, select))
    return [board(players)]


def build_reports(args: argparse.Namespace, client: RlStatsClient) -> List[Report]:
    """Run the queries for one parsed command and build its reports.

    Raises:
        InvalidStatError: Before any query, for an unknown stat name
        OutOfRangeError: When --select is past the end of the results
        RemoteQueryError: When a query fails
    """
    command = args.command

    if command == "platforms":
        return [platforms_report(client.get_platforms())]
    if command == "seasons":
        return [seasons_report(client.get_seasons())]
    if command == "tiers":
        return [tiers_report(client.get_tiers())]
    if command == "playlists":
        platforms = client.get_platforms()
        return [playlist_population_report(platforms, client.get_playlists())]
    if command == "player":
        return _player_reports(client, client.get_player(args.id, args.platform_id))
    if command == "search":
        page = client.search_players(args.name, args.page)
        if args.select is not None:
            return _player_reports(client, select_entry(list(page.players), args.select))
        return [search_report(page)]

    if args.board == "ranked":
        players = client.get_ranked_leaderboard(args.playlist_id)
        return _selected_or_board(
            client, players, args.select,
            lambda board: ranked_leaderboard_report(board, args.limit),
        )

    stat = parse_stat(args.stat)
    players = client.get_stat_leaderboard(stat)
    return _selected_or_board(
        client, players, args.select,
        lambda board: stat_leaderboard_report(board, stat, args.limit),
    )


def export_reports(args: argparse.Namespace, reports: List[Report], export_dir: Path) -> List[Path]:
    stamp = make_run_timestamps().iso_stamp
    written: List[Path] = []

    if args.to_excel:
        path = export_dir / f"{args.report_name}.{stamp}.xlsx"
        reports_to_excel(reports, path)
        written.append(path)
    if args.to_json:
        path = export_dir / f"{args.report_name}.{stamp}.json"
        reports_to_json(reports, path)
        written.append(path)

    for path in written:
        logging.info("Saved: %s", path)
    return written


def run(
    args: argparse.Namespace,
    client: RlStatsClient,
    out: Optional[Console] = None,
    err: Optional[Console] = None,
    export_dir: Optional[Path] = None,
) -> int:
    """Execute one parsed command and render its reports.

    Returns:
        Process exit status: 0 on success, 2 for an invalid stat name and 1
        for any other reported failure
    """
    err = err or err_console
    try:
        reports = build_reports(args, client)
    except InvalidStatError as exc:
        err.print(f"[red bold]Error:[/red bold] {escape(str(exc))}")
        return 2
    except (OutOfRangeError, RemoteQueryError) as exc:
        err.print(f"[red bold]Error:[/red bold] {escape(str(exc))}")
        return 1

    render_reports(reports, out or console)

    if export_dir is not None and (args.to_excel or args.to_json):
        export_reports(args, reports, export_dir)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config: ApiConfig = load_config()
    except MissingCredentialError as exc:
        err_console.print(f"{escape(str(exc))}\nSet this to your API key.")
        return 1
    except RlStatsError as exc:
        err_console.print(f"[red bold]Error:[/red bold] {escape(str(exc))}")
        return 1

    configure_logging(config.log_level)
    logging.debug("Using %r", config)

    client = RlStatsClient(config)
    return run(args, client, export_dir=config.export_dir)


if __name__ == "__main__":
    raise SystemExit(main())
