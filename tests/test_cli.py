"""Command dispatch through ``run`` with an in-memory client."""

import io
import json

import pytest
from helpers import PS4, STEAM, XBOX, FakeClient, Platform, RankedInfo, SearchPage, Season, make_player, make_players, make_playlist
from rich.console import Console

from rlstats import cli
from rlstats.api.models import Stat


def _console():
    return Console(file=io.StringIO(), width=200, highlight=False)


def invoke(argv, client, export_dir=None):
    out, err = _console(), _console()
    args = cli.build_parser().parse_args(argv)
    code = cli.run(args, client, out=out, err=err, export_dir=export_dir)
    return code, out.file.getvalue(), err.file.getvalue()


PLAYLISTS = [
    make_playlist(10, 1, 120, name="Ranked Duel"),
    make_playlist(10, 2, 30, name="Ranked Duel"),
    make_playlist(11, 3, 9, name="Ranked Doubles"),
]


class TestReports:

    def test_playlists(self):
        client = FakeClient(platforms=[XBOX, STEAM, PS4], playlists=PLAYLISTS)
        code, out, _ = invoke(["playlists"], client)
        assert code == 0
        assert "Ranked Duel" in out and "N/A" in out and "159" in out
        assert out.index("Steam") < out.index("Ps4") < out.index("XboxOne")

    def test_seasons(self):
        code, out, _ = invoke(["seasons"], FakeClient(seasons=[Season(2, 0), Season(1, 0, 86400)]))
        assert code == 0
        assert "Current" in out

    def test_player(self):
        player = make_player(ranked_seasons=(("7", (("10", RankedInfo(1100)),)),))
        client = FakeClient(player=player, playlists=PLAYLISTS)
        code, out, _ = invoke(["player", "76561198000000000", "1"], client)
        assert code == 0
        assert client.calls[0] == ("get_player", "76561198000000000", 1)
        assert ("get_playlists",) in client.calls
        assert "Ranked Duel" in out and "1100" in out

    def test_search_page(self):
        page = SearchPage(page=0, results=2, total_results=2, max_results_per_page=20,
                          players=tuple(make_players(2)))
        code, out, _ = invoke(["search", "player", "--page", "0"], FakeClient(search_page=page))
        assert code == 0
        assert "2 of 2 results" in out

    def test_ranked_limit(self):
        client = FakeClient(leaderboard=make_players(10))
        code, out, _ = invoke(["leaderboard", "ranked", "10", "--limit", "3"], client)
        assert code == 0
        assert client.calls == [("get_ranked_leaderboard", 10)]
        assert "player2" in out and "player3" not in out
        assert "3 of 100 results" in out

    def test_stat_board(self):
        client = FakeClient(leaderboard=make_players(3))
        code, out, _ = invoke(["leaderboard", "stat", "goals"], client)
        assert code == 0
        assert client.calls == [("get_stat_leaderboard", Stat.GOALS)]
        assert "Goals" in out


class TestSelection:

    def test_select_shows_player(self):
        client = FakeClient(leaderboard=make_players(5), playlists=PLAYLISTS)
        code, out, _ = invoke(["leaderboard", "ranked", "10", "--select", "3"], client)
        assert code == 0
        assert "player3" in out and "player4" not in out

    def test_select_out_of_range(self):
        client = FakeClient(leaderboard=make_players(3), playlists=PLAYLISTS)
        code, out, err = invoke(["leaderboard", "stat", "wins", "--select", "5"], client)
        assert code == 1
        assert "Cannot select index 5" in err
        assert ("get_playlists",) not in client.calls
        assert out == ""

    def test_search_select_out_of_range(self):
        code, _, err = invoke(["search", "nobody", "--select", "0"], FakeClient())
        assert code == 1
        assert "no results" in err


def test_invalid_stat_rejected_before_query():
    client = FakeClient(leaderboard=make_players(3))
    code, out, err = invoke(["leaderboard", "stat", "points"], client)
    assert code == 2
    assert client.calls == []
    assert "Invalid stat 'points'" in err


def test_remote_failure_reported():
    from rlstats.errors import RemoteQueryError

    class FailingClient(FakeClient):
        def get_tiers(self):
            raise RemoteQueryError("/data/tiers", "HTTP 500", status_code=500)

    code, _, err = invoke(["tiers"], FailingClient())
    assert code == 1
    assert "/data/tiers" in err


@pytest.mark.parametrize("argv", [
    ["leaderboard", "ranked", "10", "--limit", "-1"],
    ["search", "x", "--select", "-2"],
    ["player", "abc", "steam"],
])
def test_malformed_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.build_parser().parse_args(argv)
    assert excinfo.value.code == 2


def test_json_export(tmp_path):
    client = FakeClient(platforms=[STEAM, PS4])
    code, _, _ = invoke(["--to-json", "platforms"], client, export_dir=tmp_path)
    assert code == 0
    written = list(tmp_path.glob("platforms.*.json"))
    assert len(written) == 1
    data = json.loads(written[0].read_text(encoding="utf-8"))
    assert data[0]["columns"] == ["ID", "Platform"]
    assert data[0]["rows"][0]["cells"] == [1, "Steam"]


def test_main_without_credential(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("RLSTATS", raising=False)
    monkeypatch.chdir(tmp_path)
    assert cli.main(["platforms"]) == 1
    assert "RLSTATS environment variable not set." in capsys.readouterr().err


class TestRemoteText:
    """Names from the service are printed as-is, brackets included."""

    @pytest.mark.parametrize("name", ["squishy[/]", "[b]Kronovi", "[red]x[/red]"])
    def test_bracketed_display_names(self, name):
        client = FakeClient(leaderboard=[make_player(0, display_name=name)])
        code, out, _ = invoke(["leaderboard", "ranked", "10"], client)
        assert code == 0
        assert name in out

    def test_bracketed_platform_and_playlist_names(self):
        odd = Platform(7, "[bold]PC")
        client = FakeClient(platforms=[odd], playlists=[make_playlist(10, 7, 5, name="Hoops [/]")])
        code, out, _ = invoke(["playlists"], client)
        assert code == 0
        assert "[bold]PC" in out
        assert "Hoops [/]" in out


def test_section_titles_rendered():
    player = make_player(ranked_seasons=(("7", (("10", RankedInfo(1100)),)),))
    code, out, _ = invoke(["player", "x", "1"], FakeClient(player=player, playlists=PLAYLISTS))
    assert code == 0
    assert "Statistics" in out
    assert "Ranked" in out
