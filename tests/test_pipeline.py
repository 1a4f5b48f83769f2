"""Tests for the fetch-and-format runner."""

import json
from datetime import date
from unittest.mock import patch
from zoneinfo import ZoneInfo

import httpx
import pytest

from src.extract.errors import ParseFailedError, RetrievalFailedError, UnsupportedLeagueError
from src.extract.espn_api import ESPNAPIClient
from src.models.scoreboard import GameState
from src.pipeline.run import fetch_and_format, main, run
from tests.sample_scoreboard import make_event, make_scoreboard

EASTERN = ZoneInfo("America/New_York")
GAME_DATE = date(2024, 11, 2)

SCOREBOARDS = {
    "basketball/nba": make_scoreboard(
        make_event("BOS", "NYK", status_id="2", period=5, clock="2:10", event_id="1"),
        make_event("LAL", "GSW", status_id="1", start="2024-11-03T02:30Z", event_id="2"),
    ),
    "football/college-football": make_scoreboard(
        make_event("SDSU", "UND", status_id="3", period=5, home_location="South Dakota State"),
    ),
}


def _scoreboard_handler(request: httpx.Request) -> httpx.Response:
    for path, payload in SCOREBOARDS.items():
        if f"/sports/{path}/scoreboard" in request.url.path:
            return httpx.Response(200, json=payload)
    return httpx.Response(404, text="not found")


def _client(handler=_scoreboard_handler) -> ESPNAPIClient:
    return ESPNAPIClient(transport=httpx.MockTransport(handler))


class TestFetchAndFormat:
    def test_success(self) -> None:
        with _client() as client:
            games = fetch_and_format("NBA", None, GAME_DATE, client=client, tz=EASTERN)

        assert [g.home_team for g in games] == ["BOS", "LAL"]
        assert games[0].game_state == GameState.LIVE
        assert games[0].status == ["2:10", "OT"]
        assert games[1].status == ["10:30 pm"]

    def test_team_filter(self) -> None:
        with _client() as client:
            games = fetch_and_format("NBA", ["GSW"], GAME_DATE, client=client, tz=EASTERN)
        assert [g.visitor_team for g in games] == ["GSW"]

    def test_college_football_overtime_final(self) -> None:
        with _client() as client:
            [game] = fetch_and_format("NCAAF", None, GAME_DATE, client=client, tz=EASTERN)
        assert game.home_team == "SDSU "
        assert game.status == ["Final (OT)"]

    def test_retrieval_failure_skips_formatter(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="oops")

        with _client(handler) as client, patch("src.pipeline.run.format_games") as formatter:
            with pytest.raises(RetrievalFailedError) as exc_info:
                fetch_and_format("NBA", None, GAME_DATE, client=client, tz=EASTERN)

        formatter.assert_not_called()
        assert exc_info.value.league == "NBA"

    def test_parse_failure_skips_formatter(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with _client(handler) as client, patch("src.pipeline.run.format_games") as formatter:
            with pytest.raises(ParseFailedError):
                fetch_and_format("NBA", None, GAME_DATE, client=client, tz=EASTERN)

        formatter.assert_not_called()

    def test_unsupported_league(self) -> None:
        with _client() as client:
            with pytest.raises(UnsupportedLeagueError):
                fetch_and_format("WNBA", None, GAME_DATE, client=client, tz=EASTERN)

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        with _client(handler) as client:
            with pytest.raises(RetrievalFailedError):
                fetch_and_format("NBA", None, GAME_DATE, client=client, tz=EASTERN)

        assert "Couldn't retrieve NBA data for provider ESPN" in caplog.text


class TestRun:
    def test_collects_leagues_and_counts_failures(self) -> None:
        with patch("src.pipeline.run.ESPNAPIClient", _client):
            results, failures = run(["NBA", "NCAAF", "NCAAM"], [GAME_DATE], tz=EASTERN)

        day = results["2024-11-02"]
        assert [g["hTeam"] for g in day["NBA"]] == ["BOS", "LAL"]
        assert day["NCAAF"][0]["hTeam"] == "SDSU "
        # NCAAM has no scoreboard in the mock, so it 404s
        assert "NCAAM" not in day
        assert failures == 1

    def test_multiple_dates(self) -> None:
        dates = [date(2024, 11, 2), date(2024, 11, 3)]
        with patch("src.pipeline.run.ESPNAPIClient", _client):
            results, failures = run(["NBA"], dates, tz=EASTERN)
        assert list(results) == ["2024-11-02", "2024-11-03"]
        assert failures == 0

    def test_missing_score_written_as_null(self) -> None:
        missing = {"basketball/nba": make_scoreboard(make_event("BOS", "NYK", home_score=None))}
        with patch.dict(SCOREBOARDS, missing), patch("src.pipeline.run.ESPNAPIClient", _client):
            results, _ = run(["NBA"], [GAME_DATE], tz=EASTERN)

        [game] = results["2024-11-02"]["NBA"]
        assert game["hScore"] is None
        assert game["vScore"] == 0
        json.dumps(results, allow_nan=False)


class TestMain:
    def test_prints_json_and_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("src.pipeline.run.ESPNAPIClient", _client):
            code = main(
                ["--league", "NBA", "--teams", "BOS", "--date", "2024-11-02", "--tz", "America/New_York"]
            )

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["2024-11-02"]["NBA"][0]["hTeam"] == "BOS"
        assert output["2024-11-02"]["NBA"][0]["status"] == ["2:10", "OT"]

    def test_output_is_strict_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        missing = {"basketball/nba": make_scoreboard(make_event("BOS", "NYK", away_score="--"))}
        with patch.dict(SCOREBOARDS, missing), patch("src.pipeline.run.ESPNAPIClient", _client):
            code = main(["--league", "NBA", "--date", "2024-11-02", "--tz", "UTC"])

        assert code == 0
        out = capsys.readouterr().out
        assert "NaN" not in out
        assert json.loads(out)["2024-11-02"]["NBA"][0]["vScore"] is None

    def test_failure_exit_code(self) -> None:
        with patch("src.pipeline.run.ESPNAPIClient", _client):
            code = main(["--league", "NCAAM", "--date", "2024-11-02", "--tz", "UTC"])
        assert code == 1

    def test_unknown_timezone(self) -> None:
        with pytest.raises(SystemExit):
            main(["--league", "NBA", "--tz", "Mars/Olympus_Mons"])
