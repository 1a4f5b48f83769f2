"""Scoreboard runner. Ties together extract and transform for one league and date."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from collections.abc import Collection
from datetime import date, tzinfo
from zoneinfo import ZoneInfoNotFoundError

from src.extract.errors import ScoreboardError
from src.extract.espn_api import ESPNAPIClient
from src.extract.utils import date_range, resolve_timezone
from src.models.scoreboard import FormattedGame
from src.transform.pipeline import format_games

logger = logging.getLogger(__name__)


def _json_safe(game: dict[str, object]) -> dict[str, object]:
    """Replace NaN scores with None so the output is strict JSON."""
    for key in ("hScore", "vScore"):
        score = game[key]
        if isinstance(score, float) and math.isnan(score):
            game[key] = None
    return game


def fetch_and_format(
    league: str,
    teams: Collection[str] | None,
    game_date: date,
    client: ESPNAPIClient | None = None,
    tz: tzinfo | None = None,
    superscript: bool = False,
) -> list[FormattedGame]:
    """Fetch one league's scoreboard for a date and format it for display.

    Performs exactly one request and one decode. Nothing is retried; the
    caller decides when to poll again.

    Args:
        league: League identifier, e.g. "NBA".
        teams: Team abbreviations to keep, or None for all games.
        game_date: Date to fetch.
        client: Client to use. A temporary one is created if omitted.
        tz: Display timezone. Resolved from the environment if omitted.
        superscript: Render period ordinals with <sup> markup.

    Raises:
        UnsupportedLeagueError: If the league has no ESPN path.
        RetrievalFailedError: On transport errors or a non-2xx response.
        ParseFailedError: If the response is not a valid scoreboard.
    """
    if tz is None:
        tz = resolve_timezone()

    if client is None:
        with ESPNAPIClient() as owned:
            content = owned.get_scoreboard(league, game_date)
    else:
        content = client.get_scoreboard(league, game_date)

    return format_games(league, content, teams, tz, superscript=superscript)


def run(
    leagues: list[str],
    dates: list[date],
    teams: Collection[str] | None = None,
    tz: tzinfo | None = None,
    superscript: bool = False,
) -> tuple[dict[str, dict[str, list[dict]]], int]:
    """Fetch every league for every date.

    A failing league is logged and skipped so the others still render.

    Returns:
        (results keyed by date then league, number of failed fetches)
    """
    if tz is None:
        tz = resolve_timezone()

    results: dict[str, dict[str, list[dict]]] = {}
    failures = 0

    with ESPNAPIClient() as client:
        for game_date in dates:
            day = results.setdefault(game_date.isoformat(), {})
            for league in leagues:
                try:
                    games = fetch_and_format(
                        league, teams, game_date, client=client, tz=tz, superscript=superscript
                    )
                except ScoreboardError as e:
                    logger.error("Skipping %s for %s: %s", e.league, game_date, e)
                    failures += 1
                    continue
                day[league] = [_json_safe(g.to_dict()) for g in games]

    return results, failures


def main(argv: list[str] | None = None) -> int:
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="ESPN scoreboard normalizer",
        epilog="Missing or non-numeric scores are written as null.",
    )
    parser.add_argument(
        "--league",
        action="append",
        required=True,
        help="League to fetch (NCAAF, NBA, NCAAM). Repeat for several.",
    )
    parser.add_argument(
        "--teams",
        nargs="+",
        metavar="ABBREV",
        help="Only keep games involving these team abbreviations.",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=date.today(),
        help="Game date to fetch (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--date-range",
        nargs=2,
        metavar=("START", "END"),
        help="Fetch a range of dates (YYYY-MM-DD YYYY-MM-DD).",
    )
    parser.add_argument(
        "--tz",
        help="IANA timezone for start times. Defaults to SCOREBOARD_TZ, then the host zone.",
    )
    parser.add_argument(
        "--superscript",
        action="store_true",
        help="Render period ordinals with <sup> markup.",
    )
    args = parser.parse_args(argv)

    if args.date_range:
        dates = date_range(
            date.fromisoformat(args.date_range[0]),
            date.fromisoformat(args.date_range[1]),
        )
    else:
        dates = [args.date]

    try:
        tz = resolve_timezone(args.tz)
    except ZoneInfoNotFoundError as e:
        parser.error(f"unknown timezone: {e}")

    results, failures = run(
        args.league,
        dates,
        teams=args.teams,
        tz=tz,
        superscript=args.superscript,
    )
    json.dump(results, sys.stdout, indent=2, allow_nan=False)
    sys.stdout.write("\n")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
