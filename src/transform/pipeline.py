"""Transform pipeline: scoreboard JSON into display-ready games."""

import logging
from collections.abc import Collection
from datetime import tzinfo

from src.extract.parse import parse_scoreboard
from src.models.game import RawGame
from src.models.scoreboard import FormattedGame
from src.transform.normalize import long_team_name, normalize_abbreviation, parse_score
from src.transform.status import StatusContext, map_status

logger = logging.getLogger(__name__)


def filter_games(games: list[RawGame], teams: Collection[str] | None) -> list[RawGame]:
    """Keep games involving at least one of the given teams, or all if teams is None."""
    if teams is None:
        return list(games)
    wanted = set(teams)
    return [g for g in games if any(abbrev in wanted for abbrev in g.abbreviations)]


def sort_games(games: list[RawGame]) -> list[RawGame]:
    """Sort by start time, then by visiting team abbreviation."""
    return sorted(games, key=lambda g: (g.start_time, g.visitor.abbreviation))


def format_game(
    league: str, game: RawGame, tz: tzinfo, superscript: bool = False
) -> FormattedGame:
    """Build the display record for a single game."""
    home, visitor = game.home, game.visitor
    home_abbrev = normalize_abbreviation(league, home)
    visitor_abbrev = normalize_abbreviation(league, visitor)

    state, status, classes = map_status(
        StatusContext(game=game, league=league, tz=tz, superscript=superscript)
    )

    return FormattedGame(
        home_team=home_abbrev,
        visitor_team=visitor_abbrev,
        home_team_long=long_team_name(league, home_abbrev, home),
        visitor_team_long=long_team_name(league, visitor_abbrev, visitor),
        home_score=parse_score(home.score),
        visitor_score=parse_score(visitor.score),
        game_state=state,
        status=status,
        classes=classes,
        use_png_logos=True,
    )


def format_games(
    league: str,
    raw_data: object,
    teams: Collection[str] | None,
    tz: tzinfo,
    superscript: bool = False,
) -> list[FormattedGame]:
    """Filter, sort, and format every game in a scoreboard response.

    Pure with respect to its inputs: the timezone is passed in rather than
    read from the host.

    Args:
        league: League identifier, e.g. "NBA".
        raw_data: Decoded JSON from the scoreboard endpoint.
        teams: Team abbreviations to keep, or None for all games.
        tz: Timezone scheduled start times are displayed in.
        superscript: Render period ordinals with <sup> markup.

    Returns:
        FormattedGame list ordered by start time, then visiting team.

    Raises:
        ParseFailedError: If raw_data is not shaped like a scoreboard.
    """
    league = league.upper()
    games = sort_games(filter_games(parse_scoreboard(raw_data, league), teams))
    formatted = [format_game(league, g, tz, superscript) for g in games]
    logger.info("Formatted %d %s games", len(formatted), league)
    return formatted
