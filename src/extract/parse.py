"""Parse ESPN scoreboard JSON into RawGame instances."""

import logging
from datetime import datetime, timezone

from src.extract.errors import ParseFailedError
from src.models.game import Competitor, GameStatus, RawGame

logger = logging.getLogger(__name__)


def _parse_start_time(value: object) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        start = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    # ESPN times are UTC
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    return start


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


def _parse_competitor(c: dict) -> Competitor | None:
    team = c.get("team")
    if not isinstance(team, dict):
        return None
    score = c.get("score")
    return Competitor(
        abbreviation=_text(team.get("abbreviation")),
        location=_text(team.get("location")),
        short_display_name=_text(team.get("shortDisplayName")),
        home_away=_text(c.get("homeAway")),
        score=str(score) if score is not None else None,
    )


def _parse_status(status: dict) -> GameStatus:
    status_type = status.get("type")
    type_id = status_type.get("id") if isinstance(status_type, dict) else None
    period = status.get("period", 0)
    return GameStatus(
        type_id=str(type_id) if type_id is not None else "",
        period=period if isinstance(period, int) else 0,
        display_clock=_text(status.get("displayClock")),
    )


def parse_event(event: dict) -> RawGame | None:
    """Parse one scoreboard event.

    Returns:
        A RawGame, or None if the event has no usable competition
        (fewer than two competitors, a competitor or status that is not an
        object, or no parseable start time).
    """
    competitions = event.get("competitions")
    if not isinstance(competitions, list) or not competitions:
        return None

    competition = competitions[0]
    if not isinstance(competition, dict):
        return None

    competitors = competition.get("competitors")
    if not isinstance(competitors, list) or len(competitors) < 2:
        return None
    if not all(isinstance(c, dict) for c in competitors[:2]):
        return None
    first = _parse_competitor(competitors[0])
    second = _parse_competitor(competitors[1])
    if first is None or second is None:
        return None

    status = event.get("status") or competition.get("status") or {}
    if not isinstance(status, dict):
        return None

    start_time = _parse_start_time(competition.get("date") or event.get("date"))
    if start_time is None:
        return None

    return RawGame(
        competitors=(first, second),
        start_time=start_time,
        status=_parse_status(status),
    )


def parse_scoreboard(scoreboard: object, league: str) -> list[RawGame]:
    """Parse a decoded scoreboard response into RawGame dataclasses.

    Args:
        scoreboard: Decoded JSON from the scoreboard endpoint.
        league: League the scoreboard was fetched for, used in errors.

    Returns:
        List of RawGame instances in feed order.

    Raises:
        ParseFailedError: If the document has no ``events`` list.
    """
    if not isinstance(scoreboard, dict) or not isinstance(scoreboard.get("events"), list):
        raise ParseFailedError(league, "response has no events list")

    games: list[RawGame] = []
    for event in scoreboard["events"]:
        game = parse_event(event) if isinstance(event, dict) else None
        if game is None:
            logger.warning("Skipping malformed %s event: %s", league, _event_id(event))
            continue
        games.append(game)

    logger.info("Parsed %d %s games from scoreboard response", len(games), league)
    return games


def _event_id(event: object) -> str:
    if isinstance(event, dict):
        return str(event.get("id", "<no id>"))
    return "<not an object>"
