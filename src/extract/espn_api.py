"""ESPN scoreboard client.

Uses the public ESPN site API (site.api.espn.com). No API key required.
Please don't hammer it: one request per league per poll is plenty.

Docs: http://www.espn.com/static/apis/devcenter/docs/scores.html
"""

import json
import logging
import os
from datetime import date

import httpx

from src.extract.errors import ParseFailedError, RetrievalFailedError, UnsupportedLeagueError
from src.models.league import get_league_path

logger = logging.getLogger(__name__)

PROVIDER_NAME = "ESPN"
SCOREBOARD_PATH = "/apis/site/v2/sports/{path}/scoreboard"
RESULT_LIMIT = 200


def _base_url() -> str:
    return os.environ.get("ESPN_BASE_URL", "https://site.api.espn.com").rstrip("/")


def build_scoreboard_url(league: str, game_date: date) -> str:
    """Build the scoreboard URL for a league and date.

    The date is formatted in its own calendar day. A datetime is not
    converted to another timezone first.

    Raises:
        UnsupportedLeagueError: If the league has no ESPN path.
    """
    path = get_league_path(league)
    if path is None:
        raise UnsupportedLeagueError(league)

    endpoint = SCOREBOARD_PATH.format(path=path)
    return f"{_base_url()}{endpoint}?dates={game_date.strftime('%Y%m%d')}&limit={RESULT_LIMIT}"


class ESPNAPIClient:
    """Client for the ESPN scoreboard API.

    Makes exactly one request per call and never retries. Polling cadence
    belongs to the caller.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if timeout is None:
            timeout = float(os.environ.get("ESPN_TIMEOUT_SECONDS", "30"))
        self.client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ESPNAPIClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def get_scoreboard(self, league: str, game_date: date) -> object:
        """Fetch and decode the scoreboard for a league on a date.

        Returns:
            The decoded JSON document.

        Raises:
            UnsupportedLeagueError: If the league has no ESPN path.
            RetrievalFailedError: On transport or body decoding errors, or a non-2xx response.
            ParseFailedError: If the body is not valid JSON.
        """
        url = build_scoreboard_url(league, game_date)

        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                "Couldn't retrieve %s data for provider %s: %s", league, PROVIDER_NAME, e
            )
            raise RetrievalFailedError(league, e) from e

        try:
            content = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                "Couldn't parse %s data for provider %s: %s", league, PROVIDER_NAME, e
            )
            raise ParseFailedError(league, e) from e

        logger.info("ESPN: fetched %s scoreboard for %s", league, game_date.strftime("%Y-%m-%d"))
        return content
