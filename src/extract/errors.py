"""Errors raised while building, fetching, or decoding scoreboard requests."""


class ScoreboardError(Exception):
    """Base class for scoreboard failures. Always carries the league."""

    def __init__(self, league: str, message: str) -> None:
        super().__init__(message)
        self.league = league


class UnsupportedLeagueError(ScoreboardError, ValueError):
    """The league has no ESPN path. Retrying with the same league won't help."""

    def __init__(self, league: str) -> None:
        super().__init__(league, f"Unsupported league: {league}")


class RetrievalFailedError(ScoreboardError):
    """Network or HTTP-level failure while fetching a scoreboard."""

    def __init__(self, league: str, cause: Exception) -> None:
        super().__init__(league, f"Couldn't retrieve {league} data: {cause}")
        self.cause = cause


class ParseFailedError(ScoreboardError):
    """The scoreboard response was not valid JSON or not shaped like a scoreboard."""

    def __init__(self, league: str, cause: Exception | str) -> None:
        super().__init__(league, f"Couldn't parse {league} data: {cause}")
        self.cause = cause
