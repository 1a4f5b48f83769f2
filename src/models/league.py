from enum import StrEnum


class League(StrEnum):
    """A league supported by the ESPN scoreboard provider."""

    NCAAF = "NCAAF"  # college football (FBS)
    NBA = "NBA"
    NCAAM = "NCAAM"  # men's college basketball


# ESPN path segments under /apis/site/v2/sports
LEAGUE_PATHS: dict[str, str] = {
    League.NCAAF: "football/college-football",
    League.NBA: "basketball/nba",
    League.NCAAM: "basketball/mens-college-basketball",
}

# Long team names get the abbreviation prefixed in these leagues
COLLEGE_LEAGUES: frozenset[str] = frozenset({League.NCAAF, League.NCAAM})

# Four regulation periods; period 5 onward is overtime
OVERTIME_LEAGUES: frozenset[str] = frozenset({League.NCAAF, League.NBA, League.NCAAM})
REGULATION_PERIODS = 4


def get_league_path(league: str) -> str | None:
    """Return the ESPN path segment for a league, or None if unsupported."""
    return LEAGUE_PATHS.get(league.upper())
