"""Team field normalization: abbreviation overrides, long names, scores."""

import math
from dataclasses import dataclass

from src.models.game import Competitor
from src.models.league import COLLEGE_LEAGUES, League


@dataclass(frozen=True)
class AbbreviationOverride:
    """Rewrite a team abbreviation when league, code, and location all match."""

    league: str
    abbreviation: str
    location_contains: str
    replacement: str

    def matches(self, league: str, team: Competitor) -> bool:
        return (
            league == self.league
            and team.abbreviation == self.abbreviation
            and self.location_contains in team.location
        )


ABBREVIATION_OVERRIDES: tuple[AbbreviationOverride, ...] = (
    # FCS South Dakota State shares "SDSU" with FBS San Diego State. The
    # logo catalog keys the FCS school as "SDSU " and the space collapses
    # in HTML.
    AbbreviationOverride(
        league=League.NCAAF,
        abbreviation="SDSU",
        location_contains="South Dakota State",
        replacement="SDSU ",
    ),
)


def normalize_abbreviation(league: str, team: Competitor) -> str:
    """Return the display abbreviation for a team, applying any override."""
    for override in ABBREVIATION_OVERRIDES:
        if override.matches(league, team):
            return override.replacement
    return team.abbreviation


def long_team_name(league: str, abbreviation: str, team: Competitor) -> str:
    """Long display name. College leagues prefix the abbreviation.

    Examples:
        >>> long_team_name("NCAAM", "DUKE", Competitor("DUKE", "Duke", "Blue Devils", "home"))
        'DUKE Blue Devils'
    """
    if league in COLLEGE_LEAGUES:
        return f"{abbreviation} {team.short_display_name}"
    return team.short_display_name


def parse_score(score: str | None) -> int | float:
    """Parse a score, returning NaN when it is missing or non-numeric.

    Examples:
        >>> parse_score("17")
        17
        >>> parse_score(None)
        nan
    """
    try:
        return int(str(score).strip())
    except (TypeError, ValueError):
        return math.nan
