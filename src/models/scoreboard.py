"""Output models for the scoreboard front end.

A FormattedGame is rebuilt from scratch on every fetch. ``to_dict`` renders
it in the key layout the display front end reads.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class GameState(IntEnum):
    """Generic lifecycle bucket for a game, independent of provider codes."""

    SCHEDULED = 0
    LIVE = 1
    FINAL = 2


@dataclass
class FormattedGame:
    """A single game normalized for display."""

    home_team: str
    visitor_team: str
    home_team_long: str
    visitor_team_long: str
    home_score: int | float  # NaN when the feed score is missing or non-numeric
    visitor_score: int | float
    game_state: GameState
    status: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    use_png_logos: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "classes": list(self.classes),
            "gameMode": int(self.game_state),
            "hTeam": self.home_team,
            "vTeam": self.visitor_team,
            "hTeamLong": self.home_team_long,
            "vTeamLong": self.visitor_team_long,
            "hScore": self.home_score,
            "vScore": self.visitor_score,
            "status": list(self.status),
            "usePngLogos": self.use_png_logos,
        }
