from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Competitor:
    """One side of a game as delivered by the scoreboard feed."""

    abbreviation: str
    location: str
    short_display_name: str
    home_away: str  # "home" or "away"
    score: str | None = None

    @property
    def is_home(self) -> bool:
        return self.home_away == "home"


@dataclass(frozen=True)
class GameStatus:
    """Provider status for a game."""

    type_id: str  # ESPN status.type.id, e.g. "1", "2", "3"
    period: int = 0
    display_clock: str = ""


@dataclass(frozen=True)
class RawGame:
    """A single contest from the scoreboard feed, in feed order."""

    competitors: tuple[Competitor, Competitor]
    start_time: datetime
    status: GameStatus

    @property
    def home(self) -> Competitor:
        first, second = self.competitors
        return second if first.home_away == "away" else first

    @property
    def visitor(self) -> Competitor:
        first, second = self.competitors
        return first if first.home_away == "away" else second

    @property
    def abbreviations(self) -> tuple[str, str]:
        return self.competitors[0].abbreviation, self.competitors[1].abbreviation
