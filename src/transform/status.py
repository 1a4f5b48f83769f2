"""ESPN status codes mapped to generic game states and display text.

Each ESPN ``status.type.id`` maps to a StatusRule. Supporting a new code
means adding an entry to STATUS_RULES. Codes not in the table are shown as
not-yet-started games.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, tzinfo

from src.models.game import RawGame
from src.models.scoreboard import GameState
from src.transform.periods import get_final_ot, get_period


@dataclass(frozen=True)
class StatusContext:
    """Everything a status renderer may need for one game."""

    game: RawGame
    league: str
    tz: tzinfo
    superscript: bool = False


@dataclass(frozen=True)
class StatusRule:
    """How one provider status code is displayed."""

    state: GameState
    render: Callable[[StatusContext], list[str]]
    classes: tuple[str, ...] = ()


def format_local_time(start: datetime, tz: tzinfo) -> str:
    """Format a start time as 'h:mm am/pm' in the given timezone.

    Examples:
        >>> from datetime import timezone
        >>> format_local_time(datetime(2024, 11, 2, 19, 5, tzinfo=timezone.utc), timezone.utc)
        '7:05 pm'
    """
    local = start.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{hour}:{local.minute:02d} {meridiem}"


def _text(label: str) -> Callable[[StatusContext], list[str]]:
    return lambda ctx: [label]


def _start_time(ctx: StatusContext) -> list[str]:
    return [format_local_time(ctx.game.start_time, ctx.tz)]


def _clock_and_period(ctx: StatusContext) -> list[str]:
    status = ctx.game.status
    return [status.display_clock, get_period(ctx.league, status.period, ctx.superscript)]


def _end_of_period(ctx: StatusContext) -> list[str]:
    return ["END", get_period(ctx.league, ctx.game.status.period, ctx.superscript)]


def _final(ctx: StatusContext) -> list[str]:
    return ["Final" + get_final_ot(ctx.league, ctx.game.status.period)]


_IN_PROGRESS = StatusRule(GameState.LIVE, _clock_and_period)
_FORFEIT = StatusRule(GameState.SCHEDULED, _text("Forfeit"))
_DELAY = StatusRule(GameState.LIVE, _text("Delay"), classes=("delay",))

STATUS_RULES: dict[str, StatusRule] = {
    "0": StatusRule(GameState.SCHEDULED, _text("TBD")),
    "1": StatusRule(GameState.SCHEDULED, _start_time),
    "2": _IN_PROGRESS,
    "21": _IN_PROGRESS,  # beginning of period
    "24": _IN_PROGRESS,  # overtime
    "3": StatusRule(GameState.FINAL, _final),
    "4": _FORFEIT,
    "9": _FORFEIT,  # home team forfeit
    "10": _FORFEIT,  # away team forfeit
    "5": StatusRule(GameState.SCHEDULED, _text("Cancelled")),
    "6": StatusRule(GameState.SCHEDULED, _text("Postponed")),
    "7": _DELAY,
    "17": _DELAY,  # rain delay
    "8": StatusRule(GameState.SCHEDULED, _text("Suspended")),
    "22": StatusRule(GameState.LIVE, _end_of_period),
    "23": StatusRule(GameState.LIVE, _text("HALFTIME")),
}

DEFAULT_RULE = StatusRule(GameState.SCHEDULED, _start_time)


def map_status(ctx: StatusContext) -> tuple[GameState, list[str], list[str]]:
    """Map a game's provider status to (state, status text, classes)."""
    rule = STATUS_RULES.get(ctx.game.status.type_id, DEFAULT_RULE)
    return rule.state, rule.render(ctx), list(rule.classes)
