"""Period labels: ordinals and overtime."""

from src.models.league import OVERTIME_LEAGUES, REGULATION_PERIODS


def get_ordinal(n: int, superscript: bool = False) -> str:
    """Render a period number as an English ordinal.

    Examples:
        >>> get_ordinal(1)
        '1st'
        >>> get_ordinal(12)
        '12th'
        >>> get_ordinal(23, superscript=True)
        '23<sup>RD</sup>'
    """
    mod10 = n % 10
    mod100 = n % 100

    if mod10 == 1 and mod100 != 11:
        suffix = "st"
    elif mod10 == 2 and mod100 != 12:
        suffix = "nd"
    elif mod10 == 3 and mod100 != 13:
        suffix = "rd"
    else:
        suffix = "th"

    if superscript:
        return f"{n}<sup>{suffix.upper()}</sup>"
    return f"{n}{suffix}"


def _overtime_number(league: str, period: int) -> int:
    """Return 1 for the first overtime, 2 for the second, ... or 0 if not overtime."""
    if league.upper() not in OVERTIME_LEAGUES or period <= REGULATION_PERIODS:
        return 0
    return period - REGULATION_PERIODS


def get_period(league: str, period: int, superscript: bool = False) -> str:
    """Label an in-progress period, e.g. '3rd', 'OT', '2OT'."""
    ot = _overtime_number(league, period)
    if ot == 1:
        return "OT"
    if ot > 1:
        return f"{ot}OT"
    return get_ordinal(period, superscript=superscript)


def get_final_ot(league: str, period: int) -> str:
    """Suffix for a final score, e.g. ' (OT)', ' (3OT)', or ''."""
    ot = _overtime_number(league, period)
    if ot == 1:
        return " (OT)"
    if ot > 1:
        return f" ({ot}OT)"
    return ""
