"""Next-holiday lookup and day countdown over civil dates."""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

from .formatting import PortugueseFormatter, WeekdayFormatter
from .holidays import get_holidays_for_display


@dataclass(frozen=True)
class Countdown:
    name: str
    date: date
    days: int
    day_month: str


def civil_date(now: date | datetime) -> date:
    """Reduce an instant to its civil date (in whatever zone it carries)."""
    if isinstance(now, datetime):
        return now.date()
    return now


def next_holiday(now: date | datetime, holidays_this_year: Sequence, holidays_next_year: Sequence):
    """Return the first holiday strictly after now's civil date.

    Both sequences must be sorted; this year's entries are scanned first.
    Callers pass next year's holidays so a match always exists.
    """
    today = civil_date(now)
    found = next(
        (h for h in [*holidays_this_year, *holidays_next_year] if h.date > today),
        None,
    )
    assert found is not None, f"no holiday after {today}: next year's holidays missing"
    return found


def days_until(holiday_date: date, today: date | datetime) -> int:
    """Whole days from today's civil date to holiday_date."""
    delta = holiday_date - civil_date(today)
    return math.ceil(delta / timedelta(days=1))


def upcoming(now: datetime, formatter: WeekdayFormatter | None = None) -> Countdown:
    """Find the next holiday for a local instant and count the days to it."""
    formatter = formatter or PortugueseFormatter()
    today = civil_date(now)
    holiday = next_holiday(
        today,
        get_holidays_for_display(today.year),
        get_holidays_for_display(today.year + 1),
    )
    return Countdown(
        name=holiday.name,
        date=holiday.date,
        days=days_until(holiday.date, today),
        day_month=formatter.day_month(holiday.date),
    )


def holiday_message(countdown: Countdown) -> str:
    return (
        f"O próximo feriado é {countdown.name} no dia {countdown.day_month}, "
        f"que é em {countdown.days} dias."
    )
