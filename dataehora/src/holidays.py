"""Brazilian national holidays. Pure computation, fixed and Easter-relative dates."""

from dataclasses import dataclass
from datetime import date, timedelta

import pandas as pd

from .formatting import PortugueseFormatter, WeekdayFormatter

NEW_YEAR = "Confraternização Universal"

# (day, month, name), months one-indexed
FIXED_HOLIDAYS = (
    (1, 1, NEW_YEAR),
    (21, 4, "Tiradentes"),
    (1, 5, "Dia do Trabalhador"),
    (7, 9, "Independência do Brasil"),
    (12, 10, "Nossa Sra. Aparecida"),
    (2, 11, "Finados"),
    (15, 11, "Proclamação da República"),
    (20, 11, "Consciência Negra"),
    (25, 12, "Natal"),
)

# (days from Easter Sunday, name)
MOVEABLE_HOLIDAYS = (
    (-47, "Carnaval"),
    (-2, "Sexta-feira Santa"),
    (60, "Corpus Christi"),
)

DISPLAY_NAMES = {NEW_YEAR: "Ano Novo"}


@dataclass(frozen=True)
class Holiday:
    day: int
    month: int
    name: str
    date: date
    weekday_name: str
    moveable: bool = False


@dataclass(frozen=True)
class DisplayHoliday:
    name: str
    date: date


def easter_month_day(year: int) -> tuple[int, int]:
    """Compute (month, day) of Easter Sunday using the Anonymous Gregorian algorithm."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return month, day + 1


def easter_sunday(year: int) -> date:
    """Return the date of Easter Sunday for the given year."""
    month, day = easter_month_day(year)
    return date(year, month, day)


def get_holidays(year: int, formatter: WeekdayFormatter | None = None) -> list[Holiday]:
    """Return the 12 Brazilian national holidays of a year, sorted by date.

    Moveable dates are Easter Sunday plus a signed day offset, so Carnaval and
    Corpus Christi roll over month boundaries correctly. No deduplication is
    done: a fixed and a moveable holiday on the same day would both appear.
    """
    formatter = formatter or PortugueseFormatter()
    easter = easter_sunday(year)

    entries = [(date(year, month, day), name, False) for day, month, name in FIXED_HOLIDAYS]
    entries += [(easter + timedelta(days=offset), name, True) for offset, name in MOVEABLE_HOLIDAYS]

    holidays = [
        Holiday(
            day=dt.day,
            month=dt.month,
            name=name,
            date=dt,
            weekday_name=formatter.weekday(dt),
            moveable=moveable,
        )
        for dt, name, moveable in entries
    ]
    # stable sort: equal dates keep fixed-before-moveable order
    return sorted(holidays, key=lambda h: h.date)


def get_holidays_for_display(year: int) -> list[DisplayHoliday]:
    """Holidays with short display names ("Ano Novo" instead of the official name)."""
    return [
        DisplayHoliday(name=DISPLAY_NAMES.get(h.name, h.name), date=h.date)
        for h in get_holidays(year)
    ]


def is_holiday(d: date) -> bool:
    """Check if a date is a Brazilian national holiday."""
    return any(h.date == d for h in get_holidays(d.year))


def holidays_frame(start_year: int, end_year: int | None = None) -> pd.DataFrame:
    """Build a DataFrame of all holidays from start_year to end_year (inclusive).

    Columns: date, name, weekday, moveable. Rows are in date order.
    """
    if end_year is None:
        end_year = start_year
    rows = [
        {
            "date": h.date,
            "name": h.name,
            "weekday": h.weekday_name,
            "moveable": h.moveable,
        }
        for year in range(start_year, end_year + 1)
        for h in get_holidays(year)
    ]
    return pd.DataFrame(rows, columns=["date", "name", "weekday", "moveable"])
