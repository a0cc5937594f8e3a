"""Tests for Brazilian holidays module."""

from datetime import date

from dataehora.src.holidays import (
    easter_month_day,
    easter_sunday,
    get_holidays,
    get_holidays_for_display,
    holidays_frame,
    is_holiday,
)


def _by_name(holidays):
    return {h.name: h.date for h in holidays}


class TestEasterSunday:
    """Verify Easter computation against known dates."""

    def test_known_years(self):
        known = {
            2000: date(2000, 4, 23),
            2019: date(2019, 4, 21),
            2020: date(2020, 4, 12),
            2021: date(2021, 4, 4),
            2022: date(2022, 4, 17),
            2023: date(2023, 4, 9),
            2024: date(2024, 3, 31),
            2025: date(2025, 4, 20),
            2026: date(2026, 4, 5),
        }
        for year, expected in known.items():
            assert easter_sunday(year) == expected, f"Easter {year}: expected {expected}, got {easter_sunday(year)}"

    def test_always_a_sunday(self):
        for year in range(1900, 2101):
            assert easter_sunday(year).weekday() == 6

    def test_within_march_22_april_25(self):
        for year in range(1583, 2500):
            d = easter_sunday(year)
            assert date(year, 3, 22) <= d <= date(year, 4, 25)

    def test_month_day_total_over_any_int(self):
        """Raw computus never rejects a year, even outside the date range."""
        for year in (-500, 0, 10000, 123456):
            month, day = easter_month_day(year)
            assert month in (3, 4)
            assert 1 <= day <= 31


class TestGetHolidays:
    def test_count(self):
        """Brazil has 12 national holidays per year (9 fixed, 3 moveable)."""
        for year in (2024, 2025, 2026):
            holidays = get_holidays(year)
            assert len(holidays) == 12
            assert sum(h.moveable for h in holidays) == 3

    def test_fixed_holidays_present(self):
        dates = _by_name(get_holidays(2025))
        assert dates["Confraternização Universal"] == date(2025, 1, 1)
        assert dates["Tiradentes"] == date(2025, 4, 21)
        assert dates["Dia do Trabalhador"] == date(2025, 5, 1)
        assert dates["Independência do Brasil"] == date(2025, 9, 7)
        assert dates["Nossa Sra. Aparecida"] == date(2025, 10, 12)
        assert dates["Finados"] == date(2025, 11, 2)
        assert dates["Proclamação da República"] == date(2025, 11, 15)
        assert dates["Consciência Negra"] == date(2025, 11, 20)
        assert dates["Natal"] == date(2025, 12, 25)

    def test_moveable_holidays_2024(self):
        """Easter 2024 = March 31."""
        dates = _by_name(get_holidays(2024))
        assert dates["Carnaval"] == date(2024, 2, 13)
        assert dates["Sexta-feira Santa"] == date(2024, 3, 29)
        assert dates["Corpus Christi"] == date(2024, 5, 30)

    def test_moveable_holidays_roll_over_months(self):
        """Easter 2025 = April 20: Carnaval in March, Corpus Christi in June."""
        dates = _by_name(get_holidays(2025))
        assert dates["Carnaval"] == date(2025, 3, 4)
        assert dates["Sexta-feira Santa"] == date(2025, 4, 18)
        assert dates["Corpus Christi"] == date(2025, 6, 19)

    def test_day_month_match_date(self):
        for h in get_holidays(2026):
            assert (h.day, h.month) == (h.date.day, h.date.month)
            assert h.date.year == 2026

    def test_weekday_names(self):
        holidays = {h.name: h for h in get_holidays(2025)}
        assert holidays["Confraternização Universal"].weekday_name == "quarta-feira"
        assert holidays["Tiradentes"].weekday_name == "segunda-feira"
        assert holidays["Natal"].weekday_name == "quinta-feira"
        assert holidays["Carnaval"].weekday_name == "terça-feira"
        assert holidays["Sexta-feira Santa"].weekday_name == "sexta-feira"

    def test_sorted(self):
        """Holidays should be in chronological order."""
        holidays = get_holidays(2025)
        dates = [h.date for h in holidays]
        assert dates == sorted(dates)

    def test_range_1900_2100(self):
        for year in range(1900, 2101):
            holidays = get_holidays(year)
            dates = [h.date for h in holidays]
            assert len(holidays) == 12
            assert all(date(year, 1, 1) <= d <= date(year, 12, 31) for d in dates)
            assert dates == sorted(dates)
            if easter_sunday(year) != date(year, 4, 23):
                assert len(set(dates)) == 12, f"unexpected collision in {year}"

    def test_good_friday_on_tiradentes_not_deduplicated(self):
        """Easter 2000 = April 23, so Good Friday falls on Tiradentes."""
        holidays = get_holidays(2000)
        on_21 = [h.name for h in holidays if h.date == date(2000, 4, 21)]
        assert len(holidays) == 12
        assert on_21 == ["Tiradentes", "Sexta-feira Santa"]

    def test_idempotent(self):
        assert get_holidays(2025) == get_holidays(2025)

    def test_custom_formatter(self):
        class IsoNumbers:
            def weekday(self, d):
                return f"dia {d.isoweekday()}"

        holidays = get_holidays(2025, formatter=IsoNumbers())
        assert holidays[0].weekday_name == "dia 3"


class TestHolidaysForDisplay:
    def test_new_year_renamed(self):
        display = get_holidays_for_display(2025)
        assert display[0].name == "Ano Novo"
        assert display[0].date == date(2025, 1, 1)
        assert "Confraternização Universal" not in [h.name for h in display]

    def test_other_names_and_dates_unchanged(self):
        full = get_holidays(2025)
        display = get_holidays_for_display(2025)
        assert len(display) == len(full)
        for f, d in zip(full[1:], display[1:]):
            assert (d.name, d.date) == (f.name, f.date)


class TestIsHoliday:
    def test_christmas(self):
        assert is_holiday(date(2025, 12, 25))

    def test_regular_day(self):
        assert not is_holiday(date(2025, 3, 12))

    def test_corpus_christi_2026(self):
        assert is_holiday(date(2026, 6, 4))  # Easter 2026 = April 5

    def test_carnaval_2026(self):
        assert is_holiday(date(2026, 2, 17))


class TestHolidaysFrame:
    def test_two_years(self):
        df = holidays_frame(2025, 2026)
        assert len(df) == 24
        assert list(df.columns) == ["date", "name", "weekday", "moveable"]
        assert df["date"].iloc[0] == date(2025, 1, 1)
        assert df["date"].iloc[-1] == date(2026, 12, 25)
        assert df["moveable"].sum() == 6

    def test_single_year_default(self):
        df = holidays_frame(2024)
        assert len(df) == 12
        assert (df["name"] == "Carnaval").sum() == 1
