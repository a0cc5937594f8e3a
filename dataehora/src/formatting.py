"""Brazilian Portuguese date names, independent of the process locale."""

from abc import ABC, abstractmethod
from datetime import date

# date.weekday(): Monday=0 .. Sunday=6
WEEKDAYS_PT = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)

MONTHS_PT = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


class WeekdayFormatter(ABC):
    @abstractmethod
    def weekday(self, d: date) -> str:
        """Long weekday name."""

    @abstractmethod
    def day_month(self, d: date) -> str:
        """Day and month, e.g. for holiday listings."""

    @abstractmethod
    def long_date(self, d: date) -> str:
        """Weekday, day, month and year."""


class PortugueseFormatter(WeekdayFormatter):
    def weekday(self, d: date) -> str:
        return WEEKDAYS_PT[d.weekday()]

    def day_month(self, d: date) -> str:
        return f"{d.day} de {MONTHS_PT[d.month - 1]}"

    def long_date(self, d: date) -> str:
        return f"{self.weekday(d)}, {self.day_month(d)} de {d.year}"
