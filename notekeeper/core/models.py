from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

from notekeeper.core.errors import InvalidDate

DEFAULT_TITLE = "New Note"

MIN_YEAR = 1
MAX_YEAR = 9999


@dataclass(frozen=True)
class Date:
    """
    Calendar date of a note.

    Plain construction does not validate: stored notes are loaded verbatim,
    even when their date is out of range. Use from_parts() for checked values.
    """
    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> "Date":
        now = dt.date.today()
        return cls(day=now.day, month=now.month, year=now.year)

    @classmethod
    def from_parts(cls, day: int, month: int, year: int) -> "Date":
        for name, value in (("day", day), ("month", month), ("year", year)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDate(f"{name} must be an integer, got {value!r}")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidDate(f"year out of range: {year}")
        if not 1 <= month <= 12:
            raise InvalidDate(f"month out of range: {month}")
        try:
            dt.date(year, month, day)
        except ValueError:
            raise InvalidDate(f"day out of range for {month:02}-{year}: {day}") from None
        return cls(day=day, month=month, year=year)

    def is_valid(self) -> bool:
        try:
            Date.from_parts(self.day, self.month, self.year)
        except InvalidDate:
            return False
        return True

    def __str__(self) -> str:
        return f"{self.day:02}-{self.month:02}-{self.year}"


@dataclass
class Note:
    title: str
    content: str
    date: Date = field(default_factory=Date.today)

    @classmethod
    def new_default(cls) -> "Note":
        return cls(title=DEFAULT_TITLE, content="", date=Date.today())

    def has_title(self) -> bool:
        return bool(self.title and self.title.strip())
