"""WeeklyMenu domain entity: month, day-of-month list and the daily special for each day."""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from menubot.utilities.constants import DEFAULT_LOCALE, WEEKDAY_NAMES


def safe_date(year: int, month: int, day: int) -> Optional[date]:
    '''Returns the calendar date or None when (year, month, day) does not exist.'''
    try:
        return date(year, month, day)
    except (ValueError, TypeError, OverflowError):
        return None


@dataclass(frozen=True)
class WeeklyMenu:
    month: int
    days: Tuple[int, ...] = ()
    higawari: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store tuples so instances stay hashable
        object.__setattr__(self, "days", tuple(self.days))
        object.__setattr__(self, "higawari", tuple(self.higawari))

    @property
    def first_day(self) -> Optional[int]:
        return self.days[0] if self.days else None

    def caption_for(self, index: int) -> Optional[str]:
        '''Daily special at the given index, None if higawari is shorter than days.'''
        if 0 <= index < len(self.higawari):
            return self.higawari[index]
        return None

    def date_for(self, day: int, year: int) -> Optional[date]:
        return safe_date(year, self.month, day)

    def day_of_week(self, day: int, year: int, locale: str = DEFAULT_LOCALE) -> str:
        '''Weekday name of `day` in this menu's month, "" when the date is invalid.'''
        d = self.date_for(day, year)
        if d is None:
            return ""
        names = WEEKDAY_NAMES.get(locale) or WEEKDAY_NAMES[DEFAULT_LOCALE]
        return names[d.weekday()]

    def to_dict(self):
        '''Converts the WeeklyMenu to the server's JSON shape.'''
        return {
            "month": self.month,
            "days": list(self.days),
            "higawari": list(self.higawari),
        }
