"""Week classification and weekday labels for weekly menus."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, Optional
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from menubot.domain.WeeklyMenu import WeeklyMenu, safe_date
from menubot.utilities.config import MENU_LOCALE, MENU_REFERENCE_YEAR
from menubot.utilities.constants import MISSING_CAPTION

__all__ = [
    "MenuBuckets", "MenuLine", "week_number", "today_in", "weekday_label",
    "classify_menus", "menu_lines",
]

logger = logging.getLogger(__name__)


@dataclass
class MenuBuckets:
    current: List[WeeklyMenu] = field(default_factory=list)
    other: List[WeeklyMenu] = field(default_factory=list)


@dataclass(frozen=True)
class MenuLine:
    day: int
    weekday: str
    caption: str

    def __str__(self) -> str:
        return f"{self.day} ({self.weekday}): {self.caption}"

    def to_dict(self):
        return {"day": self.day, "weekday": self.weekday, "higawari": self.caption}


def week_number(d: date) -> int:
    """ISO week of the year (1..53)."""
    return d.isocalendar().week


def today_in(timezone: Optional[str] = None) -> date:
    """Current date in the given IANA zone; the system local zone when None or unknown."""
    if timezone:
        try:
            return datetime.now(ZoneInfo(timezone)).date()
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown time zone '{timezone}', using the system local zone")
    return datetime.now().astimezone().date()


def weekday_label(month: int, day: int, year: int = MENU_REFERENCE_YEAR, locale: str = MENU_LOCALE) -> str:
    """Weekday name for (month, day, year); empty string if that date does not exist."""
    return WeeklyMenu(month=month).day_of_week(day, year, locale)


def classify_menus(menus: Iterable[WeeklyMenu], today: date, year: int = MENU_REFERENCE_YEAR) -> MenuBuckets:
    """Split menus into the week containing `today` and every other week.

    Each menu is placed by the ISO week of its first day, dated in `year`.
    Menus without days, or whose first day is not a real date, are left out
    of both buckets. Input order is kept inside each bucket.
    """
    current_week = week_number(today)
    buckets = MenuBuckets()
    for menu in menus:
        first_day = menu.first_day
        if first_day is None:
            continue
        candidate = safe_date(year, menu.month, first_day)
        if candidate is None:
            continue
        if week_number(candidate) == current_week:
            buckets.current.append(menu)
        else:
            buckets.other.append(menu)
    return buckets


def menu_lines(menu: WeeklyMenu, year: int = MENU_REFERENCE_YEAR, locale: str = MENU_LOCALE) -> List[MenuLine]:
    """One display line per entry of `days`, paired with higawari by index."""
    lines = []
    for i, day in enumerate(menu.days):
        caption = menu.caption_for(i)
        lines.append(MenuLine(
            day=day,
            weekday=menu.day_of_week(day, year, locale),
            caption=caption if caption is not None else MISSING_CAPTION,
        ))
    return lines
