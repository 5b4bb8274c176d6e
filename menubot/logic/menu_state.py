"""Presentation state for the two menu views and its refresh cycle.

The state object is owned by the web layer. A refresh fetches, decodes and
classifies, then replaces both buckets in one assignment; a failed refresh
leaves the previous buckets untouched and only records the error.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from menubot.domain.WeeklyMenu import WeeklyMenu
from menubot.domain.errors import MenuError
from menubot.infra.Menu_Client import MenuClient
from menubot.logic.weeks import classify_menus
from menubot.utilities.config import MENU_REFERENCE_YEAR
from menubot.utilities.constants import OTHER_WEEK, THIS_WEEK

logger = logging.getLogger(__name__)


@dataclass
class MenuState:
    this_week: List[WeeklyMenu] = field(default_factory=list)
    other_week: List[WeeklyMenu] = field(default_factory=list)
    show_rating: bool = False
    last_error: Optional[str] = None
    last_updated: Optional[datetime] = None

    def menus_for(self, tab: str) -> List[WeeklyMenu]:
        if tab == THIS_WEEK:
            return self.this_week
        if tab == OTHER_WEEK:
            return self.other_week
        raise ValueError(f"Unknown menu tab: {tab}")

    def toggle_rating(self, tab: str) -> bool:
        """Flip the rating flag. Nothing is stored or sent anywhere."""
        if tab not in (THIS_WEEK, OTHER_WEEK):
            raise ValueError(f"Unknown menu tab: {tab}")
        self.show_rating = not self.show_rating
        logger.debug(f"Rating toggled from {tab} view (show_rating={self.show_rating})")
        return self.show_rating


async def refresh_menus(state: MenuState, client: MenuClient, today: date,
                        year: int = MENU_REFERENCE_YEAR) -> bool:
    """Run one fetch + classify cycle. Returns True if the buckets were replaced."""
    try:
        menus = await client.fetch_menus()
    except MenuError as e:
        logger.error(f"Menu refresh failed ({e.__class__.__name__}): {e}")
        state.last_error = str(e)
        return False
    buckets = classify_menus(menus, today, year)
    state.this_week, state.other_week = buckets.current, buckets.other
    state.last_error = None
    state.last_updated = datetime.now()
    skipped = len(menus) - len(buckets.current) - len(buckets.other)
    if skipped:
        logger.info(f"{skipped} menus had no valid first day and were not classified")
    return True
