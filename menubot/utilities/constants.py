from typing import Final

DEFAULT_LOCALE: Final[str] = "en"

# Indexed by date.weekday() (0 = Monday)
WEEKDAY_NAMES: Final[dict[str, tuple[str, ...]]] = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "ja": ("月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日"),
}

# Caption shown when a day has no matching higawari entry
MISSING_CAPTION: Final[str] = "-"

RATING_STARS: Final[int] = 5

THIS_WEEK: Final[str] = "this-week"
OTHER_WEEK: Final[str] = "other-week"
TAB_TITLES: Final[dict[str, str]] = {
    THIS_WEEK: "This week's menu",
    OTHER_WEEK: "Other weeks' menu",
}
