"""Tolerant decoding of the weekly menu payload.

The upstream service is known to send some `days` entries as strings
(e.g. ``"12"`` or ``"holiday"``). Those entries are dropped without a
placeholder, so `days` can end up shorter than `higawari`; callers that pair
them by index must expect that.
"""
from __future__ import annotations
import json
import logging
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError, field_validator

from menubot.domain.WeeklyMenu import WeeklyMenu
from menubot.domain.errors import DecodeError

__all__ = ["WeeklyMenuRecord", "decode_weekly_menu", "decode_menus"]

logger = logging.getLogger(__name__)


class WeeklyMenuRecord(BaseModel):
    """Schema for one record of the server response."""
    model_config = ConfigDict(extra="ignore")

    month: StrictInt
    days: List[Any]
    higawari: List[StrictStr]

    @field_validator('days')
    @classmethod
    def keep_integer_days(cls, v):
        """Keep integer entries in order; strings and other values are skipped."""
        kept = [d for d in v if isinstance(d, int) and not isinstance(d, bool)]
        if len(kept) != len(v):
            logger.debug("Dropped %d non-integer day entries from %r", len(v) - len(kept), v)
        return kept


def _first_error_field(exc: ValidationError) -> str | None:
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc:
            return str(loc[0])
    return None


def decode_weekly_menu(record: Any) -> WeeklyMenu:
    """Decode one raw record into a WeeklyMenu.

    Raises DecodeError naming the field when `month`, `higawari` or `days` is
    missing or of the wrong type. Bad entries inside `days` never fail the record.
    """
    if not isinstance(record, dict):
        raise DecodeError(f"Menu record must be an object, got {type(record).__name__}")
    try:
        parsed = WeeklyMenuRecord.model_validate(record)
    except ValidationError as e:
        field = _first_error_field(e)
        raise DecodeError(f"Invalid or missing field '{field}' in menu record", field=field) from e
    return WeeklyMenu(month=parsed.month, days=parsed.days, higawari=parsed.higawari)


def decode_menus(body: Union[str, bytes, list]) -> List[WeeklyMenu]:
    """Decode a whole response body (a JSON array of records).

    A single invalid record fails the whole payload.
    """
    if isinstance(body, (str, bytes, bytearray)):
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e
    else:
        data = body
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array of menus, got {type(data).__name__}")
    return [decode_weekly_menu(entry) for entry in data]
