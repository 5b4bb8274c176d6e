from datetime import date
import httpx
import pytest
from menubot.domain.WeeklyMenu import WeeklyMenu
from menubot.infra.Menu_Client import MenuClient
from menubot.logic.menu_state import MenuState, refresh_menus

TODAY = date(2024, 6, 12)
PAYLOAD = [
    {"month": 6, "days": [10, 11, 12], "higawari": ["Curry", "Ramen", "Udon"]},
    {"month": 6, "days": [17, 18], "higawari": ["Soba", "Katsu"]},
    {"month": 6, "days": [], "higawari": []},
]


def _client(handler):
    return MenuClient("http://menu.test/api", retries=0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_refresh_fills_both_lists():
    state = MenuState()
    ok = await refresh_menus(state, _client(lambda r: httpx.Response(200, json=PAYLOAD)), TODAY, year=2024)
    assert ok
    assert [m.days for m in state.this_week] == [(10, 11, 12)]
    assert [m.days for m in state.other_week] == [(17, 18)]
    assert state.last_error is None
    assert state.last_updated is not None


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_lists():
    kept = WeeklyMenu(month=6, days=[10], higawari=["Curry"])
    state = MenuState(this_week=[kept], other_week=[])
    ok = await refresh_menus(state, _client(lambda r: httpx.Response(500)), TODAY, year=2024)
    assert not ok
    assert state.this_week == [kept]
    assert state.other_week == []
    assert "500" in state.last_error


@pytest.mark.asyncio
async def test_decode_failure_keeps_previous_lists():
    state = MenuState()
    ok = await refresh_menus(state, _client(lambda r: httpx.Response(200, json=[{"days": [1]}])), TODAY, year=2024)
    assert not ok
    assert state.this_week == [] and state.other_week == []
    assert "month" in state.last_error


def test_toggle_rating():
    state = MenuState()
    assert state.toggle_rating("this-week") is True
    assert state.toggle_rating("other-week") is False
    with pytest.raises(ValueError):
        state.toggle_rating("yesterday")


@pytest.mark.asyncio
async def test_refresh_drops_records_with_out_of_range_dates():
    payload = [
        {"month": 6, "days": [100000000000000000000], "higawari": ["a"]},
        {"month": 100000000000000000000, "days": [1], "higawari": ["b"]},
        {"month": 6, "days": [10], "higawari": ["Curry"]},
    ]
    state = MenuState()
    ok = await refresh_menus(state, _client(lambda r: httpx.Response(200, json=payload)), TODAY, year=2024)
    assert ok
    assert [m.days for m in state.this_week] == [(10,)]
    assert state.other_week == []
