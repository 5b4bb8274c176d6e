from fastapi import (
    FastAPI,
    Query,
    APIRouter,
    Depends,
    HTTPException,
    Response
)
from datetime import date as _date
from typing import List
import logging

from menubot.domain.WeeklyMenu import WeeklyMenu
from menubot.infra.Menu_Client import MenuClient
from menubot.logic.menu_state import MenuState, refresh_menus
from menubot.logic.weeks import menu_lines, today_in, week_number
from menubot.utilities.config import (
    MENU_API_URL, MENU_LOCALE, MENU_REFERENCE_YEAR, MENU_REQUEST_RETRIES,
    MENU_REQUEST_TIMEOUT, MENU_TIMEZONE
)
from menubot.utilities.constants import OTHER_WEEK, RATING_STARS, TAB_TITLES, THIS_WEEK

# Logging
logger = logging.getLogger("menubot_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Cafeteria Menu")
router = APIRouter()

# Single presentation state owned by the app
_menu_state = MenuState()


# -------------------- Dependencies --------------------
def get_menu_state() -> MenuState:
    return _menu_state


def get_menu_client() -> MenuClient:
    return MenuClient(MENU_API_URL, timeout=MENU_REQUEST_TIMEOUT, retries=MENU_REQUEST_RETRIES)


def get_today() -> _date:
    return today_in(MENU_TIMEZONE)


# -------------------- Helpers --------------------
def _check_tab(tab: str) -> str:
    if tab not in TAB_TITLES:
        raise HTTPException(status_code=400, detail=f"Unknown tab '{tab}'")
    return tab


def _menu_payload(menu: WeeklyMenu):
    d = menu.to_dict()
    d["lines"] = [line.to_dict() for line in menu_lines(menu, MENU_REFERENCE_YEAR, MENU_LOCALE)]
    return d


def _text_lines(menus: List[WeeklyMenu]) -> List[str]:
    lines = []
    for menu in menus:
        lines.append(f"# {menu.month}")
        lines.extend(str(line) for line in menu_lines(menu, MENU_REFERENCE_YEAR, MENU_LOCALE))
    return lines


async def _activate(tab: str, state: MenuState, client: MenuClient, today: _date) -> List[WeeklyMenu]:
    """Opening a view triggers one refresh; failures keep the previous lists."""
    await refresh_menus(state, client, today, MENU_REFERENCE_YEAR)
    return state.menus_for(tab)


# -------------------- API: Menus --------------------
@router.get("/api/menus/{tab}")
async def api_menus(tab: str,
                    state: MenuState = Depends(get_menu_state),
                    client: MenuClient = Depends(get_menu_client),
                    today: _date = Depends(get_today)):
    """Return the menus of one view as JSON, refreshed from upstream."""
    _check_tab(tab)
    menus = await _activate(tab, state, client, today)
    return {
        "tab": tab,
        "title": TAB_TITLES[tab],
        "week": week_number(today),
        "count": len(menus),
        "menus": [_menu_payload(m) for m in menus],
        "error": state.last_error,
        "last_updated": state.last_updated.isoformat() if state.last_updated else None,
    }


@router.get("/menus/{tab}", response_class=Response)
async def text_menus(tab: str,
                     state: MenuState = Depends(get_menu_state),
                     client: MenuClient = Depends(get_menu_client),
                     today: _date = Depends(get_today)):
    """Return the menus of one view as text, one line per day."""
    _check_tab(tab)
    menus = await _activate(tab, state, client, today)
    if not menus:
        return Response(content="No menus found.", media_type="text/plain")
    return Response(content="\n".join(_text_lines(menus)), media_type="text/plain")


# -------------------- API: Rating --------------------
def _rating_payload(state: MenuState):
    return {"show_rating": state.show_rating, "stars": RATING_STARS if state.show_rating else 0}


@router.get("/api/rating")
def api_rating(state: MenuState = Depends(get_menu_state)):
    return _rating_payload(state)


@router.post("/api/rating/toggle")
def api_rating_toggle(tab: str = Query(default=THIS_WEEK), state: MenuState = Depends(get_menu_state)):
    """Show or hide the star rating. The rating is never stored or submitted."""
    state.toggle_rating(_check_tab(tab))
    if tab == OTHER_WEEK:
        logger.info("Rating: other weeks' menu")
    else:
        logger.info("Rating: this week's menu")
    return _rating_payload(state)


app.include_router(router)
