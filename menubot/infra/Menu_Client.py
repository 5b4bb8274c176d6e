"""HTTP client for the upstream weekly menu endpoint."""
import logging
from typing import List, Optional

import httpx

from menubot.domain.WeeklyMenu import WeeklyMenu
from menubot.domain.errors import NetworkError
from menubot.logic.decoding import decode_menus
from menubot.utilities.config import MENU_API_URL, MENU_REQUEST_RETRIES, MENU_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class MenuClient:
    """Fetches the menu list with a single unauthenticated GET.

    Transport failures and 5xx answers are retried `retries` times; any other
    non-200 status fails immediately.
    """

    def __init__(self, base_url: str = MENU_API_URL, timeout: float = MENU_REQUEST_TIMEOUT,
                 retries: int = MENU_REQUEST_RETRIES, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.retries = max(0, retries)
        self.transport = transport

    async def fetch_raw(self) -> bytes:
        last_error: Optional[NetworkError] = None
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            for attempt in range(1, self.retries + 2):
                try:
                    response = await client.get(self.base_url)
                except httpx.HTTPError as e:
                    last_error = NetworkError(f"Error fetching data: {e.__class__.__name__}: {e}")
                    logger.warning(f"Menu request attempt {attempt} failed: {last_error}")
                    continue
                if response.status_code >= 500:
                    last_error = NetworkError(f"Server error {response.status_code}", status_code=response.status_code)
                    logger.warning(f"Menu request attempt {attempt} failed: {last_error}")
                    continue
                if response.status_code != 200:
                    raise NetworkError(f"Unexpected status {response.status_code}", status_code=response.status_code)
                if not response.content:
                    raise NetworkError("Response has no body", status_code=response.status_code)
                return response.content
        raise last_error

    async def fetch_menus(self) -> List[WeeklyMenu]:
        """Fetch and decode the menu list. Raises NetworkError or DecodeError."""
        body = await self.fetch_raw()
        logger.debug("Received JSON: %s", body.decode("utf-8", errors="replace"))
        menus = decode_menus(body)
        logger.info(f"Decoded {len(menus)} weekly menus from {self.base_url}")
        return menus
