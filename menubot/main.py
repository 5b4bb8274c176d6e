import logging

import uvicorn
from menubot.api.api_run import app
from menubot.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, MENU_API_URL
from menubot.utilities.network import get_local_ip, serving_urls


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    urls = serving_urls(APP_PORT, get_local_ip())
    print(f"Uvicorn running on {urls[0]} (Press CTRL+C to quit)")
    # LAN URL for phones on the same network
    if len(urls) > 1:
        print(f"Accessible from other devices at: {urls[1]}")
    print(f"Reading menus from {MENU_API_URL}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
