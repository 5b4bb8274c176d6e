"""Configuration management for the menu bot."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Upstream menu endpoint
MENU_API_URL: Final[str] = os.getenv('MENU_API_URL', 'http://localhost:3000/api')
MENU_REQUEST_TIMEOUT: Final[float] = float(os.getenv('MENU_REQUEST_TIMEOUT', '10'))
MENU_REQUEST_RETRIES: Final[int] = int(os.getenv('MENU_REQUEST_RETRIES', '1'))

# Calendar settings
# Year used to turn (month, day) pairs from the server into real dates.
MENU_REFERENCE_YEAR: Final[int] = int(os.getenv('MENU_REFERENCE_YEAR', '2024'))
MENU_LOCALE: Final[str] = os.getenv('MENU_LOCALE', 'en').strip().lower()
# IANA zone name (e.g. Asia/Tokyo); empty means the system local zone
MENU_TIMEZONE: Final[Optional[str]] = os.getenv('MENU_TIMEZONE') or None

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
