"""Runtime configuration for rehabNow.

Values come from the environment (optionally a local .env file).
"""

import os
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

# Timezone of the rehabilitation center; "now" and the weekday are derived here
CENTER_TIMEZONE = os.getenv("CENTER_TIMEZONE", "Europe/Madrid")

LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))


def center_timezone(name: Optional[str] = None) -> ZoneInfo:
    return ZoneInfo(name or CENTER_TIMEZONE)


def current_time(tz_name: Optional[str] = None) -> datetime:
    """Timezone-aware current time at the center."""
    return datetime.now(center_timezone(tz_name))


def to_center_time(moment: datetime, tz_name: Optional[str] = None) -> datetime:
    """Convert an aware datetime to center wall-clock time; naive values are kept as-is."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(center_timezone(tz_name))
