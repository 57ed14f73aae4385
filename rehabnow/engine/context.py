"""Current/next activity inference for rehabNow.

Given a week of raw schedule strings, a day name and an explicit reference
instant, works out which activity is happening now, which one comes next and
how the day splits into completed and upcoming activities.

This module is deterministic - it never reads the wall clock.
"""

import logging
from datetime import datetime, time
from enum import Enum
from typing import List, Mapping, Optional, Union

from rehabnow.models.activity import Activity, DayContext
from rehabnow.models.constants import (
    CURRENT_WINDOW_LAG_MINUTES,
    CURRENT_WINDOW_LEAD_MINUTES,
    FALLBACK_WINDOW_MINUTES,
)
from rehabnow.schedule.parser import normalize_time_token, parse_activities

logger = logging.getLogger(__name__)


def minute_of_day(value: Union[datetime, time, str]) -> int:
    """Convert a datetime, time or HH:MM string to minutes since midnight.

    Raises:
        ValueError: If a string value is not a valid H:MM / HH:MM time
    """
    if isinstance(value, str):
        normalized = normalize_time_token(value)
        if normalized is None:
            raise ValueError(f"Invalid time of day: {value!r}")
        hours, minutes = normalized.split(":")
        return int(hours) * 60 + int(minutes)
    return value.hour * 60 + value.minute


def is_within_current_window(activity_minute: int, now_min: int) -> bool:
    """True if an activity at activity_minute counts as happening at now_min.

    The window is asymmetric: it opens 15 minutes before the activity and
    closes 30 minutes after it.
    """
    return (
        abs(now_min - activity_minute) <= CURRENT_WINDOW_LAG_MINUTES
        and now_min >= activity_minute - CURRENT_WINDOW_LEAD_MINUTES
    )


def _day_key(day_name) -> str:
    if isinstance(day_name, Enum):
        return day_name.value
    return str(day_name)


def _closest_started(activities: List[Activity], now_min: int) -> Optional[Activity]:
    # min() keeps the first of equally close candidates (schedule order)
    started = [a for a in activities if a.minute_of_day <= now_min]
    if not started:
        return None
    return min(started, key=lambda a: now_min - a.minute_of_day)


def infer_context(
    week_schedule: Optional[Mapping[str, Optional[str]]],
    day_name,
    now: datetime,
    *,
    fallback_minutes: Optional[int] = FALLBACK_WINDOW_MINUTES,
) -> DayContext:
    """Infer the current and next activity for a day at a reference instant.

    Rules:
    1. Current: first activity (schedule order) with |now - t| <= 30 and now >= t - 15
    2. Next: first activity (schedule order) with t > now
    3. Fallback: if nothing is current, the closest already-started activity
       becomes current when it started at most fallback_minutes ago
       (fallback_minutes=None disables this and keeps strict first-match)
    4. Counts: completed = t < now, upcoming = t > now (t == now counts in neither)

    Args:
        week_schedule: Mapping of day name -> raw schedule string
        day_name: DayName or plain day-name string to look up
        now: Reference instant (only hour and minute are used)
        fallback_minutes: Halo for the fallback rule, or None

    Returns:
        DayContext (null activities and zero counts on a rest day or missing input)
    """
    if not week_schedule or not day_name:
        return DayContext()

    day = _day_key(day_name)
    now_label = f"{now.hour:02d}:{now.minute:02d}"
    activities = parse_activities(week_schedule.get(day) or "")

    if not activities:
        logger.debug(f"No activities for {day}; treating as rest day")
        return DayContext(day=day, time=now_label)

    now_min = minute_of_day(now)

    current: Optional[Activity] = None
    next_activity: Optional[Activity] = None
    for activity in activities:
        t = activity.minute_of_day
        if current is None and is_within_current_window(t, now_min):
            current = activity
        if next_activity is None and t > now_min:
            next_activity = activity

    if current is None and fallback_minutes is not None:
        closest = _closest_started(activities, now_min)
        if closest is not None and now_min - closest.minute_of_day <= fallback_minutes:
            logger.debug(f"Fallback picked {closest.time} as current at {now_label}")
            current = closest

    completed = sum(1 for a in activities if a.minute_of_day < now_min)
    upcoming = sum(1 for a in activities if a.minute_of_day > now_min)

    return DayContext(
        current_activity=current,
        next_activity=next_activity,
        total_activities_today=len(activities),
        completed_today=completed,
        upcoming_today=upcoming,
        day=day,
        time=now_label,
    )
