"""Day timeline: past / current / upcoming status for each of today's activities."""

from datetime import datetime
from typing import List

from rehabnow.engine.context import is_within_current_window, minute_of_day
from rehabnow.models.activity import Activity
from rehabnow.models.briefing import ActivityStatus, TimelineEntry


def activity_status(activity: Activity, now_min: int) -> ActivityStatus:
    """Status of one activity at now_min (current window wins over past)."""
    t = activity.minute_of_day
    if is_within_current_window(t, now_min):
        return ActivityStatus.CURRENT
    if t < now_min:
        return ActivityStatus.PAST
    return ActivityStatus.UPCOMING


def build_timeline(activities: List[Activity], now: datetime) -> List[TimelineEntry]:
    """Tag every activity with its status, keeping schedule order.

    Only the strict current window is used here; the fallback halo applies to
    the headline context, not to the list.
    """
    now_min = minute_of_day(now)
    return [TimelineEntry(activity=a, status=activity_status(a, now_min)) for a in activities]
