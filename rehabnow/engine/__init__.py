"""Schedule interpretation engine for rehabNow."""

from rehabnow.engine.context import infer_context, is_within_current_window, minute_of_day
from rehabnow.engine.display import resolve_images, resolve_activity_images
from rehabnow.engine.timeline import build_timeline
from rehabnow.engine.briefing import build_briefing, select_featured_activity

__all__ = [
    "infer_context",
    "is_within_current_window",
    "minute_of_day",
    "resolve_images",
    "resolve_activity_images",
    "build_timeline",
    "build_briefing",
    "select_featured_activity",
]
