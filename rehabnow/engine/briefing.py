"""Patient briefing: one render-ready view model per recognition event.

Combines the parsed schedule, the inferred day context, the card images, the
day timeline and the narration into a single PatientBriefing.
"""

import logging
from datetime import datetime
from typing import Optional

from rehabnow.engine.context import infer_context
from rehabnow.engine.display import resolve_activity_images, resolve_images
from rehabnow.engine.narration import (
    DEFAULT_MESSAGES,
    REST_DAY_LABEL,
    headline,
    help_instructions,
    recognition_message,
    room_label,
)
from rehabnow.engine.timeline import build_timeline
from rehabnow.models.activity import Activity, DayContext, day_name_for
from rehabnow.models.briefing import FeaturedActivity, PatientBriefing
from rehabnow.models.recognition import RecognitionResult, RecognitionStatus
from rehabnow.schedule.parser import parse_activities

logger = logging.getLogger(__name__)


def select_featured_activity(context: DayContext, activities: list[Activity]) -> FeaturedActivity:
    """Pick the activity for the cards: current, else next, else today's first.

    On a rest day the cards show the rest-day label with no time or room.
    """
    target: Optional[Activity] = context.current_activity or context.next_activity
    if target is None and activities:
        target = activities[0]

    if target is None:
        images = resolve_images("", "")
        return FeaturedActivity(
            name=REST_DAY_LABEL,
            time=None,
            room=None,
            room_label=room_label(None),
            activity_image=images.activity_image,
            room_image=images.room_image,
            is_rest_day=True,
        )

    images = resolve_activity_images(target)
    return FeaturedActivity(
        name=target.activity_name,
        time=target.time,
        room=target.room,
        room_label=room_label(target.room),
        activity_image=images.activity_image,
        room_image=images.room_image,
    )


def build_briefing(result: RecognitionResult, now: datetime, *, day=None) -> PatientBriefing:
    """Build the briefing for a validated recognition result.

    Args:
        result: Validated webhook result
        now: Reference instant (wall-clock, center timezone)
        day: Day to show; defaults to the weekday of now

    Returns:
        PatientBriefing with schedule data only when the patient was found
    """
    status = RecognitionStatus(result.status)
    message = result.message or DEFAULT_MESSAGES[status]
    day_value = getattr(day, "value", day) or day_name_for(now).value

    if status != RecognitionStatus.USER_FOUND or result.schedule_data is None:
        if status == RecognitionStatus.USER_FOUND:
            logger.warning("Recognition reported user_found without schedule data")
        return PatientBriefing(
            status=status,
            message=message,
            day=day_value,
            spoken_message=help_instructions(
                RecognitionStatus.ERROR if status == RecognitionStatus.USER_FOUND else status
            ),
        )

    schedule = result.schedule_data
    week = schedule.week_schedule()
    context = infer_context(week, day_value, now)
    activities = parse_activities(week.get(day_value))

    logger.debug(
        f"Briefing for patient {schedule.patient_id} on {day_value}: "
        f"{context.total_activities_today} activities"
    )

    return PatientBriefing(
        status=status,
        message=message,
        patient_id=schedule.patient_id,
        patient_name=schedule.name,
        day=day_value,
        context=context,
        featured=select_featured_activity(context, activities),
        timeline=build_timeline(activities, now),
        headline=headline(context, schedule.patient_id, day_value),
        spoken_message=recognition_message(schedule.name, context),
    )
