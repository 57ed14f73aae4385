"""Data models for rehabNow."""

from rehabnow.models.activity import Activity, ActivityImages, DayContext, DayName, day_name_for
from rehabnow.models.recognition import (
    RecognitionPayloadError,
    RecognitionResult,
    RecognitionStatus,
    ScheduleData,
    parse_recognition_payload,
)
from rehabnow.models.briefing import ActivityStatus, FeaturedActivity, PatientBriefing, TimelineEntry

__all__ = [
    "Activity",
    "ActivityImages",
    "DayContext",
    "DayName",
    "day_name_for",
    "RecognitionPayloadError",
    "RecognitionResult",
    "RecognitionStatus",
    "ScheduleData",
    "parse_recognition_payload",
    "ActivityStatus",
    "FeaturedActivity",
    "PatientBriefing",
    "TimelineEntry",
]
