"""Render-ready view models produced for the kiosk presentation layer."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from rehabnow.models.activity import Activity, DayContext
from rehabnow.models.recognition import RecognitionStatus


class ActivityStatus(str, Enum):
    """Where an activity sits relative to the reference instant."""
    PAST = "past"
    CURRENT = "current"
    UPCOMING = "upcoming"


class TimelineEntry(BaseModel):
    """One row of the day schedule list."""

    activity: Activity
    status: ActivityStatus

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class FeaturedActivity(BaseModel):
    """Activity and room cards shown after a successful recognition."""

    name: str = Field(..., description="Activity name, or the rest-day label")
    time: Optional[str] = Field(None, description="HH:MM, absent on rest days")
    room: Optional[str] = None
    room_label: str = Field(..., description="Capitalized room or 'Sin asignar'")
    activity_image: str
    room_image: str
    is_rest_day: bool = False


class PatientBriefing(BaseModel):
    """Everything the kiosk needs to render and narrate one recognition event."""

    status: RecognitionStatus
    message: str = ""
    patient_id: Optional[str] = None
    patient_name: Optional[str] = None
    day: Optional[str] = None
    context: Optional[DayContext] = None
    featured: Optional[FeaturedActivity] = None
    timeline: List[TimelineEntry] = Field(default_factory=list)
    headline: Optional[str] = None
    spoken_message: str = ""

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
