"""Activity and day-context data models for rehabNow."""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class DayName(str, Enum):
    """Weekday names as spelled by the recognition webhook."""
    LUNES = "Lunes"
    MARTES = "Martes"
    MIERCOLES = "Miércoles"
    JUEVES = "Jueves"
    VIERNES = "Viernes"
    SABADO = "Sábado"
    DOMINGO = "Domingo"


# Python weekday: Monday=0 ... Sunday=6
_WEEKDAY_ORDER = [
    DayName.LUNES,
    DayName.MARTES,
    DayName.MIERCOLES,
    DayName.JUEVES,
    DayName.VIERNES,
    DayName.SABADO,
    DayName.DOMINGO,
]


def day_name_for(moment: Union[date, datetime]) -> DayName:
    """Return the DayName for a date or datetime."""
    return _WEEKDAY_ORDER[moment.weekday()]


class Activity(BaseModel):
    """One scheduled session parsed from a raw day string."""

    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="Start time, HH:MM")
    description: str = Field(..., description="Text after the first hyphen")
    activity_name: str = Field(..., min_length=1, description="Description without trailing room token")
    room: Optional[str] = Field(None, description="Trailing 'sala...' token, if any")
    full_description: str = Field(..., description="'{name} • {room}' or just the name")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def minute_of_day(self) -> int:
        hours, minutes = self.time.split(":")
        return int(hours) * 60 + int(minutes)


class DayContext(BaseModel):
    """Current/next activity plus day counts relative to one reference instant."""

    current_activity: Optional[Activity] = Field(None, description="Activity happening now")
    next_activity: Optional[Activity] = Field(None, description="First activity after now")
    total_activities_today: int = Field(0, ge=0)
    completed_today: int = Field(0, ge=0, description="Activities strictly before now")
    upcoming_today: int = Field(0, ge=0, description="Activities strictly after now")
    day: Optional[str] = Field(None, description="Day name that was looked up")
    time: Optional[str] = Field(None, description="Reference instant as HH:MM")

    class Config:
        """Pydantic configuration."""
        frozen = True


class ActivityImages(BaseModel):
    """Illustrative image references for an activity card and a room card."""

    activity_image: str
    room_image: str

    class Config:
        """Pydantic configuration."""
        frozen = True
