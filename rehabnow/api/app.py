"""FastAPI web application for rehabNow."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

from rehabnow.config import current_time, to_center_time
from rehabnow.engine.briefing import build_briefing
from rehabnow.engine.context import infer_context
from rehabnow.engine.display import resolve_images
from rehabnow.models.activity import Activity, ActivityImages, DayContext, DayName, day_name_for
from rehabnow.models.briefing import PatientBriefing
from rehabnow.models.recognition import RecognitionPayloadError, parse_recognition_payload
from rehabnow.schedule.parser import is_rest_day, parse_activities

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="rehabNow API",
    description="Tells a recognized rehabilitation patient what is happening now and what comes next",
    version=API_VERSION,
)


# Request / response models
class ContextRequest(BaseModel):
    """Request for day-context inference."""
    schedule: Dict[str, Optional[str]] = Field(..., description="Day name -> raw schedule string")
    day: Optional[DayName] = Field(None, description="Day to look up (defaults to the weekday of now)")
    now: Optional[datetime] = Field(None, description="Reference instant (defaults to center time)")


class ParseRequest(BaseModel):
    """Request for parsing one raw day string."""
    raw: Optional[str] = None


class ParseResponse(BaseModel):
    """Parsed activities for one raw day string."""
    activities: List[Activity]
    count: int
    rest_day: bool


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return current_time()
    return to_center_time(now)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": API_VERSION}


@app.post("/briefing", response_model=PatientBriefing)
async def briefing(
    payload: Any = Body(..., description="Raw recognition webhook payload (object or list)"),
    now: Optional[datetime] = None,
    day: Optional[DayName] = None,
):
    """Validate a recognition payload and build the patient briefing."""
    try:
        result = parse_recognition_payload(payload)
    except RecognitionPayloadError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})

    return build_briefing(result, _resolve_now(now), day=day)


@app.post("/context", response_model=DayContext)
async def context(request: ContextRequest):
    """Infer current/next activity and day counts for a week schedule."""
    now = _resolve_now(request.now)
    day = request.day or day_name_for(now)
    return infer_context(request.schedule, day, now)


@app.post("/activities/parse", response_model=ParseResponse)
async def parse_day(request: ParseRequest):
    """Parse one raw day-schedule string."""
    activities = parse_activities(request.raw)
    return ParseResponse(
        activities=activities,
        count=len(activities),
        rest_day=is_rest_day(request.raw),
    )


@app.get("/images", response_model=ActivityImages)
async def images(activity: Optional[str] = None, room: Optional[str] = None):
    """Resolve card images for an activity name and a room."""
    return resolve_images(activity, room)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
