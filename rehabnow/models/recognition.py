"""Recognition webhook payload models for rehabNow.

The webhook answers with a loosely typed JSON object (sometimes wrapped in a
one-element list). These models validate it once at the boundary so the engine
only ever sees a clean DayName -> raw schedule string mapping.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from rehabnow.models.activity import DayName

logger = logging.getLogger(__name__)


class RecognitionPayloadError(ValueError):
    """Structured boundary error that can be surfaced as a 422."""

    def __init__(self, message: str, *, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class RecognitionStatus(str, Enum):
    """Outcome reported by the recognition webhook."""
    USER_FOUND = "user_found"
    USER_NOT_FOUND = "user_not_found"
    NO_FACE_DETECTED = "no_face_detected"
    ERROR = "error"


class ScheduleData(BaseModel):
    """Patient identity plus one raw schedule string per weekday."""

    patient_id: str = Field(..., alias="PatientID")
    name: Optional[str] = Field(None, alias="Nombre")
    lunes: Optional[str] = Field(None, alias="Lunes")
    martes: Optional[str] = Field(None, alias="Martes")
    miercoles: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("Miércoles", "Miercoles", "miercoles"),
        serialization_alias="Miércoles",
    )
    jueves: Optional[str] = Field(None, alias="Jueves")
    viernes: Optional[str] = Field(None, alias="Viernes")
    sabado: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("Sábado", "Sabado", "sabado"),
        serialization_alias="Sábado",
    )
    domingo: Optional[str] = Field(None, alias="Domingo")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True

    @field_validator("patient_id", mode="before")
    @classmethod
    def _coerce_patient_id(cls, v):
        # Spreadsheet-backed webhooks send numeric ids
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def week_schedule(self) -> Dict[str, str]:
        """Return the validated DayName value -> raw schedule mapping (absent days as "")."""
        return {
            DayName.LUNES.value: self.lunes or "",
            DayName.MARTES.value: self.martes or "",
            DayName.MIERCOLES.value: self.miercoles or "",
            DayName.JUEVES.value: self.jueves or "",
            DayName.VIERNES.value: self.viernes or "",
            DayName.SABADO.value: self.sabado or "",
            DayName.DOMINGO.value: self.domingo or "",
        }


class RecognitionResult(BaseModel):
    """Validated recognition webhook result."""

    status: RecognitionStatus
    message: str = ""
    person_id: Optional[str] = Field(None, alias="personId")
    similarity: Optional[float] = None
    confidence: Optional[float] = None
    schedule_data: Optional[ScheduleData] = Field(None, alias="scheduleData")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, v):
        if isinstance(v, RecognitionStatus):
            return v
        value = str(v or "").strip().lower()
        known = {s.value for s in RecognitionStatus}
        if value not in known:
            # Anything the webhook does not name explicitly is an error outcome
            return RecognitionStatus.ERROR
        return value

    @field_validator("message", mode="before")
    @classmethod
    def _default_message(cls, v):
        return "" if v is None else v

    @field_validator("person_id", mode="before")
    @classmethod
    def _coerce_person_id(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


def parse_recognition_payload(payload: Any) -> RecognitionResult:
    """Validate a raw webhook payload into a RecognitionResult.

    The webhook may return either a single object or a list whose first element
    is the result.

    Raises:
        RecognitionPayloadError: If the payload is not an object or fails validation
    """
    if isinstance(payload, list):
        if not payload:
            raise RecognitionPayloadError("Recognition payload is an empty list")
        payload = payload[0]

    if not isinstance(payload, dict):
        logger.warning(f"Rejected recognition payload of type {type(payload).__name__}")
        raise RecognitionPayloadError("Recognition payload must be a JSON object")

    data = dict(payload)
    data.setdefault("status", RecognitionStatus.ERROR.value)

    try:
        result = RecognitionResult.model_validate(data)
    except ValidationError as e:
        errors: List[str] = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        logger.warning(f"Rejected recognition payload: {len(errors)} validation error(s)")
        raise RecognitionPayloadError("Invalid recognition payload", errors=errors) from e

    logger.debug(f"Recognition payload accepted with status {result.status.value}")
    return result
