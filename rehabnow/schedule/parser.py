"""Deterministic parser for raw day-schedule strings.

A day string is a comma-separated list of entries. Each entry follows a tiny grammar:

    entry := TIME "-" TEXT ("-" TEXT)* ["-" ROOM]

where TIME is H:MM or HH:MM and ROOM is a trailing token starting with the word
"sala". Parsing is lenient: malformed entries are dropped, never raised.
It must be deterministic: same input -> same output.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import List, Optional

from rehabnow.models.activity import Activity
from rehabnow.models.constants import (
    ENTRY_SEPARATOR,
    FIELD_SEPARATOR,
    FULL_DESCRIPTION_SEPARATOR,
    REST_DAY_MARKER,
    ROOM_NAME_JOINER,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryTokens:
    time_token: str
    description: str
    name_parts: tuple[str, ...]
    room: Optional[str]


_TIME_RE = re.compile(r"^(?P<h>\d{1,2}):(?P<m>\d{2})$")
_ROOM_RE = re.compile(r"^sala\b", re.I)


def is_rest_day(raw: Optional[str]) -> bool:
    """True when the day string is empty or mentions the rest-day marker anywhere."""
    if not raw or not raw.strip():
        return True
    return REST_DAY_MARKER in raw.lower()


def tokenize_day(raw: Optional[str]) -> List[str]:
    """Split a day string into trimmed, non-blank entries."""
    entries = [e.strip() for e in (raw or "").split(ENTRY_SEPARATOR)]
    return [e for e in entries if e]


def normalize_time_token(token: str) -> Optional[str]:
    """Return HH:MM for a valid H:MM / HH:MM token, else None."""
    m = _TIME_RE.match((token or "").strip())
    if not m:
        return None
    h = int(m.group("h"))
    minute = int(m.group("m"))
    if h > 23 or minute > 59:
        return None
    return f"{h:02d}:{minute:02d}"


def tokenize_entry(entry: str) -> EntryTokens:
    """Split one entry into its time token, description, name parts and optional room."""
    time_part, *rest = entry.split(FIELD_SEPARATOR)
    description = FIELD_SEPARATOR.join(rest).strip()

    parts = tuple(p.strip() for p in description.split(FIELD_SEPARATOR))
    room: Optional[str] = None
    name_parts = parts
    # A lone "Sala ..." token is the activity name itself, not a room
    if len(parts) > 1 and _ROOM_RE.match(parts[-1]):
        room = parts[-1]
        name_parts = parts[:-1]

    return EntryTokens(
        time_token=time_part.strip(),
        description=description,
        name_parts=name_parts,
        room=room,
    )


def parse_entry(entry: str) -> Optional[Activity]:
    """Parse one entry into an Activity, or None if it is malformed."""
    tokens = tokenize_entry(entry)

    time_value = normalize_time_token(tokens.time_token)
    if time_value is None:
        logger.debug(f"Dropping schedule entry without a valid time: {entry!r}")
        return None

    if tokens.room is not None:
        activity_name = ROOM_NAME_JOINER.join(tokens.name_parts).strip()
    else:
        activity_name = tokens.description
    if not activity_name:
        logger.debug(f"Dropping schedule entry without an activity name: {entry!r}")
        return None

    if tokens.room:
        full_description = f"{activity_name}{FULL_DESCRIPTION_SEPARATOR}{tokens.room}"
    else:
        full_description = activity_name

    return Activity(
        time=time_value,
        description=tokens.description,
        activity_name=activity_name,
        room=tokens.room,
        full_description=full_description,
    )


def parse_activities(raw: Optional[str]) -> List[Activity]:
    """Parse a raw day-schedule string into activities, in written order.

    Supported shapes:
    - "09:00-Fisioterapia-Sala A, 10:30-Hidroterapia" -> two activities, first with a room
    - "09:00-Descanso" (any case, anywhere) -> [] (rest day)
    - "" / None -> []
    - "bad-entry-, 09:00-Terapia" -> only the well-formed entry survives
    """
    if is_rest_day(raw):
        return []

    activities: List[Activity] = []
    for entry in tokenize_day(raw):
        activity = parse_entry(entry)
        if activity is not None:
            activities.append(activity)
    return activities
