"""Image lookup for activity and room cards.

Total over any input: unknown activities and rooms resolve to fixed defaults.
"""

from typing import Dict, Optional

from rehabnow.models.activity import Activity, ActivityImages

_IMAGE_BASE = "https://images.unsplash.com"
_IMAGE_PARAMS = "?w=400&h=300&fit=crop"


def _image(photo_id: str) -> str:
    return f"{_IMAGE_BASE}/{photo_id}{_IMAGE_PARAMS}"


ACTIVITY_IMAGES: Dict[str, str] = {
    "fisioterapia": _image("photo-1559757148-5c350d0d3c56"),
    "terapia ocupacional": _image("photo-1576091160399-112ba8d25d1f"),
    "ejercicios": _image("photo-1571019613454-1cb2f99b2d8b"),
    "rehabilitación": _image("photo-1576091160550-2173dba999ef"),
    "hidroterapia": _image("photo-1544551763-46a013bb70d5"),
    "evaluación": _image("photo-1559757175-0eb30cd8c063"),
    "descanso": _image("photo-1540553016722-983e48a2cd10"),
}

ROOM_IMAGES: Dict[str, str] = {
    "sala a": _image("photo-1571772996211-2f02c9727629"),
    "sala b": _image("photo-1559757175-8a5a08d3b745"),
    "sala c": _image("photo-1576091160399-112ba8d25d1f"),
    "gimnasio": _image("photo-1571019613454-1cb2f99b2d8b"),
    "piscina": _image("photo-1544551763-46a013bb70d5"),
}

DEFAULT_ACTIVITY_IMAGE = _image("photo-1559757148-5c350d0d3c56")
DEFAULT_ROOM_IMAGE = _image("photo-1571772996211-2f02c9727629")


def _lookup_key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def resolve_images(activity_name_or_description: Optional[str], room: Optional[str]) -> ActivityImages:
    """Resolve card images for an activity name and a room name.

    Args:
        activity_name_or_description: Activity name (or its description if no name)
        room: Room name, may be empty or None

    Returns:
        ActivityImages, falling back to the category default on a miss
    """
    activity_image = ACTIVITY_IMAGES.get(_lookup_key(activity_name_or_description), DEFAULT_ACTIVITY_IMAGE)
    room_image = ROOM_IMAGES.get(_lookup_key(room), DEFAULT_ROOM_IMAGE)
    return ActivityImages(activity_image=activity_image, room_image=room_image)


def resolve_activity_images(activity: Activity) -> ActivityImages:
    """Resolve card images for a parsed Activity."""
    return resolve_images(activity.activity_name or activity.description, activity.room)
