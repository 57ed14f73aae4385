"""Constants for rehabNow.

This module centralizes the time windows and markers used by the schedule engine.
"""


# Current-activity window (minutes around the scheduled time)
CURRENT_WINDOW_LEAD_MINUTES = 15  # considered current this long before it starts
CURRENT_WINDOW_LAG_MINUTES = 30  # ...and this long after

# Fallback halo when nothing falls inside the current window
FALLBACK_WINDOW_MINUTES = 120

# Schedule text markers
REST_DAY_MARKER = "descanso"
ENTRY_SEPARATOR = ","
FIELD_SEPARATOR = "-"
ROOM_NAME_JOINER = " "
FULL_DESCRIPTION_SEPARATOR = " • "
