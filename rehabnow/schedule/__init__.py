"""Schedule text parsing for rehabNow."""

from rehabnow.schedule.parser import is_rest_day, parse_activities, parse_entry, tokenize_day, tokenize_entry

__all__ = [
    "is_rest_day",
    "parse_activities",
    "parse_entry",
    "tokenize_day",
    "tokenize_entry",
]
