"""Tests for the schedule string parser (deterministic, lenient)."""

import pytest

from rehabnow.schedule.parser import (
    is_rest_day,
    normalize_time_token,
    parse_activities,
    parse_entry,
    tokenize_day,
    tokenize_entry,
)


class TestRestDays:
    """Empty and 'descanso' days yield no activities."""

    def test_empty_string(self):
        assert parse_activities("") == []

    def test_none(self):
        assert parse_activities(None) == []

    def test_whitespace_only(self):
        assert parse_activities("   ") == []

    def test_descanso_entry(self):
        assert parse_activities("09:00-Descanso") == []

    def test_descanso_anywhere_suppresses_whole_day(self):
        """A rest marker anywhere wins over otherwise valid entries."""
        assert parse_activities("09:00-Fisioterapia-Sala A, 12:00-DESCANSO, 14:00-Hidroterapia") == []

    def test_is_rest_day(self):
        assert is_rest_day(None) is True
        assert is_rest_day("Día de descanso") is True
        assert is_rest_day("09:00-Fisioterapia") is False


class TestParseActivities:
    """Entry splitting, room detection and ordering."""

    def test_room_and_no_room(self):
        activities = parse_activities("09:00-Fisioterapia-Sala A, 10:30-Hidroterapia")

        assert len(activities) == 2
        first, second = activities
        assert first.time == "09:00"
        assert first.room == "Sala A"
        assert first.activity_name == "Fisioterapia"
        assert first.description == "Fisioterapia-Sala A"
        assert first.full_description == "Fisioterapia • Sala A"
        assert second.room is None
        assert second.activity_name == "Hidroterapia"
        assert second.full_description == "Hidroterapia"

    def test_malformed_time_is_dropped(self):
        activities = parse_activities("bad-entry-,09:00-Terapia")

        assert len(activities) == 1
        assert activities[0].activity_name == "Terapia"

    def test_keeps_written_order(self):
        activities = parse_activities("14:00-Evaluación, 09:00-Fisioterapia")
        assert [a.time for a in activities] == ["14:00", "09:00"]

    def test_room_is_case_insensitive(self):
        activity = parse_activities("09:00-Fisioterapia-SALA b")[0]
        assert activity.room == "SALA b"
        assert activity.activity_name == "Fisioterapia"

    def test_salas_is_not_a_room_token(self):
        """'sala' must be a whole word."""
        activity = parse_activities("09:00-Juegos-Salamanca")[0]
        assert activity.room is None
        assert activity.activity_name == "Juegos-Salamanca"

    def test_hyphenated_name_with_room_is_joined_with_space(self):
        activity = parse_activities("11:00-Terapia-Ocupacional-Sala C")[0]
        assert activity.activity_name == "Terapia Ocupacional"
        assert activity.room == "Sala C"
        assert activity.description == "Terapia-Ocupacional-Sala C"

    def test_hyphenated_name_without_room_is_verbatim(self):
        activity = parse_activities("11:00-Pre-evaluación")[0]
        assert activity.activity_name == "Pre-evaluación"

    def test_lone_room_token_is_the_name(self):
        activity = parse_activities("08:30-Sala de espera")[0]
        assert activity.activity_name == "Sala de espera"
        assert activity.room is None

    def test_entry_without_name_is_dropped(self):
        assert parse_activities("09:00-, 10:00, 11:00--Sala A") == []

    def test_single_digit_hour_is_normalized(self):
        activity = parse_activities("9:05-Fisioterapia")[0]
        assert activity.time == "09:05"
        assert activity.minute_of_day == 9 * 60 + 5

    def test_out_of_range_time_is_dropped(self):
        assert parse_activities("25:00-Fisioterapia, 10:75-Hidroterapia") == []

    def test_spaces_around_hyphens(self):
        activity = parse_activities("10:00 - Hidroterapia - Sala B")[0]
        assert activity.time == "10:00"
        assert activity.activity_name == "Hidroterapia"
        assert activity.room == "Sala B"

    def test_blank_entries_are_skipped(self):
        activities = parse_activities("09:00-Fisioterapia,, ,10:00-Hidroterapia,")
        assert len(activities) == 2

    def test_idempotent(self):
        raw = "09:00-Fisioterapia-Sala A, 10:30-Hidroterapia"
        assert parse_activities(raw) == parse_activities(raw)


class TestTokenizer:
    """Low-level tokenizer helpers."""

    def test_tokenize_day(self):
        assert tokenize_day(" a , b ,, c ") == ["a", "b", "c"]
        assert tokenize_day(None) == []

    def test_tokenize_entry(self):
        tokens = tokenize_entry("09:00-Fisioterapia-Sala A")
        assert tokens.time_token == "09:00"
        assert tokens.description == "Fisioterapia-Sala A"
        assert tokens.name_parts == ("Fisioterapia",)
        assert tokens.room == "Sala A"

    @pytest.mark.parametrize(
        "token,expected",
        [("09:00", "09:00"), ("9:30", "09:30"), ("23:59", "23:59"), ("24:00", None), ("bad", None), ("", None)],
    )
    def test_normalize_time_token(self, token, expected):
        assert normalize_time_token(token) == expected

    def test_parse_entry_returns_none_for_garbage(self):
        assert parse_entry("no time here") is None
