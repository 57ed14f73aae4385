from datetime import datetime

from rehabnow.engine.timeline import build_timeline
from rehabnow.models.briefing import ActivityStatus
from rehabnow.schedule.parser import parse_activities


def test_timeline_statuses_in_schedule_order():
    activities = parse_activities("09:00-Fisioterapia-Sala A, 10:30-Hidroterapia, 12:00-Evaluación")
    timeline = build_timeline(activities, datetime(2026, 10, 19, 10, 45))

    assert [e.activity.time for e in timeline] == ["09:00", "10:30", "12:00"]
    assert [e.status for e in timeline] == [
        ActivityStatus.PAST,
        ActivityStatus.CURRENT,
        ActivityStatus.UPCOMING,
    ]


def test_timeline_lead_window_is_current():
    activities = parse_activities("10:00-Fisioterapia")
    timeline = build_timeline(activities, datetime(2026, 10, 19, 9, 46))
    assert timeline[0].status == ActivityStatus.CURRENT


def test_timeline_does_not_use_fallback_halo():
    activities = parse_activities("14:00-Hidroterapia")
    timeline = build_timeline(activities, datetime(2026, 10, 19, 15, 0))
    assert timeline[0].status == ActivityStatus.PAST


def test_timeline_empty_for_rest_day():
    assert build_timeline(parse_activities("Descanso"), datetime(2026, 10, 19, 9, 0)) == []
