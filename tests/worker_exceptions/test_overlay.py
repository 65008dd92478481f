from datetime import date, datetime

from safety_checkin.core.enums import ExceptionType
from safety_checkin.worker_exceptions.model import ExceptionRecord
from safety_checkin.worker_exceptions.overlay import overlay

SCHEDULED = {date(2026, 10, 12), date(2026, 10, 14), date(2026, 10, 16), date(2026, 10, 19)}


def _exception(start: date, end=None, **kw) -> ExceptionRecord:
    return ExceptionRecord(
        exception_id="e1",
        worker_id="w1",
        team_id="t1",
        exception_type=kw.pop("exception_type", ExceptionType.INJURY),
        start_date=start,
        end_date=end,
        **kw,
    )


def test_bounded_exception_excuses_covered_scheduled_dates():
    result = overlay(SCHEDULED, [_exception(date(2026, 10, 13), date(2026, 10, 16))])
    assert result.excused == {date(2026, 10, 14), date(2026, 10, 16)}
    assert result.exception_dates == [date(2026, 10, 14), date(2026, 10, 16)]


def test_open_ended_exception_excuses_everything_after_start():
    result = overlay(SCHEDULED, [_exception(date(2026, 10, 15))])
    assert result.exception_dates == [date(2026, 10, 16), date(2026, 10, 19)]


def test_closed_exception_still_excuses_historical_dates():
    record = _exception(date(2026, 10, 12), date(2026, 10, 12), is_active=False)
    assert overlay(SCHEDULED, [record]).excused == {date(2026, 10, 12)}


def test_deactivation_caps_open_ended_exception():
    record = _exception(date(2026, 10, 12), is_active=False, deactivated_at=datetime(2026, 10, 14, 9, 30))
    assert overlay(SCHEDULED, [record]).exception_dates == [date(2026, 10, 12), date(2026, 10, 14)]


def test_deactivation_after_end_date_keeps_end_date():
    record = _exception(date(2026, 10, 12), date(2026, 10, 14), deactivated_at=datetime(2026, 10, 30, 8, 0))
    assert record.effective_end == date(2026, 10, 14)


def test_end_before_start_excuses_nothing():
    assert overlay(SCHEDULED, [_exception(date(2026, 10, 19), date(2026, 10, 1))]).excused == frozenset()


def test_only_scheduled_dates_are_excused():
    result = overlay(SCHEDULED, [_exception(date(2026, 10, 1), date(2026, 10, 11))])
    assert result.excused == frozenset()
    assert result.exception_dates == []


def test_any_overlapping_exception_excuses():
    records = [
        _exception(date(2026, 10, 12), date(2026, 10, 12), exception_type=ExceptionType.TRANSFER),
        _exception(date(2026, 10, 19), date(2026, 10, 25), exception_type=ExceptionType.MEDICAL_LEAVE),
    ]
    assert overlay(SCHEDULED, records).exception_dates == [date(2026, 10, 12), date(2026, 10, 19)]
