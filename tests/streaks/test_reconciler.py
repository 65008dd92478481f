from datetime import date, time, timedelta

from safety_checkin.schedules.expander import definitions_for_date, expand
from safety_checkin.schedules.model import CheckInWindow, ScheduleDefinition
from safety_checkin.streaks.reconciler import milestone_progress, reconcile

MONDAY = date(2026, 10, 19)
THURSDAY = date(2026, 10, 22)


def _mwf(effective: date) -> list[ScheduleDefinition]:
    return [
        ScheduleDefinition(schedule_id=f"r-{dow}", worker_id="w1", team_id="t1", day_of_week=dow, effective_date=effective)
        for dow in (1, 3, 5)
    ]


def _run(defs, checked_in, excused=frozenset(), *, today=THURSDAY, now_time=time(12, 0), lookback=30):
    scheduled = expand(defs, today - timedelta(days=lookback), today)
    return reconcile(
        scheduled,
        set(checked_in),
        set(excused),
        today=today,
        now_time=now_time,
        lookback_days=lookback,
        today_definitions=definitions_for_date(defs, today),
    )


def test_three_recent_occurrences_on_unscheduled_day():
    defs = _mwf(date(2026, 10, 16))
    result = _run(defs, {date(2026, 10, 16), date(2026, 10, 19), date(2026, 10, 21)})

    assert result.current_streak == 3
    assert result.longest_streak == 3
    assert result.missed_dates == []
    assert result.completed_days == 3
    assert result.today_check_in_completed is False


def test_most_recent_miss_breaks_current_streak():
    defs = _mwf(date(2026, 10, 12))
    checked = {date(2026, 10, 12), date(2026, 10, 14), date(2026, 10, 16), date(2026, 10, 19)}
    result = _run(defs, checked)

    assert result.current_streak == 0
    assert result.longest_streak == 4
    assert result.missed_dates == [date(2026, 10, 21)]


def test_excused_miss_is_transparent():
    defs = _mwf(date(2026, 10, 12))
    checked = {date(2026, 10, 12), date(2026, 10, 14), date(2026, 10, 16), date(2026, 10, 19)}
    result = _run(defs, checked, excused={date(2026, 10, 21)})

    assert result.current_streak == 4
    assert result.missed_dates == []
    assert result.exception_dates == [date(2026, 10, 21)]
    assert result.completed_days == 4


def test_older_runs_only_raise_longest():
    defs = _mwf(date(2026, 10, 5))
    # Mon 5, Wed 7, Fri 9 checked; Mon 12 missed; Wed 14 .. Wed 21 checked.
    checked = {date(2026, 10, d) for d in (5, 7, 9, 14, 16, 19, 21)}
    result = _run(defs, checked)

    assert result.current_streak == 4
    assert result.longest_streak == 4
    assert result.missed_dates == [date(2026, 10, 12)]
    assert result.completed_days == 7


def _window_day(requires_daily: bool = True) -> list[ScheduleDefinition]:
    return [
        ScheduleDefinition(
            schedule_id="today",
            worker_id="w1",
            team_id="t1",
            scheduled_date=MONDAY,
            requires_daily_checkin=requires_daily,
            checkin_window=CheckInWindow(start=time(6, 0), end=time(17, 0)) if requires_daily else None,
        )
    ]


def test_today_not_missed_while_window_open():
    result = _run(_window_day(), set(), today=MONDAY, now_time=time(15, 0))
    assert result.missed_dates == []
    assert result.current_streak == 0


def test_today_missed_after_window_closes():
    result = _run(_window_day(), set(), today=MONDAY, now_time=time(18, 0))
    assert result.missed_dates == [MONDAY]


def test_open_window_does_not_break_previous_run():
    defs = _window_day() + [
        ScheduleDefinition(schedule_id="fri", worker_id="w1", team_id="t1", scheduled_date=date(2026, 10, 16)),
    ]
    open_result = _run(defs, {date(2026, 10, 16)}, today=MONDAY, now_time=time(9, 0))
    closed_result = _run(defs, {date(2026, 10, 16)}, today=MONDAY, now_time=time(17, 1))

    assert open_result.current_streak == 1
    assert closed_result.current_streak == 0
    assert closed_result.longest_streak == 1


def test_without_daily_checkin_today_stays_open_until_end_of_day():
    result = _run(_window_day(requires_daily=False), set(), today=MONDAY, now_time=time(23, 59, 30))
    assert result.missed_dates == []


def test_today_completed_counts():
    result = _run(_window_day(), {MONDAY}, today=MONDAY, now_time=time(8, 0))
    assert result.today_check_in_completed is True
    assert result.current_streak == 1


def test_no_scheduled_days_means_no_streak_and_no_misses():
    result = _run([], {date(2026, 10, 20), date(2026, 10, 21)})
    assert result.current_streak == 0
    assert result.longest_streak == 0
    assert result.missed_dates == []
    assert result.past_scheduled_days == 0


def test_removing_excused_date_does_not_change_current_streak():
    defs = _mwf(date(2026, 10, 5))
    checked = {date(2026, 10, d) for d in (5, 9, 12, 16, 19)}
    excused = {date(2026, 10, 7), date(2026, 10, 14), date(2026, 10, 21)}
    scheduled = expand(defs, THURSDAY - timedelta(days=30), THURSDAY)

    with_excused = reconcile(scheduled, checked, excused, today=THURSDAY, now_time=time(12, 0))
    without = reconcile(scheduled - excused, checked, set(), today=THURSDAY, now_time=time(12, 0))

    assert with_excused.current_streak == without.current_streak == 5
    assert not set(with_excused.missed_dates) & excused


def test_current_never_exceeds_longest():
    defs = _mwf(date(2026, 9, 21))
    scheduled = sorted(expand(defs, THURSDAY - timedelta(days=30), THURSDAY))
    for skip in range(len(scheduled)):
        checked = set(scheduled) - {scheduled[skip]}
        result = reconcile(set(scheduled), checked, set(), today=THURSDAY, now_time=time(12, 0))
        assert result.current_streak <= result.longest_streak


def test_reconcile_is_idempotent():
    defs = _mwf(date(2026, 10, 1))
    checked = {date(2026, 10, d) for d in (2, 5, 9, 14, 19)}
    assert _run(defs, checked) == _run(defs, checked)


def test_milestones():
    progress = milestone_progress(0, MONDAY)
    assert (progress.next_milestone, progress.days_until_next_milestone) == (7, 7)
    assert progress.badge is None

    progress = milestone_progress(7, MONDAY)
    assert progress.next_milestone == 14
    assert progress.has_seven_day_badge is True
    assert progress.badge.achieved_date == MONDAY

    progress = milestone_progress(90, MONDAY)
    assert progress.next_milestone is None
    assert progress.days_until_next_milestone is None
