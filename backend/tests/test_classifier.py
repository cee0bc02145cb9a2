"""Tests for per-participant status classification."""

from datetime import date, datetime, time
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from conftest import utc  # noqa: E402
from meeting_equity.core.errors import InvalidInputError  # noqa: E402
from meeting_equity.domain.models import (  # noqa: E402
    DEFAULT_CONFIG,
    DeadZone,
    HolidayEntry,
    MeetingProposal,
    Participant,
    Status,
    WorkingHoursConfig,
)
from meeting_equity.engine.classifier import (  # noqa: E402
    classify,
    classify_proposal,
)
from meeting_equity.engine.holidays import HolidayCalendar  # noqa: E402

# 2025-03-04 is a Tuesday, 2025-03-08 a Saturday.
TUESDAY = (2025, 3, 4)


def test_optimal_hours_are_green(utc_participant) -> None:
    status = classify(utc(*TUESDAY, 10), utc_participant, DEFAULT_CONFIG)

    assert status.status is Status.green
    assert status.reason == "Within optimal working hours"
    assert status.is_critical is False
    assert status.holiday is None
    assert status.participant_id == "p_utc"


def test_morning_buffer_is_orange(utc_participant) -> None:
    status = classify(utc(*TUESDAY, 8, 30), utc_participant, DEFAULT_CONFIG)

    assert status.status is Status.orange
    assert status.reason == "Within acceptable working hours"
    assert status.is_critical is False


def test_evening_buffer_is_orange(utc_participant) -> None:
    status = classify(utc(*TUESDAY, 17, 0), utc_participant, DEFAULT_CONFIG)
    assert status.status is Status.orange


def test_window_ends_are_exclusive(utc_participant) -> None:
    early = classify(utc(*TUESDAY, 9), utc_participant, DEFAULT_CONFIG)
    assert early.status is Status.green
    late = classify(utc(*TUESDAY, 18), utc_participant, DEFAULT_CONFIG)
    assert late.status is Status.red
    assert late.reason == "Outside optimal working hours"


def test_dead_zone_is_critical(utc_participant) -> None:
    status = classify(utc(*TUESDAY, 2), utc_participant, DEFAULT_CONFIG)

    assert status.status is Status.critical
    assert status.is_critical is True
    assert status.reason == "Outside working hours"


def test_dead_zone_end_is_red(utc_participant) -> None:
    status = classify(utc(*TUESDAY, 5), utc_participant, DEFAULT_CONFIG)
    assert status.status is Status.red


def test_custom_dead_zone(utc_participant) -> None:
    night = DeadZone(start=time(0, 0), end=time(7, 0))
    status = classify(
        utc(*TUESDAY, 6), utc_participant, DEFAULT_CONFIG, dead_zone=night
    )
    assert status.status is Status.critical


def test_dead_zone_across_midnight(utc_participant) -> None:
    night = DeadZone(start=time(23, 0), end=time(5, 0))

    def status_at(hour):
        return classify(
            utc(*TUESDAY, hour), utc_participant, DEFAULT_CONFIG, dead_zone=night
        ).status

    assert status_at(23) is Status.critical
    assert status_at(2) is Status.critical
    assert status_at(5) is Status.red
    assert status_at(20) is Status.red


def test_weekend_is_critical(utc_participant) -> None:
    status = classify(utc(2025, 3, 8, 10), utc_participant, DEFAULT_CONFIG)

    assert status.status is Status.critical
    assert status.is_critical is True
    assert status.reason == "Outside working hours"


def test_custom_work_week() -> None:
    participant = Participant(
        id="p_il", name="Noa", timezone="Asia/Jerusalem", country_code="IL"
    )
    sunday_to_thursday = WorkingHoursConfig(
        country_code="IL",
        green_start=time(9, 0),
        green_end=time(17, 0),
        orange_morning_start=time(8, 0),
        orange_morning_end=time(9, 0),
        orange_evening_start=time(17, 0),
        orange_evening_end=time(18, 0),
        work_days=frozenset({7, 1, 2, 3, 4}),
    )
    # Sunday 2025-03-09 10:00 UTC is 12:00 in Jerusalem.
    sunday = classify(utc(2025, 3, 9, 10), participant, sunday_to_thursday)
    friday = classify(utc(2025, 3, 7, 10), participant, sunday_to_thursday)

    assert sunday.status is Status.green
    assert friday.status is Status.critical


def test_holiday_takes_precedence(utc_participant) -> None:
    calendar = HolidayCalendar(
        [HolidayEntry(country_code="GB", date=date(*TUESDAY), name="Pancake Day")]
    )
    for hour in (2, 8, 10, 20):
        status = classify(
            utc(*TUESDAY, hour), utc_participant, DEFAULT_CONFIG, calendar
        )
        assert status.status is Status.critical
        assert status.is_critical is True
        assert status.reason == "Holiday: Pancake Day"
        assert status.holiday == "Pancake Day"


def test_holiday_uses_local_date(tokyo) -> None:
    calendar = HolidayCalendar(
        [HolidayEntry(country_code="JP", date=date(*TUESDAY), name="Local Day")]
    )
    # 20:00 UTC on the 3rd is 05:00 on the 4th in Tokyo.
    status = classify(utc(2025, 3, 3, 20), tokyo, DEFAULT_CONFIG, calendar)
    assert status.reason == "Holiday: Local Day"

    # 16:00 UTC on the 4th is already 01:00 on the 5th in Tokyo.
    status = classify(utc(*TUESDAY, 16), tokyo, DEFAULT_CONFIG, calendar)
    assert status.holiday is None


def test_other_country_holiday_is_ignored(utc_participant) -> None:
    calendar = HolidayCalendar(
        [HolidayEntry(country_code="FR", date=date(*TUESDAY), name="Fête")]
    )
    status = classify(utc(*TUESDAY, 10), utc_participant, DEFAULT_CONFIG, calendar)
    assert status.status is Status.green


def test_daylight_saving_shifts_status(new_yorker) -> None:
    # New York switches to EDT on 2025-03-09.
    before = classify(utc(*TUESDAY, 13), new_yorker, DEFAULT_CONFIG)
    after = classify(utc(2025, 3, 11, 13), new_yorker, DEFAULT_CONFIG)

    assert before.local_time.hour == 8
    assert before.status is Status.orange
    assert after.local_time.hour == 9
    assert after.status is Status.green


def test_unknown_timezone_is_rejected() -> None:
    lost = Participant(id="p_x", name="X", timezone="Mars/Olympus", country_code="")
    with pytest.raises(InvalidInputError) as excinfo:
        classify(utc(*TUESDAY, 10), lost, DEFAULT_CONFIG)
    assert excinfo.value.field == "timezone"


def test_naive_instant_is_rejected(utc_participant) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        classify(datetime(*TUESDAY, 10), utc_participant, DEFAULT_CONFIG)
    assert excinfo.value.field == "proposed_time"


def test_classify_proposal_resolves_configs(utc_participant, new_yorker) -> None:
    late_us = WorkingHoursConfig(
        country_code="US",
        green_start=time(6, 0),
        green_end=time(14, 0),
        orange_morning_start=time(5, 0),
        orange_morning_end=time(6, 0),
        orange_evening_start=time(14, 0),
        orange_evening_end=time(15, 0),
        work_days=frozenset({1, 2, 3, 4, 5}),
    )
    proposal = MeetingProposal(
        proposed_time=utc(*TUESDAY, 12),
        duration_minutes=30,
        participants=(utc_participant, new_yorker),
    )
    statuses = classify_proposal(proposal, iter([late_us]))

    assert [s.participant_id for s in statuses] == ["p_utc", "p_ny"]
    # 12:00 UTC is 07:00 EST, green only under the US override.
    assert [s.status for s in statuses] == [Status.green, Status.green]
