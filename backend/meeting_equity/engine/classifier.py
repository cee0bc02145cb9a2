"""Per-participant classification of a candidate meeting time.

Precedence, highest first:

1. a public holiday on the participant's local date (critical)
2. a local weekday outside the configured work days (critical)
3. the optimal window (green)
4. either acceptable window (orange)
5. the dead zone around local midnight (critical)
6. anything else (red)

Windows are half-open ``[start, end)`` and never wrap past midnight.
"""

from datetime import datetime, time
from typing import List

from ..domain.models import (
    DEFAULT_DEAD_ZONE,
    DeadZone,
    MeetingProposal,
    Participant,
    ParticipantStatus,
    Status,
    WorkingHoursConfig,
)
from .configs import ConfigSource, freeze_configs, resolve_config
from .holidays import EMPTY_CALENDAR, HolidayCalendar
from .timezones import to_local_time

REASON_GREEN = "Within optimal working hours"
REASON_ORANGE = "Within acceptable working hours"
REASON_RED = "Outside optimal working hours"
REASON_OFF_HOURS = "Outside working hours"
HOLIDAY_PREFIX = "Holiday: "


def _within(moment: time, start: time, end: time) -> bool:
    return start <= moment < end


def classify(
    utc_instant: datetime,
    participant: Participant,
    config: WorkingHoursConfig,
    calendar: HolidayCalendar = EMPTY_CALENDAR,
    dead_zone: DeadZone = DEFAULT_DEAD_ZONE,
) -> ParticipantStatus:
    """Classify ``utc_instant`` for ``participant`` under ``config``.

    Raises :class:`InvalidInputError` for a naive instant or an unknown
    timezone rather than falling back to a default zone.
    """
    local = to_local_time(utc_instant, participant.timezone)
    moment = local.time()

    holiday = calendar.lookup(participant.country_code, local.date())
    if holiday is not None:
        return ParticipantStatus(
            participant_id=participant.id,
            status=Status.critical,
            is_critical=True,
            reason=HOLIDAY_PREFIX + holiday.name,
            holiday=holiday.name,
            local_time=local,
        )

    if local.isoweekday() not in config.work_days:
        return _status(participant, Status.critical, REASON_OFF_HOURS, local)

    if _within(moment, config.green_start, config.green_end):
        return _status(participant, Status.green, REASON_GREEN, local)

    if _within(
        moment, config.orange_morning_start, config.orange_morning_end
    ) or _within(moment, config.orange_evening_start, config.orange_evening_end):
        return _status(participant, Status.orange, REASON_ORANGE, local)

    if dead_zone.contains(moment):
        return _status(participant, Status.critical, REASON_OFF_HOURS, local)

    return _status(participant, Status.red, REASON_RED, local)


def _status(
    participant: Participant, status: Status, reason: str, local: datetime
) -> ParticipantStatus:
    return ParticipantStatus(
        participant_id=participant.id,
        status=status,
        is_critical=status is Status.critical,
        reason=reason,
        local_time=local,
    )


def classify_proposal(
    proposal: MeetingProposal,
    configs: ConfigSource = None,
    calendar: HolidayCalendar = EMPTY_CALENDAR,
    dead_zone: DeadZone = DEFAULT_DEAD_ZONE,
) -> List[ParticipantStatus]:
    """Statuses for every participant of ``proposal``, in participant order."""
    configs = freeze_configs(configs)
    return [
        classify(
            proposal.proposed_time,
            participant,
            resolve_config(participant.country_code, configs),
            calendar,
            dead_zone,
        )
        for participant in proposal.participants
    ]
