"""24-hour heatmap generation and optimal time ranking."""

from datetime import date, datetime, time
from typing import List, Sequence, Union

from ..core.errors import InvalidInputError
from ..domain.models import (
    DEFAULT_DEAD_ZONE,
    DeadZone,
    Participant,
    TimeSlotScore,
)
from .classifier import classify
from .configs import ConfigSource, freeze_configs, resolve_config
from .holidays import EMPTY_CALENDAR, HolidayCalendar
from .scoring import score_statuses
from .timezones import UTC, ensure_utc

HOURS_PER_DAY = 24
DEFAULT_SUGGESTION_LIMIT = 3


def _utc_day(day: Union[date, datetime]) -> date:
    if isinstance(day, datetime):
        if day.tzinfo is None or day.utcoffset() is None:
            raise InvalidInputError("date", "Timezone-aware datetime required")
        return ensure_utc(day).date()
    if isinstance(day, date):
        return day
    raise InvalidInputError("date", "A calendar date is required")


def generate_heatmap(
    day: Union[date, datetime],
    participants: Sequence[Participant],
    configs: ConfigSource = None,
    calendar: HolidayCalendar = EMPTY_CALENDAR,
    dead_zone: DeadZone = DEFAULT_DEAD_ZONE,
) -> List[TimeSlotScore]:
    """Score every whole UTC hour of ``day`` for a fixed participant set.

    Always returns 24 slots in hour order. A ``datetime`` argument is
    reduced to its UTC calendar date. Each participant's config is
    resolved once, not once per hour.
    """
    utc_day = _utc_day(day)
    configs = freeze_configs(configs)
    resolved = [
        (participant, resolve_config(participant.country_code, configs))
        for participant in participants
    ]

    slots = []
    for hour in range(HOURS_PER_DAY):
        instant = UTC.localize(datetime.combine(utc_day, time(hour)))
        result = score_statuses(
            classify(instant, participant, config, calendar, dead_zone)
            for participant, config in resolved
        )
        slots.append(
            TimeSlotScore(
                hour=hour,
                datetime=instant,
                score=result.score,
                breakdown=result.breakdown,
            )
        )
    return slots


def suggest_times(
    slots: Sequence[TimeSlotScore], limit: int = DEFAULT_SUGGESTION_LIMIT
) -> List[TimeSlotScore]:
    """Top ``limit`` slots by score; earlier hours win ties.

    Slots without a score sort after every scored slot. ``slots`` itself
    is left untouched.
    """
    if limit < 0:
        raise InvalidInputError("limit", "Limit must not be negative")
    ranked = sorted(
        slots,
        key=lambda slot: (slot.score is None, -(slot.score or 0), slot.hour),
    )
    return ranked[:limit]
