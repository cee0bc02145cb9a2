"""Core domain entities represented as immutable dataclasses.

Each model is intentionally lightweight and independent of any
persistence concerns. The engine only ever reads them and returns freshly
built result objects, so they can be shared across threads freely.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Status(str, Enum):
    """Suitability tier of a meeting time for one participant."""

    green = "green"
    orange = "orange"
    red = "red"
    critical = "critical"


@dataclass(frozen=True)
class WorkingHoursConfig:
    """Local time windows and work days for a country.

    A ``country_code`` of ``None`` marks the built-in default.

    Example:
        >>> WorkingHoursConfig(
        ...     country_code="FR",
        ...     green_start=time(9, 30),
        ...     green_end=time(17, 30),
        ...     orange_morning_start=time(8, 30),
        ...     orange_morning_end=time(9, 30),
        ...     orange_evening_start=time(17, 30),
        ...     orange_evening_end=time(18, 30),
        ...     work_days=frozenset({1, 2, 3, 4, 5}),
        ... )
    """

    country_code: Optional[str]
    green_start: time
    green_end: time
    orange_morning_start: time
    orange_morning_end: time
    orange_evening_start: time
    orange_evening_end: time
    work_days: FrozenSet[int]


DEFAULT_CONFIG = WorkingHoursConfig(
    country_code=None,
    green_start=time(9, 0),
    green_end=time(17, 0),
    orange_morning_start=time(8, 0),
    orange_morning_end=time(9, 0),
    orange_evening_start=time(17, 0),
    orange_evening_end=time(18, 0),
    work_days=frozenset({1, 2, 3, 4, 5}),
)


@dataclass(frozen=True)
class DeadZone:
    """Local hours around midnight treated as a critical conflict.

    The window is half-open: ``start <= t < end``. A ``start`` later than
    ``end`` wraps past midnight (23:00-05:00); equal bounds match nothing.
    """

    start: time
    end: time

    def contains(self, moment: time) -> bool:
        if self.start <= self.end:
            return self.start <= moment < self.end
        return moment >= self.start or moment < self.end


DEFAULT_DEAD_ZONE = DeadZone(start=time(0, 0), end=time(5, 0))


@dataclass(frozen=True)
class HolidayEntry:
    """Public holiday of a country on a local calendar date.

    Example:
        >>> HolidayEntry(country_code="US", date=date(2025, 7, 4),
        ...              name="Independence Day")
    """

    country_code: str
    date: date
    name: str
    local_name: Optional[str] = None


@dataclass(frozen=True)
class Participant:
    """Person invited to a meeting.

    Example:
        >>> Participant(
        ...     id="p_1",
        ...     name="Asha",
        ...     timezone="Asia/Kolkata",
        ...     country_code="IN",
        ... )
    """

    id: str
    name: str
    timezone: str
    country_code: str
    notes: str = ""


@dataclass(frozen=True)
class MeetingProposal:
    """A meeting at a UTC instant with an ordered list of participants.

    Example:
        >>> MeetingProposal(
        ...     proposed_time=datetime(2025, 3, 4, 10, 0, tzinfo=pytz.UTC),
        ...     duration_minutes=60,
        ...     participants=(Participant("p_1", "Asha", "UTC", "GB"),),
        ... )
    """

    proposed_time: datetime
    duration_minutes: int
    participants: Tuple[Participant, ...]


@dataclass(frozen=True)
class ParticipantStatus:
    """Classification of a meeting time for a single participant."""

    participant_id: str
    status: Status
    is_critical: bool
    reason: str
    holiday: Optional[str] = None
    local_time: Optional[datetime] = None


@dataclass(frozen=True)
class StatusBreakdown:
    """Count of participants per status."""

    green: int = 0
    orange: int = 0
    red: int = 0
    critical: int = 0

    @property
    def total(self) -> int:
        return self.green + self.orange + self.red + self.critical

    def as_dict(self) -> Dict[str, int]:
        return {
            "green": self.green,
            "orange": self.orange,
            "red": self.red,
            "critical": self.critical,
        }


@dataclass(frozen=True)
class EquityScoreResult:
    """Aggregated fairness score; ``score`` is ``None`` with no participants."""

    score: Optional[int]
    breakdown: StatusBreakdown = field(default_factory=StatusBreakdown)


@dataclass(frozen=True)
class TimeSlotScore:
    """Equity evaluation of one UTC hour of a day."""

    hour: int
    datetime: datetime
    score: Optional[int]
    breakdown: StatusBreakdown


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a user-edited working-hours config."""

    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TimezoneOffset:
    """UTC offset of a timezone at a given instant.

    Example:
        >>> TimezoneOffset(offset_minutes=-240, offset_string="-04:00",
        ...                is_dst=True)
    """

    offset_minutes: int
    offset_string: str
    is_dst: bool


@dataclass(frozen=True)
class CountryTimezone:
    """A timezone commonly used in a country, for participant pickers."""

    timezone: str
    name: str
    abbreviation: str
