"""Pydantic models used for request and response bodies.

These data transfer objects (DTOs) mirror the domain models but add
parsing and serialization for the API layer. ``to_domain`` converts a
request DTO into the frozen dataclass the engine consumes.
"""

from datetime import date, datetime, time
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from . import models
from ..engine.validation import build_config


class ParticipantIn(BaseModel):
    """Meeting participant.

    Example:
        >>> ParticipantIn(id="p_1", name="Asha", timezone="Asia/Kolkata",
        ...               country_code="IN")
    """

    id: str
    name: str
    timezone: str
    country_code: str
    notes: str = ""

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "p_1",
                "name": "Asha",
                "timezone": "Asia/Kolkata",
                "country_code": "IN",
                "notes": "Prefers mornings",
            }
        }

    def to_domain(self) -> models.Participant:
        return models.Participant(
            id=self.id,
            name=self.name,
            timezone=self.timezone,
            country_code=self.country_code,
            notes=self.notes,
        )


class WorkingHoursConfigIn(BaseModel):
    """Country working-hours override.

    Example:
        >>> WorkingHoursConfigIn(country_code="IL", work_days=[7, 1, 2, 3, 4])
    """

    country_code: str
    green_start: time = time(9, 0)
    green_end: time = time(17, 0)
    orange_morning_start: time = time(8, 0)
    orange_morning_end: time = time(9, 0)
    orange_evening_start: time = time(17, 0)
    orange_evening_end: time = time(18, 0)
    work_days: List[int] = [1, 2, 3, 4, 5]

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "country_code": "IL",
                "green_start": "09:00",
                "green_end": "17:00",
                "orange_morning_start": "08:00",
                "orange_morning_end": "09:00",
                "orange_evening_start": "17:00",
                "orange_evening_end": "18:00",
                "work_days": [7, 1, 2, 3, 4],
            }
        }

    def to_domain(self) -> models.WorkingHoursConfig:
        """Build the engine config; raises ``ConfigValidationError``."""
        return build_config(self.model_dump())


class ConfigForm(BaseModel):
    """Raw, possibly invalid, config form submitted for validation."""

    country_code: Optional[str] = None
    green_start: Optional[str] = None
    green_end: Optional[str] = None
    orange_morning_start: Optional[str] = None
    orange_morning_end: Optional[str] = None
    orange_evening_start: Optional[str] = None
    orange_evening_end: Optional[str] = None
    work_days: List[Any] = []

    class Config:
        json_schema_extra = {
            "example": {
                "country_code": "US",
                "green_start": "18:00",
                "green_end": "17:00",
                "orange_morning_start": "08:00",
                "orange_morning_end": "09:00",
                "orange_evening_start": "17:00",
                "orange_evening_end": "18:00",
                "work_days": [1, 2, 3, 4, 5],
            }
        }


class HolidayIn(BaseModel):
    """Public holiday reference entry.

    Example:
        >>> HolidayIn(country_code="US", date=date(2025, 7, 4),
        ...           name="Independence Day")
    """

    country_code: str
    date: date
    name: str
    local_name: Optional[str] = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "country_code": "US",
                "date": "2025-07-04",
                "name": "Independence Day",
            }
        }

    def to_domain(self) -> models.HolidayEntry:
        return models.HolidayEntry(
            country_code=self.country_code,
            date=self.date,
            name=self.name,
            local_name=self.local_name,
        )


class EvaluateRequest(BaseModel):
    """A proposed meeting plus the reference data to evaluate it with."""

    proposed_time: datetime
    duration_minutes: int = Field(60, ge=15, le=480)
    participants: List[ParticipantIn] = Field(..., min_length=1)
    configs: List[WorkingHoursConfigIn] = []
    holidays: List[HolidayIn] = []

    class Config:
        json_schema_extra = {
            "example": {
                "proposed_time": "2025-03-04T14:00:00Z",
                "duration_minutes": 60,
                "participants": [
                    {
                        "id": "p_1",
                        "name": "Asha",
                        "timezone": "Asia/Kolkata",
                        "country_code": "IN",
                    },
                    {
                        "id": "p_2",
                        "name": "Diego",
                        "timezone": "America/New_York",
                        "country_code": "US",
                    },
                ],
            }
        }

    def to_domain(self) -> models.MeetingProposal:
        return models.MeetingProposal(
            proposed_time=self.proposed_time,
            duration_minutes=self.duration_minutes,
            participants=tuple(p.to_domain() for p in self.participants),
        )


class HeatmapRequest(BaseModel):
    """Participants and reference data to scan one UTC day with."""

    date: date
    participants: List[ParticipantIn] = []
    configs: List[WorkingHoursConfigIn] = []
    holidays: List[HolidayIn] = []


class SuggestionRequest(HeatmapRequest):
    limit: Optional[int] = Field(None, ge=0)


class BreakdownOut(BaseModel):
    green: int = 0
    orange: int = 0
    red: int = 0
    critical: int = 0
    total: int = 0

    @classmethod
    def from_domain(cls, breakdown: models.StatusBreakdown) -> "BreakdownOut":
        return cls(total=breakdown.total, **breakdown.as_dict())


class ParticipantStatusOut(BaseModel):
    participant_id: str
    status: models.Status
    is_critical: bool
    reason: str
    holiday: Optional[str] = None
    local_time: Optional[datetime] = None


class EvaluateResponse(BaseModel):
    """Per-participant statuses and the folded equity score."""

    statuses: List[ParticipantStatusOut]
    score: Optional[int]
    breakdown: BreakdownOut
    quality: Optional[str]
    severity: Optional[str]


class TimeSlotOut(BaseModel):
    hour: int
    datetime: datetime
    score: Optional[int]
    breakdown: BreakdownOut
    quality: Optional[str] = None

    @classmethod
    def from_domain(
        cls, slot: models.TimeSlotScore, quality: Optional[str] = None
    ) -> "TimeSlotOut":
        return cls(
            hour=slot.hour,
            datetime=slot.datetime,
            score=slot.score,
            breakdown=BreakdownOut.from_domain(slot.breakdown),
            quality=quality,
        )


class HeatmapResponse(BaseModel):
    slots: List[TimeSlotOut]


class ValidationResponse(BaseModel):
    valid: bool
    errors: Dict[str, str] = {}
