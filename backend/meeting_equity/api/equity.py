"""Equity evaluation endpoints: single proposal, day heatmap, suggestions."""

import logging

from fastapi import APIRouter, Depends

from ..core.config import Settings, get_settings
from ..domain import schemas
from ..engine import (
    HolidayCalendar,
    classify_proposal,
    generate_heatmap,
    quality_label,
    score_statuses,
    severity_tier,
    suggest_times,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/equity", tags=["equity"])


def _reference_data(body):
    configs = tuple(config.to_domain() for config in body.configs)
    calendar = HolidayCalendar(holiday.to_domain() for holiday in body.holidays)
    return configs, calendar


@router.post("/evaluate", response_model=schemas.EvaluateResponse)
def evaluate(
    body: schemas.EvaluateRequest, settings: Settings = Depends(get_settings)
) -> schemas.EvaluateResponse:
    """Classify every participant at the proposed time and score the result."""
    configs, calendar = _reference_data(body)
    statuses = classify_proposal(
        body.to_domain(), configs, calendar, settings.dead_zone()
    )
    result = score_statuses(statuses)
    logger.info(
        "Evaluated meeting proposal",
        extra={"participants": len(statuses), "path": "/equity/evaluate"},
    )
    return schemas.EvaluateResponse(
        statuses=[
            schemas.ParticipantStatusOut(
                participant_id=status.participant_id,
                status=status.status,
                is_critical=status.is_critical,
                reason=status.reason,
                holiday=status.holiday,
                local_time=status.local_time,
            )
            for status in statuses
        ],
        score=result.score,
        breakdown=schemas.BreakdownOut.from_domain(result.breakdown),
        quality=quality_label(result.score),
        severity=severity_tier(result.score),
    )


def _heatmap(body: schemas.HeatmapRequest, settings: Settings):
    configs, calendar = _reference_data(body)
    participants = [participant.to_domain() for participant in body.participants]
    return generate_heatmap(
        body.date, participants, configs, calendar, settings.dead_zone()
    )


def _slots_out(slots):
    return [
        schemas.TimeSlotOut.from_domain(slot, quality_label(slot.score))
        for slot in slots
    ]


@router.post("/heatmap", response_model=schemas.HeatmapResponse)
def heatmap(
    body: schemas.HeatmapRequest, settings: Settings = Depends(get_settings)
) -> schemas.HeatmapResponse:
    """Equity score for each UTC hour of the requested day."""
    slots = _heatmap(body, settings)
    return schemas.HeatmapResponse(slots=_slots_out(slots))


@router.post("/suggestions", response_model=schemas.HeatmapResponse)
def suggestions(
    body: schemas.SuggestionRequest, settings: Settings = Depends(get_settings)
) -> schemas.HeatmapResponse:
    """Best hours of the requested day, highest score first."""
    limit = settings.SUGGESTION_LIMIT if body.limit is None else body.limit
    slots = suggest_times(_heatmap(body, settings), limit)
    return schemas.HeatmapResponse(slots=_slots_out(slots))
