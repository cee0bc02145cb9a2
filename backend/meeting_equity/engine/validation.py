"""Structural checks for user-edited working-hours configs.

Every rule runs; a field keeps the first message raised against it so a
form can show one message per input.
"""

import dataclasses
from datetime import time
from typing import Any, Dict, Mapping, Optional, Union

from ..core.errors import ConfigValidationError
from ..domain.models import ValidationResult, WorkingHoursConfig

MSG_COUNTRY_REQUIRED = "Please select a country"
MSG_INVALID_TIME = "Invalid time format"
MSG_START_BEFORE_END = "Start time must be before end time"
MSG_MORNING_BEFORE_GREEN = "Should end before green hours start"
MSG_EVENING_AFTER_GREEN = "Should start after green hours end"
MSG_WORK_DAYS_REQUIRED = "Please select at least one working day"
MSG_INVALID_DAY = "Invalid day selected"

WINDOWS = (
    ("green_start", "green_end"),
    ("orange_morning_start", "orange_morning_end"),
    ("orange_evening_start", "orange_evening_end"),
)


def _parse_time(value: Any) -> Optional[time]:
    parsed = value if isinstance(value, time) else None
    if isinstance(value, str) and len(value) in (5, 8):
        try:
            parsed = time.fromisoformat(value)
        except ValueError:
            return None
    # Windows are local wall-clock times; an offset is malformed.
    if parsed is None or parsed.tzinfo is not None:
        return None
    return parsed


def _valid_day(day: Any) -> bool:
    return isinstance(day, int) and not isinstance(day, bool) and 1 <= day <= 7


def _as_mapping(
    config: Union[WorkingHoursConfig, Mapping[str, Any]]
) -> Mapping[str, Any]:
    if isinstance(config, WorkingHoursConfig):
        return dataclasses.asdict(config)
    return config


def _check(data: Mapping[str, Any]):
    errors: Dict[str, str] = {}
    times: Dict[str, Optional[time]] = {}

    country = data.get("country_code")
    if not isinstance(country, str) or not country.strip():
        errors["country_code"] = MSG_COUNTRY_REQUIRED

    for start_field, end_field in WINDOWS:
        for name in (start_field, end_field):
            times[name] = _parse_time(data.get(name))
            if times[name] is None:
                errors.setdefault(name, MSG_INVALID_TIME)
        start, end = times[start_field], times[end_field]
        if start is not None and end is not None and start >= end:
            errors.setdefault(start_field, MSG_START_BEFORE_END)
            errors.setdefault(end_field, MSG_START_BEFORE_END)

    green_start, green_end = times["green_start"], times["green_end"]
    morning_end = times["orange_morning_end"]
    evening_start = times["orange_evening_start"]
    if morning_end is not None and green_start is not None:
        if morning_end > green_start:
            errors.setdefault("orange_morning_end", MSG_MORNING_BEFORE_GREEN)
    if evening_start is not None and green_end is not None:
        if evening_start < green_end:
            errors.setdefault("orange_evening_start", MSG_EVENING_AFTER_GREEN)

    work_days = data.get("work_days")
    if not work_days:
        errors["work_days"] = MSG_WORK_DAYS_REQUIRED
    elif isinstance(work_days, (str, bytes)) or not hasattr(work_days, "__iter__"):
        errors["work_days"] = MSG_INVALID_DAY
    elif not all(_valid_day(day) for day in work_days):
        errors["work_days"] = MSG_INVALID_DAY

    return errors, times


def validate_config(
    config: Union[WorkingHoursConfig, Mapping[str, Any]]
) -> ValidationResult:
    """Report every violated rule of ``config`` as ``field -> message``.

    Validation problems are returned, never raised; whether to block a
    save is the caller's decision.
    """
    errors, _ = _check(_as_mapping(config))
    return ValidationResult(valid=not errors, errors=errors)


def build_config(data: Mapping[str, Any]) -> WorkingHoursConfig:
    """Validate raw form data and return the config it describes.

    Raises:
        ConfigValidationError: with the full ``field -> message`` map.
    """
    errors, times = _check(data)
    if errors:
        raise ConfigValidationError(errors)
    return WorkingHoursConfig(
        country_code=data["country_code"].strip().upper(),
        work_days=frozenset(data["work_days"]),
        **times,
    )
