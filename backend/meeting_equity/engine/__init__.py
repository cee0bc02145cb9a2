"""Meeting equity scheduling engine.

Pure functions over immutable inputs: nothing here performs I/O, logs,
or keeps state between calls.
"""

from .classifier import classify, classify_proposal
from .configs import format_time_range, resolve_config
from .heatmap import generate_heatmap, suggest_times
from .holidays import EMPTY_CALENDAR, HolidayCalendar
from .scoring import compare_scores, quality_label, score_statuses, severity_tier
from .timezones import timezones_for_country
from .validation import build_config, validate_config

__all__ = [
    "EMPTY_CALENDAR",
    "HolidayCalendar",
    "build_config",
    "classify",
    "classify_proposal",
    "compare_scores",
    "format_time_range",
    "generate_heatmap",
    "quality_label",
    "resolve_config",
    "score_statuses",
    "severity_tier",
    "suggest_times",
    "timezones_for_country",
    "validate_config",
]
