"""IANA timezone conversions backed by pytz."""

from datetime import datetime, timedelta
from typing import List

import pytz

from ..core.errors import InvalidInputError
from ..domain.models import CountryTimezone, TimezoneOffset

UTC = pytz.UTC

_CET = "Central European Time"
_AU_EAST = "Australian Eastern Time"

COUNTRY_TIMEZONES = {
    "US": (
        CountryTimezone("America/New_York", "Eastern Time", "EST"),
        CountryTimezone("America/Chicago", "Central Time", "CST"),
        CountryTimezone("America/Denver", "Mountain Time", "MST"),
        CountryTimezone("America/Los_Angeles", "Pacific Time", "PST"),
        CountryTimezone("America/Anchorage", "Alaska Time", "AKST"),
        CountryTimezone("Pacific/Honolulu", "Hawaii Time", "HST"),
    ),
    "GB": (CountryTimezone("Europe/London", "Greenwich Mean Time", "GMT"),),
    "FR": (CountryTimezone("Europe/Paris", _CET, "CET"),),
    "DE": (CountryTimezone("Europe/Berlin", _CET, "CET"),),
    "ES": (
        CountryTimezone("Europe/Madrid", _CET, "CET"),
        CountryTimezone("Atlantic/Canary", "Canary Islands", "WET"),
    ),
    "JP": (CountryTimezone("Asia/Tokyo", "Japan Standard Time", "JST"),),
    "CN": (CountryTimezone("Asia/Shanghai", "China Standard Time", "CST"),),
    "AU": (
        CountryTimezone("Australia/Sydney", _AU_EAST, "AEST"),
        CountryTimezone("Australia/Melbourne", _AU_EAST, "AEST"),
        CountryTimezone("Australia/Perth", "Australian Western Time", "AWST"),
    ),
    "IN": (CountryTimezone("Asia/Kolkata", "India Standard Time", "IST"),),
    "AE": (CountryTimezone("Asia/Dubai", "Gulf Standard Time", "GST"),),
    "IL": (CountryTimezone("Asia/Jerusalem", "Israel Standard Time", "IST"),),
}


def get_timezone(name: str):
    """Return the pytz zone for an IANA identifier."""
    if not name or not isinstance(name, str):
        raise InvalidInputError("timezone", "Valid timezone string is required")
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise InvalidInputError(
            "timezone", f"Invalid timezone: {name}", details={"timezone": name}
        ) from None


def is_valid_timezone(name: str) -> bool:
    return name in pytz.all_timezones_set


def ensure_utc(instant: datetime) -> datetime:
    """Normalize an aware datetime to UTC; naive values are rejected."""
    if not isinstance(instant, datetime):
        raise InvalidInputError("proposed_time", "A datetime instant is required")
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidInputError(
            "proposed_time", "Instant must be timezone-aware (UTC)"
        )
    return instant.astimezone(UTC)


def to_local_time(instant: datetime, timezone: str) -> datetime:
    """Wall-clock time in ``timezone`` for a UTC instant, DST included."""
    return ensure_utc(instant).astimezone(get_timezone(timezone))


def to_utc(local: datetime, timezone: str) -> datetime:
    """Interpret a naive wall-clock time in ``timezone`` and return UTC."""
    if local.tzinfo is not None:
        return ensure_utc(local)
    return get_timezone(timezone).localize(local).astimezone(UTC)


def timezone_offset(instant: datetime, timezone: str) -> TimezoneOffset:
    local = to_local_time(instant, timezone)
    offset = local.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return TimezoneOffset(
        offset_minutes=minutes,
        offset_string=f"{sign}{hours:02d}:{mins:02d}",
        is_dst=bool(local.dst()),
    )


def format_with_timezone(instant: datetime, timezone: str) -> str:
    """Format like ``"2:00 PM EST (America/New_York)"``."""
    local = to_local_time(instant, timezone)
    hour = local.strftime("%I").lstrip("0")
    return f"{hour}:{local:%M %p %Z} ({timezone})"


def timezones_for_country(country_code: str) -> List[CountryTimezone]:
    """Common timezones of a country, primary zone first.

    Countries outside the built-in table have no suggestions; that is not
    an error.
    """
    if not isinstance(country_code, str) or len(country_code) != 2:
        raise InvalidInputError(
            "country_code", "Valid ISO 3166-1 alpha-2 country code required"
        )
    return list(COUNTRY_TIMEZONES.get(country_code.upper(), ()))
