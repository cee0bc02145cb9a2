"""Working-hours config lookup and display."""

from datetime import time
from typing import Iterable, Mapping, Optional, Union

from ..core.errors import InvalidInputError
from ..domain.models import DEFAULT_CONFIG, WorkingHoursConfig

ConfigSource = Union[
    Iterable[WorkingHoursConfig], Mapping[str, WorkingHoursConfig], None
]


def freeze_configs(configs: ConfigSource) -> ConfigSource:
    """Materialize one-shot iterables so repeated lookups see every entry."""
    if configs is None or isinstance(configs, (Mapping, tuple)):
        return configs
    return tuple(configs)


def resolve_config(
    country_code: Optional[str], configs: ConfigSource = None
) -> WorkingHoursConfig:
    """Return the override for ``country_code`` or the default config.

    ``configs`` may be an iterable of overrides or a mapping keyed by
    country code. A missing match is the normal case, not an error.
    """
    if not country_code or not configs:
        return DEFAULT_CONFIG
    code = country_code.upper()
    if isinstance(configs, Mapping):
        for key, config in configs.items():
            if key.upper() == code:
                return config
        return DEFAULT_CONFIG
    for config in configs:
        if config.country_code and config.country_code.upper() == code:
            return config
    return DEFAULT_CONFIG


def _clock(value: Union[time, str], field: str) -> str:
    if isinstance(value, str):
        try:
            value = time.fromisoformat(value)
        except ValueError:
            raise InvalidInputError(field, "Invalid time format") from None
    if not isinstance(value, time):
        raise InvalidInputError(field, "Invalid time format")
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start: Union[time, str], end: Union[time, str]) -> str:
    """Render a window for display, e.g. ``"9:00 AM - 5:00 PM"``."""
    return f"{_clock(start, 'start')} - {_clock(end, 'end')}"
