"""Application configuration utilities."""

from __future__ import annotations

import os
from datetime import time
from functools import lru_cache

from pydantic import BaseModel

from ..domain.models import DeadZone


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    DEAD_ZONE_START: str = "00:00"
    DEAD_ZONE_END: str = "05:00"
    SUGGESTION_LIMIT: int = 3
    HOLIDAY_API_URL: str = "https://date.nager.at/api/v3"
    HOLIDAY_API_TIMEOUT: float = 10.0
    HOLIDAY_API_RETRIES: int = 3

    def dead_zone(self) -> DeadZone:
        """Return the configured critical window around local midnight."""
        return DeadZone(
            start=time.fromisoformat(self.DEAD_ZONE_START),
            end=time.fromisoformat(self.DEAD_ZONE_END),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        DEAD_ZONE_START=os.getenv("DEAD_ZONE_START", "00:00"),
        DEAD_ZONE_END=os.getenv("DEAD_ZONE_END", "05:00"),
        SUGGESTION_LIMIT=int(os.getenv("SUGGESTION_LIMIT", "3")),
        HOLIDAY_API_URL=os.getenv(
            "HOLIDAY_API_URL", "https://date.nager.at/api/v3"
        ),
        HOLIDAY_API_TIMEOUT=float(os.getenv("HOLIDAY_API_TIMEOUT", "10")),
        HOLIDAY_API_RETRIES=int(os.getenv("HOLIDAY_API_RETRIES", "3")),
    )


settings = get_settings()
