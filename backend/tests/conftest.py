"""Shared fixtures for the meeting equity tests."""

from datetime import datetime
from pathlib import Path
import sys

import pytest
import pytz

sys.path.append(str(Path(__file__).resolve().parents[1]))
from meeting_equity.domain.models import Participant  # noqa: E402


def utc(*args) -> datetime:
    """Aware UTC datetime, e.g. ``utc(2025, 3, 4, 10)``."""
    return pytz.UTC.localize(datetime(*args))


@pytest.fixture
def utc_participant() -> Participant:
    """Participant whose wall clock is UTC all year."""
    return Participant(id="p_utc", name="Uma", timezone="UTC", country_code="GB")


@pytest.fixture
def new_yorker() -> Participant:
    return Participant(
        id="p_ny", name="Diego", timezone="America/New_York", country_code="US"
    )


@pytest.fixture
def tokyo() -> Participant:
    return Participant(
        id="p_jp", name="Kenji", timezone="Asia/Tokyo", country_code="JP"
    )
