"""Public holiday reference data keyed by country and local date."""

from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain.models import HolidayEntry


class HolidayCalendar:
    """Read-only lookup of holidays by ``(country_code, local date)``.

    Country codes are compared case-insensitively. When a country has two
    entries on the same date the first one supplied wins.
    """

    def __init__(self, entries: Iterable[HolidayEntry] = ()):
        index: Dict[Tuple[str, date], HolidayEntry] = {}
        for entry in entries:
            index.setdefault((entry.country_code.upper(), entry.date), entry)
        self._index = index

    def __len__(self) -> int:
        return len(self._index)

    def lookup(
        self, country_code: Optional[str], local_date: date
    ) -> Optional[HolidayEntry]:
        """Return the holiday on ``local_date`` or ``None``."""
        if not country_code:
            return None
        return self._index.get((country_code.upper(), local_date))

    def upcoming(
        self, country_code: str, from_date: date, count: int = 5
    ) -> List[HolidayEntry]:
        """Next ``count`` holidays strictly after ``from_date``."""
        code = country_code.upper()
        later = sorted(
            (
                entry
                for (cc, day), entry in self._index.items()
                if cc == code and day > from_date
            ),
            key=lambda entry: entry.date,
        )
        return later[:count]

    def countries(self) -> List[str]:
        return sorted({cc for cc, _ in self._index})


EMPTY_CALENDAR = HolidayCalendar()
