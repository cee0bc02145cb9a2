"""Client for the Nager.Date public holiday API.

This is the I/O side of holiday data: it fetches, retries and degrades,
and hands the engine a read-only :class:`HolidayCalendar`.
"""

import logging
import time
from datetime import date
from typing import Iterable, List, Optional

import httpx

from ..core.config import get_settings
from ..core.errors import HolidaySourceError, InvalidInputError
from ..domain.models import HolidayEntry
from ..engine.holidays import HolidayCalendar

logger = logging.getLogger(__name__)


class NagerHolidayClient:
    """Fetch public holidays per country and year.

    A 404 means the API has no data for the country and yields no
    holidays. Other failures are retried with exponential backoff
    (``backoff_seconds * 2 ** attempt``) before raising
    :class:`HolidaySourceError`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_seconds: float = 1.0,
        client: Optional[httpx.Client] = None,
    ):
        settings = get_settings()
        if base_url is None:
            base_url = settings.HOLIDAY_API_URL
        if timeout is None:
            timeout = settings.HOLIDAY_API_TIMEOUT
        if max_retries is None:
            max_retries = settings.HOLIDAY_API_RETRIES
        self.base_url = base_url.rstrip("/")
        self.max_retries = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self._client = client or httpx.Client(
            timeout=timeout, headers={"Accept": "application/json"}
        )
        self._owns_client = client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "NagerHolidayClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_holidays(self, country_code: str, year: int) -> List[HolidayEntry]:
        if not country_code or len(country_code) != 2:
            raise InvalidInputError(
                "country_code", "Valid ISO 3166-1 alpha-2 country code required"
            )
        if not isinstance(year, int) or not 2000 <= year <= 2100:
            raise InvalidInputError("year", "Valid year required (2000-2100)")

        code = country_code.upper()
        url = f"{self.base_url}/PublicHolidays/{year}/{code}"
        response = self._get(url, code)
        if response is None:
            logger.warning(
                "No holiday data for country",
                extra={"country_code": code, "year": year},
            )
            return []

        # A malformed body will not fix itself on retry.
        try:
            return [_to_entry(code, item) for item in response.json()]
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise HolidaySourceError(
                f"Malformed holiday data for {code} {year}: {exc!r}",
                country_code=code,
                status_code=response.status_code,
            ) from exc

    def _get(self, url: str, code: str) -> Optional[httpx.Response]:
        """GET ``url`` with retries; ``None`` when the API answers 404."""
        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries):
            try:
                response = self._client.get(url)
                if response.status_code == 404:
                    return None
                response.raise_for_status()
                return response
            except httpx.HTTPError as exc:
                last_error = exc
                if attempt < self.max_retries - 1:
                    delay = self.backoff_seconds * 2**attempt
                    logger.warning(
                        "Holiday fetch failed, retrying in %.1fs",
                        delay,
                        extra={"country_code": code, "attempt": attempt + 1},
                    )
                    time.sleep(delay)

        status_code = None
        if isinstance(last_error, httpx.HTTPStatusError):
            status_code = last_error.response.status_code
        raise HolidaySourceError(
            f"Failed to fetch holidays for {code}: {last_error}",
            country_code=code,
            status_code=status_code,
        )

    def build_calendar(
        self, country_codes: Iterable[str], years: Iterable[int]
    ) -> HolidayCalendar:
        """Fetch every (country, year) pair; failed countries get no holidays."""
        years = list(years)
        entries: List[HolidayEntry] = []
        for code in sorted({c.upper() for c in country_codes if c}):
            for year in years:
                try:
                    entries.extend(self.fetch_holidays(code, year))
                except HolidaySourceError:
                    logger.error(
                        "Holiday checking unavailable for country",
                        extra={"country_code": code, "year": year},
                        exc_info=True,
                    )
        return HolidayCalendar(entries)


def _to_entry(country_code: str, item: dict) -> HolidayEntry:
    return HolidayEntry(
        country_code=item.get("countryCode") or country_code,
        date=date.fromisoformat(item["date"]),
        name=item["name"],
        local_name=item.get("localName"),
    )
