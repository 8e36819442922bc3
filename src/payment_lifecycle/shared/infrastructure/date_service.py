"""System date service."""

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from payment_lifecycle.features.payments.application.ports import DateServicePort
from payment_lifecycle.shared.core.settings import get_settings
from payment_lifecycle.shared.domain.exceptions import DateParseError


class SystemDateService(DateServicePort):
    """
    Date service backed by the system clock.

    Timestamps are timezone-aware in the configured zone. Date strings are
    tried against the configured format first, then as ISO 8601; naive
    results are placed in the configured zone.
    """

    def __init__(self, tz_name: str = "UTC", date_format: str = "%Y-%m-%d") -> None:
        self._tz = ZoneInfo(tz_name)
        self._date_format = date_format

    def get_application_timestamp(self) -> datetime:
        return datetime.now(tz=self._tz)

    def parse_timestamp(self, value: str) -> datetime:
        if not isinstance(value, str) or not value.strip():
            raise DateParseError(value)
        text = value.strip()
        try:
            parsed = datetime.strptime(text, self._date_format)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            except ValueError as exc:
                raise DateParseError(value) from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self._tz)
        return parsed.astimezone(self._tz)


@lru_cache
def get_date_service() -> SystemDateService:
    """Get the date service configured from settings."""
    settings = get_settings()
    return SystemDateService(tz_name=settings.timezone, date_format=settings.date_format)
