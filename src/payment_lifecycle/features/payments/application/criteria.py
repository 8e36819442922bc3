"""Date criteria for the duplicate-payment search window."""

import logging
from datetime import datetime, timedelta

from payment_lifecycle.features.payments.application.ports import DateServicePort

logger = logging.getLogger(__name__)


def get_criteria_date(
    date_service: DateServicePort,
    date_string: str | None,
    offset_days: int,
) -> datetime | None:
    """
    Resolve one bound of the duplicate-search window.

    Parses ``date_string`` through the date service and shifts it by
    ``offset_days``. Returns None when the date is missing or cannot be
    resolved for any reason; callers treat None as an open bound.
    """
    if not date_string or not date_string.strip():
        return None
    try:
        return date_service.parse_timestamp(date_string) + timedelta(days=offset_days)
    except Exception:
        logger.debug(
            "Criteria date unresolved, search bound left open",
            extra={"date_string": date_string, "offset_days": offset_days},
            exc_info=True,
        )
        return None
