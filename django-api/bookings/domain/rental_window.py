"""Validation of rental start/end instants and billable day counting."""

from datetime import datetime, timedelta, timezone

from bookings.domain.errors import InvalidWindowError, LeadTimeViolationError
from bookings.domain.models import RentalWindow

DAY = timedelta(days=1)


def billable_days(start: datetime, end: datetime) -> int:
    """Whole days charged for a rental; any started day counts, minimum one."""
    elapsed = end - start
    return max(1, -(-elapsed // DAY))


class DateWindowValidator:
    """Checks a proposed rental window against a minimum lead time."""

    def __init__(self, min_lead_time: timedelta) -> None:
        self._min_lead_time = min_lead_time

    def validate(
        self, start: datetime, end: datetime, now: datetime, *, enforce_lead_time: bool = True
    ) -> RentalWindow:
        """Return the validated window in UTC.

        Administrative corrections pass enforce_lead_time=False; the window
        must still be well formed.

        Raises:
            InvalidWindowError: If either instant is naive or end is not after start.
            LeadTimeViolationError: If start is earlier than now plus the lead time.
        """
        if start.tzinfo is None or end.tzinfo is None:
            raise InvalidWindowError("Pickup and return times must include a timezone")
        start = start.astimezone(timezone.utc)
        end = end.astimezone(timezone.utc)
        if end <= start:
            raise InvalidWindowError()
        earliest_start = now + self._min_lead_time
        if enforce_lead_time and start < earliest_start:
            raise LeadTimeViolationError(earliest_start)
        return RentalWindow(start=start, end=end, days=billable_days(start, end))
