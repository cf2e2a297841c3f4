"""Booking status state machine and the self-service mutable window.

Status flow::

    pending -> confirmed -> active -> completed
    pending -> cancelled

Customers may only cancel or edit a pending booking during the mutable
window after creation. Administrative transitions are not gated here; the
caller is responsible for authorizing them.
"""

from dataclasses import replace
from datetime import datetime, timedelta

from bookings.domain.errors import NotMutableError
from bookings.domain.models import (
    Booking,
    DeliveryRequest,
    OptionsSelection,
    PriceBreakdown,
    RentalWindow,
)
from bookings.domain.value_objects import BookingStatus


class BookingLifecycle:
    """The single authority for booking status changes."""

    def __init__(self, mutable_window: timedelta = timedelta(minutes=30)) -> None:
        self._mutable_window = mutable_window

    def mutable_until(self, booking: Booking) -> datetime:
        return booking.created_at + self._mutable_window

    def is_mutable(self, booking: Booking, now: datetime) -> bool:
        return booking.status is BookingStatus.PENDING and now < self.mutable_until(booking)

    def ensure_mutable(self, booking: Booking, now: datetime) -> None:
        if not self.is_mutable(booking, now):
            raise NotMutableError(booking.status.value, self.mutable_until(booking))

    def cancel(
        self,
        booking: Booking,
        now: datetime,
        reason: str | None = None,
        *,
        administrative: bool = False,
    ) -> Booking:
        """Move a booking to cancelled, keeping the reason as its notes.

        Raises:
            NotMutableError: If a customer cancels outside the mutable window.
        """
        if not administrative:
            self.ensure_mutable(booking, now)
        notes = reason if reason else booking.notes
        return replace(booking, status=BookingStatus.CANCELLED, notes=notes)

    def edit(
        self,
        booking: Booking,
        now: datetime,
        *,
        window: RentalWindow,
        options: OptionsSelection,
        delivery: DeliveryRequest,
        price: PriceBreakdown,
        administrative: bool = False,
    ) -> Booking:
        """Replace the priced fields. Status and creation time are unchanged.

        Raises:
            NotMutableError: If a customer edits outside the mutable window.
        """
        if not administrative:
            self.ensure_mutable(booking, now)
        return replace(booking, window=window, options=options, delivery=delivery, price=price)

    def transition(self, booking: Booking, target: BookingStatus) -> Booking:
        """Administrative status change; accepted unconditionally."""
        return replace(booking, status=target)
