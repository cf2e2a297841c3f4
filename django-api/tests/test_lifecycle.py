"""Unit tests for the booking status state machine.

Run with: pytest tests/test_lifecycle.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from bookings.domain import BookingStatus, DeliveryRequest, Money, OptionsSelection, RentalWindow
from bookings.domain.errors import NotMutableError
from bookings.domain.lifecycle import BookingLifecycle
from bookings.domain.pricing import PriceCalculator

from tests.support import NOW


@pytest.fixture
def lifecycle() -> BookingLifecycle:
    return BookingLifecycle(mutable_window=timedelta(minutes=30))


def edit_fields(days: int = 5) -> dict:
    start = NOW + timedelta(days=2)
    return dict(
        window=RentalWindow(start=start, end=start + timedelta(days=days), days=days),
        options=OptionsSelection(insurance=True),
        delivery=DeliveryRequest(),
        price=PriceCalculator().calculate(Money.of(142), days, OptionsSelection(insurance=True), Money.of(0)),
    )


class TestMutableWindow:
    """Tests for the mutable window predicate."""

    def test_pending_booking_is_mutable_right_after_creation(self, lifecycle, make_booking):
        assert lifecycle.is_mutable(make_booking(), NOW)

    def test_window_closes_exactly_at_thirty_minutes(self, lifecycle, make_booking):
        booking = make_booking()
        assert lifecycle.mutable_until(booking) == NOW + timedelta(minutes=30)
        assert lifecycle.is_mutable(booking, NOW + timedelta(minutes=29, seconds=59))
        assert not lifecycle.is_mutable(booking, NOW + timedelta(minutes=30))

    @pytest.mark.parametrize(
        "status",
        [BookingStatus.CONFIRMED, BookingStatus.ACTIVE, BookingStatus.COMPLETED, BookingStatus.CANCELLED],
    )
    def test_only_pending_bookings_are_mutable(self, lifecycle, make_booking, status):
        assert not lifecycle.is_mutable(make_booking(status=status), NOW)


class TestCancel:
    """Tests for cancelling a booking."""

    def test_cancel_inside_window(self, lifecycle, make_booking):
        booking = make_booking()
        cancelled = lifecycle.cancel(booking, NOW + timedelta(minutes=29, seconds=59), "Plans changed")
        assert cancelled.status is BookingStatus.CANCELLED
        assert cancelled.notes == "Plans changed"
        assert booking.status is BookingStatus.PENDING

    def test_cancel_after_window_is_rejected(self, lifecycle, make_booking):
        with pytest.raises(NotMutableError) as excinfo:
            lifecycle.cancel(make_booking(), NOW + timedelta(minutes=30, seconds=1))
        assert excinfo.value.status == "pending"
        assert excinfo.value.mutable_until == NOW + timedelta(minutes=30)

    def test_cancel_without_reason_keeps_notes(self, lifecycle, make_booking):
        cancelled = lifecycle.cancel(make_booking(notes="Leave keys at desk"), NOW)
        assert cancelled.notes == "Leave keys at desk"

    def test_confirmed_booking_cannot_be_cancelled_by_customer(self, lifecycle, make_booking):
        with pytest.raises(NotMutableError):
            lifecycle.cancel(make_booking(status=BookingStatus.CONFIRMED), NOW)

    def test_administrative_cancel_ignores_window(self, lifecycle, make_booking):
        booking = make_booking(status=BookingStatus.CONFIRMED)
        cancelled = lifecycle.cancel(booking, NOW + timedelta(days=1), administrative=True)
        assert cancelled.status is BookingStatus.CANCELLED


class TestEdit:
    """Tests for editing a booking."""

    def test_edit_replaces_priced_fields_only(self, lifecycle, make_booking):
        booking = make_booking()
        edited = lifecycle.edit(booking, NOW + timedelta(minutes=10), **edit_fields())
        assert edited.window.days == 5
        assert edited.options.insurance
        assert edited.price.insurance.amount == Decimal("250.00")
        assert edited.status is BookingStatus.PENDING
        assert edited.created_at == booking.created_at
        assert edited.booking_number == booking.booking_number

    def test_edit_does_not_renew_window(self, lifecycle, make_booking):
        edited = lifecycle.edit(make_booking(), NOW + timedelta(minutes=20), **edit_fields())
        assert lifecycle.mutable_until(edited) == NOW + timedelta(minutes=30)

    def test_edit_after_window_is_rejected(self, lifecycle, make_booking):
        booking = make_booking()
        with pytest.raises(NotMutableError):
            lifecycle.edit(booking, NOW + timedelta(minutes=31), **edit_fields())
        assert booking.window.days == 3

    def test_administrative_edit_after_window(self, lifecycle, make_booking):
        edited = lifecycle.edit(
            make_booking(), NOW + timedelta(days=1), administrative=True, **edit_fields()
        )
        assert edited.window.days == 5


class TestTransition:
    """Tests for administrative transitions."""

    @pytest.mark.parametrize("target", list(BookingStatus))
    def test_any_target_is_accepted(self, lifecycle, make_booking, target):
        assert lifecycle.transition(make_booking(), target).status is target

    def test_cancelled_booking_can_be_corrected(self, lifecycle, make_booking):
        booking = make_booking(status=BookingStatus.CANCELLED)
        assert lifecycle.transition(booking, BookingStatus.CONFIRMED).status is BookingStatus.CONFIRMED
