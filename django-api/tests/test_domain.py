"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import timedelta
from decimal import Decimal
from uuid import UUID

import pytest

from bookings.domain import BookingId, BookingNumber, BookingPolicy, GeoPoint, Money
from bookings.domain.errors import ErrorCode, NotMutableError
from bookings.domain.value_objects import round2


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("142.00")).amount == Decimal("142.00")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("63.9"))) == "63.90"

    def test_of_rounds_half_up_to_cents(self):
        """Money.of quantizes to cents, rounding halves up."""
        assert Money.of("14.9985").amount == Decimal("15.00")
        assert Money.of("0.005").amount == Decimal("0.01")
        assert Money.of(426).amount == Decimal("426.00")

    def test_round2_keeps_exact_cents(self):
        assert round2(Decimal("489.9")) == Decimal("489.90")


class TestBookingId:
    """Tests for BookingId value object."""

    def test_from_string_valid_uuid(self):
        """BookingId.from_string parses valid UUID."""
        value = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
        assert BookingId.from_string(value).value == UUID(value)

    def test_from_string_invalid_uuid(self):
        """BookingId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            BookingId.from_string("not-a-uuid")


class TestBookingNumber:
    """Tests for BookingNumber value object."""

    def test_generate_matches_pattern(self):
        """Generated numbers are MAS- followed by five digits."""
        for _ in range(50):
            number = BookingNumber.generate()
            assert number.value.startswith("MAS-")
            assert 10000 <= int(number.value[4:]) <= 99999

    @pytest.mark.parametrize("value", ["MAS-1234", "MAS-123456", "mas-12345", "ABC-12345", ""])
    def test_rejects_malformed_numbers(self, value):
        with pytest.raises(ValueError):
            BookingNumber(value)


class TestGeoPoint:
    """Tests for GeoPoint value object."""

    def test_accepts_valid_coordinates(self):
        point = GeoPoint(lat=24.8118, lng=46.7801)
        assert (point.lat, point.lng) == (24.8118, 46.7801)

    @pytest.mark.parametrize("lat,lng", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_rejects_out_of_range_coordinates(self, lat, lng):
        with pytest.raises(ValueError):
            GeoPoint(lat=lat, lng=lng)


class TestBookingPolicy:
    """Tests for BookingPolicy defaults and validation."""

    def test_defaults(self):
        policy = BookingPolicy()
        assert policy.min_lead_time == timedelta(hours=2)
        assert policy.mutable_window == timedelta(minutes=30)
        assert policy.tax_rate == Decimal("0.15")
        assert policy.max_delivery_km == 40

    def test_rejects_negative_tax_rate(self):
        with pytest.raises(ValueError):
            BookingPolicy(tax_rate=Decimal("-0.01"))

    def test_rejects_zero_booking_number_attempts(self):
        with pytest.raises(ValueError):
            BookingPolicy(booking_number_attempts=0)


class TestDomainErrors:
    """Tests for domain error formatting."""

    def test_not_mutable_carries_window_state(self):
        from datetime import datetime, timezone

        until = datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)
        error = NotMutableError("pending", until)
        assert error.code is ErrorCode.NOT_MUTABLE
        assert error.status == "pending"
        assert error.mutable_until == until
        assert str(error).startswith("NOT_MUTABLE: ")
