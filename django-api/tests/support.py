"""In-memory stores, a controllable clock and shared constants for tests."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from bookings.domain import Booking, BookingId, BookingStatus, CarPricingInfo, GeoPoint, Money
from bookings.domain.errors import ConcurrentModificationError
from bookings.stores.interfaces import BookingStore, CatalogStore, DuplicateBookingNumberError

NOW = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)
BRANCH_POINT = GeoPoint(lat=24.8118, lng=46.7801)


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class InMemoryCatalogStore(CatalogStore):
    def __init__(self) -> None:
        self.cars: dict[str, CarPricingInfo] = {}
        self.branches: dict[str, GeoPoint | None] = {}

    def add_car(self, car_id: str, daily_rate: str, branch_id: str, point: GeoPoint | None) -> None:
        self.cars[car_id] = CarPricingInfo(
            car_id=car_id, daily_rate=Money.of(Decimal(daily_rate)), branch_id=branch_id
        )
        self.branches[branch_id] = point

    def get_car_pricing_info(self, car_id: str) -> CarPricingInfo | None:
        return self.cars.get(car_id)

    def get_branch_point(self, branch_id: str) -> GeoPoint | None:
        return self.branches.get(branch_id)


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}

    def create(self, booking: Booking) -> Booking:
        if self.booking_number_exists(booking.booking_number.value):
            raise DuplicateBookingNumberError(booking.booking_number.value)
        created = replace(booking, id=BookingId(uuid4()))
        self.bookings[created.id] = created
        return created

    def update(self, booking: Booking, expected_status: BookingStatus) -> Booking:
        stored = self.bookings[booking.id]
        if stored.status is not expected_status:
            raise ConcurrentModificationError(str(booking.id))
        self.bookings[booking.id] = booking
        return booking

    def get(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_bookings(self, user_id: str | None = None) -> list[Booking]:
        bookings = sorted(self.bookings.values(), key=lambda b: b.created_at, reverse=True)
        if user_id is None:
            return bookings
        return [b for b in bookings if b.user_id == user_id]

    def booking_number_exists(self, booking_number: str) -> bool:
        return any(b.booking_number.value == booking_number for b in self.bookings.values())

