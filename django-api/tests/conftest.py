"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from bookings.domain import (
    Booking,
    BookingId,
    BookingNumber,
    BookingStatus,
    ContactInfo,
    DeliveryRequest,
    DocumentRefs,
    Money,
    OptionsSelection,
    PaymentMethod,
    PriceBreakdown,
    RentalWindow,
)
from bookings.services import Actor, BookingService

from tests.support import BRANCH_POINT, NOW, FakeClock, InMemoryBookingStore, InMemoryCatalogStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def catalog() -> InMemoryCatalogStore:
    store = InMemoryCatalogStore()
    store.add_car("car-010", "142", "ryd-yarmuk", BRANCH_POINT)
    store.add_car("car-online", "200", "e-branch", None)
    return store


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def service(catalog, booking_store, clock) -> BookingService:
    return BookingService(catalog=catalog, store=booking_store, clock=clock)


@pytest.fixture
def customer() -> Actor:
    return Actor(user_id="42")


@pytest.fixture
def staff() -> Actor:
    return Actor(user_id="1", is_staff=True)


@pytest.fixture
def make_booking():
    """Build a pending booking created at NOW; override any field."""

    def factory(**overrides) -> Booking:
        start = NOW + timedelta(days=1)
        fields = dict(
            id=BookingId(uuid4()),
            booking_number=BookingNumber("MAS-12345"),
            car_id="car-010",
            user_id="42",
            branch_id="ryd-yarmuk",
            window=RentalWindow(start=start, end=start + timedelta(days=3), days=3),
            options=OptionsSelection(),
            delivery=DeliveryRequest(),
            price=PriceBreakdown(
                base=Money.of(426),
                insurance=Money.of(0),
                extras=Money.of(0),
                delivery=Money.of(0),
                tax=Money.of("63.90"),
                total=Money.of("489.90"),
            ),
            contact=ContactInfo(phone1="0500000000", address="Riyadh"),
            documents=DocumentRefs(license_expiry="2030-01-01"),
            payment_method=PaymentMethod.CASH,
            status=BookingStatus.PENDING,
            created_at=NOW,
        )
        fields.update(overrides)
        return Booking(**fields)

    return factory
