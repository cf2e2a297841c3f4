"""Settings access for the bookings app.

Engine tunables live in the ``BOOKINGS`` settings dict; missing keys use
the defaults below.
"""

from datetime import timedelta
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone

from bookings.domain import BookingPolicy
from bookings.services import BookingService
from bookings.stores.django_store import DjangoBookingStore, DjangoCatalogStore

DEFAULTS = {
    "MIN_LEAD_TIME_MINUTES": 120,
    "MUTABLE_WINDOW_MINUTES": 30,
    "TAX_RATE": "0.15",
    "MAX_DELIVERY_KM": 40,
    "CATALOG_CACHE_TIMEOUT": 300,
    "BOOKING_NUMBER_ATTEMPTS": 5,
}


def get_setting(name: str):
    return {**DEFAULTS, **getattr(settings, "BOOKINGS", {})}[name]


def get_policy() -> BookingPolicy:
    try:
        return BookingPolicy(
            min_lead_time=timedelta(minutes=int(get_setting("MIN_LEAD_TIME_MINUTES"))),
            mutable_window=timedelta(minutes=int(get_setting("MUTABLE_WINDOW_MINUTES"))),
            tax_rate=Decimal(str(get_setting("TAX_RATE"))),
            max_delivery_km=float(get_setting("MAX_DELIVERY_KM")),
            booking_number_attempts=int(get_setting("BOOKING_NUMBER_ATTEMPTS")),
        )
    except (TypeError, ValueError, InvalidOperation) as exc:
        raise ImproperlyConfigured(f"Invalid BOOKINGS setting: {exc}") from exc


def get_booking_service() -> BookingService:
    """Build a BookingService wired to the ORM stores and server time."""
    return BookingService(
        catalog=DjangoCatalogStore(cache_timeout=int(get_setting("CATALOG_CACHE_TIMEOUT"))),
        store=DjangoBookingStore(),
        clock=timezone.now,
        policy=get_policy(),
    )
