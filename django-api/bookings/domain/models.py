"""Domain models representing booking state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bookings.domain.value_objects import (
    BookingId,
    BookingNumber,
    BookingStatus,
    DeliveryMode,
    GeoPoint,
    Money,
    PaymentMethod,
)


@dataclass(frozen=True)
class RentalWindow:
    """Validated pickup/return instants and the billable day count."""

    start: datetime
    end: datetime
    days: int


@dataclass(frozen=True)
class OptionsSelection:
    """Fixed set of optional add-ons; every flag prices independently."""

    insurance: bool = False
    extra_driver: bool = False
    open_km: bool = False
    child_seat: bool = False
    international_permit: bool = False


@dataclass(frozen=True)
class DeliveryLocation:
    point: GeoPoint
    address: str = ""


@dataclass(frozen=True)
class DeliveryRequest:
    """Requested delivery mode; location is only read when mode is not branch."""

    mode: DeliveryMode = DeliveryMode.BRANCH
    location: DeliveryLocation | None = None

    def normalized(self) -> "DeliveryRequest":
        """Drop a location that branch pickup never reads."""
        if self.mode is DeliveryMode.BRANCH and self.location is not None:
            return DeliveryRequest()
        return self


@dataclass(frozen=True)
class DeliveryEstimate:
    """Delivery fee result. ``error`` is a reportable condition, not a failure."""

    fee: Money
    distance_km: float | None = None
    error: str | None = None


@dataclass(frozen=True)
class PriceBreakdown:
    base: Money
    insurance: Money
    extras: Money
    delivery: Money
    tax: Money
    total: Money

    @property
    def subtotal(self) -> Decimal:
        return (
            self.base.amount
            + self.insurance.amount
            + self.extras.amount
            + self.delivery.amount
        )


@dataclass(frozen=True)
class Quote:
    """Authoritative price for a rental request."""

    window: RentalWindow
    delivery: DeliveryEstimate
    price: PriceBreakdown

    @property
    def days(self) -> int:
        return self.window.days

    @property
    def delivery_error(self) -> str | None:
        return self.delivery.error


@dataclass(frozen=True)
class CarPricingInfo:
    """Catalog data the engine needs to price a car."""

    car_id: str
    daily_rate: Money
    branch_id: str


@dataclass(frozen=True)
class ContactInfo:
    phone1: str
    address: str
    phone2: str = ""


@dataclass(frozen=True)
class DocumentRefs:
    """References to uploaded documents; uploads are handled elsewhere."""

    license_expiry: str
    license: str | None = None
    id_card: str | None = None


@dataclass(frozen=True)
class RentalRequest:
    """The pricing inputs of a booking, as supplied by a caller."""

    car_id: str
    start: datetime
    end: datetime
    options: OptionsSelection = OptionsSelection()
    delivery: DeliveryRequest = DeliveryRequest()


@dataclass(frozen=True)
class BookingDraft:
    """A booking as submitted by a customer, before pricing and identity."""

    request: RentalRequest
    user_id: str
    contact: ContactInfo
    documents: DocumentRefs
    payment_method: PaymentMethod
    notes: str = ""


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId | None
    booking_number: BookingNumber
    car_id: str
    user_id: str
    branch_id: str
    window: RentalWindow
    options: OptionsSelection
    delivery: DeliveryRequest
    price: PriceBreakdown
    contact: ContactInfo
    documents: DocumentRefs
    payment_method: PaymentMethod
    status: BookingStatus
    created_at: datetime
    notes: str = ""
