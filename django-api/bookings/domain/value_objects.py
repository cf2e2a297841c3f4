"""Domain primitives that enforce validity at creation time."""

import re
import secrets
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self
from uuid import UUID

CENTS = Decimal("0.01")
BOOKING_NUMBER_PATTERN = re.compile(r"^MAS-\d{5}$")


def round2(amount: Decimal) -> Decimal:
    """Quantize a currency amount to two decimals, half away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingNumber:
    """Human-facing booking reference, ``MAS-`` followed by five digits."""

    value: str

    def __post_init__(self) -> None:
        if not BOOKING_NUMBER_PATTERN.match(self.value):
            raise ValueError(f"Invalid booking number: {self.value!r}")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=f"MAS-{10000 + secrets.randbelow(90000)}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, amount: Decimal | int | str) -> Self:
        return cls(amount=round2(Decimal(amount)))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= self.lng <= 180:
            raise ValueError("Longitude must be between -180 and 180")


class DeliveryMode(Enum):
    """How the car reaches and leaves the customer."""

    BRANCH = "branch"
    DELIVERY = "delivery"
    DELIVERY_PICKUP = "delivery_pickup"


class BookingStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    """Payment method label chosen at checkout; no payment is processed."""

    CASH = "cash"
    CARD = "card"
    STC_PAY = "stc_pay"
    APPLE_PAY = "apple_pay"
