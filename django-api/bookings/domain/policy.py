"""Tunable business constants for pricing and the booking lifecycle."""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal


@dataclass(frozen=True)
class BookingPolicy:
    min_lead_time: timedelta = timedelta(hours=2)
    mutable_window: timedelta = timedelta(minutes=30)
    tax_rate: Decimal = Decimal("0.15")
    max_delivery_km: float = 40.0
    booking_number_attempts: int = 5

    def __post_init__(self) -> None:
        if self.min_lead_time < timedelta(0):
            raise ValueError("Lead time cannot be negative")
        if self.mutable_window < timedelta(0):
            raise ValueError("Mutable window cannot be negative")
        if self.tax_rate < 0:
            raise ValueError("Tax rate cannot be negative")
        if self.max_delivery_km <= 0:
            raise ValueError("Delivery range must be positive")
        if self.booking_number_attempts < 1:
            raise ValueError("At least one booking number attempt is required")
