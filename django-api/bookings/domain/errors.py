"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_WINDOW = "INVALID_WINDOW"
    LEAD_TIME_VIOLATION = "LEAD_TIME_VIOLATION"
    MISSING_LOCATION = "MISSING_LOCATION"
    DELIVERY_UNAVAILABLE = "DELIVERY_UNAVAILABLE"
    CAR_NOT_FOUND = "CAR_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    NOT_MUTABLE = "NOT_MUTABLE"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"
    BOOKING_NUMBER_UNAVAILABLE = "BOOKING_NUMBER_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidWindowError(DomainError):
    """Raised when a rental window is malformed or reversed."""

    def __init__(self, message: str = "Return time must be after pickup time") -> None:
        super().__init__(code=ErrorCode.INVALID_WINDOW, message=message)


class LeadTimeViolationError(DomainError):
    """Raised when a rental starts sooner than the minimum lead time allows."""

    def __init__(self, earliest_start: datetime) -> None:
        super().__init__(
            code=ErrorCode.LEAD_TIME_VIOLATION,
            message="Pickup time is too soon",
        )
        object.__setattr__(self, "earliest_start", earliest_start)


class MissingLocationError(DomainError):
    """Raised when a delivery mode is requested without a location."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_LOCATION,
            message="A delivery location is required for this delivery option",
        )


class DeliveryUnavailableError(DomainError):
    """Raised when a booking is submitted with a delivery that cannot be served."""

    def __init__(self, reason: str) -> None:
        super().__init__(code=ErrorCode.DELIVERY_UNAVAILABLE, message=reason)


class CarNotFoundError(DomainError):
    """Raised when a car or its model is not in the catalog."""

    def __init__(self, car_id: str) -> None:
        super().__init__(code=ErrorCode.CAR_NOT_FOUND, message="Car not found")
        object.__setattr__(self, "car_id", car_id)


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found or not visible to the caller."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        object.__setattr__(self, "booking_id", booking_id)


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class NotMutableError(DomainError):
    """Raised when a customer edits or cancels outside the mutable window."""

    def __init__(self, status: str, mutable_until: datetime) -> None:
        super().__init__(
            code=ErrorCode.NOT_MUTABLE,
            message="Booking can no longer be changed",
        )
        object.__setattr__(self, "status", status)
        object.__setattr__(self, "mutable_until", mutable_until)


class ConcurrentModificationError(DomainError):
    """Raised when a booking's status changed between read and write."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONCURRENT_MODIFICATION,
            message="Booking was modified by another request",
        )
        object.__setattr__(self, "booking_id", booking_id)


class BookingNumberUnavailableError(DomainError):
    """Raised when no unused booking number could be generated."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NUMBER_UNAVAILABLE,
            message="Could not allocate a booking number",
        )
