"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from bookings.domain import Booking, BookingId, BookingStatus, CarPricingInfo, GeoPoint


class DuplicateBookingNumberError(Exception):
    """Raised by BookingStore.create when the booking number is already stored."""

    def __init__(self, booking_number: str) -> None:
        super().__init__(f"Booking number {booking_number} is taken")
        self.booking_number = booking_number


class CatalogStore(ABC):
    """Read-only access to fleet reference data."""

    @abstractmethod
    def get_car_pricing_info(self, car_id: str) -> CarPricingInfo | None:
        """Return the daily rate and home branch of a car, or None if not found."""
        ...

    @abstractmethod
    def get_branch_point(self, branch_id: str) -> GeoPoint | None:
        """Return a branch's coordinates, or None if it has none."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def create(self, booking: Booking) -> Booking:
        """Persist a new booking and return it with its assigned ID.

        Raises:
            DuplicateBookingNumberError: If another booking already holds the number.
        """
        ...

    @abstractmethod
    def update(self, booking: Booking, expected_status: BookingStatus) -> Booking:
        """Overwrite a booking if its stored status still equals expected_status.

        Raises:
            ConcurrentModificationError: If the stored status has changed.
        """
        ...

    @abstractmethod
    def get(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings(self, user_id: str | None = None) -> list[Booking]:
        """Return bookings ordered by created_at descending, optionally for one user."""
        ...

    @abstractmethod
    def booking_number_exists(self, booking_number: str) -> bool:
        """Check if a booking number is already taken."""
        ...
