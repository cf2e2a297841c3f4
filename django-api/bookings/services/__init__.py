from bookings.services.booking_service import Actor, BookingService

__all__ = ["Actor", "BookingService"]
