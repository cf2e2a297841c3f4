from bookings.stores.interfaces import BookingStore, CatalogStore, DuplicateBookingNumberError

__all__ = ["BookingStore", "CatalogStore", "DuplicateBookingNumberError"]
