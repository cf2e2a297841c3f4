from bookings.handlers.views import (
    BookingCancelView,
    BookingDetailView,
    BookingListView,
    BookingStatusView,
    QuoteView,
)

__all__ = [
    "BookingCancelView",
    "BookingDetailView",
    "BookingListView",
    "BookingStatusView",
    "QuoteView",
]
