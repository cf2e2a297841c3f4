from django.urls import path

from bookings.handlers import (
    BookingCancelView,
    BookingDetailView,
    BookingListView,
    BookingStatusView,
    QuoteView,
)

urlpatterns = [
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/quote", QuoteView.as_view(), name="booking-quote"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/<str:booking_id>/cancel",
        BookingCancelView.as_view(),
        name="booking-cancel",
    ),
    path(
        "bookings/<str:booking_id>/status",
        BookingStatusView.as_view(),
        name="booking-status",
    ),
]
