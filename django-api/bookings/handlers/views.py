"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.conf import get_booking_service
from bookings.domain import BookingStatus
from bookings.domain.errors import DomainError, ErrorCode, NotMutableError
from bookings.handlers.serializers import (
    BookingDraftSerializer,
    BookingSerializer,
    CancelSerializer,
    PricingInputSerializer,
    QuoteSerializer,
    RentalRequestSerializer,
    StatusChangeSerializer,
)
from bookings.services import Actor, BookingService

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_WINDOW: status.HTTP_400_BAD_REQUEST,
    ErrorCode.LEAD_TIME_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_LOCATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DELIVERY_UNAVAILABLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_BOOKING_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOT_MUTABLE: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENT_MODIFICATION: status.HTTP_409_CONFLICT,
    ErrorCode.BOOKING_NUMBER_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, NotMutableError):
        body["status"] = error.status
        body["mutableUntil"] = error.mutable_until.isoformat()
    return Response({"error": body}, status=STATUS_BY_CODE[error.code])


class BookingAPIView(APIView):
    """Base view wiring the booking service and domain error mapping."""

    permission_classes = [IsAuthenticated]

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        self.service: BookingService = get_booking_service()

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return error_response(exc)
        if isinstance(exc, DatabaseError):
            logger.exception("Booking store unavailable")
            return Response(
                {"error": {"code": "SERVICE_UNAVAILABLE", "message": "Please try again later"}},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return super().handle_exception(exc)

    def actor(self, request: Request) -> Actor:
        return Actor(user_id=str(request.user.pk), is_staff=request.user.is_staff)

    def booking_response(self, booking, status_code: int = status.HTTP_200_OK) -> Response:
        data = BookingSerializer(booking, context={"service": self.service}).data
        return Response(data, status=status_code)


class QuoteView(BookingAPIView):
    """Handler for POST /api/bookings/quote"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = RentalRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quote = self.service.quote(serializer.to_request())
        return Response(QuoteSerializer(quote).data)


class BookingListView(BookingAPIView):
    """Handler for GET/POST /api/bookings"""

    def get(self, request: Request) -> Response:
        bookings = self.service.list_bookings(self.actor(request))
        data = BookingSerializer(bookings, many=True, context={"service": self.service}).data
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = BookingDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.service.submit(serializer.to_draft(user_id=str(request.user.pk)))
        return self.booking_response(booking, status.HTTP_201_CREATED)


class BookingDetailView(BookingAPIView):
    """Handler for GET/PATCH /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        booking = self.service.get_booking(booking_id, self.actor(request))
        return self.booking_response(booking)

    def patch(self, request: Request, booking_id: str) -> Response:
        serializer = PricingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.service.edit(
            booking_id,
            self.actor(request),
            start=serializer.validated_data["start"],
            end=serializer.validated_data["end"],
            options=serializer.options_selection(),
            delivery=serializer.delivery_request(),
        )
        return self.booking_response(booking)


class BookingCancelView(BookingAPIView):
    """Handler for POST /api/bookings/{booking_id}/cancel"""

    def post(self, request: Request, booking_id: str) -> Response:
        serializer = CancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.service.cancel(
            booking_id, self.actor(request), reason=serializer.validated_data.get("reason")
        )
        return self.booking_response(booking)


class BookingStatusView(BookingAPIView):
    """Handler for POST /api/bookings/{booking_id}/status (staff only)"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, booking_id: str) -> Response:
        serializer = StatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.service.change_status(
            booking_id,
            BookingStatus(serializer.validated_data["status"]),
            self.actor(request),
        )
        return self.booking_response(booking)
