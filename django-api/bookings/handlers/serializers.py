"""Serializers for parsing booking requests and rendering domain models.

Wire names are camelCase; ``source`` maps them onto domain attributes.
"""

from collections.abc import Mapping

from rest_framework import serializers

from bookings.domain import (
    BookingDraft,
    BookingStatus,
    ContactInfo,
    DeliveryLocation,
    DeliveryMode,
    DeliveryRequest,
    DocumentRefs,
    GeoPoint,
    OptionsSelection,
    PaymentMethod,
    RentalRequest,
)

DELIVERY_CHOICES = [mode.value for mode in DeliveryMode]
PAYMENT_CHOICES = [method.value for method in PaymentMethod]
STATUS_CHOICES = [status.value for status in BookingStatus]


class OptionsSerializer(serializers.Serializer):
    """Add-on flags. Unrecognized keys are rejected rather than ignored."""

    insurance = serializers.BooleanField(default=False)
    extraDriver = serializers.BooleanField(source="extra_driver", default=False)
    openKm = serializers.BooleanField(source="open_km", default=False)
    childSeat = serializers.BooleanField(source="child_seat", default=False)
    internationalPermit = serializers.BooleanField(source="international_permit", default=False)

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError({key: ["Unknown option."] for key in unknown})
        return super().to_internal_value(data)


class DeliveryLocationSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)
    address = serializers.CharField(max_length=255, allow_blank=True, default="")


class PricingInputSerializer(serializers.Serializer):
    """Window, options and delivery: the fields a customer may edit."""

    startDate = serializers.DateTimeField(source="start")
    endDate = serializers.DateTimeField(source="end")
    options = OptionsSerializer(required=False)
    deliveryOption = serializers.ChoiceField(
        source="delivery_mode", choices=DELIVERY_CHOICES, default=DeliveryMode.BRANCH.value
    )
    deliveryLocation = DeliveryLocationSerializer(
        source="delivery_location", required=False, allow_null=True
    )

    def options_selection(self) -> OptionsSelection:
        return OptionsSelection(**self.validated_data.get("options", {}))

    def delivery_request(self) -> DeliveryRequest:
        location = self.validated_data.get("delivery_location")
        return DeliveryRequest(
            mode=DeliveryMode(self.validated_data["delivery_mode"]),
            location=DeliveryLocation(
                point=GeoPoint(lat=location["lat"], lng=location["lng"]),
                address=location["address"],
            ) if location else None,
        )


class RentalRequestSerializer(PricingInputSerializer):
    """Input for the quote endpoint."""

    carId = serializers.CharField(source="car_id", max_length=50)

    def to_request(self) -> RentalRequest:
        return RentalRequest(
            car_id=self.validated_data["car_id"],
            start=self.validated_data["start"],
            end=self.validated_data["end"],
            options=self.options_selection(),
            delivery=self.delivery_request(),
        )


class ContactSerializer(serializers.Serializer):
    phone1 = serializers.CharField(max_length=30)
    phone2 = serializers.CharField(max_length=30, allow_blank=True, default="")
    address = serializers.CharField(max_length=255)


class DocumentsSerializer(serializers.Serializer):
    license = serializers.CharField(max_length=255, allow_null=True, default=None)
    licenseExpiry = serializers.CharField(source="license_expiry", max_length=30)
    idCard = serializers.CharField(
        source="id_card", max_length=255, allow_null=True, default=None
    )


class BookingDraftSerializer(RentalRequestSerializer):
    """Input for booking submission. Any client-sent price is ignored."""

    contact = ContactSerializer()
    documents = DocumentsSerializer()
    paymentMethod = serializers.ChoiceField(source="payment_method", choices=PAYMENT_CHOICES)
    notes = serializers.CharField(allow_blank=True, default="")

    def to_draft(self, user_id: str) -> BookingDraft:
        return BookingDraft(
            request=self.to_request(),
            user_id=user_id,
            contact=ContactInfo(**self.validated_data["contact"]),
            documents=DocumentRefs(**self.validated_data["documents"]),
            payment_method=PaymentMethod(self.validated_data["payment_method"]),
            notes=self.validated_data["notes"],
        )


class CancelSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class StatusChangeSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES)


class PriceBreakdownSerializer(serializers.Serializer):
    """Serializer for PriceBreakdown domain model."""

    base = serializers.DecimalField(max_digits=12, decimal_places=2, source="base.amount")
    insurance = serializers.DecimalField(max_digits=12, decimal_places=2, source="insurance.amount")
    extras = serializers.DecimalField(max_digits=12, decimal_places=2, source="extras.amount")
    delivery = serializers.DecimalField(max_digits=12, decimal_places=2, source="delivery.amount")
    tax = serializers.DecimalField(max_digits=12, decimal_places=2, source="tax.amount")
    total = serializers.DecimalField(max_digits=12, decimal_places=2, source="total.amount")


class QuoteSerializer(serializers.Serializer):
    """Serializer for Quote domain model."""

    days = serializers.IntegerField()
    deliveryError = serializers.CharField(source="delivery_error", allow_null=True)
    distanceKm = serializers.FloatField(source="delivery.distance_km", allow_null=True)
    priceBreakdown = PriceBreakdownSerializer(source="price")


class DeliveryLocationOutputSerializer(serializers.Serializer):
    lat = serializers.FloatField(source="point.lat")
    lng = serializers.FloatField(source="point.lng")
    address = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model.

    ``isMutable`` and ``mutableUntil`` are advisory; the server re-checks
    the window on every change.
    """

    id = serializers.CharField()
    bookingNumber = serializers.CharField(source="booking_number")
    carId = serializers.CharField(source="car_id")
    userId = serializers.CharField(source="user_id")
    branchId = serializers.CharField(source="branch_id")
    startDate = serializers.DateTimeField(source="window.start")
    endDate = serializers.DateTimeField(source="window.end")
    days = serializers.IntegerField(source="window.days")
    options = OptionsSerializer()
    deliveryOption = serializers.CharField(source="delivery.mode.value")
    deliveryLocation = DeliveryLocationOutputSerializer(source="delivery.location", allow_null=True)
    priceBreakdown = PriceBreakdownSerializer(source="price")
    contact = ContactSerializer()
    documents = DocumentsSerializer()
    paymentMethod = serializers.CharField(source="payment_method.value")
    notes = serializers.CharField()
    status = serializers.CharField(source="status.value")
    createdAt = serializers.DateTimeField(source="created_at")
    isMutable = serializers.SerializerMethodField()
    mutableUntil = serializers.SerializerMethodField()

    def get_isMutable(self, booking) -> bool:
        return self.context["service"].is_mutable(booking)

    def get_mutableUntil(self, booking):
        return self.context["service"].lifecycle.mutable_until(booking).isoformat()
