from bookings.domain.models import (
    Booking,
    BookingDraft,
    CarPricingInfo,
    ContactInfo,
    DeliveryEstimate,
    DeliveryLocation,
    DeliveryRequest,
    DocumentRefs,
    OptionsSelection,
    PriceBreakdown,
    Quote,
    RentalRequest,
    RentalWindow,
)
from bookings.domain.policy import BookingPolicy
from bookings.domain.value_objects import (
    BookingId,
    BookingNumber,
    BookingStatus,
    DeliveryMode,
    GeoPoint,
    Money,
    PaymentMethod,
)

__all__ = [
    "Booking",
    "BookingDraft",
    "CarPricingInfo",
    "ContactInfo",
    "DeliveryEstimate",
    "DeliveryLocation",
    "DeliveryRequest",
    "DocumentRefs",
    "OptionsSelection",
    "PriceBreakdown",
    "Quote",
    "RentalRequest",
    "RentalWindow",
    "BookingPolicy",
    "BookingId",
    "BookingNumber",
    "BookingStatus",
    "DeliveryMode",
    "GeoPoint",
    "Money",
    "PaymentMethod",
]
