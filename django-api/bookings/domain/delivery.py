"""Distance-based delivery pricing."""

import math

from bookings.domain.errors import MissingLocationError
from bookings.domain.models import DeliveryEstimate, DeliveryRequest
from bookings.domain.value_objects import DeliveryMode, GeoPoint, Money

EARTH_RADIUS_KM = 6371.0

# (upper bound in km, flat fee per trip), ascending.
TRIP_FEE_TIERS = (
    (20.0, 15),
    (30.0, 20),
    (40.0, 25),
)

OUT_OF_RANGE = "out of delivery range"
NO_DELIVERY_FROM_BRANCH = "delivery is not offered from this branch"


def haversine_km(origin: GeoPoint, target: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers."""
    lat1 = math.radians(origin.lat)
    lat2 = math.radians(target.lat)
    delta_lat = math.radians(target.lat - origin.lat)
    delta_lng = math.radians(target.lng - origin.lng)

    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) *
         math.sin(delta_lng / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def trip_fee(distance_km: float) -> int | None:
    """Flat one-way fee for a distance, or None beyond the last tier."""
    for limit, fee in TRIP_FEE_TIERS:
        if distance_km <= limit:
            return fee
    return None


class DeliveryFeeEstimator:
    """Prices a delivery request relative to the car's home branch."""

    def __init__(self, max_distance_km: float = 40.0) -> None:
        self._max_distance_km = max_distance_km

    def estimate(self, branch_point: GeoPoint | None, request: DeliveryRequest) -> DeliveryEstimate:
        """Return the delivery fee, distance and any reportable range error.

        Raises:
            MissingLocationError: If a delivery mode has no location.
        """
        if request.mode is DeliveryMode.BRANCH:
            return DeliveryEstimate(fee=Money.of(0))

        if request.location is None:
            raise MissingLocationError()

        if branch_point is None:
            return DeliveryEstimate(fee=Money.of(0), error=NO_DELIVERY_FROM_BRANCH)

        distance_km = haversine_km(branch_point, request.location.point)
        fee = trip_fee(distance_km) if distance_km <= self._max_distance_km else None
        if fee is None:
            return DeliveryEstimate(fee=Money.of(0), distance_km=distance_km, error=OUT_OF_RANGE)

        if request.mode is DeliveryMode.DELIVERY_PICKUP:
            fee *= 2
        return DeliveryEstimate(fee=Money.of(fee), distance_km=distance_km)
