"""Django ORM implementations of the catalog and booking stores."""

from decimal import Decimal

from django.core.cache import cache
from django.db import IntegrityError, transaction
from django.utils import timezone

from bookings import models as orm
from bookings.domain import (
    Booking,
    BookingId,
    BookingNumber,
    BookingStatus,
    CarPricingInfo,
    ContactInfo,
    DeliveryLocation,
    DeliveryMode,
    DeliveryRequest,
    DocumentRefs,
    GeoPoint,
    Money,
    OptionsSelection,
    PaymentMethod,
    PriceBreakdown,
    RentalWindow,
)
from bookings.domain.errors import ConcurrentModificationError
from bookings.stores.interfaces import BookingStore, CatalogStore, DuplicateBookingNumberError


def car_cache_key(car_id: str) -> str:
    return f"catalog:car:{car_id}"


def branch_cache_key(branch_id: str) -> str:
    return f"catalog:branch:{branch_id}"


class DjangoCatalogStore(CatalogStore):
    """Catalog lookups backed by the ORM and cached in the Django cache."""

    def __init__(self, cache_timeout: int = 300) -> None:
        self._cache_timeout = cache_timeout

    def get_car_pricing_info(self, car_id: str) -> CarPricingInfo | None:
        key = car_cache_key(car_id)
        cached = cache.get(key)
        if cached is None:
            row = (
                orm.Car.objects.filter(pk=car_id)
                .values("id", "branch_id", "car_model__daily_price")
                .first()
            )
            if row is None:
                return None
            cached = {
                "car_id": row["id"],
                "daily_rate": str(row["car_model__daily_price"]),
                "branch_id": row["branch_id"],
            }
            cache.set(key, cached, self._cache_timeout)
        return CarPricingInfo(
            car_id=cached["car_id"],
            daily_rate=Money.of(Decimal(cached["daily_rate"])),
            branch_id=cached["branch_id"],
        )

    def get_branch_point(self, branch_id: str) -> GeoPoint | None:
        key = branch_cache_key(branch_id)
        cached = cache.get(key)
        if cached is None:
            row = orm.Branch.objects.filter(pk=branch_id).values("lat", "lng").first()
            # An empty dict records a known branch without coordinates.
            cached = {}
            if row is not None and row["lat"] is not None and row["lng"] is not None:
                cached = {"lat": row["lat"], "lng": row["lng"]}
            cache.set(key, cached, self._cache_timeout)
        if not cached:
            return None
        return GeoPoint(lat=cached["lat"], lng=cached["lng"])


class DjangoBookingStore(BookingStore):
    """Booking persistence using Django ORM."""

    def create(self, booking: Booking) -> Booking:
        row = orm.Booking(
            booking_number=str(booking.booking_number),
            car_id=booking.car_id,
            user_id=booking.user_id,
            branch_id=booking.branch_id,
            created_at=booking.created_at,
            **self._mutable_columns(booking),
        )
        try:
            with transaction.atomic():
                row.save(force_insert=True)
        except IntegrityError:
            if orm.Booking.objects.filter(booking_number=row.booking_number).exists():
                raise DuplicateBookingNumberError(row.booking_number) from None
            raise
        return self._to_domain(row)

    def update(self, booking: Booking, expected_status: BookingStatus) -> Booking:
        updated = orm.Booking.objects.filter(
            pk=booking.id.value,
            status=expected_status.value,
        ).update(updated_at=timezone.now(), **self._mutable_columns(booking))
        if updated == 0:
            raise ConcurrentModificationError(str(booking.id))
        return self._to_domain(orm.Booking.objects.get(pk=booking.id.value))

    def get(self, booking_id: BookingId) -> Booking | None:
        row = orm.Booking.objects.filter(pk=booking_id.value).first()
        if row is None:
            return None
        return self._to_domain(row)

    def list_bookings(self, user_id: str | None = None) -> list[Booking]:
        queryset = orm.Booking.objects.order_by("-created_at")
        if user_id is not None:
            queryset = queryset.filter(user_id=user_id)
        return [self._to_domain(row) for row in queryset]

    def booking_number_exists(self, booking_number: str) -> bool:
        return orm.Booking.objects.filter(booking_number=booking_number).exists()

    @staticmethod
    def _mutable_columns(booking: Booking) -> dict:
        location = booking.delivery.location
        return {
            "start_date": booking.window.start,
            "end_date": booking.window.end,
            "days": booking.window.days,
            "insurance": booking.options.insurance,
            "extra_driver": booking.options.extra_driver,
            "open_km": booking.options.open_km,
            "child_seat": booking.options.child_seat,
            "international_permit": booking.options.international_permit,
            "delivery_option": booking.delivery.mode.value,
            "delivery_address": location.address if location else "",
            "delivery_lat": location.point.lat if location else None,
            "delivery_lng": location.point.lng if location else None,
            "price_base": booking.price.base.amount,
            "price_insurance": booking.price.insurance.amount,
            "price_extras": booking.price.extras.amount,
            "price_delivery": booking.price.delivery.amount,
            "price_tax": booking.price.tax.amount,
            "price_total": booking.price.total.amount,
            "phone1": booking.contact.phone1,
            "phone2": booking.contact.phone2,
            "address": booking.contact.address,
            "license": booking.documents.license,
            "license_expiry": booking.documents.license_expiry,
            "id_card": booking.documents.id_card,
            "payment_method": booking.payment_method.value,
            "notes": booking.notes,
            "status": booking.status.value,
        }

    @staticmethod
    def _to_domain(row: orm.Booking) -> Booking:
        location = None
        if row.delivery_lat is not None and row.delivery_lng is not None:
            location = DeliveryLocation(
                point=GeoPoint(lat=row.delivery_lat, lng=row.delivery_lng),
                address=row.delivery_address,
            )
        return Booking(
            id=BookingId(value=row.id),
            booking_number=BookingNumber(row.booking_number),
            car_id=row.car_id,
            user_id=str(row.user_id),
            branch_id=row.branch_id,
            window=RentalWindow(start=row.start_date, end=row.end_date, days=row.days),
            options=OptionsSelection(
                insurance=row.insurance,
                extra_driver=row.extra_driver,
                open_km=row.open_km,
                child_seat=row.child_seat,
                international_permit=row.international_permit,
            ),
            delivery=DeliveryRequest(mode=DeliveryMode(row.delivery_option), location=location),
            price=PriceBreakdown(
                base=Money(row.price_base),
                insurance=Money(row.price_insurance),
                extras=Money(row.price_extras),
                delivery=Money(row.price_delivery),
                tax=Money(row.price_tax),
                total=Money(row.price_total),
            ),
            contact=ContactInfo(phone1=row.phone1, phone2=row.phone2, address=row.address),
            documents=DocumentRefs(
                license=row.license,
                license_expiry=row.license_expiry,
                id_card=row.id_card,
            ),
            payment_method=PaymentMethod(row.payment_method),
            status=BookingStatus(row.status),
            created_at=row.created_at,
            notes=row.notes,
        )
