from django.contrib import admin, messages

from bookings.conf import get_booking_service
from bookings.domain import BookingStatus
from bookings.domain.errors import DomainError
from bookings.models import Booking, Branch, Car, CarModel
from bookings.services import Actor


class CarInline(admin.TabularInline):
    model = Car
    extra = 1


@admin.register(Branch)
class BranchAdmin(admin.ModelAdmin):
    list_display = ["name", "region", "phone", "lat", "lng"]
    search_fields = ["name", "region"]
    inlines = [CarInline]


@admin.register(CarModel)
class CarModelAdmin(admin.ModelAdmin):
    list_display = ["make", "model", "year", "category", "daily_price"]
    list_filter = ["category", "year"]


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ["id", "car_model", "branch", "license_plate", "status"]
    list_filter = ["branch", "status"]


def _status_action(target: BookingStatus):
    def action(modeladmin, request, queryset):
        service = get_booking_service()
        actor = Actor(user_id=str(request.user.pk), is_staff=True)
        for booking in queryset:
            try:
                service.change_status(str(booking.pk), target, actor)
            except DomainError as exc:
                modeladmin.message_user(
                    request, f"{booking.booking_number}: {exc.message}", messages.ERROR
                )

    action.__name__ = f"mark_{target.value}"
    action.short_description = f"Mark selected bookings as {target.value}"
    return action


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["booking_number", "car", "user", "start_date", "end_date", "status", "price_total"]
    list_filter = ["status", "branch"]
    search_fields = ["booking_number", "user__username", "phone1"]
    # Pricing inputs and status change only through the booking service.
    readonly_fields = [
        "booking_number",
        "car",
        "user",
        "branch",
        "status",
        "start_date",
        "end_date",
        "days",
        "insurance",
        "extra_driver",
        "open_km",
        "child_seat",
        "international_permit",
        "delivery_option",
        "delivery_address",
        "delivery_lat",
        "delivery_lng",
        "price_base",
        "price_insurance",
        "price_extras",
        "price_delivery",
        "price_tax",
        "price_total",
        "created_at",
        "updated_at",
    ]
    actions = [_status_action(status) for status in BookingStatus]

    def has_delete_permission(self, request, obj=None) -> bool:
        return False

    def has_add_permission(self, request) -> bool:
        return False
