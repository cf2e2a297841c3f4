"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.conf import settings
from django.db import models


class Branch(models.Model):
    """Persistence model for rental branches."""

    id = models.SlugField(primary_key=True, max_length=50)
    name = models.CharField(max_length=255)
    region = models.CharField(max_length=100)
    phone = models.CharField(max_length=30, blank=True)
    lat = models.FloatField(blank=True, null=True)
    lng = models.FloatField(blank=True, null=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "branches"

    def __str__(self) -> str:
        return self.name


class CarModel(models.Model):
    """Persistence model for a make/model/year offered in the fleet."""

    key = models.SlugField(primary_key=True, max_length=100)
    make = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField()
    category = models.CharField(max_length=50)
    daily_price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        ordering = ["make", "model"]

    def __str__(self) -> str:
        return f"{self.make} {self.model} {self.year}"


class Car(models.Model):
    """Persistence model for a physical car instance."""

    STATUS_CHOICES = [
        ("available", "Available"),
        ("maintenance", "Maintenance"),
        ("booked", "Booked"),
    ]

    id = models.SlugField(primary_key=True, max_length=50)
    car_model = models.ForeignKey(CarModel, on_delete=models.PROTECT, related_name="cars")
    branch = models.ForeignKey(Branch, on_delete=models.PROTECT, related_name="cars")
    license_plate = models.CharField(max_length=30, unique=True)
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default="available")

    class Meta:
        indexes = [
            models.Index(fields=["branch"], name="bookings_ca_branch__6f1c2e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.car_model} - {self.license_plate}"


class Booking(models.Model):
    """Persistence model for bookings."""

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("confirmed", "Confirmed"),
        ("active", "Active"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
    ]
    DELIVERY_CHOICES = [
        ("branch", "Branch pickup"),
        ("delivery", "Delivery"),
        ("delivery_pickup", "Delivery and pickup"),
    ]
    PAYMENT_CHOICES = [
        ("cash", "Cash"),
        ("card", "Card"),
        ("stc_pay", "STC Pay"),
        ("apple_pay", "Apple Pay"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking_number = models.CharField(max_length=9, unique=True)
    car = models.ForeignKey(Car, on_delete=models.PROTECT, related_name="bookings")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="bookings"
    )
    branch = models.ForeignKey(Branch, on_delete=models.PROTECT, related_name="bookings")

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    days = models.PositiveIntegerField()

    insurance = models.BooleanField(default=False)
    extra_driver = models.BooleanField(default=False)
    open_km = models.BooleanField(default=False)
    child_seat = models.BooleanField(default=False)
    international_permit = models.BooleanField(default=False)

    delivery_option = models.CharField(max_length=16, choices=DELIVERY_CHOICES)
    delivery_address = models.CharField(max_length=255, blank=True)
    delivery_lat = models.FloatField(blank=True, null=True)
    delivery_lng = models.FloatField(blank=True, null=True)

    price_base = models.DecimalField(max_digits=10, decimal_places=2)
    price_insurance = models.DecimalField(max_digits=10, decimal_places=2)
    price_extras = models.DecimalField(max_digits=10, decimal_places=2)
    price_delivery = models.DecimalField(max_digits=10, decimal_places=2)
    price_tax = models.DecimalField(max_digits=10, decimal_places=2)
    price_total = models.DecimalField(max_digits=10, decimal_places=2)

    phone1 = models.CharField(max_length=30)
    phone2 = models.CharField(max_length=30, blank=True)
    address = models.CharField(max_length=255)
    license = models.CharField(max_length=255, blank=True, null=True)
    license_expiry = models.CharField(max_length=30)
    id_card = models.CharField(max_length=255, blank=True, null=True)

    payment_method = models.CharField(max_length=12, choices=PAYMENT_CHOICES)
    notes = models.TextField(blank=True)
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default="pending")
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="bookings_bo_user_id_3d9a41_idx"),
            models.Index(fields=["status"], name="bookings_bo_status_8c2f07_idx"),
        ]

    def __str__(self) -> str:
        return self.booking_number
