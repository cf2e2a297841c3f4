import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Branch",
            fields=[
                ("id", models.SlugField(max_length=50, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("region", models.CharField(max_length=100)),
                ("phone", models.CharField(blank=True, max_length=30)),
                ("lat", models.FloatField(blank=True, null=True)),
                ("lng", models.FloatField(blank=True, null=True)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "branches",
            },
        ),
        migrations.CreateModel(
            name="CarModel",
            fields=[
                ("key", models.SlugField(max_length=100, primary_key=True, serialize=False)),
                ("make", models.CharField(max_length=100)),
                ("model", models.CharField(max_length=100)),
                ("year", models.PositiveIntegerField()),
                ("category", models.CharField(max_length=50)),
                ("daily_price", models.DecimalField(decimal_places=2, max_digits=10)),
            ],
            options={
                "ordering": ["make", "model"],
            },
        ),
        migrations.CreateModel(
            name="Car",
            fields=[
                ("id", models.SlugField(max_length=50, primary_key=True, serialize=False)),
                ("license_plate", models.CharField(max_length=30, unique=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("available", "Available"),
                            ("maintenance", "Maintenance"),
                            ("booked", "Booked"),
                        ],
                        default="available",
                        max_length=12,
                    ),
                ),
                (
                    "branch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="cars",
                        to="bookings.branch",
                    ),
                ),
                (
                    "car_model",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="cars",
                        to="bookings.carmodel",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["branch"], name="bookings_ca_branch__6f1c2e_idx")],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("booking_number", models.CharField(max_length=9, unique=True)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("days", models.PositiveIntegerField()),
                ("insurance", models.BooleanField(default=False)),
                ("extra_driver", models.BooleanField(default=False)),
                ("open_km", models.BooleanField(default=False)),
                ("child_seat", models.BooleanField(default=False)),
                ("international_permit", models.BooleanField(default=False)),
                (
                    "delivery_option",
                    models.CharField(
                        choices=[
                            ("branch", "Branch pickup"),
                            ("delivery", "Delivery"),
                            ("delivery_pickup", "Delivery and pickup"),
                        ],
                        max_length=16,
                    ),
                ),
                ("delivery_address", models.CharField(blank=True, max_length=255)),
                ("delivery_lat", models.FloatField(blank=True, null=True)),
                ("delivery_lng", models.FloatField(blank=True, null=True)),
                ("price_base", models.DecimalField(decimal_places=2, max_digits=10)),
                ("price_insurance", models.DecimalField(decimal_places=2, max_digits=10)),
                ("price_extras", models.DecimalField(decimal_places=2, max_digits=10)),
                ("price_delivery", models.DecimalField(decimal_places=2, max_digits=10)),
                ("price_tax", models.DecimalField(decimal_places=2, max_digits=10)),
                ("price_total", models.DecimalField(decimal_places=2, max_digits=10)),
                ("phone1", models.CharField(max_length=30)),
                ("phone2", models.CharField(blank=True, max_length=30)),
                ("address", models.CharField(max_length=255)),
                ("license", models.CharField(blank=True, max_length=255, null=True)),
                ("license_expiry", models.CharField(max_length=30)),
                ("id_card", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("cash", "Cash"),
                            ("card", "Card"),
                            ("stc_pay", "STC Pay"),
                            ("apple_pay", "Apple Pay"),
                        ],
                        max_length=12,
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("active", "Active"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=12,
                    ),
                ),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "branch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="bookings.branch",
                    ),
                ),
                (
                    "car",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="bookings.car",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="bookings_bo_user_id_3d9a41_idx"),
                    models.Index(fields=["status"], name="bookings_bo_status_8c2f07_idx"),
                ],
            },
        ),
    ]
