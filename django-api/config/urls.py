from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("api/", include("bookings.urls")),
    path("admin/", admin.site.urls),
]
