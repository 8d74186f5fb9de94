from django.contrib import admin
from django.urls import path, include

from .health_check_view import health

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("api.urls")),
    path("auth/", include("authentication.urls")),
    path("health", health),
]
