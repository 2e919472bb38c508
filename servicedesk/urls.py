from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("users/", include("users.urls")),
    path("tickets/", include("tickets.urls")),
    path("assets/", include("assets.urls")),
    path("dashboard/", include("dashboard.urls")),
]
