from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.authtoken.views import obtain_auth_token

from . import views

urlpatterns = [
    path(settings.ADMIN_URL, admin.site.urls),
    path("health/", views.health_check, name="health_check"),
    path("api/", include("config.api_router")),
    # representatives and administrators exchange their credentials for a token here
    path("auth-token/", obtain_auth_token, name="auth_token"),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="api-schema"), name="api-docs"),
]
