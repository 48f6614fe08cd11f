# config/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from apps.accounts import api


def api_root(request):
    return JsonResponse({"status": "ok"})


schema_view = get_schema_view(
    openapi.Info(
        title="CostCook API",
        default_version="v1",
        description=(
            "CostCook Backend API\n\n"
            "## Authentication\n"
            "1. Call `POST /api/auth/login/` with `email`, `socialKey` and `provider`\n"
            "2. The access token is returned in the body and both tokens are set as cookies\n"
            "3. Send `Authorization: Bearer <accessToken>` or rely on the `accessToken` cookie\n"
            "4. Renew with `POST /api/auth/token/refresh/`\n\n"
            "## Pagination\n"
            "List endpoints accept `limit` (default 10, max 100) and `offset`."
        ),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
    authentication_classes=[],
)

urlpatterns = [
    path("", api_root),
    path("admin/", admin.site.urls),
    # -----------------------------
    # AUTH API
    # -----------------------------
    path("api/health/", api.health_check, name="health_check"),
    path("api/auth/", include("apps.accounts.urls")),
    path("api/users/me/", api.MeAPI.as_view(), name="users-me"),
    # -----------------------------
    # CATALOGUE & REVIEWS
    # -----------------------------
    path("api/recipes/", include("apps.recipes.urls")),
    path("api/reviews/", include("apps.reviews.urls")),
    # -----------------------------
    # DOCS
    # -----------------------------
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
