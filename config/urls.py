from django.apps import apps
from django.urls import include, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

urlpatterns = [
    path('', include('String_Analyser.urls')),
]

if apps.get_app_config('String_Analyser').analyser_settings.swagger:
    schema_view = get_schema_view(
        openapi.Info(
            title="String Analyser API",
            default_version='v1',
            description="Store strings, compute their properties and filter them, "
                        "including by simple natural language queries.",
        ),
        public=True,
        permission_classes=[permissions.AllowAny],
    )

    urlpatterns += [
        path('swagger.<str:format>', schema_view.without_ui(cache_timeout=0), name='schema-json'),
        path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
        path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    ]
