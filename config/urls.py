"""
URL configuration for the Dealership Management project.

Every API lives under /api/; the OpenAPI schema and Swagger UI are served
at /api/schema/ and /api/docs/.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/vendors/', include('apps.vendors.urls')),
    path('api/customers/', include('apps.customers.urls')),
    path('api/vehicles/', include('apps.inventory.urls')),
    path('api/floor-plans/', include('apps.floorplans.urls')),
    path('api/sales/', include('apps.sales.urls')),
    path('api/accounting/', include('apps.accounting.urls')),
    path('api/trade-ins/', include('apps.tradeins.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
