from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'vendors'

router = DefaultRouter()
router.register(r'', views.VendorViewSet, basename='vendor')

urlpatterns = [
    # GET    /api/vendors/          - List vendors
    # POST   /api/vendors/          - Create vendor
    # GET    /api/vendors/{id}/     - Get vendor
    # PATCH  /api/vendors/{id}/     - Edit vendor
    # DELETE /api/vendors/{id}/     - Delete vendor
    path('', include(router.urls)),
]
