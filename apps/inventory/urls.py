from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'', views.VehicleViewSet, basename='vehicle')

urlpatterns = [
    # GET    /api/vehicles/                     - List vehicles
    # POST   /api/vehicles/                     - Add vehicle
    # GET    /api/vehicles/sold/                - Sold vehicles
    # GET    /api/vehicles/available/           - Available vehicles
    # GET    /api/vehicles/by-sale/{sale_id}/   - Vehicle linked to a sale
    # GET    /api/vehicles/{id}/                - Get vehicle
    # PATCH  /api/vehicles/{id}/                - Edit vehicle
    # DELETE /api/vehicles/{id}/                - Soft-delete vehicle
    # PATCH  /api/vehicles/{id}/costs/          - Costs, floor plan, curtailments
    # POST   /api/vehicles/{id}/complete/       - Mark as completed
    # GET    /api/vehicles/{id}/sale/           - Latest sale of vehicle
    path('', include(router.urls)),
]
