from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sales'

router = DefaultRouter()
router.register(r'', views.SalesViewSet, basename='sale')

urlpatterns = [
    # GET    /api/sales/                      - List sales
    # POST   /api/sales/                      - Create sale
    # GET    /api/sales/{id}/                 - Get sale
    # PATCH  /api/sales/{id}/                 - Change customer/type/vehicle
    # DELETE /api/sales/{id}/                 - Delete sale
    # POST   /api/sales/{id}/details/         - Add pricing details
    # POST   /api/sales/{id}/net-trade-in/    - Link/unlink trade-in
    path('', include(router.urls)),
]
