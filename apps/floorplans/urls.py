from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'floorplans'

router = DefaultRouter()
router.register(r'', views.FloorPlanViewSet, basename='floorplan')

urlpatterns = [
    # GET    /api/floor-plans/                 - Paginated floor plans
    # GET    /api/floor-plans/all/             - All floor plans
    # POST   /api/floor-plans/                 - Create floor plan
    # GET    /api/floor-plans/{id}/            - Get floor plan
    # PATCH  /api/floor-plans/{id}/            - Edit floor plan (reconciles status)
    # DELETE /api/floor-plans/{id}/            - Detach vehicles and delete
    # POST   /api/floor-plans/{id}/archive/    - Archive (freeze status)
    path('', include(router.urls)),
]
