from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'tradeins'

router = DefaultRouter()
router.register(r'', views.NetTradeInViewSet, basename='trade-in')

urlpatterns = [
    # GET    /api/trade-ins/          - List trade-ins
    # POST   /api/trade-ins/          - Record trade-in
    # GET    /api/trade-ins/{id}/     - Get trade-in
    # PATCH  /api/trade-ins/{id}/     - Edit trade-in
    # DELETE /api/trade-ins/{id}/     - Delete trade-in
    path('', include(router.urls)),
]
