from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'customers'

router = DefaultRouter()
router.register(r'', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # GET    /api/customers/          - List customers (paginated)
    # GET    /api/customers/all/      - List all customers
    # POST   /api/customers/          - Create customer
    # GET    /api/customers/{id}/     - Get customer
    # PATCH  /api/customers/{id}/     - Edit customer
    # DELETE /api/customers/{id}/     - Delete customer
    path('', include(router.urls)),
]
