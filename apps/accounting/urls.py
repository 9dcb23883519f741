from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'accounting'

router = DefaultRouter()
router.register(r'', views.AccountingViewSet, basename='accounting')

urlpatterns = [
    # GET  /api/accounting/by-customer/?customer_id=  - Customer sales summary
    path('by-customer/', views.customer_summary, name='customer-summary'),

    # GET  /api/accounting/        - Latest installment per receipt
    # POST /api/accounting/        - Record installment
    # GET  /api/accounting/{id}/   - Get installment
    path('', include(router.urls)),
]
