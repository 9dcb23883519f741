from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .queries import DashboardQueries
from .serializers import DashboardSummarySerializer


@extend_schema(
    responses={200: DashboardSummarySerializer},
    description="Vehicle, sales, payment and customer totals.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Dashboard summary - thin HTTP handler."""
    data = DashboardQueries.summary()
    return Response(DashboardSummarySerializer(data).data)
