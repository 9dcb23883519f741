from rest_framework import viewsets, status, mixins
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.pagination import StandardPagination
from apps.core.responses import result_response
from .models import Accounting
from .serializers import (
    InstallmentInputSerializer,
    CustomerSummaryQuerySerializer,
    AccountingSerializer,
    LatestInstallmentSerializer,
    CustomerSalesSummarySerializer,
)
from .services import (
    create_installment,
    customer_sales_summary,
    latest_installments,
    InstallmentLimitReachedError,
    ReceiptNotFoundError,
    CustomerSalesNotFoundError,
)


@extend_schema(tags=['accounting'])
class AccountingViewSet(mixins.ListModelMixin,
                        mixins.RetrieveModelMixin,
                        viewsets.GenericViewSet):
    """
    ViewSet for installment accounting.

    list: Latest installment per receipt with count and cleared/pending status
    create: Record the next installment of a sale
    retrieve: Get one installment entry
    """

    queryset = Accounting.objects.all()
    serializer_class = AccountingSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        if self.action == 'list':
            return latest_installments()
        return super().get_queryset()

    def get_serializer_class(self):
        if self.action == 'list':
            return LatestInstallmentSerializer
        if self.action == 'create':
            return InstallmentInputSerializer
        return AccountingSerializer

    def create(self, request, *args, **kwargs):
        serializer = InstallmentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        receipt_number = data.pop('receipt_number')

        try:
            result = create_installment(receipt_number=receipt_number, data=data)
        except ReceiptNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InstallmentLimitReachedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return result_response(result, AccountingSerializer, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('customer_id', OpenApiTypes.STR, description='Customer code (e.g. CUS-JOHN-1001)'),
    ],
    responses={200: CustomerSalesSummarySerializer},
    description="Latest sale of a customer with installment progress.",
    tags=['accounting'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def customer_summary(request):
    """Customer sales summary - thin HTTP handler."""
    query_serializer = CustomerSummaryQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = customer_sales_summary(customer_id=query_serializer.validated_data['customer_id'])
    except CustomerSalesNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(CustomerSalesSummarySerializer(data).data)
