from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from apps.core.responses import result_response
from apps.customers.services import CustomerNotFoundError, DuplicateCustomerError
from apps.inventory.services import VehicleNotFoundError
from .models import Sales
from .serializers import (
    SaleCreateSerializer,
    SaleUpdateSerializer,
    SalesDetailsSerializer,
    NetTradeInLinkSerializer,
    SalesFilterSerializer,
    SalesSerializer,
    SalesListSerializer,
)
from .services import (
    list_sales,
    create_sale,
    add_sales_details,
    update_sale,
    set_net_trade_in,
    delete_sale,
    SaleNotFoundError,
    InvalidSaleDetailsError,
    TradeInNotFoundError,
)


@extend_schema(tags=['sales'])
class SalesViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the sales lifecycle.

    list: Get sales (filter by customer code or sales type)
    create: Create a sale for an existing or new customer (vehicle -> Pending)
    retrieve: Get a sale
    update/partial_update: Change customer, sales type or vehicle
    destroy: Delete a sale (vehicle -> Available, floor plan reconciled)
    details: Add pricing, schedule and payment details (vehicle -> Reserved/Sold)
    net_trade_in: Link or unlink a trade-in
    """

    queryset = Sales.objects.select_related('customer')
    serializer_class = SalesSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = SalesFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_sales(**filter_serializer.validated_data)

    def get_serializer_class(self):
        if self.action == 'list':
            return SalesListSerializer
        if self.action == 'create':
            return SaleCreateSerializer
        if self.action in ['update', 'partial_update']:
            return SaleUpdateSerializer
        if self.action == 'details':
            return SalesDetailsSerializer
        if self.action == 'net_trade_in':
            return NetTradeInLinkSerializer
        return SalesSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            result = create_sale(
                customer_info=data['customer_info'],
                vehicle_id=data.get('vehicle_id'),
                created_by=request.user,
            )
        except (CustomerNotFoundError, VehicleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateCustomerError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return result_response(result, SalesSerializer, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = SaleUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        try:
            result = update_sale(pk=kwargs['pk'], **data)
        except (SaleNotFoundError, CustomerNotFoundError, VehicleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateCustomerError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return result_response(result, SalesSerializer)

    def destroy(self, request, *args, **kwargs):
        try:
            result = delete_sale(pk=kwargs['pk'])
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'receipt_id': result.value, 'warnings': result.warnings})

    @action(detail=True, methods=['post', 'put'])
    def details(self, request, pk=None):
        """Add or replace pricing details."""
        serializer = SalesDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = add_sales_details(pk=pk, data=serializer.validated_data)
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSaleDetailsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return result_response(result, SalesSerializer)

    @action(detail=True, methods=['post'], url_path='net-trade-in')
    def net_trade_in(self, request, pk=None):
        serializer = NetTradeInLinkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            sale = set_net_trade_in(pk=pk, **serializer.validated_data)
        except (SaleNotFoundError, TradeInNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(SalesSerializer(sale).data)
