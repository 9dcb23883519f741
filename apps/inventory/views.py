from django.db.models import Q
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from apps.core.responses import result_response
from apps.floorplans.services import FloorPlanNotFoundError
from apps.sales.serializers import SalesSerializer
from apps.vendors.services import VendorNotFoundError, DuplicateVendorError
from .models import Vehicle
from .serializers import (
    VehicleCreateSerializer,
    VehicleUpdateSerializer,
    VehicleCostsSerializer,
    VehicleFilterSerializer,
    VehicleSerializer,
    VehicleListSerializer,
)
from .services import (
    create_vehicle,
    update_vehicle,
    update_vehicle_costs,
    mark_completed,
    delete_vehicle,
    get_sold_vehicles,
    get_available_vehicles,
    get_vehicle_by_sale,
    get_sale_by_vehicle,
    VehicleNotFoundError,
    InvalidFloorPlanError,
)


@extend_schema(tags=['vehicles'])
class VehicleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for vehicle inventory.

    list: Get vehicles (search, filter by sales status, completion, floor plan)
    create: Add a vehicle (vendor resolved or created, stock ID minted)
    retrieve: Get a vehicle
    update/partial_update: Edit basic details (stock ID re-minted on type/category change)
    destroy: Soft-delete a vehicle and release its floor plan
    costs: Update costs, floor plan attachment and curtailments
    complete: Mark vehicle entry as completed
    sold / available: Vehicles by sales state
    sale: Latest sale of a vehicle
    by_sale: Vehicle currently linked to a sale
    """

    queryset = Vehicle.objects.filter(is_deleted=False).select_related('vendor')
    serializer_class = VehicleSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = VehicleFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('search'):
            term = params['search']
            queryset = queryset.filter(
                Q(stock_id__icontains=term) | Q(vin__icontains=term)
                | Q(make__icontains=term) | Q(model__icontains=term)
            )
        if params.get('sales_status'):
            queryset = queryset.filter(sales_status=params['sales_status'])
        if params.get('completed') is not None:
            queryset = queryset.filter(mark_as_completed=params['completed'])
        if params.get('floor_plan'):
            queryset = queryset.filter(floor_plan_id=params['floor_plan'])

        return queryset

    def get_serializer_class(self):
        if self.action in ['list', 'sold', 'available']:
            return VehicleListSerializer
        if self.action == 'create':
            return VehicleCreateSerializer
        if self.action in ['update', 'partial_update']:
            return VehicleUpdateSerializer
        if self.action == 'costs':
            return VehicleCostsSerializer
        return VehicleSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        vendor_info = data.pop('vendor_info')

        try:
            vehicle = create_vehicle(vendor_info=vendor_info, created_by=request.user, **data)
        except VendorNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(VehicleSerializer(vehicle).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = VehicleUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        vendor_info = data.pop('vendor_info', None)

        try:
            vehicle = update_vehicle(
                pk=kwargs['pk'], data=data, vendor_info=vendor_info, updated_by=request.user,
            )
        except (VehicleNotFoundError, VendorNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(VehicleSerializer(vehicle).data)

    def destroy(self, request, *args, **kwargs):
        try:
            result = delete_vehicle(pk=kwargs['pk'])
        except VehicleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'warnings': result.warnings}, status=status.HTTP_200_OK)

    @action(detail=True, methods=['patch'])
    def costs(self, request, pk=None):
        """Update costs, floor plan attachment and curtailments."""
        serializer = VehicleCostsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            result = update_vehicle_costs(
                pk=pk,
                costs=data.get('costs'),
                floor_plan=data.get('floor_plan'),
                curtailments=data.get('curtailments'),
            )
        except VehicleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidFloorPlanError, FloorPlanNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return result_response(result, VehicleSerializer)

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Mark the vehicle entry as completed (or not, with ``completed: false``)."""
        completed = request.data.get('completed', True) not in (False, 'false', 'False', 0, '0')
        try:
            vehicle = mark_completed(pk=pk, completed=completed)
        except VehicleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(VehicleSerializer(vehicle).data)

    @action(detail=False, methods=['get'])
    def sold(self, request):
        serializer = VehicleListSerializer(get_sold_vehicles().select_related('vendor'), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def available(self, request):
        serializer = VehicleListSerializer(get_available_vehicles().select_related('vendor'), many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['get'])
    def sale(self, request, pk=None):
        """Latest sale recorded for this vehicle."""
        sale = get_sale_by_vehicle(vehicle_id=pk)
        if sale is None:
            return Response({'error': 'No sale found for this vehicle'}, status=status.HTTP_404_NOT_FOUND)
        return Response(SalesSerializer(sale).data)

    @action(detail=False, methods=['get'], url_path=r'by-sale/(?P<sale_id>[0-9a-f-]+)')
    def by_sale(self, request, sale_id=None):
        """Vehicle whose current sale is ``sale_id``."""
        vehicle = get_vehicle_by_sale(sale_id=sale_id)
        if vehicle is None:
            return Response({'error': 'No vehicle linked to this sale'}, status=status.HTTP_404_NOT_FOUND)
        return Response(VehicleSerializer(vehicle).data)
