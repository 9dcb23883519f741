from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from apps.core.responses import result_response
from .models import FloorPlan
from .serializers import (
    FloorPlanInputSerializer,
    FloorPlanFilterSerializer,
    FloorPlanSerializer,
    FloorPlanListSerializer,
)
from .services import (
    create_floor_plan,
    update_floor_plan,
    archive_floor_plan,
    delete_floor_plan,
    FloorPlanNotFoundError,
    DuplicateFloorPlanError,
)


@extend_schema(tags=['floor-plans'])
class FloorPlanViewSet(viewsets.ModelViewSet):
    """
    ViewSet for floor plan financing arrangements.

    list: Paginated floor plans (search by company, filter by status)
    all: Every floor plan, unpaginated
    create: Create a floor plan (starts Inactive)
    retrieve: Get a floor plan
    update/partial_update: Edit terms; status is recomputed afterwards
    destroy: Detach vehicles and delete
    archive: Soft-delete; status is frozen
    """

    queryset = FloorPlan.objects.all()
    serializer_class = FloorPlanSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action not in ['list', 'all']:
            return queryset

        filter_serializer = FloorPlanFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if not params.get('include_archived'):
            queryset = queryset.filter(is_deleted=False)
        if params.get('search'):
            queryset = queryset.filter(company_name__icontains=params['search'])
        if params.get('status'):
            queryset = queryset.filter(status=params['status'])

        return queryset

    def get_serializer_class(self):
        if self.action in ['list', 'all']:
            return FloorPlanListSerializer
        if self.action in ['create', 'update', 'partial_update']:
            return FloorPlanInputSerializer
        return FloorPlanSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            floor_plan = create_floor_plan(**serializer.validated_data)
        except DuplicateFloorPlanError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(FloorPlanSerializer(floor_plan).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = FloorPlanInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            result = update_floor_plan(pk=kwargs['pk'], data=serializer.validated_data)
        except FloorPlanNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateFloorPlanError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return result_response(result, FloorPlanSerializer)

    def destroy(self, request, *args, **kwargs):
        try:
            detached = delete_floor_plan(pk=kwargs['pk'])
        except FloorPlanNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'vehicles_detached': detached}, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'])
    def all(self, request):
        """Every floor plan without pagination."""
        serializer = FloorPlanListSerializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['post'])
    def archive(self, request, pk=None):
        try:
            floor_plan = archive_floor_plan(pk=pk)
        except FloorPlanNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(FloorPlanSerializer(floor_plan).data)
