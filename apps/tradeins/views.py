from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from apps.inventory.services import VehicleNotFoundError
from apps.vendors.services import VendorNotFoundError, DuplicateVendorError
from .models import NetTradeIn
from .serializers import NetTradeInInputSerializer, NetTradeInSerializer
from .services import (
    create_trade_in,
    update_trade_in,
    delete_trade_in,
    NetTradeInNotFoundError,
    MissingVehicleInfoError,
)


@extend_schema(tags=['trade-ins'])
class NetTradeInViewSet(viewsets.ModelViewSet):
    """
    ViewSet for net trade-ins.

    list: Get trade-ins
    create: Record a trade-in (optionally adding the vehicle to inventory)
    retrieve: Get a trade-in
    update/partial_update: Edit a trade-in
    destroy: Delete a trade-in
    """

    queryset = NetTradeIn.objects.all()
    serializer_class = NetTradeInSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return NetTradeInInputSerializer
        return NetTradeInSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            trade_in = create_trade_in(created_by=request.user, **serializer.validated_data)
        except VendorNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except MissingVehicleInfoError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NetTradeInSerializer(trade_in).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = NetTradeInInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            trade_in = update_trade_in(pk=kwargs['pk'], data=serializer.validated_data, updated_by=request.user)
        except (NetTradeInNotFoundError, VendorNotFoundError, VehicleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except MissingVehicleInfoError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NetTradeInSerializer(trade_in).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_trade_in(pk=kwargs['pk'])
        except NetTradeInNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
