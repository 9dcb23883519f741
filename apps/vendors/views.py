from django.db.models import Q
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from .models import Vendor
from .serializers import (
    VendorInputSerializer,
    VendorFilterSerializer,
    VendorSerializer,
    VendorListSerializer,
)
from .services import (
    create_vendor,
    update_vendor,
    delete_vendor,
    VendorNotFoundError,
    DuplicateVendorError,
)


@extend_schema(tags=['vendors'])
class VendorViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Vendor CRUD operations.

    list: Get vendors (search by name/email/vendor ID, filter by category)
    create: Create a vendor (vendor ID is minted from the category)
    retrieve: Get a vendor
    update/partial_update: Edit a vendor
    destroy: Delete a vendor
    """

    queryset = Vendor.objects.all()
    serializer_class = VendorSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = VendorFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('search'):
            term = params['search']
            queryset = queryset.filter(
                Q(name__icontains=term) | Q(email__icontains=term) | Q(vendor_id__icontains=term)
            )
        if params.get('category'):
            queryset = queryset.filter(category=params['category'])

        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return VendorListSerializer
        if self.action in ['create', 'update', 'partial_update']:
            return VendorInputSerializer
        return VendorSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            vendor = create_vendor(created_by=request.user, **serializer.validated_data)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(VendorSerializer(vendor).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = VendorInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            vendor = update_vendor(pk=kwargs['pk'], data=serializer.validated_data)
        except VendorNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVendorError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(VendorSerializer(vendor).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_vendor(pk=kwargs['pk'])
        except VendorNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
