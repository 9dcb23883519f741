from django.db.models import Q
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.pagination import StandardPagination
from .models import Customer
from .serializers import CustomerInputSerializer, CustomerSerializer, CustomerListSerializer
from .services import (
    create_customer,
    update_customer,
    delete_customer,
    CustomerNotFoundError,
    DuplicateCustomerError,
)


@extend_schema(tags=['customers'])
class CustomerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Customer CRUD operations.

    list: Paginated customers (``search`` matches names, email, customer ID)
    all: Every customer, unpaginated
    create: Create a customer (customer ID is minted from the first name)
    retrieve / partial_update / destroy: usual semantics
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(email__icontains=search)
                | Q(customer_id__icontains=search)
            )
        return queryset

    def get_serializer_class(self):
        if self.action in ['list', 'all']:
            return CustomerListSerializer
        if self.action in ['create', 'update', 'partial_update']:
            return CustomerInputSerializer
        return CustomerSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = create_customer(**serializer.validated_data)
        except DuplicateCustomerError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = CustomerInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            customer = update_customer(pk=kwargs['pk'], data=serializer.validated_data)
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateCustomerError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_customer(pk=kwargs['pk'])
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def all(self, request):
        """Get every customer without pagination."""
        serializer = CustomerListSerializer(self.get_queryset(), many=True)
        return Response(serializer.data)
