from rest_framework import serializers

from apps.customers.models import Customer
from apps.customers.serializers import CustomerInfoSerializer, CustomerMinimalSerializer
from .models import Sales, SalesType


# =============================================================================
# Input Serializers
# =============================================================================

class SaleCreateSerializer(serializers.Serializer):
    """Validate a new sale: a customer block and an optional vehicle."""

    customer_info = CustomerInfoSerializer()
    vehicle_id = serializers.UUIDField(required=False, allow_null=True)


class SaleUpdateSerializer(serializers.Serializer):
    """Validate sale edits; every field is optional."""

    customer_info = CustomerInfoSerializer(required=False)
    sales_type = serializers.ChoiceField(choices=SalesType.choices, required=False)
    vehicle_id = serializers.UUIDField(required=False, allow_null=True)


class SalesDetailsSerializer(serializers.Serializer):
    """
    Validate pricing details for a sale.

    Financed sales must carry a payment schedule (payment schedule type and
    number of payments); cash sales ignore any schedule that is sent.
    """

    is_cash_sale = serializers.BooleanField(required=False, allow_null=True, default=None)
    sales_type = serializers.ChoiceField(choices=SalesType.choices, required=False)
    is_reserved = serializers.BooleanField(default=False)
    sales_details = serializers.DictField(required=False)

    # Payment schedule
    payment_schedule = serializers.CharField(max_length=30, required=False, allow_blank=True)
    financing_calculation_method = serializers.CharField(max_length=40, required=False, allow_blank=True)
    number_of_payments = serializers.IntegerField(min_value=1, required=False)
    first_payment_starts = serializers.DateField(required=False, allow_null=True)
    first_payment_date = serializers.DateField(required=False, allow_null=True)
    second_payment_date = serializers.DateField(required=False, allow_null=True)

    # Payment details
    total_loan_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    down_payment = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    amount_to_finance = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    details_first_payment_date = serializers.DateField(required=False, allow_null=True)
    next_payment_due_date = serializers.DateField(required=False, allow_null=True)
    apr = serializers.DecimalField(max_digits=6, decimal_places=3, min_value=0, required=False)
    ert_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    payment_note = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        is_cash = attrs.get('is_cash_sale')
        if is_cash is None:
            is_cash = attrs.get('sales_type', SalesType.CASH) == SalesType.CASH
            attrs['is_cash_sale'] = is_cash

        if not is_cash:
            missing = [f for f in ('payment_schedule', 'number_of_payments') if not attrs.get(f)]
            if missing:
                raise serializers.ValidationError({f: 'Required for a financed sale' for f in missing})
        return attrs


class NetTradeInLinkSerializer(serializers.Serializer):
    enabled = serializers.BooleanField()
    net_trade_in_id = serializers.UUIDField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs['enabled'] and not attrs.get('net_trade_in_id'):
            raise serializers.ValidationError({'net_trade_in_id': 'Required when enabling a trade-in'})
        return attrs


class SalesFilterSerializer(serializers.Serializer):
    customer_id = serializers.CharField(required=False)
    sales_type = serializers.ChoiceField(choices=SalesType.choices, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class SalesSerializer(serializers.ModelSerializer):
    """Full sale detail. Financing fields are null on cash sales."""

    customer = serializers.SerializerMethodField()

    class Meta:
        model = Sales
        fields = [
            'id', 'receipt_id', 'is_existing_customer', 'customer', 'vehicle',
            'is_cash_sale', 'is_reserved', 'sales_type', 'sales_details',
            'net_trade_in_enabled', 'net_trade_in',
            'payment_schedule', 'financing_calculation_method', 'number_of_payments',
            'first_payment_starts', 'first_payment_date', 'second_payment_date',
            'total_loan_amount', 'down_payment', 'amount_to_finance',
            'details_first_payment_date', 'next_payment_due_date', 'apr', 'ert_fee', 'payment_note',
            'total_amount', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_customer(self, obj):
        # customer is a soft reference and may point at a deleted row
        customer = Customer.objects.filter(pk=obj.customer_id).first() if obj.customer_id else None
        return CustomerMinimalSerializer(customer).data if customer else None


class SalesListSerializer(serializers.ModelSerializer):
    """Sale list item."""

    customer = CustomerMinimalSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Sales
        fields = [
            'id', 'receipt_id', 'customer', 'vehicle', 'sales_type',
            'is_reserved', 'total_amount', 'next_payment_due_date', 'created_at',
        ]
        read_only_fields = fields
