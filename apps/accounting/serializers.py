from rest_framework import serializers
from .models import Accounting
from .services import installment_status


class InstallmentInputSerializer(serializers.Serializer):
    """
    Validate an installment payment.

    ``due_date`` and ``total_number_of_payments`` are optional; when omitted
    they are derived from the sale's schedule.
    """

    receipt_number = serializers.CharField(max_length=32)
    total_number_of_payments = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    due_date = serializers.DateField(required=False, allow_null=True)
    payment_schedule = serializers.CharField(max_length=30, required=False, allow_blank=True)
    financing_calculation_method = serializers.CharField(max_length=40, required=False, allow_blank=True)
    loan_term = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    customer_code = serializers.CharField(max_length=64, required=False, allow_blank=True)

    # Bill details
    bill_type = serializers.CharField(max_length=50, required=False, allow_blank=True)
    payment_date = serializers.DateField(required=False, allow_null=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    payment_type = serializers.CharField(max_length=30, required=False, allow_blank=True)
    note = serializers.CharField(required=False, allow_blank=True)


class CustomerSummaryQuerySerializer(serializers.Serializer):
    customer_id = serializers.CharField()


class AccountingSerializer(serializers.ModelSerializer):
    """Full installment entry."""

    class Meta:
        model = Accounting
        fields = [
            'id', 'receipt_number', 'customer_code', 'vin', 'stock_id', 'make',
            'sales_type', 'payment_schedule', 'financing_calculation_method', 'loan_term',
            'total_number_of_payments', 'installment_number', 'due_date',
            'bill_type', 'payment_date', 'amount', 'payment_type', 'note',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class LatestInstallmentSerializer(AccountingSerializer):
    """Latest entry of a receipt with its progress."""

    installment_count = serializers.IntegerField(read_only=True)
    status = serializers.SerializerMethodField()

    class Meta(AccountingSerializer.Meta):
        fields = AccountingSerializer.Meta.fields + ['installment_count', 'status']
        read_only_fields = fields

    def get_status(self, obj):
        return installment_status(obj)


class CustomerSalesSummarySerializer(serializers.Serializer):
    receipt_id = serializers.CharField()
    stock_id = serializers.CharField(allow_null=True)
    vin = serializers.CharField(allow_null=True)
    make = serializers.CharField(allow_null=True)
    sales_type = serializers.CharField(allow_null=True)
    payment_schedule = serializers.CharField(allow_null=True)
    financing_calculation_method = serializers.CharField(allow_null=True)
    total_number_of_payments = serializers.IntegerField(allow_null=True)
    next_payment_due_date = serializers.DateField(allow_null=True)
    installment_count = serializers.IntegerField()
    latest_due_date = serializers.DateField(allow_null=True)
    remaining_payments = serializers.IntegerField()
