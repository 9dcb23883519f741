from rest_framework import serializers

from apps.inventory.serializers import VehicleBasicDetailsSerializer, VehicleMinimalSerializer
from apps.inventory.models import Vehicle
from apps.vendors.serializers import VendorInfoSerializer
from .models import NetTradeIn


class PayoffInformationSerializer(serializers.Serializer):
    payoff_owed = serializers.BooleanField(required=False)
    payoff_to_you = serializers.BooleanField(required=False)
    account_number = serializers.CharField(max_length=64, required=False, allow_blank=True)
    payoff_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    payoff_to_lender_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    zip = serializers.CharField(max_length=20, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    quoted_by = serializers.CharField(max_length=100, required=False, allow_blank=True)
    good_through = serializers.DateField(required=False, allow_null=True)


class NetTradeInInputSerializer(serializers.Serializer):
    """
    Validate a trade-in.

    Vendor and vehicle blocks are required when the vehicle goes to inventory.
    """

    is_buy_here_pay_here = serializers.BooleanField(default=False)
    amount_allowed = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    actual_cash_value = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    previous_sold_vehicle = serializers.BooleanField(required=False)
    payoff_applicable = serializers.BooleanField(default=False)
    payoff_information = PayoffInformationSerializer(required=False)
    vendor_info = VendorInfoSerializer(required=False)
    vehicle_info = VehicleBasicDetailsSerializer(required=False)
    add_to_inventory = serializers.BooleanField(default=False)

    def validate(self, attrs):
        if attrs.get('add_to_inventory') and not self.partial:
            missing = [f for f in ('vendor_info', 'vehicle_info') if not attrs.get(f)]
            if missing:
                raise serializers.ValidationError({f: 'Required to add the vehicle to inventory' for f in missing})
        return attrs


class NetTradeInSerializer(serializers.ModelSerializer):
    """Full trade-in detail with the ingested vehicle."""

    linked_vehicle = serializers.SerializerMethodField()
    net_value = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = NetTradeIn
        fields = [
            'id', 'is_buy_here_pay_here', 'amount_allowed', 'actual_cash_value', 'previous_sold_vehicle',
            'payoff_applicable', 'payoff_information', 'net_value',
            'vendor_info', 'vehicle_info', 'add_to_inventory',
            'linked_sales', 'linked_vehicle',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_linked_vehicle(self, obj):
        vehicle = Vehicle.objects.filter(pk=obj.linked_vehicle_id).first() if obj.linked_vehicle_id else None
        return VehicleMinimalSerializer(vehicle).data if vehicle else None
