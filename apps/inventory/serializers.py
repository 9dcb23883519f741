from rest_framework import serializers

from apps.vendors.serializers import VendorInfoSerializer, VendorMinimalSerializer
from .models import Vehicle, SalesStatus


# =============================================================================
# Input Serializers
# =============================================================================

class VehicleBasicDetailsSerializer(serializers.Serializer):
    """Descriptive vehicle fields shared by create and edit."""

    vehicle_title = serializers.CharField(max_length=200, required=False, allow_blank=True)
    vin = serializers.CharField(max_length=17, required=False, allow_blank=True)
    make = serializers.CharField(max_length=100, required=False, allow_blank=True)
    model = serializers.CharField(max_length=100, required=False, allow_blank=True)
    style = serializers.CharField(max_length=100, required=False, allow_blank=True)
    body_type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    manufacturing_year = serializers.IntegerField(min_value=1900, max_value=2100, required=False, allow_null=True)
    vehicle_type = serializers.CharField(max_length=20)
    condition = serializers.CharField(max_length=50, required=False, allow_blank=True)
    certified = serializers.CharField(max_length=50, required=False, allow_blank=True)

    specifications = serializers.DictField(required=False)
    exterior_interior = serializers.DictField(required=False)
    title_registration = serializers.DictField(required=False)
    inspection = serializers.DictField(required=False)
    key_security = serializers.DictField(required=False)
    features = serializers.ListField(child=serializers.CharField(), required=False)
    images = serializers.DictField(required=False)


class VehicleCreateSerializer(VehicleBasicDetailsSerializer):
    """Validate a new vehicle with its inline vendor block."""

    vendor_info = VendorInfoSerializer()


class VehicleUpdateSerializer(VehicleBasicDetailsSerializer):
    """Validate vehicle edits; every field is optional."""

    vendor_info = VendorInfoSerializer(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    previous_owner = serializers.DictField(required=False)

    def get_fields(self):
        fields = super().get_fields()
        fields['vehicle_type'].required = False
        return fields


class AddedCostSerializer(serializers.Serializer):
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class CostDetailsSerializer(serializers.Serializer):
    purchase_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    added_costs = AddedCostSerializer(many=True, required=False)


class FloorPlanAttachmentSerializer(serializers.Serializer):
    floor_plan = serializers.UUIDField(required=False, allow_null=True)
    is_floor_planned = serializers.BooleanField(required=False)
    floor_plan_date_opened = serializers.DateField(required=False, allow_null=True)


class VehicleCostsSerializer(serializers.Serializer):
    """Validate cost, floor plan and curtailment updates."""

    costs = CostDetailsSerializer(required=False)
    floor_plan = FloorPlanAttachmentSerializer(required=False)
    curtailments = serializers.DictField(required=False)


class VehicleFilterSerializer(serializers.Serializer):
    """Validate query parameters for vehicle listing."""

    search = serializers.CharField(required=False)
    sales_status = serializers.ChoiceField(choices=SalesStatus.choices, required=False)
    completed = serializers.BooleanField(required=False, allow_null=True, default=None)
    floor_plan = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class VehicleSerializer(serializers.ModelSerializer):
    """Full vehicle detail."""

    vendor = VendorMinimalSerializer(read_only=True)

    class Meta:
        model = Vehicle
        fields = [
            'id', 'stock_id', 'vendor',
            'vehicle_title', 'vin', 'make', 'model', 'style', 'body_type',
            'manufacturing_year', 'vehicle_type', 'condition', 'certified',
            'specifications', 'exterior_interior', 'title_registration',
            'inspection', 'key_security', 'features', 'images',
            'purchase_price', 'added_costs', 'added_costs_total', 'total_cost',
            'floor_plan', 'is_floor_planned', 'floor_plan_date_opened', 'curtailments',
            'sales_status', 'sales',
            'notes', 'previous_owner', 'mark_as_completed',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class VehicleListSerializer(serializers.ModelSerializer):
    """Vehicle list item."""

    vendor = VendorMinimalSerializer(read_only=True)

    class Meta:
        model = Vehicle
        fields = [
            'id', 'stock_id', 'vendor', 'vehicle_title', 'vin', 'make', 'model',
            'manufacturing_year', 'vehicle_type', 'total_cost', 'sales_status',
            'floor_plan', 'is_floor_planned', 'mark_as_completed', 'created_at',
        ]
        read_only_fields = fields


class VehicleMinimalSerializer(serializers.ModelSerializer):
    """Minimal vehicle info for nested serialization."""

    class Meta:
        model = Vehicle
        fields = ['id', 'stock_id', 'vin', 'make', 'model', 'sales_status']
        read_only_fields = fields
