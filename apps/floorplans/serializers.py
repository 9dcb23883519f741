from rest_framework import serializers
from .models import FloorPlan, FloorPlanStatus, FeeType


class FloorPlanInputSerializer(serializers.Serializer):
    """Validate floor plan fields for create/update. Status is never accepted."""

    # Company details
    company_name = serializers.CharField(max_length=200)
    street = serializers.CharField(max_length=200)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    zip = serializers.CharField(max_length=20)
    phone = serializers.CharField(max_length=30)
    contact_person = serializers.CharField(max_length=100)

    # Rate
    apr = serializers.DecimalField(max_digits=6, decimal_places=3, min_value=0, required=False)
    interest_calculation_days = serializers.IntegerField(min_value=0, required=False)

    # Fees
    fee_type = serializers.ChoiceField(choices=FeeType.choices, required=False)
    admin_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    set_up_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    additional_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)

    # Term
    term_length_in_days = serializers.IntegerField(min_value=0, required=False)
    days_until_first_curtailment = serializers.IntegerField(min_value=0, required=False)
    percent_principal_reduction = serializers.DecimalField(max_digits=6, decimal_places=3, min_value=0, max_value=100, required=False)
    days_until_second_curtailment = serializers.IntegerField(min_value=0, required=False)
    percent_principal_reduction_2 = serializers.DecimalField(max_digits=6, decimal_places=3, min_value=0, max_value=100, required=False)
    interest_and_fees_with_each_curtailment = serializers.BooleanField(required=False)

    additional_notes = serializers.CharField(required=False, allow_blank=True)


class FloorPlanFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False)
    status = serializers.ChoiceField(choices=FloorPlanStatus.choices, required=False)
    include_archived = serializers.BooleanField(default=False)


class FloorPlanSerializer(serializers.ModelSerializer):
    """Full floor plan detail."""

    vehicle_count = serializers.SerializerMethodField()

    class Meta:
        model = FloorPlan
        fields = [
            'id', 'company_name', 'street', 'city', 'state', 'zip', 'phone', 'contact_person', 'status',
            'apr', 'interest_calculation_days',
            'fee_type', 'admin_fee', 'set_up_fee', 'additional_fee',
            'term_length_in_days', 'days_until_first_curtailment', 'percent_principal_reduction',
            'days_until_second_curtailment', 'percent_principal_reduction_2',
            'interest_and_fees_with_each_curtailment',
            'additional_notes', 'is_deleted', 'vehicle_count',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_vehicle_count(self, obj):
        return obj.vehicles.filter(is_floor_planned=True, is_deleted=False).count()


class FloorPlanListSerializer(serializers.ModelSerializer):
    """Floor plan list item."""

    class Meta:
        model = FloorPlan
        fields = ['id', 'company_name', 'contact_person', 'phone', 'status', 'apr', 'is_deleted', 'created_at']
        read_only_fields = fields
