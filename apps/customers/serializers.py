from rest_framework import serializers
from .models import Customer, Gender, ReferralSource, EmploymentStatus, IncomeVerification


# =============================================================================
# Input Serializers
# =============================================================================

class CustomerInputSerializer(serializers.Serializer):
    """Validate customer fields for create/update."""

    first_name = serializers.CharField(max_length=100)
    middle_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    email = serializers.EmailField(max_length=255)
    primary_contact_number = serializers.CharField(max_length=30, required=False, allow_blank=True)
    secondary_contact_number = serializers.CharField(max_length=30, required=False, allow_blank=True)
    street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    zip_code = serializers.CharField(max_length=20, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    date_of_birth = serializers.DateField(required=False, allow_null=True)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False, allow_blank=True)
    ssn = serializers.CharField(max_length=20, required=False, allow_blank=True)
    driver_license = serializers.CharField(max_length=50, required=False, allow_blank=True)
    license_expiration = serializers.DateField(required=False, allow_null=True)
    spouse_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    vehicle_use = serializers.CharField(max_length=100, required=False, allow_blank=True)
    is_home_owner = serializers.BooleanField(required=False)
    hear_about_us = serializers.ChoiceField(choices=ReferralSource.choices, required=False, allow_blank=True)
    hear_about_us_other = serializers.CharField(max_length=200, required=False, allow_blank=True)
    employment_status = serializers.ChoiceField(choices=EmploymentStatus.choices, required=False, allow_blank=True)
    employment_length = serializers.CharField(max_length=50, required=False, allow_blank=True)
    employment_type = serializers.CharField(max_length=50, required=False, allow_blank=True)
    gross_monthly_income = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    preferred_income_verification = serializers.ChoiceField(
        choices=IncomeVerification.choices, required=False, allow_blank=True
    )


class CustomerInfoSerializer(CustomerInputSerializer):
    """Inline customer block on a new sale: existing by ``customer_id`` or new."""

    is_existing_customer = serializers.BooleanField(default=False)
    customer_id = serializers.CharField(max_length=64, required=False)

    def get_fields(self):
        fields = super().get_fields()
        for name in ('first_name', 'email'):
            fields[name].required = False
        return fields

    def validate(self, attrs):
        if attrs.get('is_existing_customer'):
            if not attrs.get('customer_id'):
                raise serializers.ValidationError({'customer_id': 'Required for an existing customer'})
        else:
            missing = [f for f in ('first_name', 'email') if not attrs.get(f)]
            if missing:
                raise serializers.ValidationError({f: 'Required for a new customer' for f in missing})
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class CustomerSerializer(serializers.ModelSerializer):
    """Full customer detail."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Customer
        fields = [
            'id', 'customer_id', 'full_name',
            'first_name', 'middle_name', 'last_name', 'email',
            'primary_contact_number', 'secondary_contact_number',
            'street', 'city', 'state', 'zip_code', 'country',
            'date_of_birth', 'gender', 'ssn', 'driver_license', 'license_expiration',
            'spouse_name', 'vehicle_use', 'is_home_owner', 'hear_about_us', 'hear_about_us_other',
            'employment_status', 'employment_length', 'employment_type',
            'gross_monthly_income', 'preferred_income_verification',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class CustomerListSerializer(serializers.ModelSerializer):
    """Customer list item."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'customer_id', 'full_name', 'email', 'primary_contact_number', 'city', 'created_at']
        read_only_fields = fields


class CustomerMinimalSerializer(serializers.ModelSerializer):
    """Minimal customer info for nested serialization."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'customer_id', 'full_name', 'email']
        read_only_fields = fields
