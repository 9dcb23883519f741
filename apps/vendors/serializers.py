from rest_framework import serializers
from .models import Vendor, VendorCategory


# =============================================================================
# Input Serializers
# =============================================================================

class VendorInputSerializer(serializers.Serializer):
    """Validate vendor fields for create/update."""

    category = serializers.ChoiceField(choices=VendorCategory.choices)
    name = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=255)
    street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    zip = serializers.CharField(max_length=20, required=False, allow_blank=True)
    primary_contact_number = serializers.CharField(max_length=30, required=False, allow_blank=True)
    alternative_contact_number = serializers.CharField(max_length=30, required=False, allow_blank=True)
    contact_person = serializers.CharField(max_length=100, required=False, allow_blank=True)
    account_number = serializers.CharField(max_length=64, required=False, allow_blank=True)
    tax_id_or_ssn = serializers.CharField(max_length=64, required=False, allow_blank=True)
    bill_of_sales = serializers.CharField(max_length=500, required=False, allow_blank=True)
    note = serializers.CharField(required=False, allow_blank=True)


class VendorInfoSerializer(VendorInputSerializer):
    """
    Inline vendor block used when creating vehicles or trade-ins.

    Either references an existing vendor by ``vendor_id`` or carries the
    fields for a new one.
    """

    is_existing_vendor = serializers.BooleanField(default=False)
    vendor_id = serializers.CharField(max_length=32, required=False)

    def get_fields(self):
        fields = super().get_fields()
        # New-vendor fields are only required when no existing vendor is referenced
        for name in ('category', 'name', 'email'):
            fields[name].required = False
        return fields

    def validate(self, attrs):
        if attrs.get('is_existing_vendor'):
            if not attrs.get('vendor_id'):
                raise serializers.ValidationError({'vendor_id': 'Required for an existing vendor'})
        else:
            missing = [f for f in ('category', 'name', 'email') if not attrs.get(f)]
            if missing:
                raise serializers.ValidationError({f: 'Required for a new vendor' for f in missing})
        return attrs


class VendorFilterSerializer(serializers.Serializer):
    """Validate query parameters for vendor listing."""

    search = serializers.CharField(required=False)
    category = serializers.ChoiceField(choices=VendorCategory.choices, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class VendorSerializer(serializers.ModelSerializer):
    """Full vendor detail."""

    class Meta:
        model = Vendor
        fields = [
            'id', 'vendor_id', 'category', 'name',
            'street', 'city', 'state', 'zip',
            'email', 'primary_contact_number', 'alternative_contact_number', 'contact_person',
            'account_number', 'tax_id_or_ssn', 'bill_of_sales', 'note',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class VendorListSerializer(serializers.ModelSerializer):
    """Vendor list item, without tax identifiers."""

    class Meta:
        model = Vendor
        fields = ['id', 'vendor_id', 'category', 'name', 'email', 'city', 'state', 'contact_person', 'created_at']
        read_only_fields = fields


class VendorMinimalSerializer(serializers.ModelSerializer):
    """Minimal vendor info for nested serialization."""

    class Meta:
        model = Vendor
        fields = ['id', 'vendor_id', 'name', 'category']
        read_only_fields = fields
