import pytest
from apps.vendors.services import (
    create_vendor,
    update_vendor,
    resolve_vendor,
    VendorNotFoundError,
    DuplicateVendorError,
)


@pytest.mark.django_db
class TestResolveVendor:

    def test_existing_vendor_by_code(self, vendor):
        resolved = resolve_vendor(
            vendor_info={'is_existing_vendor': True, 'vendor_id': vendor.vendor_id},
            bill_of_sales='uploads/bos-17.pdf',
        )

        assert resolved.pk == vendor.pk
        vendor.refresh_from_db()
        assert vendor.bill_of_sales == 'uploads/bos-17.pdf'

    def test_missing_existing_vendor(self, db):
        with pytest.raises(VendorNotFoundError):
            resolve_vendor(vendor_info={'is_existing_vendor': True, 'vendor_id': 'VEN-AU-9999'})

    def test_new_vendor_created(self, db):
        resolved = resolve_vendor(vendor_info={
            'category': 'Private Seller - PS',
            'name': 'Pat Seller',
            'email': 'pat@example.com',
        })

        assert resolved.vendor_id == 'VEN-PS-0001'

    def test_new_vendor_duplicate_email(self, vendor):
        with pytest.raises(DuplicateVendorError):
            resolve_vendor(vendor_info={
                'category': 'Dealer - DL',
                'name': 'Other',
                'email': vendor.email,
            })


@pytest.mark.django_db
class TestVendorManagement:

    def test_unknown_category_uses_fallback_code(self, db):
        vendor = create_vendor(category='Garage', name='X', email='x@example.com')

        assert vendor.vendor_id == 'VEN-XX-0001'

    def test_update_rejects_taken_email(self, vendor):
        other = create_vendor(category='Dealer - DL', name='Other', email='other@example.com')

        with pytest.raises(DuplicateVendorError):
            update_vendor(pk=other.pk, data={'email': vendor.email})
