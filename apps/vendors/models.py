from django.conf import settings
from django.db import models
import uuid


class VendorCategory(models.TextChoices):
    AUCTION = 'Auction - AU', 'Auction'
    COMPANY = 'Company - COM', 'Company'
    WHOLESALE = 'Wholesale - WS', 'Wholesale'
    DEALER = 'Dealer - DL', 'Dealer'
    CONSIGNMENT = 'Consignment - CT', 'Consignment'
    PRIVATE_SELLER = 'Private Seller - PS', 'Private Seller'
    MANUFACTURER = 'Manufacturer - MR', 'Manufacturer'
    RENTAL_COMPANY = 'Rental Company - RC', 'Rental Company'
    REPOSSESSION = 'Repossession - RE', 'Repossession'
    TRADE_IN = 'Trade-In - TI', 'Trade-In'


class Vendor(models.Model):
    """Source a vehicle was purchased from."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor_id = models.CharField(max_length=32, unique=True, db_index=True, editable=False)
    category = models.CharField(max_length=40, choices=VendorCategory.choices)
    name = models.CharField(max_length=200)

    street = models.CharField(max_length=200, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    zip = models.CharField(max_length=20, blank=True)

    email = models.EmailField(unique=True, max_length=255)
    primary_contact_number = models.CharField(max_length=30, blank=True)
    alternative_contact_number = models.CharField(max_length=30, blank=True)
    contact_person = models.CharField(max_length=100, blank=True)

    account_number = models.CharField(max_length=64, blank=True)
    tax_id_or_ssn = models.CharField(max_length=64, blank=True)
    bill_of_sales = models.CharField(max_length=500, blank=True)
    note = models.TextField(blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vendors',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vendors'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category'], name='vendors_categor_5c2d1e_idx'),
            models.Index(fields=['name'], name='vendors_name_8f3a7b_idx'),
        ]

    def __str__(self):
        return f"{self.vendor_id} {self.name}"

    def save(self, *args, **kwargs):
        self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
