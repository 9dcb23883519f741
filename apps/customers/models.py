from django.db import models
import uuid


class Gender(models.TextChoices):
    MALE = 'Male', 'Male'
    FEMALE = 'Female', 'Female'
    OTHER = 'Other', 'Other'


class ReferralSource(models.TextChoices):
    FACEBOOK = 'Facebook', 'Facebook'
    TWITTER = 'Twitter', 'Twitter'
    OTHER = 'Other', 'Other'


class EmploymentStatus(models.TextChoices):
    FULL_TIME = 'Employed Full-Time', 'Employed Full-Time'
    PART_TIME = 'Employed Part-Time', 'Employed Part-Time'
    SELF_EMPLOYED = 'Self-Employed', 'Self-Employed'
    UNEMPLOYED = 'Unemployed', 'Unemployed'
    RETIRED = 'Retired', 'Retired'
    STUDENT = 'Student', 'Student'


class IncomeVerification(models.TextChoices):
    PAY_STUB = 'Pay Stub', 'Pay Stub'
    BANK_STATEMENT = 'Bank Statement', 'Bank Statement'
    TAX_RETURN = 'Tax Return', 'Tax Return'
    VERBAL = 'Verbal Confirmation', 'Verbal Confirmation'


class Customer(models.Model):
    """Buyer of a vehicle."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_id = models.CharField(max_length=64, unique=True, db_index=True, editable=False)

    # Personal information
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    email = models.EmailField(unique=True, max_length=255)
    primary_contact_number = models.CharField(max_length=30, blank=True)
    secondary_contact_number = models.CharField(max_length=30, blank=True)
    street = models.CharField(max_length=200, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    zip_code = models.CharField(max_length=20, blank=True)
    country = models.CharField(max_length=100, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.choices, blank=True)
    ssn = models.CharField(max_length=20, blank=True)
    driver_license = models.CharField(max_length=50, blank=True)
    license_expiration = models.DateField(null=True, blank=True)
    spouse_name = models.CharField(max_length=200, blank=True)
    vehicle_use = models.CharField(max_length=100, blank=True)
    is_home_owner = models.BooleanField(default=False)
    hear_about_us = models.CharField(max_length=20, choices=ReferralSource.choices, blank=True)
    hear_about_us_other = models.CharField(max_length=200, blank=True)

    # Income information
    employment_status = models.CharField(max_length=30, choices=EmploymentStatus.choices, blank=True)
    employment_length = models.CharField(max_length=50, blank=True)
    employment_type = models.CharField(max_length=50, blank=True)
    gross_monthly_income = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    preferred_income_verification = models.CharField(max_length=30, choices=IncomeVerification.choices, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['last_name', 'first_name'], name='customers_last_na_2b7c4d_idx'),
        ]

    def __str__(self):
        return f"{self.customer_id} {self.full_name}"

    @property
    def full_name(self):
        return ' '.join(part for part in [self.first_name, self.middle_name, self.last_name] if part)

    def save(self, *args, **kwargs):
        self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
