import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('customer_id', models.CharField(db_index=True, editable=False, max_length=64, unique=True)),
                ('first_name', models.CharField(max_length=100)),
                ('middle_name', models.CharField(blank=True, max_length=100)),
                ('last_name', models.CharField(blank=True, max_length=100)),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('primary_contact_number', models.CharField(blank=True, max_length=30)),
                ('secondary_contact_number', models.CharField(blank=True, max_length=30)),
                ('street', models.CharField(blank=True, max_length=200)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('state', models.CharField(blank=True, max_length=100)),
                ('zip_code', models.CharField(blank=True, max_length=20)),
                ('country', models.CharField(blank=True, max_length=100)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, choices=[('Male', 'Male'), ('Female', 'Female'), ('Other', 'Other')], max_length=10)),
                ('ssn', models.CharField(blank=True, max_length=20)),
                ('driver_license', models.CharField(blank=True, max_length=50)),
                ('license_expiration', models.DateField(blank=True, null=True)),
                ('spouse_name', models.CharField(blank=True, max_length=200)),
                ('vehicle_use', models.CharField(blank=True, max_length=100)),
                ('is_home_owner', models.BooleanField(default=False)),
                ('hear_about_us', models.CharField(blank=True, choices=[('Facebook', 'Facebook'), ('Twitter', 'Twitter'), ('Other', 'Other')], max_length=20)),
                ('hear_about_us_other', models.CharField(blank=True, max_length=200)),
                ('employment_status', models.CharField(blank=True, choices=[('Employed Full-Time', 'Employed Full-Time'), ('Employed Part-Time', 'Employed Part-Time'), ('Self-Employed', 'Self-Employed'), ('Unemployed', 'Unemployed'), ('Retired', 'Retired'), ('Student', 'Student')], max_length=30)),
                ('employment_length', models.CharField(blank=True, max_length=50)),
                ('employment_type', models.CharField(blank=True, max_length=50)),
                ('gross_monthly_income', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('preferred_income_verification', models.CharField(blank=True, choices=[('Pay Stub', 'Pay Stub'), ('Bank Statement', 'Bank Statement'), ('Tax Return', 'Tax Return'), ('Verbal Confirmation', 'Verbal Confirmation')], max_length=30)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['last_name', 'first_name'], name='customers_last_na_2b7c4d_idx')],
            },
        ),
    ]
