import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Vendor',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('vendor_id', models.CharField(db_index=True, editable=False, max_length=32, unique=True)),
                ('category', models.CharField(choices=[('Auction - AU', 'Auction'), ('Company - COM', 'Company'), ('Wholesale - WS', 'Wholesale'), ('Dealer - DL', 'Dealer'), ('Consignment - CT', 'Consignment'), ('Private Seller - PS', 'Private Seller'), ('Manufacturer - MR', 'Manufacturer'), ('Rental Company - RC', 'Rental Company'), ('Repossession - RE', 'Repossession'), ('Trade-In - TI', 'Trade-In')], max_length=40)),
                ('name', models.CharField(max_length=200)),
                ('street', models.CharField(blank=True, max_length=200)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('state', models.CharField(blank=True, max_length=100)),
                ('zip', models.CharField(blank=True, max_length=20)),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('primary_contact_number', models.CharField(blank=True, max_length=30)),
                ('alternative_contact_number', models.CharField(blank=True, max_length=30)),
                ('contact_person', models.CharField(blank=True, max_length=100)),
                ('account_number', models.CharField(blank=True, max_length=64)),
                ('tax_id_or_ssn', models.CharField(blank=True, max_length=64)),
                ('bill_of_sales', models.CharField(blank=True, max_length=500)),
                ('note', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vendors', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'vendors',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['category'], name='vendors_categor_5c2d1e_idx'),
                    models.Index(fields=['name'], name='vendors_name_8f3a7b_idx'),
                ],
            },
        ),
    ]
