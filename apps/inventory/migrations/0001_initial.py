import uuid
from decimal import Decimal
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('floorplans', '0001_initial'),
        ('vendors', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Vehicle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('stock_id', models.CharField(db_index=True, max_length=40, unique=True)),
                ('vehicle_title', models.CharField(blank=True, max_length=200)),
                ('vin', models.CharField(blank=True, db_index=True, max_length=17)),
                ('make', models.CharField(blank=True, max_length=100)),
                ('model', models.CharField(blank=True, max_length=100)),
                ('style', models.CharField(blank=True, max_length=100)),
                ('body_type', models.CharField(blank=True, max_length=100)),
                ('manufacturing_year', models.PositiveIntegerField(blank=True, null=True)),
                ('vehicle_type', models.CharField(max_length=20)),
                ('condition', models.CharField(blank=True, max_length=50)),
                ('certified', models.CharField(blank=True, max_length=50)),
                ('specifications', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('exterior_interior', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('title_registration', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('inspection', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('key_security', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('features', models.JSONField(blank=True, default=list, encoder=DjangoJSONEncoder)),
                ('images', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('purchase_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('added_costs', models.JSONField(blank=True, default=list, encoder=DjangoJSONEncoder)),
                ('added_costs_total', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('total_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('is_floor_planned', models.BooleanField(default=False)),
                ('floor_plan_date_opened', models.DateField(blank=True, null=True)),
                ('curtailments', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('sales_status', models.CharField(choices=[('Available', 'Available'), ('Pending', 'Pending'), ('Reserved', 'Reserved'), ('Sold', 'Sold')], db_index=True, default='Available', max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('previous_owner', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('mark_as_completed', models.BooleanField(default=False)),
                ('is_deleted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vehicles', to=settings.AUTH_USER_MODEL)),
                ('floor_plan', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='vehicles', to='floorplans.floorplan')),
                ('vendor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vehicles', to='vendors.vendor')),
            ],
            options={
                'db_table': 'vehicles',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['floor_plan', 'is_floor_planned'], name='vehicles_floor_p_3c8e2b_idx'),
                    models.Index(fields=['is_deleted', 'sales_status'], name='vehicles_is_dele_9a4f1d_idx'),
                ],
            },
        ),
    ]
