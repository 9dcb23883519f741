import uuid
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FloorPlan',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('company_name', models.CharField(max_length=200, unique=True)),
                ('street', models.CharField(max_length=200)),
                ('city', models.CharField(max_length=100)),
                ('state', models.CharField(max_length=100)),
                ('zip', models.CharField(max_length=20)),
                ('phone', models.CharField(max_length=30)),
                ('contact_person', models.CharField(max_length=100)),
                ('status', models.CharField(choices=[('Active', 'Active'), ('Inactive', 'Inactive')], db_index=True, default='Inactive', max_length=10)),
                ('apr', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=6)),
                ('interest_calculation_days', models.PositiveIntegerField(default=0)),
                ('fee_type', models.CharField(choices=[('One Time', 'One Time'), ('Plus for each Curtailment', 'Plus for each Curtailment')], default='Plus for each Curtailment', max_length=40)),
                ('admin_fee', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('set_up_fee', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('additional_fee', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('term_length_in_days', models.PositiveIntegerField(default=0)),
                ('days_until_first_curtailment', models.PositiveIntegerField(default=0)),
                ('percent_principal_reduction', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=6)),
                ('days_until_second_curtailment', models.PositiveIntegerField(default=0)),
                ('percent_principal_reduction_2', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=6)),
                ('interest_and_fees_with_each_curtailment', models.BooleanField(default=False)),
                ('additional_notes', models.TextField(blank=True)),
                ('is_deleted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'floor_plans',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status', 'is_deleted'], name='floor_plans_status_4e1a9c_idx')],
            },
        ),
    ]
