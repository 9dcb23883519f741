import uuid
from decimal import Decimal
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
        ('inventory', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Sales',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('receipt_id', models.CharField(db_index=True, max_length=32, unique=True)),
                ('is_existing_customer', models.BooleanField(blank=True, null=True)),
                ('is_cash_sale', models.BooleanField(blank=True, null=True)),
                ('is_reserved', models.BooleanField(default=False)),
                ('sales_type', models.CharField(blank=True, choices=[('Cash Sales', 'Cash Sales'), ('Buy Here Pay Here', 'Buy Here Pay Here')], max_length=30)),
                ('sales_details', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('net_trade_in_enabled', models.BooleanField(default=False)),
                ('payment_schedule', models.CharField(blank=True, max_length=30, null=True)),
                ('financing_calculation_method', models.CharField(blank=True, max_length=40, null=True)),
                ('number_of_payments', models.PositiveIntegerField(blank=True, null=True)),
                ('first_payment_starts', models.DateField(blank=True, null=True)),
                ('first_payment_date', models.DateField(blank=True, null=True)),
                ('second_payment_date', models.DateField(blank=True, null=True)),
                ('total_loan_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('down_payment', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('amount_to_finance', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('details_first_payment_date', models.DateField(blank=True, null=True)),
                ('next_payment_due_date', models.DateField(blank=True, null=True)),
                ('apr', models.DecimalField(blank=True, decimal_places=3, max_digits=6, null=True)),
                ('ert_fee', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('payment_note', models.TextField(blank=True, null=True)),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sales', to=settings.AUTH_USER_MODEL)),
                ('customer', models.ForeignKey(db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='sales', to='customers.customer')),
                ('vehicle', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='sale_records', to='inventory.vehicle')),
            ],
            options={
                'verbose_name_plural': 'sales',
                'db_table': 'sales',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['customer', 'vehicle', 'sales_type'], name='sales_custome_6d1b8e_idx')],
            },
        ),
    ]
