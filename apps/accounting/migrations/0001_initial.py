import uuid
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Accounting',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('receipt_number', models.CharField(db_index=True, max_length=32)),
                ('customer_code', models.CharField(blank=True, max_length=64)),
                ('vin', models.CharField(blank=True, max_length=17)),
                ('stock_id', models.CharField(blank=True, max_length=40)),
                ('make', models.CharField(blank=True, max_length=100)),
                ('sales_type', models.CharField(blank=True, max_length=30)),
                ('payment_schedule', models.CharField(blank=True, max_length=30)),
                ('financing_calculation_method', models.CharField(blank=True, max_length=40)),
                ('loan_term', models.PositiveIntegerField(blank=True, null=True)),
                ('total_number_of_payments', models.PositiveIntegerField(blank=True, null=True)),
                ('installment_number', models.PositiveIntegerField()),
                ('due_date', models.DateField(blank=True, null=True)),
                ('bill_type', models.CharField(blank=True, max_length=50)),
                ('payment_date', models.DateField(blank=True, null=True)),
                ('amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('payment_type', models.CharField(blank=True, max_length=30)),
                ('note', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'accounting entry',
                'verbose_name_plural': 'accounting entries',
                'db_table': 'accounting_entries',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['receipt_number', '-installment_number'], name='accounting__receipt_7d2f3a_idx')],
            },
        ),
    ]
