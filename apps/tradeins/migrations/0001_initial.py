import uuid
from decimal import Decimal
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('inventory', '0001_initial'),
        ('sales', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='NetTradeIn',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_buy_here_pay_here', models.BooleanField(default=False)),
                ('amount_allowed', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('actual_cash_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('previous_sold_vehicle', models.BooleanField(default=False)),
                ('payoff_applicable', models.BooleanField(default=False)),
                ('payoff_information', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('vendor_info', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('vehicle_info', models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)),
                ('add_to_inventory', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='trade_ins', to=settings.AUTH_USER_MODEL)),
                ('linked_sales', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='sales.sales')),
                ('linked_vehicle', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='inventory.vehicle')),
            ],
            options={
                'db_table': 'net_trade_ins',
                'ordering': ['-created_at'],
            },
        ),
    ]
