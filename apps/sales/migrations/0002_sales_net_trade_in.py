from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('sales', '0001_initial'),
        ('tradeins', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='sales',
            name='net_trade_in',
            field=models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='tradeins.nettradein'),
        ),
    ]
