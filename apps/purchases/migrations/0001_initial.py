import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('participants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CoffeePurchase',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('purchase_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('participant', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='coffee_purchases', to='participants.participant')),
            ],
            options={
                'db_table': 'coffee_purchases',
                'ordering': ['-purchase_date', '-id'],
                'indexes': [models.Index(fields=['purchase_date'], name='coffee_purchase_date_idx')],
            },
        ),
        migrations.CreateModel(
            name='ExternalPurchase',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('purchase_date', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'external_purchases',
                'ordering': ['-purchase_date', '-id'],
                'indexes': [models.Index(fields=['purchase_date'], name='external_purchase_date_idx')],
            },
        ),
    ]
