import django.core.serializers.json
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='IdempotencyKey',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('scope', models.CharField(max_length=100)),
                ('key', models.CharField(max_length=255)),
                ('status_code', models.PositiveSmallIntegerField()),
                ('response_body', models.JSONField(encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('expires_at', models.DateTimeField()),
            ],
            options={
                'db_table': 'idempotency_keys',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['expires_at'], name='idempotency_expires_idx')],
                'constraints': [models.UniqueConstraint(fields=('scope', 'key'), name='unique_idempotency_scope_key')],
            },
        ),
    ]
