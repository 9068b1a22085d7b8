from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Participant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('order_position', models.IntegerField(default=0)),
            ],
            options={
                'db_table': 'participants',
                'ordering': ['order_position', 'id'],
                'indexes': [models.Index(fields=['order_position'], name='participants_order_idx')],
            },
        ),
        migrations.CreateModel(
            name='ReorderHistoryEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('timestamp', models.DateTimeField(auto_now_add=True)),
                ('old_order', models.JSONField(default=list)),
                ('new_order', models.JSONField(default=list)),
            ],
            options={
                'db_table': 'reorder_history',
                'ordering': ['-id'],
                'verbose_name_plural': 'reorder history entries',
            },
        ),
    ]
