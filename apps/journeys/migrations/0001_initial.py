import uuid
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Journey',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner', models.CharField(db_index=True, max_length=128)),
                ('name', models.CharField(max_length=200)),
                ('date', models.CharField(max_length=32)),
                ('timestamp', models.BigIntegerField()),
                ('expenses', models.JSONField(default=list)),
                ('settlements', models.JSONField(default=list)),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('expense_count', models.PositiveIntegerField(default=0)),
                ('people_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'journeys',
                'ordering': ['-timestamp'],
                'indexes': [models.Index(fields=['owner', 'timestamp'], name='journeys_owner_5d7c0a_idx')],
            },
        ),
    ]
