import uuid
from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import apps.ledger.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Friend',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner', models.CharField(db_index=True, max_length=128)),
                ('name', models.CharField(max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'friends',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['owner', 'name'], name='friends_owner_a8f0e6_idx')],
            },
        ),
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner', models.CharField(db_index=True, max_length=128)),
                ('name', models.CharField(max_length=200)),
                ('members', models.JSONField(default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'friend_groups',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['owner', 'created_at'], name='friend_grou_owner_3c1d52_idx')],
            },
        ),
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner', models.CharField(db_index=True, max_length=128)),
                ('payer', models.CharField(max_length=200)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('description', models.TextField(blank=True, default='')),
                ('beneficiaries', models.JSONField(default=list)),
                ('split_type', models.CharField(choices=[('equal', 'Equal'), ('unequal', 'Unequal')], default='equal', max_length=10)),
                ('splits', models.JSONField(blank=True, default=None, null=True)),
                ('date', models.CharField(default=apps.ledger.models.today_iso, max_length=32)),
                ('timestamp', models.BigIntegerField(default=apps.ledger.models.now_millis)),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-timestamp'],
                'indexes': [models.Index(fields=['owner', 'timestamp'], name='expenses_owner_7e2b91_idx')],
            },
        ),
    ]
