from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid

from apps.settlements.services import ExpenseRecord


def today_iso():
    """Local calendar date as YYYY-MM-DD."""
    return timezone.localdate().isoformat()


def now_millis():
    """Current time as epoch milliseconds."""
    return int(timezone.now().timestamp() * 1000)


class SplitType(models.TextChoices):
    EQUAL = 'equal', 'Equal'
    UNEQUAL = 'unequal', 'Unequal'


class Friend(models.Model):
    """A person who can pay for or share in expenses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.CharField(max_length=128, db_index=True)
    name = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'friends'
        indexes = [
            models.Index(fields=['owner', 'name'], name='friends_owner_a8f0e6_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Group(models.Model):
    """Saved set of people, used to prefill beneficiaries."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.CharField(max_length=128, db_index=True)
    name = models.CharField(max_length=200)
    members = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'friend_groups'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='friend_grou_owner_3c1d52_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({len(self.members)} members)"


class Expense(models.Model):
    """Current, not yet archived expense. Never edited once created."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.CharField(max_length=128, db_index=True)

    payer = models.CharField(max_length=200)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    description = models.TextField(blank=True, default='')
    beneficiaries = models.JSONField(default=list)

    split_type = models.CharField(
        max_length=10,
        choices=SplitType.choices,
        default=SplitType.EQUAL
    )
    # person -> amount as a decimal string; only set for unequal splits
    splits = models.JSONField(null=True, blank=True, default=None)

    date = models.CharField(max_length=32, default=today_iso)
    timestamp = models.BigIntegerField(default=now_millis)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['owner', 'timestamp'], name='expenses_owner_7e2b91_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.payer} paid {self.amount} ({self.description or 'no description'})"

    def to_record(self):
        """Engine view of this expense."""
        return ExpenseRecord.from_dict({
            'id': str(self.id),
            'payer': self.payer,
            'amount': self.amount,
            'description': self.description,
            'beneficiaries': self.beneficiaries,
            'splitType': self.split_type,
            'splits': self.splits,
            'date': self.date,
            'timestamp': self.timestamp,
        })
