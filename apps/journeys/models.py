from django.db import models
from decimal import Decimal
import uuid


class Journey(models.Model):
    """
    Immutable archive of a closed ledger.

    ``expenses`` and ``settlements`` hold copies in their boundary shape,
    so later changes to the current ledger never reach a past journey.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.CharField(max_length=128, db_index=True)
    name = models.CharField(max_length=200)

    date = models.CharField(max_length=32)
    timestamp = models.BigIntegerField()

    expenses = models.JSONField(default=list)
    settlements = models.JSONField(default=list)

    # Frozen at creation time
    total_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00')
    )
    expense_count = models.PositiveIntegerField(default=0)
    people_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'journeys'
        indexes = [
            models.Index(fields=['owner', 'timestamp'], name='journeys_owner_5d7c0a_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.name} ({self.date}, {self.expense_count} expenses)"
