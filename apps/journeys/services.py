"""
Journey services.

Store side of journey archival. The settlement engine decides what the
journey contains and which expenses to clear; this module makes the write
of the snapshot and the clearing of the ledger a single transaction, with
the owner's expense rows locked while it runs.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.ledger.models import Expense
from apps.ledger.services import current_ledger
from apps.settlements.services import ClearExpenses, JourneySnapshot, archive_journey

from .exceptions import InvalidJourneyNameError, JourneyNotFoundError
from .models import Journey

logger = logging.getLogger(__name__)


def _store_snapshot(*, owner: str, snapshot: JourneySnapshot) -> Journey:
    data = snapshot.as_dict()
    return Journey.objects.create(
        owner=owner,
        name=snapshot.name,
        date=snapshot.date,
        timestamp=snapshot.timestamp,
        expenses=data['expenses'],
        settlements=data['settlements'],
        total_amount=snapshot.total_amount,
        expense_count=snapshot.expense_count,
        people_count=snapshot.people_count,
    )


def _clear_expenses(*, owner: str, command: ClearExpenses) -> int:
    deleted, _ = Expense.objects.filter(owner=owner, id__in=command.expense_ids).delete()
    return deleted


def archive_current_ledger(*, owner: str, name: str, now: Optional[datetime] = None) -> Journey:
    """
    Archive the owner's current ledger as a journey and clear its expenses.

    This is a multi-step operation wrapped in a transaction:
    1. Lock and read the current people and expenses
    2. Compute the journey snapshot and clear command
    3. Store the journey
    4. Delete exactly the archived expenses

    If any step fails nothing is written and no expense is removed.
    People and groups are never touched.

    Args:
        owner: Ledger owner id
        name: Journey name
        now: Archive time, defaults to the current local time

    Returns:
        Created Journey instance

    Raises:
        InvalidJourneyNameError: If the name is empty
    """
    name = (name or '').strip()
    if not name:
        raise InvalidJourneyNameError("Journey name is required")

    try:
        with transaction.atomic():
            persons, records = current_ledger(owner=owner, lock=True)
            plan = archive_journey(name, persons, records, now=now)

            journey = _store_snapshot(owner=owner, snapshot=plan.journey)
            cleared = _clear_expenses(owner=owner, command=plan.command)
    except Exception:
        logger.exception("Failed to archive journey '%s' for %s", name, owner)
        raise

    logger.info(
        "Archived journey %s '%s' for %s: %d expenses cleared, %d payments",
        journey.id, name, owner, cleared, len(journey.settlements),
    )
    return journey


def list_journeys(*, owner: str) -> QuerySet:
    """Archived journeys, newest first."""
    return Journey.objects.filter(owner=owner).order_by('-timestamp')


def get_journey(*, owner: str, journey_id: UUID) -> Journey:
    """
    Raises:
        JourneyNotFoundError: If the journey is not in the owner's archive.
    """
    try:
        return Journey.objects.get(owner=owner, id=journey_id)
    except Journey.DoesNotExist:
        raise JourneyNotFoundError(f"Journey with ID {journey_id} not found")
