"""
Journey archival.

Closes the current ledger: settles it, freezes the result into a
JourneySnapshot and tells the store which expenses to clear. Nothing is
persisted here; the store writes the snapshot and applies the command in
one transaction, and must skip the command if the write fails.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from django.utils import timezone

from .balances import as_record
from .netting import compute_settlement
from .types import ArchivePlan, ClearExpenses, JourneySnapshot

logger = logging.getLogger(__name__)


def archive_journey(name: str, persons: Iterable[str], expenses: Iterable, *, now: Optional[datetime] = None) -> ArchivePlan:
    """
    Snapshot the current ledger into a journey.

    Args:
        name: Journey name. Surrounding whitespace is stripped.
        persons: Current people of the ledger.
        expenses: Current expenses (ExpenseRecord or boundary dicts).
        now: Archive time, defaults to the current local time in the
            configured time zone.

    Returns:
        ArchivePlan: The frozen journey and the ClearExpenses command that
        names exactly the archived expenses. People and groups are never
        part of the command.

    Raises:
        ValueError: If the name is empty.
    """
    name = (name or '').strip()
    if not name:
        raise ValueError("Journey name is required")

    persons = list(persons)
    records = tuple(as_record(expense).copy() for expense in expenses)
    settlements = tuple(compute_settlement(persons, records))

    moment = now or timezone.localtime()
    journey = JourneySnapshot(
        name=name,
        date=moment.date().isoformat(),
        timestamp=int(moment.timestamp() * 1000),
        expenses=records,
        settlements=settlements,
        total_amount=sum((record.amount for record in records), Decimal('0')),
        expense_count=len(records),
        people_count=len(persons),
    )
    command = ClearExpenses(
        expense_ids=tuple(record.id for record in records if record.id is not None)
    )

    logger.debug(
        "Prepared journey '%s': %d expenses, %d payments",
        name, journey.expense_count, len(settlements),
    )
    return ArchivePlan(journey=journey, command=command)
