"""
Ledger services.

People, groups and current expenses for one ledger owner. Every function
takes the owner explicitly; views never touch the models directly.
State-changing operations run in a transaction.
"""

import logging
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.settlements.services import EPSILON, ExpenseRecord, to_decimal

from .exceptions import (
    DuplicatePersonError,
    FriendNotFoundError,
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidExpenseError,
    InvalidSplitError,
)
from .models import Friend, Group, Expense, SplitType

logger = logging.getLogger(__name__)


# =============================================================================
# People & Friends
# =============================================================================

def list_people(*, owner: str) -> List[str]:
    """
    Names of everyone in the ledger, in the order they were added.

    This order is what the settlement engine uses to break ties.
    """
    return list(
        Friend.objects
        .filter(owner=owner)
        .order_by('created_at', 'name')
        .values_list('name', flat=True)
    )


def add_person(*, owner: str, name: str) -> Friend:
    """
    Add a person by exact name.

    Raises:
        DuplicatePersonError: If the exact name is already in the ledger.
    """
    name = name.strip()
    with transaction.atomic():
        if Friend.objects.filter(owner=owner, name=name).exists():
            raise DuplicatePersonError("Person already exists")
        return Friend.objects.create(owner=owner, name=name)


def list_friends(*, owner: str) -> QuerySet:
    """Friends of the owner, newest first."""
    return Friend.objects.filter(owner=owner).order_by('-created_at')


def add_friend(*, owner: str, name: str) -> Friend:
    """
    Add a friend. Names are compared case-insensitively.

    Raises:
        DuplicatePersonError: If a friend with that name already exists.
    """
    name = name.strip()
    with transaction.atomic():
        if Friend.objects.filter(owner=owner, name__iexact=name).exists():
            raise DuplicatePersonError("Friend already exists")
        return Friend.objects.create(owner=owner, name=name)


@transaction.atomic
def delete_friend(*, owner: str, friend_id: UUID) -> None:
    """
    Remove a friend. Expenses that mention them are left untouched; the
    engine still gives them a balance.

    Raises:
        FriendNotFoundError: If the friend is not in the owner's ledger.
    """
    deleted, _ = Friend.objects.filter(owner=owner, id=friend_id).delete()
    if not deleted:
        raise FriendNotFoundError("Friend not found")


# =============================================================================
# Groups
# =============================================================================

def list_groups(*, owner: str) -> QuerySet:
    """Groups of the owner, newest first."""
    return Group.objects.filter(owner=owner).order_by('-created_at')


def create_group(*, owner: str, name: str, members: List[str]) -> Group:
    """
    Create a saved group of people.

    Raises:
        DuplicateGroupError: If a group with that name (any case) exists.
    """
    name = name.strip()
    members = list(dict.fromkeys(member.strip() for member in members if member.strip()))
    with transaction.atomic():
        if Group.objects.filter(owner=owner, name__iexact=name).exists():
            raise DuplicateGroupError("Group already exists")
        return Group.objects.create(owner=owner, name=name, members=members)


@transaction.atomic
def delete_group(*, owner: str, group_id: UUID) -> None:
    """
    Raises:
        GroupNotFoundError: If the group is not in the owner's ledger.
    """
    deleted, _ = Group.objects.filter(owner=owner, id=group_id).delete()
    if not deleted:
        raise GroupNotFoundError("Group not found")


# =============================================================================
# Expenses
# =============================================================================

def validate_splits(amount: Decimal, beneficiaries: List[str], splits: Optional[dict]) -> dict:
    """
    Check custom split amounts against the expense.

    Splits may only name beneficiaries and must add up to ``amount`` within
    one cent. Beneficiaries without an entry owe nothing.

    Returns:
        dict: person -> Decimal split amount.

    Raises:
        InvalidSplitError: If splits are missing, name an outsider, or do not
            add up.
    """
    if not splits:
        raise InvalidSplitError("Split amounts are required for an unequal split")

    outsiders = [person for person in splits if person not in beneficiaries]
    if outsiders:
        raise InvalidSplitError(
            f"Split amounts given for non-beneficiaries: {', '.join(outsiders)}"
        )

    parsed = {person: to_decimal(value or 0) for person, value in splits.items()}
    if any(value < 0 for value in parsed.values()):
        raise InvalidSplitError("Split amounts cannot be negative")

    total = sum(parsed.values(), Decimal('0'))
    if abs(total - amount) > EPSILON:
        raise InvalidSplitError("Split amounts must equal total expense amount")

    return parsed


def add_expense(
    *,
    owner: str,
    payer: str,
    amount: Decimal,
    beneficiaries: List[str],
    description: str = '',
    split_type: str = SplitType.EQUAL,
    splits: Optional[dict] = None
) -> Expense:
    """
    Record a new expense after validating it.

    Args:
        owner: Ledger owner id
        payer: Name of the person who paid
        amount: Positive amount paid
        beneficiaries: People sharing the cost (duplicates collapse)
        description: Optional description
        split_type: 'equal' or 'unequal'
        splits: person -> amount, required for unequal splits

    Returns:
        Created Expense instance

    Raises:
        InvalidExpenseError: If payer, amount or beneficiaries are missing.
        InvalidSplitError: If unequal split amounts are invalid.
    """
    beneficiaries = list(dict.fromkeys(beneficiaries or []))
    if not payer or not amount or amount <= 0 or not beneficiaries:
        raise InvalidExpenseError("Invalid expense data")

    stored_splits = None
    if split_type == SplitType.UNEQUAL:
        parsed = validate_splits(amount, beneficiaries, splits)
        stored_splits = {person: str(value) for person, value in parsed.items()}

    expense = Expense.objects.create(
        owner=owner,
        payer=payer,
        amount=amount,
        description=description or '',
        beneficiaries=beneficiaries,
        split_type=split_type,
        splits=stored_splits,
    )
    logger.info("Expense %s added for %s: %s paid %s", expense.id, owner, payer, amount)
    return expense


def list_expenses(*, owner: str) -> QuerySet:
    """Current expenses, newest first."""
    return Expense.objects.filter(owner=owner).order_by('-timestamp')


@transaction.atomic
def reset_expenses(*, owner: str) -> int:
    """
    Clear all current expenses. People and groups are kept.

    Returns:
        Number of expenses removed
    """
    deleted, _ = Expense.objects.filter(owner=owner).delete()
    logger.info("Reset ledger for %s: %d expenses removed", owner, deleted)
    return deleted


def current_ledger(*, owner: str, lock: bool = False) -> Tuple[List[str], List[ExpenseRecord]]:
    """
    Read the owner's people and current expenses as engine inputs.

    Args:
        owner: Ledger owner id
        lock: Lock the expense rows (SELECT FOR UPDATE). Only meaningful
            inside a transaction.

    Returns:
        tuple: (person names, expense records oldest first)
    """
    expenses = Expense.objects.filter(owner=owner).order_by('timestamp')
    if lock:
        expenses = expenses.select_for_update()

    persons = list_people(owner=owner)
    return persons, [expense.to_record() for expense in expenses]
