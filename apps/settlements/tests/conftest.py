import random
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.settlements.services import ExpenseRecord, SplitType


def make_expense(payer, amount, beneficiaries, splits=None, **extra):
    """Build an ExpenseRecord; passing ``splits`` makes it an unequal split."""
    return ExpenseRecord(
        payer=payer,
        amount=Decimal(str(amount)),
        beneficiaries=tuple(beneficiaries),
        split_type=SplitType.UNEQUAL if splits is not None else SplitType.EQUAL,
        splits=(
            {person: Decimal(str(value)) for person, value in splits.items()}
            if splits is not None else None
        ),
        **extra
    )


def random_ledger(seed, max_people=7, max_expenses=25):
    """
    Generate a valid ledger: persons plus expenses with amounts in whole
    cents and unequal splits that add up exactly.
    """
    rng = random.Random(seed)
    persons = [f'P{i}' for i in range(rng.randint(2, max_people))]
    expenses = []
    for index in range(rng.randint(1, max_expenses)):
        payer = rng.choice(persons)
        beneficiaries = rng.sample(persons, rng.randint(1, len(persons)))
        cents = rng.randint(1, 50000)
        amount = Decimal(cents) / 100

        if rng.random() < 0.3:
            remaining = cents
            splits = {}
            for person in beneficiaries[:-1]:
                share = rng.randint(0, remaining)
                splits[person] = Decimal(share) / 100
                remaining -= share
            splits[beneficiaries[-1]] = Decimal(remaining) / 100
            expenses.append(make_expense(payer, amount, beneficiaries, splits, id=str(index)))
        else:
            expenses.append(make_expense(payer, amount, beneficiaries, id=str(index)))
    return persons, expenses


def sub_cent_ledger(seed, max_expenses=6):
    """
    Generate a ledger of tiny expenses (0.01 to 0.05) shared by 3 to 7
    people, so most equal shares are fractions of a cent.
    """
    rng = random.Random(seed)
    persons = [f'P{i}' for i in range(rng.randint(3, 7))]
    expenses = []
    for index in range(rng.randint(1, max_expenses)):
        payer = rng.choice(persons)
        beneficiaries = rng.sample(persons, rng.randint(3, len(persons)))
        amount = Decimal(rng.randint(1, 5)) / 100
        expenses.append(make_expense(payer, amount, beneficiaries, id=str(index)))
    return persons, expenses


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def two_people_dinner():
    """A paid 100 for A and B."""
    return ['A', 'B'], [make_expense('A', 100, ['A', 'B'], id='e1')]


@pytest.fixture
def three_way_split():
    """A paid 90 for A, B and C."""
    return ['A', 'B', 'C'], [make_expense('A', 90, ['A', 'B', 'C'])]


@pytest.fixture
def unequal_split():
    """A paid 100 for B (70) and C (30), A not sharing."""
    return ['A', 'B', 'C'], [make_expense('A', 100, ['B', 'C'], {'B': 70, 'C': 30})]
