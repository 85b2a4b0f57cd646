"""
Unit tests for balance accumulation.

Tests cover:
- Equal and unequal splits
- Persons missing from the person list
- Degenerate records (missing split entries, no beneficiaries)
- Zero-sum and order-independence properties
"""

import logging
import random
from decimal import Decimal
from fractions import Fraction

import pytest

from apps.settlements.services import compute_balances, ExpenseRecord, SplitType
from apps.settlements.tests.conftest import make_expense, random_ledger


class TestComputeBalances:
    """Tests for compute_balances()."""

    def test_equal_split_two_people(self, two_people_dinner):
        """Payer sharing the cost is credited only the other half."""
        persons, expenses = two_people_dinner

        balances = compute_balances(persons, expenses)

        assert balances == {'A': Decimal('50'), 'B': Decimal('-50')}

    def test_equal_split_three_people(self, three_way_split):
        persons, expenses = three_way_split

        balances = compute_balances(persons, expenses)

        assert balances == {'A': Decimal('60'), 'B': Decimal('-30'), 'C': Decimal('-30')}

    def test_unequal_split(self, unequal_split):
        """Payer outside the beneficiaries is credited the full amount."""
        persons, expenses = unequal_split

        balances = compute_balances(persons, expenses)

        assert balances == {'A': Decimal('100'), 'B': Decimal('-70'), 'C': Decimal('-30')}

    def test_no_expenses_all_zero(self):
        balances = compute_balances(['A', 'B', 'C'], [])

        assert balances == {'A': 0, 'B': 0, 'C': 0}

    def test_no_persons_no_expenses(self):
        assert compute_balances([], []) == {}

    def test_listed_order_preserved(self):
        """Listed persons keep their order even when expenses name them differently."""
        expenses = [make_expense('C', 30, ['B', 'A', 'C'])]

        balances = compute_balances(['A', 'B', 'C'], expenses)

        assert list(balances) == ['A', 'B', 'C']

    def test_unlisted_persons_get_a_balance(self):
        """People missing from a stale person list are still accounted for."""
        expenses = [make_expense('A', 30, ['A', 'Zoe', 'Bob'])]

        balances = compute_balances(['A'], expenses)

        assert list(balances) == ['A', 'Bob', 'Zoe']
        assert balances['A'] == Decimal('20')
        assert balances['Bob'] == Decimal('-10')
        assert balances['Zoe'] == Decimal('-10')

    def test_names_are_case_sensitive(self):
        expenses = [make_expense('anna', 10, ['Anna'])]

        balances = compute_balances(['Anna'], expenses)

        assert balances == {'Anna': Decimal('-10'), 'anna': Decimal('10')}

    def test_equal_share_not_pre_rounded(self):
        """Three-way split of 100 keeps exact thirds until the end."""
        expenses = [make_expense('A', 100, ['A', 'B', 'C'])] * 3

        balances = compute_balances(['A', 'B', 'C'], expenses)

        # 3 * 33.333... rounds to exactly 100, not 99.99
        assert balances['B'] == Decimal('-100')
        assert balances['C'] == Decimal('-100')
        assert balances['A'] == Decimal('200')

    def test_missing_split_entry_owes_nothing(self):
        """Beneficiary absent from splits is debited 0, not an error."""
        expenses = [make_expense('A', 100, ['B', 'C'], {'B': 100})]

        balances = compute_balances(['A', 'B', 'C'], expenses)

        assert balances == {'A': Decimal('100'), 'B': Decimal('-100'), 'C': Decimal('0')}

    def test_unequal_without_splits_falls_back_to_equal(self):
        expense = ExpenseRecord(
            payer='A',
            amount=Decimal('100'),
            beneficiaries=('A', 'B'),
            split_type=SplitType.UNEQUAL,
            splits=None,
        )

        balances = compute_balances(['A', 'B'], [expense])

        assert balances == {'A': Decimal('50'), 'B': Decimal('-50')}

    def test_no_beneficiaries_credits_payer(self, caplog):
        """Degenerate record: payer is credited, nobody debited, warning logged."""
        expenses = [make_expense('A', 40, [])]

        with caplog.at_level(logging.WARNING, logger='apps.settlements'):
            balances = compute_balances(['A', 'B'], expenses)

        assert balances == {'A': Decimal('40'), 'B': Decimal('0')}
        assert 'has no beneficiaries' in caplog.text
        assert 'imbalanced' in caplog.text

    def test_imbalanced_splits_do_not_crash(self, caplog):
        """Splits not adding up produce a warning, not an exception."""
        expenses = [make_expense('A', 100, ['B', 'C'], {'B': 10, 'C': 10})]

        with caplog.at_level(logging.WARNING, logger='apps.settlements'):
            balances = compute_balances(['A', 'B', 'C'], expenses)

        assert balances['A'] == Decimal('100')
        assert 'imbalanced' in caplog.text

    def test_accepts_boundary_dicts(self):
        """Expenses may be passed in their serialized shape."""
        expenses = [{
            'payer': 'A',
            'amount': 100,
            'description': 'Dinner',
            'beneficiaries': ['B', 'C'],
            'splitType': 'unequal',
            'splits': {'B': 70.5, 'C': 29.5},
        }]

        balances = compute_balances(['A', 'B', 'C'], expenses)

        assert balances == {'A': Decimal('100'), 'B': Decimal('-70.5'), 'C': Decimal('-29.5')}

    def test_duplicate_beneficiaries_collapse(self):
        expenses = [{'payer': 'A', 'amount': 10, 'beneficiaries': ['B', 'B', 'A']}]

        balances = compute_balances(['A', 'B'], expenses)

        assert balances == {'A': Decimal('5'), 'B': Decimal('-5')}

    def test_inputs_not_mutated(self):
        persons = ['A', 'B']
        expenses = [make_expense('A', 100, ['A', 'B'])]
        snapshot = list(expenses)

        compute_balances(persons, expenses)

        assert persons == ['A', 'B']
        assert expenses == snapshot


class TestBalanceProperties:
    """Properties that hold for every valid ledger."""

    @pytest.mark.parametrize('seed', range(30))
    def test_balances_sum_to_zero(self, seed):
        persons, expenses = random_ledger(seed)

        balances = compute_balances(persons, expenses)

        assert abs(sum(balances.values(), Decimal('0'))) <= Decimal('0.000001')

    @pytest.mark.parametrize('seed', range(30))
    def test_order_independent(self, seed):
        """Permuting the expense list does not change balances or their order."""
        persons, expenses = random_ledger(seed)
        shuffled = list(expenses)
        random.Random(seed + 1000).shuffle(shuffled)

        original = compute_balances(persons, expenses)
        permuted = compute_balances(persons, shuffled)

        assert original == permuted
        assert list(original) == list(permuted)

    @pytest.mark.parametrize('seed', range(10))
    def test_order_independent_with_stale_person_list(self, seed):
        persons, expenses = random_ledger(seed)
        shuffled = list(reversed(expenses))

        assert list(compute_balances(persons[:1], expenses)) == list(compute_balances(persons[:1], shuffled))

    def test_thirds_are_exact(self):
        """Result is exact for repeating decimals up to Decimal precision."""
        expenses = [make_expense('A', 10, ['A', 'B', 'C'])]

        balances = compute_balances(['A', 'B', 'C'], expenses)

        assert abs(Fraction(balances['B']) + Fraction(10, 3)) < Fraction(1, 10 ** 20)
