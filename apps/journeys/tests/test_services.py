"""
Service layer unit tests for journeys app.

Tests cover:
- Archiving the current ledger
- Transaction safety (snapshot write and clearing succeed or fail together)
- Owner scoping
"""

import logging
import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

from apps.journeys.exceptions import InvalidJourneyNameError, JourneyNotFoundError
from apps.journeys.models import Journey
from apps.journeys.services import archive_current_ledger, list_journeys, get_journey
from apps.ledger.models import Expense, Friend, Group
from apps.ledger.services import add_expense, list_people

from .conftest import OWNER


ARCHIVED_AT = datetime(2024, 3, 15, 18, 30, tzinfo=timezone.utc)


@pytest.mark.django_db
class TestArchiveCurrentLedger:
    """Tests for archive_current_ledger()."""

    def test_archive_creates_journey(self, dinner_ledger):
        journey = archive_current_ledger(owner=OWNER, name='Trip', now=ARCHIVED_AT)

        assert journey.name == 'Trip'
        assert journey.total_amount == Decimal('100')
        assert journey.expense_count == 1
        assert journey.people_count == 2
        assert journey.settlements == [{'from': 'B', 'to': 'A', 'amount': 50.0}]
        assert journey.date == '2024-03-15'
        assert journey.timestamp == int(ARCHIVED_AT.timestamp() * 1000)

    def test_archive_copies_expenses(self, dinner_ledger):
        journey = archive_current_ledger(owner=OWNER, name='Trip')

        [expense] = journey.expenses
        assert expense['id'] == str(dinner_ledger.id)
        assert expense['payer'] == 'A'
        assert expense['amount'] == 100.0
        assert expense['beneficiaries'] == ['A', 'B']
        assert expense['description'] == 'Dinner'

    def test_archive_clears_expenses_only(self, dinner_ledger):
        """People and groups survive archiving; current expenses do not."""
        archive_current_ledger(owner=OWNER, name='Trip')

        assert not Expense.objects.filter(owner=OWNER).exists()
        assert list_people(owner=OWNER) == ['A', 'B']
        assert Group.objects.filter(owner=OWNER).count() == 1

    def test_archive_leaves_other_ledgers_alone(self, dinner_ledger):
        other = add_expense(owner='device-2', payer='X', amount=Decimal('5'), beneficiaries=['Y'])

        archive_current_ledger(owner=OWNER, name='Trip')

        assert Expense.objects.filter(id=other.id).exists()

    def test_archive_empty_ledger(self, db):
        journey = archive_current_ledger(owner=OWNER, name='Nothing yet')

        assert journey.expense_count == 0
        assert journey.total_amount == Decimal('0')
        assert journey.settlements == []

    def test_archive_strips_name(self, dinner_ledger):
        journey = archive_current_ledger(owner=OWNER, name='  Trip ')

        assert journey.name == 'Trip'

    @pytest.mark.parametrize('name', ['', '   '])
    def test_archive_requires_name(self, dinner_ledger, name):
        with pytest.raises(InvalidJourneyNameError, match='Journey name is required'):
            archive_current_ledger(owner=OWNER, name=name)

        assert Expense.objects.filter(owner=OWNER).count() == 1
        assert not Journey.objects.exists()

    def test_archive_rolls_back_when_snapshot_fails(self, dinner_ledger, caplog):
        """If the journey cannot be written, no expense is cleared."""
        with patch('apps.journeys.services._store_snapshot', side_effect=RuntimeError('disk full')):
            with caplog.at_level(logging.ERROR, logger='apps.journeys'):
                with pytest.raises(RuntimeError):
                    archive_current_ledger(owner=OWNER, name='Trip')

        assert Expense.objects.filter(id=dinner_ledger.id).exists()
        assert not Journey.objects.exists()
        assert "Failed to archive journey 'Trip'" in caplog.text

    def test_archive_rolls_back_when_clearing_fails(self, dinner_ledger):
        """If clearing fails after the write, the journey is not kept."""
        with patch('apps.journeys.services._clear_expenses', side_effect=RuntimeError('lock timeout')):
            with pytest.raises(RuntimeError):
                archive_current_ledger(owner=OWNER, name='Trip')

        assert Expense.objects.filter(id=dinner_ledger.id).exists()
        assert not Journey.objects.exists()

    def test_archive_logs_success(self, dinner_ledger, caplog):
        with caplog.at_level(logging.INFO, logger='apps.journeys'):
            journey = archive_current_ledger(owner=OWNER, name='Trip')

        assert f"Archived journey {journey.id} 'Trip'" in caplog.text

    def test_friend_list_not_touched(self, dinner_ledger):
        before = set(Friend.objects.values_list('id', flat=True))

        archive_current_ledger(owner=OWNER, name='Trip')

        assert set(Friend.objects.values_list('id', flat=True)) == before


@pytest.mark.django_db
class TestJourneyQueries:
    """Tests for list_journeys() and get_journey()."""

    def test_list_newest_first(self, journey):
        later = Journey.objects.create(owner=OWNER, name='Later', date='2024-04-01', timestamp=journey.timestamp + 1)

        assert list(list_journeys(owner=OWNER)) == [later, journey]

    def test_list_scoped_to_owner(self, journey):
        assert list(list_journeys(owner='device-2')) == []

    def test_get_journey(self, journey):
        assert get_journey(owner=OWNER, journey_id=journey.id) == journey

    def test_get_journey_not_found(self, db):
        with pytest.raises(JourneyNotFoundError):
            get_journey(owner=OWNER, journey_id=uuid4())

    def test_get_journey_of_other_owner(self, journey):
        with pytest.raises(JourneyNotFoundError):
            get_journey(owner='device-2', journey_id=journey.id)
