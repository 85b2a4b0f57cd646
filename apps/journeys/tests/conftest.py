import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.journeys.models import Journey
from apps.ledger.models import Group
from apps.ledger.services import add_person, add_expense


OWNER = 'device-1'


@pytest.fixture
def api_client():
    """Return an API client without a ledger owner header."""
    return APIClient()


@pytest.fixture
def owner_client(api_client):
    """Return an API client scoped to the test ledger."""
    api_client.credentials(HTTP_X_USER_ID=OWNER)
    return api_client


@pytest.fixture
def dinner_ledger(db):
    """
    People A and B, one saved group and one expense: A paid 100 for A and B.
    """
    add_person(owner=OWNER, name='A')
    add_person(owner=OWNER, name='B')
    Group.objects.create(owner=OWNER, name='Dinner club', members=['A', 'B'])
    return add_expense(
        owner=OWNER,
        payer='A',
        amount=Decimal('100'),
        beneficiaries=['A', 'B'],
        description='Dinner',
    )


@pytest.fixture
def journey(db):
    """Create and return an archived journey."""
    return Journey.objects.create(
        owner=OWNER,
        name='Weekend',
        date='2024-03-15',
        timestamp=1710527400000,
        expenses=[{
            'payer': 'A',
            'amount': 100.0,
            'description': 'Dinner',
            'beneficiaries': ['A', 'B'],
            'splitType': 'equal',
            'splits': None,
            'date': '2024-03-15',
            'timestamp': 1710520000000,
        }],
        settlements=[{'from': 'B', 'to': 'A', 'amount': 50.0}],
        total_amount=Decimal('100.00'),
        expense_count=1,
        people_count=2,
    )
