import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.ledger.models import Friend, Group, Expense, SplitType


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
def other_client():
    """Return an API client scoped to a different ledger."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ID='device-2')
    return client


@pytest.fixture
def friend(db):
    """Create and return a friend in the test ledger."""
    return Friend.objects.create(owner=OWNER, name='Alice')


@pytest.fixture
def group(db):
    """Create and return a saved group in the test ledger."""
    return Group.objects.create(owner=OWNER, name='Flatmates', members=['Alice', 'Bob'])


@pytest.fixture
def expense(db):
    """Alice paid 30 for Alice and Bob."""
    return Expense.objects.create(
        owner=OWNER,
        payer='Alice',
        amount=Decimal('30.00'),
        description='Groceries',
        beneficiaries=['Alice', 'Bob'],
        split_type=SplitType.EQUAL,
    )


@pytest.fixture
def unequal_expense(db):
    """Bob paid 100, Alice owes 70 and Carol 30."""
    return Expense.objects.create(
        owner=OWNER,
        payer='Bob',
        amount=Decimal('100.00'),
        description='Hotel',
        beneficiaries=['Alice', 'Carol'],
        split_type=SplitType.UNEQUAL,
        splits={'Alice': '70.00', 'Carol': '30.00'},
    )
