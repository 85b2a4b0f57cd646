from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.ledger.owners import get_ledger_owner
from apps.ledger.services import current_ledger

from .serializers import SettlementTransactionSerializer, BalanceSerializer
from .services import compute_balances, compute_settlement, quantize


@extend_schema(
    responses={200: SettlementTransactionSerializer(many=True)},
    description=(
        "Payments that settle the current ledger. Largest debts are matched "
        "with largest credits first; amounts are in cents precision."
    ),
    tags=['settlement'],
)
@api_view(['GET'])
def settlement(request):
    """Settle up - thin HTTP handler."""
    persons, records = current_ledger(owner=get_ledger_owner(request))
    transactions = compute_settlement(persons, records)
    return Response(SettlementTransactionSerializer(transactions, many=True).data)


@extend_schema(
    responses={200: BalanceSerializer(many=True)},
    description="Net balance per person. Positive means the person is owed money.",
    tags=['settlement'],
)
@api_view(['GET'])
def balances(request):
    """Net balances - thin HTTP handler."""
    persons, records = current_ledger(owner=get_ledger_owner(request))
    rows = [
        {'person': person, 'balance': quantize(balance)}
        for person, balance in compute_balances(persons, records).items()
    ]
    return Response(BalanceSerializer(rows, many=True).data)
