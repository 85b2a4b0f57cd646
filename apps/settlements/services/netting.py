"""
Debt netting service.

Turns net balances into a short list of point-to-point payments using a
greedy largest-creditor / largest-debtor match. The result is not globally
minimal but it is deterministic and never longer than N-1 payments for N
people with a non-zero balance.

Algorithm:
    1. Round every balance to cents. Balances within one cent of zero are
       settled and stay out of the netting. The rounding residue is pushed
       onto unsettled entries that were rounded furthest in the offending
       direction, so the cent balances add up like the unrounded ones did
       whenever the residue can be placed.
    2. Split into creditors and debtors (amount owed kept positive).
    3. Sort each side by amount, largest first. Ties keep the order in
       which persons appear in the balance mapping.
    4. Walk both sides with index cursors, settling min(creditor, debtor)
       each step and advancing whichever cursor is fully settled.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from .balances import compute_balances
from .exceptions import SettlementInvariantError
from .money import CENTS_PER_UNIT, EPSILON, EPSILON_CENTS, ZERO_SUM_TOLERANCE, from_cents, to_cents, to_decimal
from .types import SettlementTransaction

logger = logging.getLogger(__name__)


class _Party:
    __slots__ = ('person', 'order', 'cents')

    def __init__(self, person: str, order: int, cents: int):
        self.person = person
        self.order = order
        self.cents = cents


def assert_zero_sum(balances: Dict[str, Decimal]) -> None:
    """
    Raise SettlementInvariantError unless the balances net out to zero.

    Correct accumulation always produces a zero-sum ledger, so this is a
    programming-error check rather than a user-facing validation.
    """
    total = sum((to_decimal(value) for value in balances.values()), Decimal(0))
    if abs(total) > ZERO_SUM_TOLERANCE:
        raise SettlementInvariantError(
            f"Balances sum to {total}, expected 0"
        )


def round_balances(balances: Dict[str, Decimal]) -> List[Tuple[str, int]]:
    """
    Round balances to whole cents while preserving their total.

    A balance within one cent of zero is already settled and becomes 0.
    Every other balance is rounded half-up, then the difference between the
    sum of the rounded values and the rounded total is corrected one cent at
    a time. A correction only goes to an unsettled entry whose rounding
    error points in the needed direction, furthest first (first-seen order
    breaks ties), so every rounded value stays within one cent of its exact
    value and settled people never enter the netting. Cents that cannot be
    placed that way are left uncorrected.

    Returns:
        list[tuple]: (person, cents) pairs in the order of ``balances``.
    """
    exact = [(person, to_decimal(value)) for person, value in balances.items()]
    cents = [0 if abs(value) < EPSILON else to_cents(value) for _, value in exact]

    target = to_cents(sum((value for _, value in exact), Decimal(0)))
    residue = sum(cents) - target

    if residue:
        # Positive error: rounding went down. Negative error: it went up.
        errors = [value * CENTS_PER_UNIT - rounded for (_, value), rounded in zip(exact, cents)]
        step = -1 if residue > 0 else 1
        candidates = sorted(
            (index for index in range(len(cents)) if cents[index] and step * errors[index] > 0),
            key=lambda index: (-step * errors[index], index),
        )
        for index in candidates[:abs(residue)]:
            cents[index] += step

    return [(person, amount) for (person, _), amount in zip(exact, cents)]


def settle_balances(balances: Dict[str, Decimal], *, strict: bool = False) -> List[SettlementTransaction]:
    """
    Compute the payments that bring every balance to zero.

    Args:
        balances: Ordered person -> balance mapping (positive = is owed).
        strict: Verify the zero-sum invariant before netting. Off by default
            so that a ledger holding an inconsistent record degrades to a
            partial settlement instead of failing.

    Returns:
        list[SettlementTransaction]: Payments in the order they were matched.

    Raises:
        SettlementInvariantError: In strict mode when balances do not sum to
            zero, or whenever a zero-sum ledger leaves an unmatched party.
    """
    if strict:
        assert_zero_sum(balances)

    rounded = round_balances(balances)

    creditors: List[_Party] = []
    debtors: List[_Party] = []
    for order, (person, cents) in enumerate(rounded):
        if cents >= EPSILON_CENTS:
            creditors.append(_Party(person, order, cents))
        elif cents <= -EPSILON_CENTS:
            debtors.append(_Party(person, order, -cents))

    creditors.sort(key=lambda party: (-party.cents, party.order))
    debtors.sort(key=lambda party: (-party.cents, party.order))

    transactions = []
    i = j = 0
    while i < len(creditors) and j < len(debtors):
        creditor = creditors[i]
        debtor = debtors[j]

        amount = min(creditor.cents, debtor.cents)
        transactions.append(SettlementTransaction(
            from_person=debtor.person,
            to_person=creditor.person,
            amount=from_cents(amount),
        ))

        creditor.cents -= amount
        debtor.cents -= amount

        if creditor.cents < EPSILON_CENTS:
            i += 1
        if debtor.cents < EPSILON_CENTS:
            j += 1

    unmatched = creditors[i:] + debtors[j:]
    if unmatched:
        leftover = ', '.join(f"{party.person}={from_cents(party.cents)}" for party in unmatched)
        if sum(cents for _, cents in rounded) == 0:
            raise SettlementInvariantError(
                f"Netting ended with unmatched balances: {leftover}"
            )
        logger.warning("Ledger does not net out, left unsettled: %s", leftover)

    return transactions


def compute_settlement(persons: Iterable[str], expenses: Iterable, *, strict: bool = False) -> List[SettlementTransaction]:
    """
    Compute the settlement for a ledger: balances first, then netting.

    Example:
        >>> compute_settlement(['A', 'B'], [
        ...     {'payer': 'A', 'amount': 100, 'beneficiaries': ['A', 'B']},
        ... ])
        [SettlementTransaction(from_person='B', to_person='A', amount=Decimal('50.00'))]
    """
    expenses = list(expenses)
    if not expenses:
        return []

    balances = compute_balances(persons, expenses)
    transactions = settle_balances(balances, strict=strict)
    logger.debug(
        "Settled %d expenses among %d people with %d payments",
        len(expenses), len(balances), len(transactions),
    )
    return transactions
