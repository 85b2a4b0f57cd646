"""
Balance accumulation service.

Folds expense records into a signed net balance per person:
positive means the person is owed money, negative means they owe money.

Arithmetic is exact (rational) until the very end, so equal shares are
never pre-rounded and the order in which expenses are folded cannot change
the result.
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Dict, Iterable, List

from .money import ZERO_SUM_TOLERANCE, to_decimal
from .types import ExpenseRecord, SplitType

logger = logging.getLogger(__name__)


def _exact(amount) -> Fraction:
    return Fraction(to_decimal(amount))


def _to_decimal(value: Fraction) -> Decimal:
    if value.denominator == 1:
        return Decimal(value.numerator)
    return Decimal(value.numerator) / Decimal(value.denominator)


def as_record(expense) -> ExpenseRecord:
    """Accept either an ExpenseRecord or its boundary dict."""
    if isinstance(expense, ExpenseRecord):
        return expense
    return ExpenseRecord.from_dict(expense)


class BalanceSheet:
    """
    Ordered person -> exact balance mapping.

    Listed persons keep the order they were given in. Persons that only
    show up in expense history are appended after them, sorted by name, so
    the key order does not depend on the order expenses were folded in.
    """

    def __init__(self, persons: Iterable[str] = ()):
        self._listed: Dict[str, Fraction] = {}
        self._discovered: Dict[str, Fraction] = {}
        for person in persons:
            self._listed.setdefault(person, Fraction(0))

    def _account(self, person: str) -> Dict[str, Fraction]:
        if person in self._listed:
            return self._listed
        self._discovered.setdefault(person, Fraction(0))
        return self._discovered

    def credit(self, person: str, amount: Fraction) -> None:
        self._account(person)[person] += amount

    def debit(self, person: str, amount: Fraction) -> None:
        self._account(person)[person] -= amount

    def apply(self, record: ExpenseRecord) -> None:
        """Credit the payer in full and debit each beneficiary's share."""
        amount = _exact(record.amount)
        self.credit(record.payer, amount)

        if record.split_type == SplitType.UNEQUAL and record.splits is not None:
            for person in record.beneficiaries:
                # A beneficiary without a split entry owes nothing.
                self.debit(person, _exact(record.splits.get(person, 0)))
        elif record.beneficiaries:
            share = amount / len(record.beneficiaries)
            for person in record.beneficiaries:
                self.debit(person, share)

    def total(self) -> Fraction:
        return sum(self._listed.values(), Fraction(0)) + sum(self._discovered.values(), Fraction(0))

    def as_decimals(self) -> Dict[str, Decimal]:
        balances = {person: _to_decimal(value) for person, value in self._listed.items()}
        for person in sorted(self._discovered):
            balances[person] = _to_decimal(self._discovered[person])
        return balances


def compute_balances(persons: Iterable[str], expenses: Iterable) -> Dict[str, Decimal]:
    """
    Compute the net balance of every person.

    Args:
        persons: Known people. May be stale; payers and beneficiaries that
            are missing from it get a balance too.
        expenses: ExpenseRecord instances (or their boundary dicts) in any
            order.

    Returns:
        dict: person -> Decimal balance, every listed person included.

    A payer who is also a beneficiary is credited and debited in the same
    pass, so they end up credited only with what the others owe.
    """
    sheet = BalanceSheet(persons)
    records: List[ExpenseRecord] = [as_record(expense) for expense in expenses]

    for record in records:
        if not record.beneficiaries:
            logger.warning(
                "Expense %s paid by %s has no beneficiaries", record.id, record.payer
            )
        sheet.apply(record)

    total = sheet.total()
    if abs(total) > Fraction(ZERO_SUM_TOLERANCE):
        logger.warning(
            "Ledger is imbalanced by %s across %d expenses", _to_decimal(total), len(records)
        )

    return sheet.as_decimals()
