"""
Value objects passed between the ledger store and the settlement engine.

All of them are frozen dataclasses. The store hands the engine
ExpenseRecord instances and gets back SettlementTransaction lists or an
ArchivePlan, which it serializes with ``as_dict()`` unchanged.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Tuple

from .money import to_decimal


class SplitType(str, Enum):
    EQUAL = 'equal'
    UNEQUAL = 'unequal'


def _number(amount: Decimal):
    """Render a Decimal as a JSON number."""
    return float(amount)


@dataclass(frozen=True)
class ExpenseRecord:
    """A single expense as the engine sees it."""

    payer: str
    amount: Decimal
    beneficiaries: Tuple[str, ...]
    split_type: SplitType = SplitType.EQUAL
    splits: Optional[Dict[str, Decimal]] = None
    description: str = ''
    date: str = ''
    timestamp: Optional[int] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ExpenseRecord':
        """
        Build a record from the boundary shape::

            {payer, amount, description, beneficiaries,
             splitType, splits, date, timestamp, id}

        Duplicate beneficiaries collapse (first occurrence wins). Any split
        type other than 'unequal' is treated as an equal split.
        """
        beneficiaries = tuple(dict.fromkeys(data.get('beneficiaries') or ()))
        split_type = (
            SplitType.UNEQUAL if data.get('splitType') == SplitType.UNEQUAL.value
            else SplitType.EQUAL
        )
        raw_splits = data.get('splits')
        splits = None
        if raw_splits is not None:
            splits = {person: to_decimal(value or 0) for person, value in raw_splits.items()}

        record_id = data.get('id')
        return cls(
            payer=data['payer'],
            amount=to_decimal(data['amount']),
            beneficiaries=beneficiaries,
            split_type=split_type,
            splits=splits,
            description=data.get('description') or '',
            date=data.get('date') or '',
            timestamp=data.get('timestamp'),
            id=str(record_id) if record_id is not None else None,
        )

    def copy(self) -> 'ExpenseRecord':
        """Return a copy that shares no mutable state with this record."""
        return replace(self, splits=dict(self.splits) if self.splits is not None else None)

    def as_dict(self) -> dict:
        data = {
            'payer': self.payer,
            'amount': _number(self.amount),
            'description': self.description,
            'beneficiaries': list(self.beneficiaries),
            'splitType': self.split_type.value,
            'splits': (
                {person: _number(value) for person, value in self.splits.items()}
                if self.splits is not None else None
            ),
            'date': self.date,
            'timestamp': self.timestamp,
        }
        if self.id is not None:
            data['id'] = self.id
        return data


@dataclass(frozen=True)
class SettlementTransaction:
    """One payment: ``from_person`` pays ``amount`` to ``to_person``."""

    from_person: str
    to_person: str
    amount: Decimal

    def as_dict(self) -> dict:
        return {
            'from': self.from_person,
            'to': self.to_person,
            'amount': _number(self.amount),
        }


@dataclass(frozen=True)
class JourneySnapshot:
    """Archived, immutable picture of a ledger at the moment it was closed."""

    name: str
    date: str
    timestamp: int
    expenses: Tuple[ExpenseRecord, ...]
    settlements: Tuple[SettlementTransaction, ...]
    total_amount: Decimal
    expense_count: int
    people_count: int

    def as_dict(self) -> dict:
        return {
            'name': self.name,
            'date': self.date,
            'timestamp': self.timestamp,
            'expenses': [expense.as_dict() for expense in self.expenses],
            'settlements': [tx.as_dict() for tx in self.settlements],
            'totalAmount': _number(self.total_amount),
            'expenseCount': self.expense_count,
            'peopleCount': self.people_count,
        }


@dataclass(frozen=True)
class ClearExpenses:
    """Instruction to the store: delete exactly these current expenses."""

    expense_ids: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ArchivePlan:
    """
    Result of archiving a ledger.

    The store must persist ``journey`` and then apply ``command`` inside a
    single transaction. If persisting the journey fails, the command must
    not be applied.
    """

    journey: JourneySnapshot
    command: ClearExpenses
