"""
Settlement engine.

Pure, synchronous computations over plain records: no database access and
no shared state, so every call is safe to run concurrently.
"""

from .exceptions import (
    SettlementServiceError,
    SettlementInvariantError,
)

from .money import (
    EPSILON,
    to_decimal,
    to_cents,
    from_cents,
    quantize,
)

from .types import (
    SplitType,
    ExpenseRecord,
    SettlementTransaction,
    JourneySnapshot,
    ClearExpenses,
    ArchivePlan,
)

from .balances import (
    compute_balances,
)

from .netting import (
    assert_zero_sum,
    round_balances,
    settle_balances,
    compute_settlement,
)

from .archive import (
    archive_journey,
)


__all__ = [
    # Exceptions
    'SettlementServiceError',
    'SettlementInvariantError',

    # Money
    'EPSILON',
    'to_decimal',
    'to_cents',
    'from_cents',
    'quantize',

    # Records
    'SplitType',
    'ExpenseRecord',
    'SettlementTransaction',
    'JourneySnapshot',
    'ClearExpenses',
    'ArchivePlan',

    # Balance accumulation
    'compute_balances',

    # Debt netting
    'assert_zero_sum',
    'round_balances',
    'settle_balances',
    'compute_settlement',

    # Journey archival
    'archive_journey',
]
