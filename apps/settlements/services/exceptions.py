"""
Domain exceptions for the settlement engine.

The engine is a pure computation and only ever signals failure through
SettlementInvariantError. It indicates an accumulation bug (or a ledger the
store should never have accepted), not a user-facing condition.

Exception Hierarchy:
    SettlementServiceError (base)
    └── SettlementInvariantError
"""


class SettlementServiceError(Exception):
    """Base exception for all settlement engine errors."""
    pass


class SettlementInvariantError(SettlementServiceError):
    """
    Raised when balances do not net out to zero, or when the netting loop
    exhausts one side while the other still holds money.

    Example:
        raise SettlementInvariantError("Balances sum to 30.00, expected 0")
    """
    pass
