"""
Domain exceptions for ledger app.

Service-layer errors are plain exceptions that views translate into
``{'error': message}`` responses. Request-level errors are DRF
APIExceptions so they surface with the right status code on their own.
"""
from rest_framework.exceptions import APIException


class LedgerServiceError(Exception):
    """Base exception for ledger service errors."""
    pass


class DuplicatePersonError(LedgerServiceError):
    """Raised when a person or friend with the same name already exists."""
    pass


class FriendNotFoundError(LedgerServiceError):
    """Raised when a friend does not exist in the owner's ledger."""
    pass


class DuplicateGroupError(LedgerServiceError):
    """Raised when a group with the same name already exists."""
    pass


class GroupNotFoundError(LedgerServiceError):
    """Raised when a group does not exist in the owner's ledger."""
    pass


class InvalidExpenseError(LedgerServiceError):
    """Raised when an expense is missing payer, amount or beneficiaries."""
    pass


class InvalidSplitError(InvalidExpenseError):
    """Raised when custom split amounts do not add up to the expense amount."""
    pass


class InvalidLedgerOwnerError(APIException):
    """Ledger owner header is malformed."""
    status_code = 400
    default_detail = 'Invalid X-User-Id header.'
    default_code = 'invalid_ledger_owner'
