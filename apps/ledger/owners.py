"""
Ledger owner resolution.

Each installation of the client sends its id in the ``X-User-Id`` header;
everything in the store is scoped to that id. Requests without the header
fall back to ``settings.DEFAULT_LEDGER_OWNER``.
"""

from django.conf import settings

from .exceptions import InvalidLedgerOwnerError

OWNER_HEADER = 'X-User-Id'
MAX_OWNER_LENGTH = 128


def get_ledger_owner(request):
    """Return the ledger owner id for a request."""
    owner = request.headers.get(OWNER_HEADER, '').strip()
    if not owner:
        return settings.DEFAULT_LEDGER_OWNER
    if len(owner) > MAX_OWNER_LENGTH:
        raise InvalidLedgerOwnerError()
    return owner
