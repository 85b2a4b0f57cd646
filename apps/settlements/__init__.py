"""
Settlements app.

Holds the settlement engine (``services``) and the read-only endpoints
that run it against the current ledger.
"""
