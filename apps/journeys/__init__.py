"""
Journeys App - Archived Ledgers

A journey is a frozen snapshot of a ledger at the moment it was closed:
the expenses, the settlement computed from them, and summary totals.
Archiving a journey clears the current expenses (never people or groups)
in the same database transaction that stores the snapshot.
"""
