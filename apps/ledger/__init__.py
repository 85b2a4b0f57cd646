"""
Ledger App - People, Groups and Current Expenses

This app is the store behind the settlement engine. It keeps, per ledger
owner, the people that can take part in expenses, saved groups of people,
and the current (not yet archived) expenses.

Key Features:
- People and friends with duplicate-name protection
- Saved groups of people for quick expense entry
- Expense recording with equal or custom (unequal) splits
- Split validation before a record ever reaches the engine
- Ledger reset (clears expenses, keeps people and groups)

Architecture:
- Models: Friend, Group, Expense
- Services: people/group/expense functions in services.py
- Views: thin function-based API views
- Exceptions: domain exception hierarchy in exceptions.py
"""
