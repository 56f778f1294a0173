"""
Account Management System

A single-account balance ledger driven by an interactive text menu.
Balances are held as integer cents and every debit is guarded by
overdraft protection.
"""

__version__ = "1.0.0"
