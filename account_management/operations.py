"""
Balance Operations Module

Implements the business rules for the account: viewing, crediting and
debiting the balance held by a store. Debits are guarded by overdraft
protection; a debit that would take the balance below zero is rejected
outright and leaves the balance untouched.
"""

from dataclasses import dataclass

from .storage import BalanceStorageInterface
from .logging_config import get_logger, log_action


@dataclass(frozen=True)
class DebitResult:
    """Outcome of a debit request"""
    success: bool
    balance: int  # minor units after the request

    def __iter__(self):
        # Allows ``ok, balance = operations.debit(...)``
        return iter((self.success, self.balance))


class BalanceOperations:
    """
    Read-modify-write operations against a balance store

    All amounts are non-negative integers in minor units, already validated
    by the caller. None of these operations raise for valid input.
    """

    def __init__(self, store: BalanceStorageInterface):
        self.store = store
        self.logger = get_logger("account_management.operations")

    def view_balance(self) -> str:
        """Return the formatted current balance without mutating it"""
        return self.store.format(self.store.get())

    def credit(self, amount: int) -> int:
        """
        Add amount to the balance

        Args:
            amount: Amount in minor units (>= 0)

        Returns:
            New balance in minor units
        """
        old_balance = self.store.get()
        new_balance = old_balance + amount
        self.store.set(new_balance)

        log_action(
            self.logger, "info", "Account credited",
            action="credit", resource="balance",
            extra={
                "amount": amount,
                "old_balance": old_balance,
                "new_balance": new_balance
            }
        )
        return new_balance

    def debit(self, amount: int) -> DebitResult:
        """
        Subtract amount from the balance if funds are sufficient

        Args:
            amount: Amount in minor units (>= 0)

        Returns:
            DebitResult(True, new balance) on success, or
            DebitResult(False, unchanged balance) on insufficient funds
        """
        old_balance = self.store.get()

        if old_balance < amount:
            log_action(
                self.logger, "warning", "Debit rejected: insufficient funds",
                action="debit_rejected", resource="balance",
                extra={"amount": amount, "balance": old_balance}
            )
            return DebitResult(success=False, balance=old_balance)

        new_balance = old_balance - amount
        self.store.set(new_balance)

        log_action(
            self.logger, "info", "Account debited",
            action="debit", resource="balance",
            extra={
                "amount": amount,
                "old_balance": old_balance,
                "new_balance": new_balance
            }
        )
        return DebitResult(success=True, balance=new_balance)
