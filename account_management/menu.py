"""
Menu Shell Module

Interactive text menu for the account. Reads choices and amounts, hands
parsed minor-unit values to BalanceOperations and reports the outcome.
"""

from enum import IntEnum
from typing import Callable, Optional

from .amounts import parse_amount, parse_menu_choice
from .operations import BalanceOperations
from .logging_config import get_logger


SEPARATOR = "-" * 32

MENU_LINES = (
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
)

CHOICE_PROMPT = "Enter your choice (1-4): "
CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "

INVALID_CHOICE = "Invalid choice, please select 1-4."
INVALID_AMOUNT = "Invalid amount entered."
INSUFFICIENT_FUNDS = "Insufficient funds for this debit."
GOODBYE = "Exiting the program. Goodbye!"


class MenuChoice(IntEnum):
    """Main menu options"""
    VIEW_BALANCE = 1
    CREDIT = 2
    DEBIT = 3
    EXIT = 4


class MenuSystem:
    """
    Menu loop around BalanceOperations

    input_func and output_func default to the builtins and are swapped out
    in tests.
    """

    def __init__(
        self,
        operations: BalanceOperations,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self.operations = operations
        self.input = input_func
        self.output = output_func
        self.continue_flag = True
        self.logger = get_logger("account_management.menu")

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self.output(line)

    def read_choice(self) -> Optional[MenuChoice]:
        """Prompt for a menu choice; None when the input is invalid"""
        answer = self.input(CHOICE_PROMPT)
        try:
            return MenuChoice(parse_menu_choice(answer))
        except ValueError:
            self.logger.debug("Rejected menu choice %r", answer)
            return None

    def read_amount(self, prompt: str) -> Optional[int]:
        """Prompt for an amount in minor units; None when the input is invalid"""
        answer = self.input(prompt)
        try:
            return parse_amount(answer)
        except ValueError:
            self.logger.debug("Rejected amount %r", answer)
            return None

    def process_choice(self, choice: int) -> None:
        """Execute the operation for a menu choice"""
        if choice == MenuChoice.VIEW_BALANCE:
            self.output(f"Current balance: {self.operations.view_balance()}")

        elif choice == MenuChoice.CREDIT:
            amount = self.read_amount(CREDIT_PROMPT)
            if amount is None:
                self.output(INVALID_AMOUNT)
                return
            new_balance = self.operations.credit(amount)
            formatted = self.operations.store.format(new_balance)
            self.output(f"Amount credited. New balance: {formatted}")

        elif choice == MenuChoice.DEBIT:
            amount = self.read_amount(DEBIT_PROMPT)
            if amount is None:
                self.output(INVALID_AMOUNT)
                return
            result = self.operations.debit(amount)
            if result.success:
                formatted = self.operations.store.format(result.balance)
                self.output(f"Amount debited. New balance: {formatted}")
            else:
                self.output(INSUFFICIENT_FUNDS)

        elif choice == MenuChoice.EXIT:
            self.continue_flag = False
            self.output(GOODBYE)

        else:
            self.output(INVALID_CHOICE)

    def run(self) -> None:
        """Main menu loop; returns once the user exits or input ends"""
        while self.continue_flag:
            self.display_menu()
            try:
                choice = self.read_choice()
                if choice is None:
                    self.output(INVALID_CHOICE)
                    continue
                self.process_choice(choice)
            except EOFError:
                self.logger.debug("Input closed, leaving menu")
                self.process_choice(MenuChoice.EXIT)
