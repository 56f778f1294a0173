"""
Amount Parsing Module

Converts user-entered text into values the balance operations accept.
Amounts are parsed with Decimal and rounded half-up to whole cents; float is
never used for monetary values.
"""

from decimal import Decimal, ROUND_HALF_UP, DecimalException
import re

from .storage import MINOR_UNITS_PER_MAJOR


# Leading numeric prefix, e.g. "12.50" out of "12.50 dollars"
_AMOUNT_PREFIX = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_CHOICE_PREFIX = re.compile(r'[+-]?\d+')

MAX_AMOUNT = 10 ** 18  # cents per single request

MIN_CHOICE = 1
MAX_CHOICE = 4


def parse_amount(text: str) -> int:
    """
    Parse a decimal amount string into minor units

    Args:
        text: User input such as "123.45" or "250"

    Returns:
        Amount in cents, rounded half-up ("0.005" -> 1)

    Raises:
        ValueError: If the input has no numeric prefix, is negative or
            exceeds MAX_AMOUNT cents
    """
    if not isinstance(text, str):
        raise ValueError("Amount must be a string")

    match = _AMOUNT_PREFIX.match(text.strip())
    if not match:
        raise ValueError(f"Cannot convert '{text}' to an amount")

    try:
        amount = Decimal(match.group(0))
        if amount < 0:
            raise ValueError(f"Amount must not be negative: '{text}'")
        cents = (amount * MINOR_UNITS_PER_MAJOR).to_integral_value(rounding=ROUND_HALF_UP)
    except DecimalException as e:
        raise ValueError(f"Cannot convert '{text}' to an amount") from e

    if cents > MAX_AMOUNT:
        raise ValueError(f"Amount exceeds {MAX_AMOUNT} cents: '{text}'")

    return int(cents)


def parse_menu_choice(text: str) -> int:
    """Parse a menu selection, accepting a leading integer in 1-4"""
    match = _CHOICE_PREFIX.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise ValueError(f"Invalid choice: '{text}'")

    choice = int(match.group(0))
    if not MIN_CHOICE <= choice <= MAX_CHOICE:
        raise ValueError(f"Choice out of range: {choice}")
    return choice
