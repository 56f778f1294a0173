"""
Balance Storage Module

Provides the abstract balance store interface and the in-memory implementation
used by the application. Balances are held as integer minor units (cents) so no
binary floating point ever touches a monetary value.
"""

from abc import ABC, abstractmethod


DEFAULT_INITIAL_BALANCE = 100000  # 1000.00 in cents
MINOR_UNITS_PER_MAJOR = 100
MAJOR_DIGITS = 6
MINOR_DIGITS = 2

# Large balances are rendered in chunks well under the int-to-str digit limit
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def _digits(value: int) -> str:
    """Decimal digits of a non-negative int of any size"""
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def format_balance(value: int) -> str:
    """
    Render a minor-unit balance as DDDDDD.CC

    Major units are zero-padded to at least six digits and widen past that;
    minor units are always two digits. Uses truncating division, no rounding.

    Args:
        value: Balance in minor units (non-negative)

    Returns:
        Display string, e.g. 100000 -> "001000.00"
    """
    major, minor = divmod(value, MINOR_UNITS_PER_MAJOR)
    return f"{_digits(major).zfill(MAJOR_DIGITS)}.{minor:0{MINOR_DIGITS}d}"


class BalanceStorageInterface(ABC):
    """Abstract interface for balance stores"""

    @abstractmethod
    def get(self) -> int:
        """Return the current balance in minor units"""
        pass

    @abstractmethod
    def set(self, value: int) -> None:
        """Replace the stored balance"""
        pass

    def format(self, value: int) -> str:
        """Format a minor-unit value for display"""
        return format_balance(value)


class InMemoryBalanceStore(BalanceStorageInterface):
    """In-memory balance store, discarded at process exit"""

    def __init__(self, initial_balance: int = DEFAULT_INITIAL_BALANCE):
        self._balance = initial_balance

    def get(self) -> int:
        return self._balance

    def set(self, value: int) -> None:
        # Callers enforce the non-negative invariant
        self._balance = value

    def __repr__(self) -> str:
        return f"InMemoryBalanceStore(balance={self._balance})"
