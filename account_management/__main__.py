#!/usr/bin/env python3
"""Main entry point for the Account Management System"""

import sys

from .config import get_config
from .logging_config import setup_logging
from .menu import MenuSystem
from .operations import BalanceOperations
from .storage import InMemoryBalanceStore


def main() -> int:
    """Wire the store, operations and menu together and run the menu loop"""
    config = get_config()
    logger = setup_logging(config.log_level, log_format=config.log_format)

    store = InMemoryBalanceStore(config.initial_balance)
    operations = BalanceOperations(store)
    menu = MenuSystem(operations)

    logger.info("Starting account menu with balance %s", store.format(store.get()))

    try:
        menu.run()
    except KeyboardInterrupt:
        print()
        print("Exiting the program. Goodbye!")
    except Exception as e:
        logger.exception("Fatal error in menu loop")
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
