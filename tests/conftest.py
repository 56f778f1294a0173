"""Shared pytest fixtures"""

import logging

import pytest

from account_management.storage import InMemoryBalanceStore
from account_management.operations import BalanceOperations


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo setup_logging() so caplog sees records from every test"""
    yield
    logger = logging.getLogger("account_management")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def store():
    return InMemoryBalanceStore()


@pytest.fixture
def operations(store):
    return BalanceOperations(store)
