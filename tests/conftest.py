"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from bank_ledger.bank import Bank
from bank_ledger.models import Account, AccountType, Customer
from bank_ledger.sinks import MemorySink
from bank_ledger.store import LedgerStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def notices() -> MemorySink:
    """Operational notice channel."""
    return MemorySink(name="notices")


@pytest.fixture
def inbox() -> MemorySink:
    """Customer notification inbox."""
    return MemorySink(name="inbox")


@pytest.fixture
def bank(notices: MemorySink) -> Bank:
    """Fresh bank wired to the notice sink."""
    return Bank(notice=notices)


@pytest.fixture
def store() -> LedgerStore:
    """Fresh store for each test."""
    return LedgerStore()


@pytest.fixture
def customer(store: LedgerStore, inbox: MemorySink) -> Customer:
    """Customer whose notifications land in ``inbox``."""
    return store.add_customer("Shivani", inbox=inbox)


@pytest.fixture
def account(store: LedgerStore, customer: Customer) -> Account:
    """Generic account with 1000 opening balance."""
    return store.add_account(AccountType.GENERIC, customer.customer_id, Decimal("1000"))


@pytest.fixture
def other_account(store: LedgerStore) -> Account:
    """Second account owned by a different customer, 200 opening balance."""
    ravi = store.add_customer("Ravi")
    return store.add_account(AccountType.CURRENT, ravi.customer_id, Decimal("200"))
