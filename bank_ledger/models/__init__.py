"""Domain models for the ledger."""

from bank_ledger.models.account import Account
from bank_ledger.models.customer import Customer, Inbox
from bank_ledger.models.enums import AccountType, CommandStatus, StrategyKey
from bank_ledger.models.notification import Notification

__all__ = [
    "Account",
    "AccountType",
    "CommandStatus",
    "Customer",
    "Inbox",
    "Notification",
    "StrategyKey",
]
