"""Enumeration types for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    GENERIC = "Generic"
    SAVINGS = "Savings"
    CURRENT = "Current"
    FIXED_DEPOSIT = "FixedDeposit"

    @classmethod
    def from_key(cls, key: "str | AccountType") -> "AccountType":
        """Resolve a form key (``savings``, ``current``, ``fixed``) or type name.

        Anything unrecognised falls back to ``GENERIC``.
        """
        if isinstance(key, cls):
            return key
        normalized = str(key).strip().lower()
        for member in cls:
            if normalized == member.value.lower():
                return member
        return _ACCOUNT_TYPE_KEYS.get(normalized, cls.GENERIC)


_ACCOUNT_TYPE_KEYS = {
    "savings": AccountType.SAVINGS,
    "current": AccountType.CURRENT,
    "fixed": AccountType.FIXED_DEPOSIT,
}


class StrategyKey(str, Enum):
    SAVINGS = "savings"
    CURRENT = "current"
    FIXED = "fixed"


class CommandStatus(str, Enum):
    PENDING = "PENDING"
    EXECUTED = "EXECUTED"
    REJECTED = "REJECTED"
    UNDONE = "UNDONE"
