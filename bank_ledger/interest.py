"""Interest strategies.

A strategy is a pure mapping from a balance to an interest amount. The set
of strategies is closed: each one is a frozen value object registered under
a :class:`StrategyKey`, so accounts can swap them at runtime without any
subclassing.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.exceptions import UnknownStrategyError
from bank_ledger.models.enums import AccountType, StrategyKey


@dataclass(frozen=True)
class InterestStrategy:
    """Flat-rate interest policy."""

    key: StrategyKey
    rate: Decimal

    def calculate(self, balance: Decimal) -> Decimal:
        """Return the interest earned on ``balance``."""
        if not self.rate:
            return Decimal("0")
        return balance * self.rate


SAVINGS_INTEREST = InterestStrategy(StrategyKey.SAVINGS, Decimal("0.03"))
FIXED_DEPOSIT_INTEREST = InterestStrategy(StrategyKey.FIXED, Decimal("0.07"))
CURRENT_INTEREST = InterestStrategy(StrategyKey.CURRENT, Decimal("0"))

STRATEGIES: dict[StrategyKey, InterestStrategy] = {
    StrategyKey.SAVINGS: SAVINGS_INTEREST,
    StrategyKey.FIXED: FIXED_DEPOSIT_INTEREST,
    StrategyKey.CURRENT: CURRENT_INTEREST,
}

_DEFAULTS: dict[AccountType, InterestStrategy] = {
    AccountType.GENERIC: CURRENT_INTEREST,
    AccountType.SAVINGS: SAVINGS_INTEREST,
    AccountType.CURRENT: CURRENT_INTEREST,
    AccountType.FIXED_DEPOSIT: FIXED_DEPOSIT_INTEREST,
}


def strategy_for(key: StrategyKey | str) -> InterestStrategy:
    """Look up a strategy by key.

    Raises
    ------
    UnknownStrategyError
        If ``key`` is not one of ``savings``, ``current`` or ``fixed``.
    """
    if isinstance(key, StrategyKey):
        return STRATEGIES[key]
    try:
        return STRATEGIES[StrategyKey(str(key).strip().lower())]
    except ValueError as exc:
        raise UnknownStrategyError(f"Unknown interest strategy: {key!r}") from exc


def default_strategy(account_type: AccountType) -> InterestStrategy:
    """Strategy an account of the given type starts with."""
    return _DEFAULTS[account_type]
