"""Demo customer/account generator."""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models.enums import AccountType


@dataclass
class AccountSeed:
    """A customer name and the account to open for them."""

    customer_name: str
    account_type: AccountType
    initial_balance: Decimal


class AccountSeedGenerator(BaseGenerator):
    """Generate plausible customers with one opening account each."""

    ACCOUNT_TYPE_WEIGHTS = {
        AccountType.SAVINGS: 0.55,
        AccountType.CURRENT: 0.30,
        AccountType.FIXED_DEPOSIT: 0.15,
    }

    # Opening balance bounds in paise (hundredths)
    BALANCE_RANGE = (10_000, 5_000_000)

    def generate(self) -> AccountSeed:
        """Generate a single seed record."""
        account_type = random.choices(
            list(self.ACCOUNT_TYPE_WEIGHTS),
            weights=list(self.ACCOUNT_TYPE_WEIGHTS.values()),
        )[0]
        low, high = self.BALANCE_RANGE
        return AccountSeed(
            customer_name=self.fake.name(),
            account_type=account_type,
            initial_balance=Decimal(random.randint(low, high)) / 100,
        )

    def generate_batch(self, count: int) -> Iterator[AccountSeed]:
        """Yield ``count`` seed records."""
        for _ in range(count):
            yield self.generate()
