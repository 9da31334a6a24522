"""Demo scenario: seed a bank with a few customers and accounts."""

from decimal import Decimal

from bank_ledger.bank import Bank
from bank_ledger.generators import AccountSeedGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import AccountType, Inbox

logger = get_logger(__name__)

# The two fixed customers every demo starts with
DEMO_CUSTOMERS: list[tuple[str, AccountType, Decimal]] = [
    ("Shivani", AccountType.SAVINGS, Decimal("1500")),
    ("Ravi", AccountType.CURRENT, Decimal("500")),
]


class DemoScenario:
    """Populate an empty bank with demo customers.

    Parameters
    ----------
    bank : Bank
        Bank to seed. Seeding is refused if it already has customers.
    extra_customers : int
        Number of Faker-generated customers to add after the fixed ones.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for generated names.
    inbox : Callable[[str], None] | None
        Notification channel given to every seeded customer.
    """

    def __init__(
        self,
        bank: Bank,
        extra_customers: int = 0,
        seed: int | None = None,
        locale: str = "en_IN",
        inbox: Inbox | None = None,
    ) -> None:
        self.bank = bank
        self.extra_customers = extra_customers
        self.seed = seed
        self.locale = locale
        self.inbox = inbox

    def run(self) -> dict[str, int] | None:
        """Seed the bank.

        Returns
        -------
        dict[str, int] | None
            Bank summary after seeding, or ``None`` if it was already seeded.
        """
        if self.bank.customers:
            self.bank.notice("Demo already seeded")
            return None

        for name, account_type, balance in DEMO_CUSTOMERS:
            self._open(name, account_type, balance)

        if self.extra_customers:
            generator = AccountSeedGenerator(seed=self.seed, locale=self.locale)
            for record in generator.generate_batch(self.extra_customers):
                self._open(record.customer_name, record.account_type, record.initial_balance)

        summary = self.bank.summary()
        logger.info(
            "Seeded demo: %d customers, %d accounts",
            summary["customers"],
            summary["accounts"],
        )
        return summary

    def _open(self, name: str, account_type: AccountType, balance: Decimal) -> None:
        customer = self.bank.create_customer(name, inbox=self.inbox)
        self.bank.create_account(account_type, customer, balance)
