"""In-memory ledger store with referential integrity."""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_ledger.exceptions import (
    AccountNotFoundError,
    CustomerNotFoundError,
    ReferentialIntegrityError,
)
from bank_ledger.interest import InterestStrategy, default_strategy
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountType, Customer, Inbox

logger = get_logger(__name__)


@dataclass
class IdSequence:
    """Monotonic id allocator. Ids are never handed out twice."""

    next_id: int = 1

    def allocate(self) -> int:
        allocated = self.next_id
        self.next_id += 1
        return allocated


@dataclass
class LedgerStore:
    """In-memory store for customers and accounts.

    Each store allocates its own ids, so two stores never share an id
    sequence.
    """

    currency_symbol: str = ""

    customers: dict[int, Customer] = field(default_factory=dict)
    accounts: dict[int, Account] = field(default_factory=dict)

    _customer_ids: IdSequence = field(default_factory=IdSequence)
    _account_ids: IdSequence = field(default_factory=IdSequence)

    # Relationship index
    _customer_accounts: dict[int, list[int]] = field(default_factory=dict)

    def add_customer(self, name: str, inbox: Inbox | None = None) -> Customer:
        """Register a new customer."""
        customer = Customer(customer_id=self._customer_ids.allocate(), name=name, inbox=inbox)
        self.customers[customer.customer_id] = customer
        self._customer_accounts[customer.customer_id] = []
        logger.info("Added customer #%d (%s)", customer.customer_id, name)
        return customer

    def add_account(
        self,
        account_type: AccountType,
        owner_id: int,
        initial_balance: Decimal = Decimal("0"),
        strategy: InterestStrategy | None = None,
    ) -> Account:
        """Open an account for an existing customer.

        The owner is attached as the first observer.
        """
        if owner_id not in self.customers:
            raise ReferentialIntegrityError(f"Customer {owner_id} not found")

        account = Account(
            account_id=self._account_ids.allocate(),
            owner_id=owner_id,
            account_type=account_type,
            interest_strategy=strategy or default_strategy(account_type),
            customer_lookup=self.get_customer,
            balance=initial_balance,
            currency_symbol=self.currency_symbol,
        )
        account.attach(self.customers[owner_id])
        self.accounts[account.account_id] = account
        self._customer_accounts[owner_id].append(account.account_id)
        logger.info("Opened %s for customer #%d", account.label, owner_id)
        return account

    def get_customer(self, customer_id: int) -> Customer:
        """Get a customer by id."""
        try:
            return self.customers[customer_id]
        except KeyError:
            raise CustomerNotFoundError(f"Customer {customer_id} not found") from None

    def get_account(self, account_id: int) -> Account:
        """Get an account by id."""
        try:
            return self.accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_id} not found") from None

    def find_account(self, account_id: int) -> Account | None:
        """Get an account by id, or ``None`` when it does not exist."""
        return self.accounts.get(account_id)

    # Query methods
    def get_customer_accounts(self, customer_id: int) -> list[Account]:
        """Get all accounts owned by a customer."""
        account_ids = self._customer_accounts.get(customer_id, [])
        return [self.accounts[aid] for aid in account_ids]

    def total_balance(self) -> Decimal:
        """Sum of every account balance."""
        return sum((a.balance for a in self.accounts.values()), Decimal("0"))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "customers": len(self.customers),
            "accounts": len(self.accounts),
        }
