"""Bank facade: the operations a presentation layer calls.

Every expected failure (unknown ids, bad amounts, insufficient funds,
self-transfer, empty undo) is reported on the ``notice`` channel and the
call returns without effect. Only programming errors propagate.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

from bank_ledger.commands import (
    Command,
    DepositCommand,
    TransactionManager,
    TransferCommand,
    WithdrawCommand,
)
from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import InvalidAmountError, UnknownStrategyError
from bank_ledger.interest import strategy_for
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountType, Customer, Inbox
from bank_ledger.money import positive_amount, to_decimal
from bank_ledger.store import LedgerStore

logger = get_logger(__name__)

Notice = Callable[[str], None]


def _discard(message: str) -> None:
    pass


def _as_id(value: Any) -> int | None:
    """Coerce an id coming from a form field; ``None`` if it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


class Bank:
    """Ledger engine: customers, accounts, commands and interest.

    Parameters
    ----------
    notice : Callable[[str], None] | None
        Ambient channel for operational messages such as
        ``"Nothing to undo"``.
    config : LedgerConfig | None
        Currency symbol and undo history limit.
    """

    def __init__(
        self,
        notice: Notice | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.notice = notice or _discard
        self.store = LedgerStore(currency_symbol=self.config.currency_symbol)
        self.transactions = TransactionManager(
            notice=self.notice,
            history_limit=self.config.history_limit,
        )

    # Read-only views
    @property
    def customers(self) -> list[Customer]:
        return list(self.store.customers.values())

    @property
    def accounts(self) -> list[Account]:
        return list(self.store.accounts.values())

    @property
    def history(self) -> tuple[Command, ...]:
        return self.transactions.history

    def find_account(self, account_id: Any) -> Account | None:
        """Resolve an account id from any caller-supplied representation."""
        resolved = _as_id(account_id)
        if resolved is None:
            return None
        return self.store.find_account(resolved)

    def summary(self) -> dict[str, int]:
        return {**self.store.summary(), "history": len(self.transactions)}

    # Customers and accounts
    def create_customer(self, name: str, inbox: Inbox | None = None) -> Customer | None:
        """Register a customer whose notifications go to ``inbox``."""
        name = (name or "").strip()
        if not name:
            self.notice("Enter a customer name")
            return None

        customer = self.store.add_customer(name, inbox=inbox)
        self.notice(f"Added customer {name}")
        return customer

    def create_account(
        self,
        account_type: AccountType | str,
        owner: Customer | int,
        initial_balance: Any = 0,
    ) -> Account | None:
        """Open an account; the owner is subscribed to its notifications."""
        owner_id = owner.customer_id if isinstance(owner, Customer) else _as_id(owner)
        if owner_id is None or owner_id not in self.store.customers:
            self.notice("Select an owner")
            return None

        try:
            opening = to_decimal(initial_balance)
        except InvalidAmountError:
            self.notice("Enter a valid initial balance")
            return None
        if opening < 0:
            self.notice("Initial balance cannot be negative")
            return None

        account = self.store.add_account(AccountType.from_key(account_type), owner_id, opening)
        self.notice(
            f"Created {account.account_type.value} Acct#{account.account_id} "
            f"for {account.owner.name}"
        )
        return account

    def attach_observer(self, account_id: Any, customer_id: Any) -> bool:
        """Subscribe another customer to an account's balance changes."""
        account = self.find_account(account_id)
        customer = self.store.customers.get(_as_id(customer_id))
        if account is None or customer is None:
            self.notice("Select a valid account and customer")
            return False
        account.attach(customer)
        return True

    def detach_observer(self, account_id: Any, customer_id: Any) -> bool:
        """Unsubscribe a customer from an account."""
        account = self.find_account(account_id)
        customer = self.store.customers.get(_as_id(customer_id))
        if account is None or customer is None:
            self.notice("Select a valid account and customer")
            return False
        account.detach(customer)
        return True

    # Money movement
    def _amount(self, amount: Any) -> Decimal | None:
        try:
            return positive_amount(amount)
        except InvalidAmountError as exc:
            logger.warning("Rejected amount %r: %s", amount, exc)
            self.notice("Enter a valid amount")
            return None

    def _run(self, command: Command) -> bool:
        return self.transactions.execute_command(command).ok

    def deposit(self, account_id: Any, amount: Any) -> bool:
        account = self.find_account(account_id)
        if account is None:
            self.notice("Select a valid account")
            return False
        value = self._amount(amount)
        if value is None:
            return False
        return self._run(DepositCommand(account, value))

    def withdraw(self, account_id: Any, amount: Any) -> bool:
        account = self.find_account(account_id)
        if account is None:
            self.notice("Select a valid account")
            return False
        value = self._amount(amount)
        if value is None:
            return False
        return self._run(WithdrawCommand(account, value))

    def transfer(self, from_id: Any, to_id: Any, amount: Any) -> bool:
        source = self.find_account(from_id)
        destination = self.find_account(to_id)
        if source is None or destination is None:
            self.notice("Select valid accounts")
            return False
        if source is destination:
            self.notice("Cannot transfer to same account")
            return False
        value = self._amount(amount)
        if value is None:
            return False
        return self._run(TransferCommand(source, destination, value))

    def undo_last(self) -> bool:
        """Reverse the most recent successful money movement."""
        return self.transactions.undo_last() is not None

    # Interest
    def apply_strategy(self, account_id: Any, key: Any) -> bool:
        """Swap the interest strategy of an account (``savings``, ``current``, ``fixed``)."""
        account = self.find_account(account_id)
        if account is None:
            self.notice("Select account to apply strategy")
            return False
        try:
            strategy = strategy_for(key)
        except UnknownStrategyError:
            self.notice(f"Unknown interest strategy {key}")
            return False

        account.set_interest_strategy(strategy)
        logger.info("%s now uses %s interest", account.label, strategy.key.value)
        self.notice(f"Applied {strategy.key.value} strategy to Acct#{account.account_id}")
        return True

    def calculate_interest(self, account_id: Any) -> Decimal:
        account = self.find_account(account_id)
        if account is None:
            self.notice("Select an account")
            return Decimal("0")
        return account.calculate_interest()
