"""Account model: the subject whose balance changes are observed."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Callable

from bank_ledger.logging import get_logger
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import AccountType
from bank_ledger.money import format_delta, format_money, to_decimal

if TYPE_CHECKING:
    from bank_ledger.interest import InterestStrategy

logger = get_logger(__name__)

CustomerLookup = Callable[[int], Customer]


class Account:
    """Bank account entity.

    Observers are stored as customer ids and resolved through
    ``customer_lookup`` on every notification, so an account never keeps
    customers alive on its own. ``update_balance`` is the only way the
    balance changes and it always notifies.

    Parameters
    ----------
    account_id : int
        Unique id allocated by the owning store.
    owner_id : int
        Customer id of the owner. Fixed for the life of the account.
    account_type : AccountType
        Product type shown in notifications.
    interest_strategy : InterestStrategy
        Initial interest policy.
    customer_lookup : Callable[[int], Customer]
        Resolves an observer id to its customer.
    balance : Decimal
        Opening balance.
    currency_symbol : str
        Prefix used when formatting balances.
    """

    def __init__(
        self,
        account_id: int,
        owner_id: int,
        account_type: AccountType,
        interest_strategy: InterestStrategy,
        customer_lookup: CustomerLookup,
        balance: Decimal = Decimal("0"),
        currency_symbol: str = "",
    ) -> None:
        self._account_id = account_id
        self._owner_id = owner_id
        self._account_type = account_type
        self._balance = to_decimal(balance)
        self._lookup = customer_lookup
        self._observer_ids: dict[int, None] = {}  # insertion-ordered set
        self.interest_strategy = interest_strategy
        self.currency_symbol = currency_symbol

    @property
    def account_id(self) -> int:
        return self._account_id

    @property
    def owner_id(self) -> int:
        return self._owner_id

    @property
    def owner(self) -> Customer:
        return self._lookup(self._owner_id)

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_balance(self) -> Decimal:
        """Return the current balance."""
        return self._balance

    @property
    def observer_ids(self) -> tuple[int, ...]:
        return tuple(self._observer_ids)

    @property
    def observers(self) -> list[Customer]:
        """Attached customers in the order they were attached."""
        return [self._lookup(customer_id) for customer_id in self._observer_ids]

    @property
    def label(self) -> str:
        """Short reference used in every message, e.g. ``Acct#3 (Savings)``."""
        return f"Acct#{self._account_id} ({self._account_type.value})"

    def attach(self, observer: Customer) -> None:
        """Subscribe a customer; attaching twice has no extra effect."""
        self._observer_ids.setdefault(observer.customer_id, None)

    def detach(self, observer: Customer) -> None:
        """Unsubscribe a customer if attached."""
        self._observer_ids.pop(observer.customer_id, None)

    def notify(self, message: str) -> None:
        for observer in self.observers:
            observer.update(f"{self.label}: {message}")

    def update_balance(self, delta: Decimal, reason: str = "") -> str:
        """Apply a signed change to the balance and notify every observer.

        Returns
        -------
        str
            The notification text sent to observers (without the account
            prefix).
        """
        delta = to_decimal(delta)
        new_balance = self._balance + delta
        message = (
            f"{reason} {format_delta(delta)}. "
            f"New balance: {format_money(new_balance, self.currency_symbol)}"
        )
        self._balance = new_balance
        logger.debug(
            "%s: %s",
            self.label,
            message,
            extra={"extra": {"account_id": self._account_id, "balance": str(new_balance)}},
        )
        self.notify(message)
        return message

    def set_interest_strategy(self, strategy: InterestStrategy) -> None:
        self.interest_strategy = strategy

    def calculate_interest(self) -> Decimal:
        """Interest under the active strategy. Does not touch the balance."""
        return self.interest_strategy.calculate(self._balance)

    def __repr__(self) -> str:
        return (
            f"Account(account_id={self._account_id}, owner_id={self._owner_id}, "
            f"account_type={self._account_type.value}, balance={self._balance})"
        )

    def __str__(self) -> str:
        return (
            f"{self.label} - {self.owner.name} - "
            f"{format_money(self._balance, self.currency_symbol)}"
        )
