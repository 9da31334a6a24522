"""Tests for the Bank facade."""

from decimal import Decimal

import pytest

from bank_ledger.bank import Bank
from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import InvalidOperationError
from bank_ledger.interest import FIXED_DEPOSIT_INTEREST
from bank_ledger.models import Account, AccountType, Customer
from bank_ledger.sinks import MemorySink


@pytest.fixture
def shivani(bank: Bank, inbox: MemorySink) -> Customer:
    return bank.create_customer("Shivani", inbox=inbox)


@pytest.fixture
def pair(bank: Bank, shivani: Customer, notices: MemorySink) -> tuple[Account, Account]:
    """Account A with 1000 and account B with 200."""
    ravi = bank.create_customer("Ravi")
    a = bank.create_account("current", shivani, 1000)
    b = bank.create_account("current", ravi, 200)
    notices.clear()
    return a, b


class TestCreate:
    """Tests for customer and account creation."""

    def test_create_customer(self, bank: Bank, notices: MemorySink) -> None:
        customer = bank.create_customer("  Shivani ")

        assert customer.name == "Shivani"
        assert bank.customers == [customer]
        assert notices.messages == ["Added customer Shivani"]

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_customer_blank(self, bank: Bank, notices: MemorySink, name) -> None:
        assert bank.create_customer(name) is None
        assert bank.customers == []
        assert notices.messages == ["Enter a customer name"]

    def test_create_account_by_id_or_customer(self, bank: Bank, shivani: Customer) -> None:
        by_customer = bank.create_account("savings", shivani, 1500)
        by_id = bank.create_account("fixed", str(shivani.customer_id), "250")

        assert by_customer.account_type is AccountType.SAVINGS
        assert by_id.account_type is AccountType.FIXED_DEPOSIT
        assert by_id.balance == Decimal("250")
        assert by_id.interest_strategy is FIXED_DEPOSIT_INTEREST
        assert by_id.account_id > by_customer.account_id

    def test_create_account_unknown_type_is_generic(self, bank: Bank, shivani: Customer) -> None:
        account = bank.create_account("platinum", shivani)

        assert account.account_type is AccountType.GENERIC
        assert account.balance == Decimal("0")

    def test_create_account_notice(self, bank: Bank, shivani: Customer, notices: MemorySink) -> None:
        bank.create_account(AccountType.SAVINGS, shivani, 1500)

        assert notices.messages[-1] == "Created Savings Acct#1 for Shivani"

    @pytest.mark.parametrize("owner", [99, None, "abc"])
    def test_create_account_unknown_owner(self, bank: Bank, notices: MemorySink, owner) -> None:
        assert bank.create_account("savings", owner, 100) is None
        assert bank.accounts == []
        assert notices.messages == ["Select an owner"]

    def test_create_account_invalid_balance(
        self, bank: Bank, shivani: Customer, notices: MemorySink
    ) -> None:
        notices.clear()

        assert bank.create_account("savings", shivani, "lots") is None
        assert bank.create_account("savings", shivani, -5) is None
        assert notices.messages == [
            "Enter a valid initial balance",
            "Initial balance cannot be negative",
        ]
        assert bank.accounts == []

    def test_owner_auto_attached(self, bank: Bank, shivani: Customer, inbox: MemorySink) -> None:
        account = bank.create_account("savings", shivani, 1500)

        bank.deposit(account.account_id, 10)

        assert inbox.messages == [
            "[Shivani] Acct#1 (Savings): Deposit +10.00. New balance: ₹1510.00"
        ]


class TestMoneyMovement:
    """Tests for deposit, withdraw, transfer and undo."""

    def test_deposit_withdraw_sum(self, bank: Bank, pair) -> None:
        a, _ = pair

        assert bank.deposit(a.account_id, 100)
        assert bank.withdraw(a.account_id, "40.50")
        assert bank.deposit(str(a.account_id), 0.25)

        assert a.balance == Decimal("1000") + 100 - Decimal("40.50") + Decimal("0.25")

    def test_scenario_b_withdraw_more_than_balance(
        self, bank: Bank, shivani: Customer, notices: MemorySink
    ) -> None:
        account = bank.create_account("current", shivani, 500)
        notices.clear()

        assert not bank.withdraw(account.account_id, 700)

        assert account.balance == Decimal("500")
        assert notices.messages == ["Withdraw failed: insufficient funds on Acct#1"]
        assert bank.history == ()

        assert not bank.undo_last()
        assert account.balance == Decimal("500")
        assert notices.messages[-1] == "Nothing to undo"

    def test_scenario_c_transfer_and_undo(self, bank: Bank, pair) -> None:
        a, b = pair

        assert bank.transfer(a.account_id, b.account_id, 300)
        assert (a.balance, b.balance) == (Decimal("700"), Decimal("500"))

        assert bank.undo_last()
        assert (a.balance, b.balance) == (Decimal("1000"), Decimal("200"))

    def test_scenario_d_undo_only_latest_deposit(self, bank: Bank, pair) -> None:
        a, _ = pair

        bank.deposit(a.account_id, 100)
        bank.deposit(a.account_id, 50)
        bank.undo_last()

        assert a.balance == Decimal("1100")
        assert len(bank.history) == 1

    def test_transfer_insufficient_funds(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, b = pair

        assert not bank.transfer(b.account_id, a.account_id, 500)

        assert (a.balance, b.balance) == (Decimal("1000"), Decimal("200"))
        assert notices.messages == ["Transfer failed: insufficient funds on Acct#2"]

    def test_self_transfer(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair

        assert not bank.transfer(a.account_id, str(a.account_id), 10)

        assert a.balance == Decimal("1000")
        assert notices.messages == ["Cannot transfer to same account"]
        assert bank.history == ()

    def test_unknown_accounts(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair

        assert not bank.deposit(42, 10)
        assert not bank.withdraw("nope", 10)
        assert not bank.transfer(a.account_id, 42, 10)

        assert notices.messages == [
            "Select a valid account",
            "Select a valid account",
            "Select valid accounts",
        ]
        assert a.balance == Decimal("1000")

    @pytest.mark.parametrize("amount", [0, -10, "ten", None, float("nan")])
    def test_invalid_amount(self, bank: Bank, pair, notices: MemorySink, amount) -> None:
        a, b = pair

        assert not bank.deposit(a.account_id, amount)
        assert not bank.transfer(a.account_id, b.account_id, amount)

        assert notices.messages == ["Enter a valid amount", "Enter a valid amount"]
        assert bank.history == ()

    def test_undo_empty_every_time(self, bank: Bank, notices: MemorySink) -> None:
        for _ in range(3):
            assert not bank.undo_last()

        assert notices.messages == ["Nothing to undo"] * 3

    def test_undo_restores_all_accounts(self, bank: Bank, pair) -> None:
        a, b = pair
        operations = [
            lambda: bank.deposit(a.account_id, 75),
            lambda: bank.withdraw(b.account_id, 120),
            lambda: bank.transfer(a.account_id, b.account_id, 999),
        ]

        for operation in operations:
            before = (a.balance, b.balance)
            assert operation()
            bank.undo_last()
            assert (a.balance, b.balance) == before

    def test_history_limit(self, notices: MemorySink) -> None:
        bank = Bank(notice=notices, config=LedgerConfig(history_limit=1))
        owner = bank.create_customer("Shivani")
        account = bank.create_account("savings", owner, 100)

        bank.deposit(account.account_id, 1)
        bank.deposit(account.account_id, 2)
        bank.undo_last()
        bank.undo_last()

        assert account.balance == Decimal("101")
        assert notices.messages[-1] == "Nothing to undo"

    def test_deposit_very_large_amount(self, bank: Bank, shivani: Customer, inbox: MemorySink) -> None:
        account = bank.create_account("savings", shivani, 0)
        big = "1000000000000000000000000000000.00"

        assert bank.deposit(account.account_id, "1e30")

        assert account.balance == Decimal("1e30")
        assert inbox.messages[-1].endswith(f"Deposit +{big}. New balance: ₹{big}")
        assert len(bank.history) == 1
        assert str(account) == f"Acct#1 (Savings) - Shivani - ₹{big}"
        assert bank.undo_last()
        assert account.balance == 0

    def test_programming_errors_propagate(self, bank: Bank, pair) -> None:
        a, _ = pair
        bank.deposit(a.account_id, 10)
        command = bank.history[-1]
        bank.undo_last()

        with pytest.raises(InvalidOperationError):
            command.undo()


class TestObservers:
    """Tests for explicit observer management."""

    def test_attach_and_detach(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair
        watcher_inbox = MemorySink()
        watcher = bank.create_customer("Auditor", inbox=watcher_inbox)

        assert bank.attach_observer(a.account_id, watcher.customer_id)
        assert bank.attach_observer(a.account_id, watcher.customer_id)
        bank.deposit(a.account_id, 5)
        assert len(watcher_inbox) == 1

        assert bank.detach_observer(a.account_id, watcher.customer_id)
        bank.deposit(a.account_id, 5)
        assert len(watcher_inbox) == 1

    def test_invalid_references(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair

        assert not bank.attach_observer(a.account_id, 99)
        assert not bank.detach_observer(99, 1)
        assert notices.messages == ["Select a valid account and customer"] * 2

    def test_shared_name_customers_notified_separately(self, bank: Bank, pair) -> None:
        a, _ = pair
        first, second = MemorySink(), MemorySink()
        twin_one = bank.create_customer("Asha", inbox=first)
        twin_two = bank.create_customer("Asha", inbox=second)
        bank.attach_observer(a.account_id, twin_one.customer_id)
        bank.attach_observer(a.account_id, twin_two.customer_id)

        bank.deposit(a.account_id, 1)

        assert len(first) == 1
        assert len(second) == 1


class TestInterest:
    """Tests for strategy selection and interest calculation."""

    def test_scenario_a(self, bank: Bank, shivani: Customer) -> None:
        account = bank.create_account("savings", shivani, 1500)

        assert bank.calculate_interest(account.account_id) == Decimal("45.00")

    def test_apply_strategy(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair
        assert bank.calculate_interest(a.account_id) == 0

        assert bank.apply_strategy(a.account_id, "fixed")

        assert bank.calculate_interest(a.account_id) == Decimal("70")
        assert notices.messages == ["Applied fixed strategy to Acct#1"]

    def test_apply_strategy_does_not_change_type(self, bank: Bank, pair) -> None:
        a, _ = pair

        bank.apply_strategy(a.account_id, "savings")

        assert a.account_type is AccountType.CURRENT

    def test_apply_strategy_invalid(self, bank: Bank, pair, notices: MemorySink) -> None:
        a, _ = pair

        assert not bank.apply_strategy(42, "savings")
        assert not bank.apply_strategy(a.account_id, "gold")
        assert notices.messages == [
            "Select account to apply strategy",
            "Unknown interest strategy gold",
        ]
        assert bank.calculate_interest(a.account_id) == 0

    def test_calculate_interest_unknown_account(self, bank: Bank, notices: MemorySink) -> None:
        assert bank.calculate_interest(7) == Decimal("0")
        assert notices.messages == ["Select an account"]

    def test_calculate_interest_is_side_effect_free(
        self, bank: Bank, shivani: Customer, inbox: MemorySink
    ) -> None:
        account = bank.create_account("fixed", shivani, 1000)

        for _ in range(5):
            assert bank.calculate_interest(account.account_id) == Decimal("70")

        assert account.balance == Decimal("1000")
        assert inbox.messages == []
        assert bank.history == ()


class TestViews:
    """Tests for read-only views."""

    def test_summary(self, bank: Bank, pair) -> None:
        a, _ = pair
        bank.deposit(a.account_id, 1)

        assert bank.summary() == {"customers": 2, "accounts": 2, "history": 1}

    def test_find_account(self, bank: Bank, pair) -> None:
        a, _ = pair

        assert bank.find_account(a.account_id) is a
        assert bank.find_account(str(a.account_id)) is a
        assert bank.find_account(True) is None
        assert bank.find_account("x") is None
