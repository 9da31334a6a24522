"""Deposit, withdraw and transfer commands."""

from __future__ import annotations

from typing import Any

from bank_ledger.commands.base import Command, CommandResult
from bank_ledger.exceptions import InvalidOperationError
from bank_ledger.models.account import Account


class DepositCommand(Command):
    """Credit an account. Undo debits the same amount."""

    def __init__(self, account: Account, amount: Any) -> None:
        super().__init__(amount)
        self.account = account

    @property
    def description(self) -> str:
        return f"Deposit {self.amount} to Acct#{self.account.account_id}"

    def _apply(self) -> CommandResult:
        self.account.update_balance(self.amount, "Deposit")
        return CommandResult(ok=True)

    def _revert(self) -> None:
        self.account.update_balance(-self.amount, "Undo Deposit")


class WithdrawCommand(Command):
    """Debit an account if it holds enough funds. Undo credits the same amount."""

    def __init__(self, account: Account, amount: Any) -> None:
        super().__init__(amount)
        self.account = account

    @property
    def description(self) -> str:
        return f"Withdraw {self.amount} from Acct#{self.account.account_id}"

    def _apply(self) -> CommandResult:
        if self.account.get_balance() < self.amount:
            return CommandResult(
                ok=False,
                message=f"Withdraw failed: insufficient funds on Acct#{self.account.account_id}",
            )
        self.account.update_balance(-self.amount, "Withdraw")
        return CommandResult(ok=True)

    def _revert(self) -> None:
        self.account.update_balance(self.amount, "Undo Withdraw")


class TransferCommand(Command):
    """Move money between two distinct accounts.

    The source is debited before the destination is credited, and undo
    credits the source before debiting the destination, so observers of
    either account always see the source side first.
    """

    def __init__(self, source: Account, destination: Account, amount: Any) -> None:
        if source is destination or source.account_id == destination.account_id:
            raise InvalidOperationError(
                f"Cannot transfer from Acct#{source.account_id} to itself"
            )
        super().__init__(amount)
        self.source = source
        self.destination = destination

    @property
    def description(self) -> str:
        return (
            f"Transfer {self.amount} from Acct#{self.source.account_id} "
            f"to Acct#{self.destination.account_id}"
        )

    def _apply(self) -> CommandResult:
        if self.source.get_balance() < self.amount:
            return CommandResult(
                ok=False,
                message=f"Transfer failed: insufficient funds on Acct#{self.source.account_id}",
            )
        self.source.update_balance(
            -self.amount, f"Transfer -> Acct#{self.destination.account_id}"
        )
        self.destination.update_balance(
            self.amount, f"Transfer <- Acct#{self.source.account_id}"
        )
        return CommandResult(ok=True)

    def _revert(self) -> None:
        self.source.update_balance(
            self.amount, f"Undo Transfer from Acct#{self.source.account_id}"
        )
        self.destination.update_balance(
            -self.amount, f"Undo Transfer to Acct#{self.destination.account_id}"
        )
