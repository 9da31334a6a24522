"""Reversible ledger commands and their invoker."""

from bank_ledger.commands.base import Command, CommandResult
from bank_ledger.commands.manager import NOTHING_TO_UNDO, TransactionManager
from bank_ledger.commands.money_movement import (
    DepositCommand,
    TransferCommand,
    WithdrawCommand,
)

__all__ = [
    "NOTHING_TO_UNDO",
    "Command",
    "CommandResult",
    "DepositCommand",
    "TransactionManager",
    "TransferCommand",
    "WithdrawCommand",
]
