"""Reversible command base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from bank_ledger.exceptions import InvalidOperationError
from bank_ledger.models.enums import CommandStatus
from bank_ledger.money import to_decimal


@dataclass(frozen=True)
class CommandResult:
    """Outcome of :meth:`Command.execute`."""

    ok: bool
    message: str = ""


class Command(ABC):
    """Money movement that can be applied once and reversed once.

    Subclasses implement ``_apply`` and ``_revert``. The base class owns
    the lifecycle: ``PENDING`` -> ``EXECUTED`` or ``REJECTED``, and
    ``EXECUTED`` -> ``UNDONE``. Stepping outside that sequence is a
    programming error and raises :class:`InvalidOperationError`.

    The amount is captured when the command is built and is exactly what
    ``undo`` reverses.
    """

    def __init__(self, amount: Any) -> None:
        self._amount = to_decimal(amount)
        self._status = CommandStatus.PENDING

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def status(self) -> CommandStatus:
        return self._status

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable summary of the command."""

    def execute(self) -> CommandResult:
        """Apply the command. A rejected command leaves every balance untouched."""
        if self._status is not CommandStatus.PENDING:
            raise InvalidOperationError(
                f"{self.description} cannot be executed from state {self._status.value}"
            )
        result = self._apply()
        self._status = CommandStatus.EXECUTED if result.ok else CommandStatus.REJECTED
        return result

    def undo(self) -> None:
        """Reverse a successfully executed command, without re-checking funds."""
        if self._status is not CommandStatus.EXECUTED:
            raise InvalidOperationError(
                f"{self.description} cannot be undone from state {self._status.value}"
            )
        self._revert()
        self._status = CommandStatus.UNDONE

    @abstractmethod
    def _apply(self) -> CommandResult:
        """Perform the forward change, or report why it was refused."""

    @abstractmethod
    def _revert(self) -> None:
        """Perform the compensating change."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description} [{self._status.value}]>"
