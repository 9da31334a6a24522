"""Transaction manager: runs commands and keeps the undo history."""

from __future__ import annotations

from collections import deque
from typing import Callable

from bank_ledger.commands.base import Command, CommandResult
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import get_logger

logger = get_logger(__name__)

NOTHING_TO_UNDO = "Nothing to undo"


def _discard(message: str) -> None:
    pass


class TransactionManager:
    """Invoker for ledger commands.

    Only commands whose ``execute`` succeeded are recorded, so ``undo_last``
    never reverses a change that did not happen. Rejections and empty
    undo requests are reported on ``notice``.

    Parameters
    ----------
    notice : Callable[[str], None] | None
        Channel for operational messages.
    history_limit : int | None
        Maximum number of commands kept for undo. The oldest entry is
        dropped when the limit is reached. ``None`` keeps everything.
        Values below 1 raise ``ConfigurationError``.
    """

    def __init__(
        self,
        notice: Callable[[str], None] | None = None,
        history_limit: int | None = None,
    ) -> None:
        if history_limit is not None and history_limit < 1:
            raise ConfigurationError(f"history_limit must be at least 1, got {history_limit}")
        self.notice = notice or _discard
        self.history_limit = history_limit
        self._history: deque[Command] = deque(maxlen=history_limit)

    @property
    def history(self) -> tuple[Command, ...]:
        """Executed commands, oldest first."""
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def execute_command(self, command: Command) -> CommandResult:
        """Execute ``command`` and record it if it took effect."""
        result = command.execute()
        if not result.ok:
            logger.warning("Rejected %s: %s", command.description, result.message)
            self.notice(result.message)
            return result

        if self.history_limit is not None and len(self._history) == self.history_limit:
            logger.debug("History full, forgetting %s", self._history[0].description)
        self._history.append(command)
        logger.debug("Recorded %s (history size %d)", command.description, len(self._history))
        return result

    def undo_last(self) -> Command | None:
        """Reverse the most recent recorded command.

        Returns
        -------
        Command | None
            The command that was undone, or ``None`` when history is empty.
        """
        if not self._history:
            self.notice(NOTHING_TO_UNDO)
            return None

        command = self._history.pop()
        command.undo()
        logger.info("Undid %s", command.description)
        return command

