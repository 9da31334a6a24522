"""Customer model: a named observer of account balance changes."""

from dataclasses import dataclass, field
from typing import Callable

Inbox = Callable[[str], None]


@dataclass(eq=False)
class Customer:
    """Bank customer entity.

    Customers compare by identity: two customers may share a name and
    still be different observers.
    """

    customer_id: int
    name: str
    inbox: Inbox | None = field(default=None, repr=False)

    def update(self, message: str) -> None:
        """Receive a balance-change notification."""
        if self.inbox is not None:
            self.inbox(f"[{self.name}] {message}")
