"""In-memory sink, mainly for tests and embedding."""

from bank_ledger.models.notification import Notification


class MemorySink:
    """Keep every notification in arrival order."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self.notifications: list[Notification] = []

    def __call__(self, message: str) -> None:
        self.notifications.append(Notification(message=message, source=self.name))

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def __len__(self) -> int:
        return len(self.notifications)

    def clear(self) -> None:
        self.notifications.clear()
