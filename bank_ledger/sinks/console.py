"""Console sink for interactive use."""

from bank_ledger.models.notification import Notification


class ConsoleSink:
    """Print notifications to stdout prefixed with the local time."""

    def __init__(self, name: str = "console", time_format: str = "%H:%M:%S") -> None:
        """Initialize console sink.

        Parameters
        ----------
        name : str
            Source name stamped on each notification.
        time_format : str
            ``strftime`` format for the timestamp prefix.
        """
        self.name = name
        self.time_format = time_format
        self._count = 0

    def __call__(self, message: str) -> None:
        notification = Notification(message=message, source=self.name)
        print(f"{notification.created_at.strftime(self.time_format)} - {notification.message}")
        self._count += 1

    def close(self) -> None:
        """Print summary."""
        print(f"\n{self._count} notifications posted to {self.name}")
