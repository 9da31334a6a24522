"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError


@dataclass
class LedgerConfig:
    """Ledger engine configuration."""

    currency_symbol: str = "₹"
    history_limit: int | None = None  # None keeps every executed command

    def __post_init__(self) -> None:
        if self.history_limit is not None and self.history_limit < 1:
            raise ConfigurationError(
                f"history_limit must be a positive integer, got {self.history_limit}"
            )


@dataclass
class DemoConfig:
    """Demo seeding configuration."""

    extra_customers: int = 0
    locale: str = "en_IN"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.extra_customers < 0:
            raise ConfigurationError(
                f"extra_customers cannot be negative, got {self.extra_customers}"
            )


@dataclass
class NotificationConfig:
    """Notification output configuration."""

    output_file: Path | None = None
    console: bool = True


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        try:
            history_limit_str = os.getenv("LEDGER_HISTORY_LIMIT")
            ledger = LedgerConfig(
                currency_symbol=os.getenv("LEDGER_CURRENCY_SYMBOL", "₹"),
                history_limit=int(history_limit_str) if history_limit_str else None,
            )

            demo = DemoConfig(
                extra_customers=int(os.getenv("DEMO_EXTRA_CUSTOMERS", "0")),
                locale=os.getenv("DEMO_LOCALE", "en_IN"),
                seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting in environment: {exc}") from exc

        output_file_str = os.getenv("NOTIFICATIONS_FILE")
        notifications = NotificationConfig(
            output_file=Path(output_file_str) if output_file_str else None,
            console=os.getenv("NOTIFICATIONS_CONSOLE", "true").lower() == "true",
        )

        return cls(
            ledger=ledger,
            demo=demo,
            notifications=notifications,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
