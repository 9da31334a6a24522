#!/usr/bin/env python3
"""Seed a demo bank and walk through deposits, withdrawals, transfers and undo.

Notifications for customers and operational notices are printed to the
console and can also be appended to a JSON Lines file.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.bank import Bank
from bank_ledger.config import BankConfig, DemoConfig, LedgerConfig, NotificationConfig
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.money import format_money
from bank_ledger.scenarios import DemoScenario
from bank_ledger.sinks import ConsoleSink, FanOutSink, JsonLinesSink

logger = get_logger(__name__)


def print_accounts(bank: Bank) -> None:
    """Print one line per account and the ledger total."""
    print()
    for account in bank.accounts:
        print(f"  {account}")
    total = bank.store.total_balance()
    print(f"  Total: {format_money(total, bank.config.currency_symbol)}")
    print()


def walkthrough(bank: Bank) -> None:
    """Exercise every ledger operation against the seeded accounts."""
    savings, current = bank.accounts[0], bank.accounts[1]
    symbol = bank.config.currency_symbol

    interest = bank.calculate_interest(savings.account_id)
    print(f"Interest on {savings.label}: {format_money(interest, symbol)}")

    bank.deposit(savings.account_id, 100)
    bank.deposit(savings.account_id, 50)
    bank.undo_last()

    bank.withdraw(current.account_id, 700)
    bank.transfer(savings.account_id, current.account_id, 300)
    print_accounts(bank)
    bank.undo_last()

    bank.apply_strategy(current.account_id, "fixed")
    interest = bank.calculate_interest(current.account_id)
    print(f"Interest on {current.label}: {format_money(interest, symbol)}")

    bank.undo_last()
    bank.undo_last()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run the bank ledger demo"
    )
    parser.add_argument(
        "--extra-customers",
        type=int,
        default=None,
        help="Generated customers to add after the fixed demo ones (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--history-limit",
        type=int,
        default=None,
        help="Maximum number of undoable transactions (default: unbounded)",
    )
    parser.add_argument(
        "--notifications-file",
        type=Path,
        default=None,
        help="Append notifications to this JSON Lines file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: standard)",
    )
    args = parser.parse_args()

    try:
        env = BankConfig.from_env()
        config = BankConfig(
            ledger=LedgerConfig(
                currency_symbol=env.ledger.currency_symbol,
                history_limit=(
                    args.history_limit
                    if args.history_limit is not None
                    else env.ledger.history_limit
                ),
            ),
            demo=DemoConfig(
                extra_customers=(
                    args.extra_customers
                    if args.extra_customers is not None
                    else env.demo.extra_customers
                ),
                locale=env.demo.locale,
                seed=args.seed if args.seed is not None else env.demo.seed,
            ),
            notifications=NotificationConfig(
                output_file=args.notifications_file or env.notifications.output_file,
                console=env.notifications.console,
            ),
            log_level=args.log_level or env.log_level,
            log_format=args.log_format or env.log_format,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    setup_logging(level=config.log_level, format_type=config.log_format)

    sinks = []
    console = ConsoleSink() if config.notifications.console else None
    if console is not None:
        sinks.append(console)
    file_sink = (
        JsonLinesSink(config.notifications.output_file)
        if config.notifications.output_file
        else None
    )
    if file_sink is not None:
        sinks.append(file_sink)
    channel = FanOutSink(*sinks)

    try:
        bank = Bank(notice=channel, config=config.ledger)
        DemoScenario(
            bank,
            extra_customers=config.demo.extra_customers,
            seed=config.demo.seed,
            locale=config.demo.locale,
            inbox=channel,
        ).run()
        print_accounts(bank)
        walkthrough(bank)
        print_accounts(bank)
        logger.info("Demo finished: %s", bank.summary())
    finally:
        if file_sink is not None:
            file_sink.close()
        if console is not None:
            console.close()


if __name__ == "__main__":
    main()
