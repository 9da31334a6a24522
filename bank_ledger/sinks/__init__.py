"""Notification channels for ledger messages."""

from bank_ledger.sinks.console import ConsoleSink
from bank_ledger.sinks.fan_out import FanOutSink
from bank_ledger.sinks.json_file import JsonLinesSink
from bank_ledger.sinks.memory import MemorySink

__all__ = ["ConsoleSink", "FanOutSink", "JsonLinesSink", "MemorySink"]
