"""Notification envelope handed to sinks."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Notification:
    """A single human-readable message posted to a notification channel."""

    message: str
    source: str = "ledger"  # sink name that received it
    created_at: datetime = field(default_factory=datetime.now)
