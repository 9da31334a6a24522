"""In-memory data stores for ledger entities."""

from bank_ledger.store.ledger import IdSequence, LedgerStore

__all__ = ["IdSequence", "LedgerStore"]
