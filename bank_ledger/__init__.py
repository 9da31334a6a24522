"""bank-ledger: in-memory bank ledger with undoable transactions."""

from bank_ledger.bank import Bank

__version__ = "0.1.0"

__all__ = ["Bank", "__version__"]
