"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when a customer id is not registered in the ledger."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account id is not registered in the ledger."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when an entity points at an owner that does not exist."""


class InvalidAmountError(LedgerError):
    """Raised when a monetary amount cannot be used for an operation."""


class InvalidOperationError(LedgerError):
    """Raised when an operation is invoked out of its allowed sequence."""


class UnknownStrategyError(LedgerError):
    """Raised when an interest strategy key is not recognised."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
