"""Decimal helpers for monetary amounts."""

from decimal import Decimal, InvalidOperation
from typing import Any

from bank_ledger.exceptions import InvalidAmountError


def to_decimal(value: Any) -> Decimal:
    """Coerce a user supplied amount to ``Decimal``.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric or not finite.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(f"Amount must be numeric, got {value!r}") from exc

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return result


def positive_amount(value: Any) -> Decimal:
    """Coerce an amount and require it to be greater than zero."""
    amount = to_decimal(value)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    return amount


def format_money(amount: Decimal, symbol: str = "") -> str:
    """Format an amount with exactly two decimal places."""
    return f"{symbol}{amount:.2f}"


def format_delta(delta: Decimal) -> str:
    """Format a signed balance change, always showing the sign."""
    return f"{delta:+.2f}"
