# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Enforces that all monetary values are handled with `Decimal`, not float,
  to avoid floating-point rounding errors in balances.
- Turns raw console text into validated amounts.
- Formats amounts for display with the configured currency symbol.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN

import bankmenu.config as cfg
from .errors import InvalidAmount, InvalidNumericInput

ZERO = Decimal("0.00")


def as_money(value) -> Decimal:
    """
    Normalize any input to Decimal with 2 fractional digits.

    Why:
    - Guarantees consistent 2dp (e.g., "10.00") across the system.
    - Avoids subtle float inaccuracies (e.g., 0.1 + 0.2 != 0.3).
    """
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)


def fmt_money(x) -> str:
    symbol = cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, '$')
    return f"{symbol}{as_money(x):,.2f}"


def parse_amount(text: str) -> Decimal:
    """
    Parse an amount typed at the console.

    Rules:
    - Must be a finite decimal number ("12", "12.50"); raises InvalidNumericInput otherwise.
    - Must not carry more than 2 decimal places of value ("1.500" is fine, "1.005" is not).
    - Must not be negative; raises InvalidAmount otherwise.
    - Zero is accepted here; accounts reject it when it is used.
    - No business upper bound; only what the Decimal context can represent.
    """
    raw = text.strip()
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise InvalidNumericInput(text) from None
    if not value.is_finite():
        raise InvalidNumericInput(text)
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative: {raw}")
    try:
        amt = as_money(value)
    except InvalidOperation:
        # more digits than the Decimal context can hold at 2dp
        raise InvalidNumericInput(text) from None
    if amt != value:
        raise InvalidNumericInput(text)
    return amt


def require_positive(amount) -> Decimal:
    """
    Return the amount as money, raising InvalidAmount unless it is a finite
    number > 0 with at most 2 decimal places. Nothing is rounded away.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise InvalidAmount(f"Not an amount: {amount!r}") from None
    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {value}")
    try:
        amt = as_money(value)
    except InvalidOperation:
        raise InvalidAmount(f"Amount too large: {value}") from None
    if amt != value:
        raise InvalidAmount(f"Amount has more than 2 decimal places: {value}")
    if amt <= ZERO:
        raise InvalidAmount(f"Amount must be > 0, got {amt}")
    return amt
