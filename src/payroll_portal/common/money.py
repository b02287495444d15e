from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

CURRENCY_SYMBOLS = {"PHP": "₱", "USD": "$", "EUR": "€"}
TWO_PLACES = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Coerce API amounts ("1500.00", 1500, None) into Decimal."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def format_currency(value: Any, currency: str = "PHP") -> str:
    amount = to_decimal(value).quantize(TWO_PLACES)
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
