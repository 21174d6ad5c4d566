"""Helpers for amounts expressed in minor currency units."""

from decimal import Decimal, InvalidOperation


def coerce_cents(value) -> int:
    """Normalize raw amounts to integer cents.

    Backends send cents as integers, floats or numeric strings such as
    ``"1500"`` or ``"1500.00"``.

    Args:
        value: Raw amount from SQL or API payloads.

    Returns:
        int: Amount in cents.

    Raises:
        ValueError: If the value is not numeric or has a fractional part.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, int):
        return value
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite() or amount != amount.to_integral_value():
        raise ValueError(f"Amount is not a whole number of cents: {value!r}")
    return int(amount)


def format_currency(cents: int, symbol: str = "R$") -> str:
    """Format cents as Brazilian currency, e.g. ``R$ 1.234,56``."""
    reais = Decimal(cents) / Decimal("100")
    sign = "-" if reais < 0 else ""
    grouped = f"{abs(reais):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol} {localized}"


__all__ = ["coerce_cents", "format_currency"]
